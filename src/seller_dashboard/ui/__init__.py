"""Gradio user interface."""

from seller_dashboard.ui.gradio_app import create_gradio_interface

__all__ = ["create_gradio_interface"]
