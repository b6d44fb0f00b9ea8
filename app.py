"""
Deployment entry point for HuggingFace Spaces.

This file is used when deploying to HuggingFace Spaces.
For local deployment, use: python -m seller_dashboard
"""

import logging
import os
import sys
from pathlib import Path

# Add src directory to Python path for HuggingFace Spaces deployment
# This allows imports to work without installing the package
src_path = Path(__file__).parent / "src"
if src_path.exists() and str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

# Set deployment mode for HF Spaces
os.environ["DEPLOYMENT_MODE"] = "hf_spaces"

from seller_dashboard.config.deployment import configure_logging, get_gradio_server_config  # noqa: E402
from seller_dashboard.ui import gradio_app  # noqa: E402

configure_logging()
logger = logging.getLogger(__name__)

logger.info("Starting Seller Dashboard on HuggingFace Spaces")

demo = gradio_app.create_gradio_interface()

if __name__ == "__main__":
    demo.launch(**get_gradio_server_config())
