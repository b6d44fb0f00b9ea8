"""Observability module for LangFuse tracing and request metrics."""

from seller_dashboard.observability.decorators import trace
from seller_dashboard.observability.langfuse_client import (
    flush_langfuse,
    get_langfuse_client,
    log_event,
)
from seller_dashboard.observability.metrics_collector import MetricsCollector

__all__ = ["get_langfuse_client", "trace", "MetricsCollector", "flush_langfuse", "log_event"]
