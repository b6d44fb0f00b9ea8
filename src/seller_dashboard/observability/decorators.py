"""Tracing decorators for automatic observability."""

import functools
import inspect
import logging
import time
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


def _start_span(trace_name: str, trace_type: str, func: Callable):
    """Open a LangFuse span for ``func``; None when LangFuse is unavailable."""
    try:
        from seller_dashboard.observability.langfuse_client import get_langfuse_client

        client = get_langfuse_client()
    except Exception as e:
        logger.debug(f"LangFuse not available: {e}")
        return None

    if not client:
        return None

    try:
        return client.start_span(
            name=trace_name,
            metadata={
                "type": trace_type,
                "function": func.__name__,
                "module": func.__module__,
            },
        )
    except Exception as e:
        logger.debug(f"Error creating span: {e}")
        return None


def _end_span(span_obj, start_time: float, result: Any, error: BaseException | None) -> None:
    if not span_obj:
        return
    try:
        span_obj.update(
            output={"result": str(result)[:1000] if result else None},
            metadata={
                "duration_seconds": time.time() - start_time,
                "error": str(error) if error else None,
            },
        )
        span_obj.end()
    except Exception as e:
        logger.debug(f"Error updating/ending span: {e}")


def trace(name: str | None = None, trace_type: str = "function"):
    """
    Decorator to trace function execution with LangFuse.

    Args:
        name: Optional custom name for the trace (defaults to function name)
        trace_type: Type of trace (function, http, view)

    Usage:
        @trace(name="fetch_orders", trace_type="http")
        async def list_orders(self):
            ...
    """

    def decorator(func: Callable) -> Callable:
        trace_name = name or func.__name__

        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs) -> Any:
            start_time = time.time()
            span_obj = _start_span(trace_name, trace_type, func)
            error = None
            result = None
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                error = e
                raise
            finally:
                _end_span(span_obj, start_time, result, error)
            return result

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs) -> Any:
            start_time = time.time()
            span_obj = _start_span(trace_name, trace_type, func)
            error = None
            result = None
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                error = e
                raise
            finally:
                _end_span(span_obj, start_time, result, error)
            return result

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        else:
            return sync_wrapper

    return decorator
