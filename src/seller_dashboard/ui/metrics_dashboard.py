"""Request activity components for the Gradio UI."""

import logging
from datetime import datetime
from typing import Any

logger = logging.getLogger(__name__)


def format_metrics_for_display(metrics: dict[str, Any]) -> tuple[int, float, int, float]:
    """
    Format metrics for Gradio Number components.

    Args:
        metrics: Metrics dictionary from MetricsCollector

    Returns:
        Tuple of (total_requests, avg_response_time, error_count, success_rate)
    """
    total_requests = metrics.get("total_requests", 0)
    avg_response_time = metrics.get("avg_response_time", 0.0)
    error_count = metrics.get("error_count", 0)
    success_rate = metrics.get("success_rate", 100.0)

    return total_requests, avg_response_time, error_count, success_rate


def format_activity_log(metrics: dict[str, Any], limit: int = 20) -> list[list[str]]:
    """
    Format recent requests for Gradio Dataframe.

    Args:
        metrics: Metrics dictionary from MetricsCollector
        limit: Maximum rows to show

    Returns:
        List of rows for dataframe [time, request, status]
    """
    recent_activity = metrics.get("recent_activity", [])

    if not recent_activity:
        return [["No recent activity", "", ""]]

    rows = []
    for activity in recent_activity[:limit]:
        timestamp = activity.get("timestamp", "")
        try:
            formatted_time = datetime.fromisoformat(timestamp).strftime("%H:%M:%S")
        except ValueError:
            formatted_time = timestamp[:19]

        name = activity.get("name", "Unknown")
        code = activity.get("code")
        status = activity.get("status", "success")

        status_emoji = "✅" if status == "success" else "❌"
        detail = str(code) if code is not None else "network error"
        rows.append([formatted_time, name, f"{status_emoji} {detail}"])

    return rows
