"""Request metrics collection for the Activity tab."""

import logging
from collections import deque
from datetime import datetime
from typing import Any

logger = logging.getLogger(__name__)


class MetricsCollector:
    """
    Collects outcomes of API requests issued by this client.

    Keeps running totals plus a bounded history of recent requests.
    """

    def __init__(self, history_size: int = 50):
        """
        Initialize metrics collector.

        Args:
            history_size: Number of recent requests kept for the activity log
        """
        self._recent: deque[dict[str, Any]] = deque(maxlen=history_size)
        self._total = 0
        self._errors = 0
        self._auth_failures = 0
        self._total_duration = 0.0

    def record_request(
        self,
        method: str,
        path: str,
        status: int | None,
        duration: float,
        error: str | None = None,
    ) -> None:
        """
        Record one settled request.

        Args:
            method: HTTP verb
            path: Request path relative to the API base URL
            status: Response status, None for transport failures
            duration: Seconds from send to settlement
            error: Error description for failed requests
        """
        failed = error is not None or status is None or status >= 400
        self._total += 1
        self._total_duration += duration
        if failed:
            self._errors += 1
        if status == 401:
            self._auth_failures += 1

        self._recent.appendleft(
            {
                "timestamp": datetime.now().isoformat(),
                "name": f"{method.upper()} {path}",
                "type": "http",
                "status": "error" if failed else "success",
                "code": status,
                "duration": round(duration, 3),
            }
        )

    def get_dashboard_data(self) -> dict[str, Any]:
        """
        Get aggregated metrics for dashboard display.

        Returns:
            Dictionary with dashboard metrics:
            {
                "total_requests": int,
                "avg_response_time": float,
                "error_count": int,
                "auth_failures": int,
                "success_rate": float,
                "recent_activity": list[dict],
            }
        """
        if not self._total:
            return self._get_empty_metrics()

        avg_response_time = self._total_duration / self._total
        success_rate = (self._total - self._errors) / self._total * 100

        return {
            "total_requests": self._total,
            "avg_response_time": round(avg_response_time, 3),
            "error_count": self._errors,
            "auth_failures": self._auth_failures,
            "success_rate": round(success_rate, 1),
            "recent_activity": list(self._recent),
        }

    def reset(self) -> None:
        """Forget every recorded request."""
        self._recent.clear()
        self._total = 0
        self._errors = 0
        self._auth_failures = 0
        self._total_duration = 0.0

    def _get_empty_metrics(self) -> dict[str, Any]:
        return {
            "total_requests": 0,
            "avg_response_time": 0.0,
            "error_count": 0,
            "auth_failures": 0,
            "success_rate": 100.0,
            "recent_activity": [],
        }
