"""Sales overview view."""

import logging

from seller_dashboard.api import ApiError
from seller_dashboard.data.models import DashboardSummary
from seller_dashboard.observability import trace
from seller_dashboard.views.base import ViewController
from seller_dashboard.views.navigation import View

logger = logging.getLogger(__name__)


class DashboardController(ViewController):
    """Shows aggregate counters and sales/earnings charts, fetched fresh on every activation."""

    view = View.DASHBOARD

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.summary = DashboardSummary()

    @trace(name="dashboard_refresh", trace_type="view")
    async def refresh(self) -> None:
        try:
            self.summary = await self.api.get_dashboard()
        except ApiError as e:
            logger.error(f"Error fetching dashboard data: {e}")
            self.notifier.error("Failed to fetch dashboard data")
