"""Application context wiring the seller dashboard together."""

import logging
from collections.abc import Callable

import httpx

from seller_dashboard.api import ApiClient, SellerApi
from seller_dashboard.config.deployment import get_token_store
from seller_dashboard.config.settings import Settings, get_settings
from seller_dashboard.observability import MetricsCollector, flush_langfuse
from seller_dashboard.session import TokenStore
from seller_dashboard.views import (
    DashboardController,
    LoginController,
    NavigationGuard,
    Navigator,
    Notifier,
    OrdersController,
    ProductsController,
    View,
)

logger = logging.getLogger(__name__)


class SellerDashboard:
    """
    Builds and owns every component of the dashboard.

    Integrates:
    - Session token store (file or memory)
    - Authenticated API client and typed endpoint bindings
    - Navigation guard shared by the protected views
    - Dashboard, products and orders controllers
    - Request metrics for the Activity tab
    """

    def __init__(
        self,
        settings: Settings | None = None,
        token_store: TokenStore | None = None,
        notifier: Notifier | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the dashboard.

        Args:
            settings: Configuration settings (uses default if not provided)
            token_store: Token storage (built from settings if not provided)
            notifier: Notification sink (logging-only if not provided)
            transport: Optional httpx transport for the API client
        """
        self.settings = settings or get_settings()

        self.token_store = token_store or get_token_store(self.settings)
        logger.info(f"Initialized token store: {type(self.token_store).__name__}")

        self.metrics = MetricsCollector(history_size=self.settings.metrics_history_size)
        self.client = ApiClient(
            token_store=self.token_store,
            settings=self.settings,
            metrics=self.metrics,
            transport=transport,
        )
        self.api = SellerApi(self.client)

        self.notifier = notifier or Notifier()
        initial_view = View.DASHBOARD if self.token_store.get() else View.LOGIN
        self.navigator = Navigator(initial=initial_view)
        self.guard = NavigationGuard(self.token_store, self.navigator)

        self.login = LoginController(self.api, self.token_store, self.navigator, self.notifier)
        self.dashboard = DashboardController(self.api, self.guard, self.notifier)
        self.products = ProductsController(self.api, self.guard, self.notifier)
        self.orders = OrdersController(self.api, self.guard, self.notifier)
        logger.info("Initialized view controllers")

    def get_metrics(self) -> dict:
        """Request metrics for the Activity tab."""
        return self.metrics.get_dashboard_data()

    async def aclose(self) -> None:
        """Release previews and close the HTTP client."""
        self.products.close()
        await self.client.aclose()
        flush_langfuse()


class DashboardRegistry:
    """
    Hands out dashboards to browser sessions.

    With per-session isolation every session gets its own dashboard, so its
    token, navigation and notifications are never seen by another visitor.
    Otherwise every session shares one dashboard, which suits a single seller
    running the app locally.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        per_session: bool | None = None,
        factory: Callable[[], SellerDashboard] | None = None,
    ):
        """
        Args:
            settings: Configuration settings (uses default if not provided)
            per_session: Isolate sessions (defaults to True on HuggingFace Spaces)
            factory: Builds a new dashboard (defaults to ``SellerDashboard(settings)``)
        """
        self.settings = settings or get_settings()
        if per_session is None:
            per_session = self.settings.deployment_mode == "hf_spaces"
        self.per_session = per_session
        self.factory = factory or (lambda: SellerDashboard(settings=self.settings))
        self._sessions: dict[str, SellerDashboard] = {}
        self._shared: SellerDashboard | None = None

    def get(self, session_id: str | None = None) -> SellerDashboard:
        """
        Get the dashboard of a session, creating it on first use.

        Raises:
            ValueError: Sessions are isolated and no session id was given
        """
        if not self.per_session:
            if self._shared is None:
                self._shared = self.factory()
            return self._shared

        if not session_id:
            raise ValueError("A session id is required when sessions are isolated")
        app = self._sessions.get(session_id)
        if app is None:
            app = self.factory()
            self._sessions[session_id] = app
            logger.info(f"Created dashboard for session {session_id[:8]}")
        return app

    async def release(self, session_id: str | None) -> None:
        """Close and forget the dashboard of a session that has ended."""
        if not self.per_session or not session_id:
            return
        app = self._sessions.pop(session_id, None)
        if app is not None:
            await app.aclose()
            logger.info(f"Released dashboard for session {session_id[:8]}")

    async def aclose(self) -> None:
        """Close every dashboard."""
        for session_id in list(self._sessions):
            await self.release(session_id)
        if self._shared is not None:
            await self._shared.aclose()
            self._shared = None

    def __len__(self) -> int:
        return len(self._sessions) + (self._shared is not None)


_registry_instance: DashboardRegistry | None = None


def get_registry(notifier_factory: Callable[[], Notifier] | None = None) -> DashboardRegistry:
    """
    Get singleton dashboard registry.

    Args:
        notifier_factory: Builds the notification sink of each new dashboard
            when the registry is first created

    Returns:
        DashboardRegistry instance
    """
    global _registry_instance
    if _registry_instance is None:
        settings = get_settings()
        make_notifier = notifier_factory or Notifier
        _registry_instance = DashboardRegistry(
            settings=settings,
            factory=lambda: SellerDashboard(settings=settings, notifier=make_notifier()),
        )
    return _registry_instance
