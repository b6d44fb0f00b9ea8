"""View routing and the session guard for protected views."""

import logging
from collections import deque
from enum import Enum

from seller_dashboard.api.errors import Unauthenticated
from seller_dashboard.session import TokenStore

logger = logging.getLogger(__name__)


class View(str, Enum):
    """Views of the dashboard; values double as Gradio tab ids."""

    LOGIN = "login"
    DASHBOARD = "dashboard"
    PRODUCTS = "products"
    ORDERS = "orders"
    ACTIVITY = "activity"


PROTECTED_VIEWS = frozenset({View.DASHBOARD, View.PRODUCTS, View.ORDERS})


class Navigator:
    """Tracks the active view and keeps the most recent redirects."""

    def __init__(self, initial: View = View.LOGIN, history_size: int = 50):
        self.current = initial
        self.history: deque[View] = deque([initial], maxlen=history_size)

    def redirect(self, view: View) -> None:
        """Switch the active view."""
        if view != self.current:
            logger.info(f"Navigating from {self.current.value} to {view.value}")
        self.current = view
        self.history.append(view)


class NavigationGuard:
    """
    Checked once when a protected view becomes active.

    Without a session token the guard redirects to the login view and the
    caller must not fetch anything for that activation. The guard reads the
    token store itself; the fetch that follows reads it again when the
    request is sent.
    """

    def __init__(self, token_store: TokenStore, navigator: Navigator):
        self.token_store = token_store
        self.navigator = navigator

    def check(self, view: View) -> bool:
        """
        Return True when ``view`` may load its data.

        Args:
            view: View being activated

        Returns:
            False after redirecting to login when no token is present
        """
        if view not in PROTECTED_VIEWS or self.token_store.get():
            return True
        logger.info(f"No session token; redirecting {view.value} to login")
        self.navigator.redirect(View.LOGIN)
        return False

    def require(self, view: View) -> None:
        """Like ``check`` but raises ``Unauthenticated`` after redirecting."""
        if not self.check(view):
            raise Unauthenticated(f"Login required to open {view.value}")
