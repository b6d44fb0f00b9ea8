"""Login and logout."""

import logging

from seller_dashboard.api import ApiError, SellerApi, SessionExpired, ValidationFailure, describe_failure
from seller_dashboard.session import TokenStore
from seller_dashboard.utils import require_fields
from seller_dashboard.views.navigation import Navigator, View
from seller_dashboard.views.notifications import Notifier

logger = logging.getLogger(__name__)


class LoginController:
    """Creates and destroys the session token."""

    def __init__(self, api: SellerApi, token_store: TokenStore, navigator: Navigator, notifier: Notifier):
        self.api = api
        self.token_store = token_store
        self.navigator = navigator
        self.notifier = notifier

    @property
    def is_authenticated(self) -> bool:
        return self.token_store.has_token()

    async def login(self, email: str, password: str) -> bool:
        """
        Exchange credentials for a token and open the dashboard.

        Returns:
            True when a token was stored
        """
        try:
            require_fields({"email": email, "password": password}, ("email", "password"))
        except ValidationFailure as e:
            self.notifier.error(str(e))
            return False

        try:
            result = await self.api.login(email.strip(), password)
        except SessionExpired:
            self.notifier.error("Invalid email or password")
            return False
        except ApiError as e:
            logger.error(f"Login failed: {e}")
            self.notifier.error(describe_failure(e, "Login failed. Please try again."))
            return False

        self.token_store.set(result.token)
        logger.info(f"Logged in as {email.strip()}")
        self.notifier.success("Logged in")
        self.navigator.redirect(View.DASHBOARD)
        return True

    def login_with_token(self, token: str) -> bool:
        """Store a bearer token issued elsewhere."""
        token = (token or "").strip()
        if not token:
            self.notifier.error("Missing required fields: token")
            return False
        self.token_store.set(token)
        self.notifier.success("Token saved")
        self.navigator.redirect(View.DASHBOARD)
        return True

    def logout(self) -> None:
        self.token_store.clear()
        logger.info("Logged out")
        self.notifier.info("Logged out")
        self.navigator.redirect(View.LOGIN)
