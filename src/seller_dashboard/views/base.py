"""Common behaviour of view controllers."""

import logging

from seller_dashboard.api import SellerApi
from seller_dashboard.views.navigation import NavigationGuard, View
from seller_dashboard.views.notifications import Notifier

logger = logging.getLogger(__name__)


class ViewController:
    """
    Base class for a protected view.

    ``activate`` runs the navigation guard and, only when it passes, loads
    the view's data through ``refresh``.
    """

    view: View

    def __init__(self, api: SellerApi, guard: NavigationGuard, notifier: Notifier):
        self.api = api
        self.guard = guard
        self.notifier = notifier
        self.is_loading = False

    async def activate(self) -> bool:
        """
        Enter the view.

        Returns:
            True when data was requested, False after a login redirect
        """
        if not self.guard.check(self.view):
            return False
        self.guard.navigator.redirect(self.view)
        self.is_loading = True
        try:
            await self.refresh()
        finally:
            self.is_loading = False
        return True

    async def refresh(self) -> None:
        raise NotImplementedError
