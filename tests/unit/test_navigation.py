"""Unit tests for navigation, the session guard, login and notifications."""

import pytest

from seller_dashboard.api import Unauthenticated
from seller_dashboard.views import LoginController, NavigationGuard, Navigator, Notifier, View


class TestNavigationGuard:
    """Test the protected-view guard."""

    @pytest.mark.parametrize("view", [View.DASHBOARD, View.PRODUCTS, View.ORDERS])
    def test_protected_views_redirect_without_token(self, token_store, view):
        token_store.clear()
        navigator = Navigator(initial=view)
        guard = NavigationGuard(token_store, navigator)

        assert guard.check(view) is False
        assert navigator.current == View.LOGIN

    def test_passes_with_token(self, guard, navigator):
        assert guard.check(View.ORDERS) is True
        assert navigator.current == View.DASHBOARD

    def test_unprotected_views_always_pass(self, token_store, guard):
        token_store.clear()
        assert guard.check(View.LOGIN) is True
        assert guard.check(View.ACTIVITY) is True

    def test_require_raises(self, token_store, guard):
        token_store.clear()
        with pytest.raises(Unauthenticated):
            guard.require(View.PRODUCTS)

    def test_navigator_history(self):
        navigator = Navigator()
        navigator.redirect(View.DASHBOARD)
        navigator.redirect(View.ORDERS)
        assert list(navigator.history) == [View.LOGIN, View.DASHBOARD, View.ORDERS]

    def test_navigator_history_bounded(self):
        navigator = Navigator(history_size=3)
        for _ in range(10):
            navigator.redirect(View.ORDERS)
            navigator.redirect(View.PRODUCTS)

        assert len(navigator.history) == 3
        assert navigator.history[-1] == View.PRODUCTS
        assert navigator.current == View.PRODUCTS


class TestLoginController:
    """Test login and logout."""

    @pytest.fixture
    def login(self, seller_api, token_store, navigator, notifier):
        token_store.clear()
        navigator.redirect(View.LOGIN)
        return LoginController(seller_api, token_store, navigator, notifier)

    @pytest.mark.asyncio
    async def test_login_stores_token(self, login, fake_api, token_store, navigator):
        fake_api.add("POST", "/auth/login", json={"token": "issued"})

        assert await login.login(" seller@example.com ", "secret") is True

        assert token_store.get() == "issued"
        assert login.is_authenticated
        assert navigator.current == View.DASHBOARD
        assert fake_api.body(fake_api.requests[0])["email"] == "seller@example.com"

    @pytest.mark.asyncio
    async def test_wrong_credentials(self, login, fake_api, token_store, notifier, navigator):
        fake_api.add("POST", "/auth/login", status=401, json={"message": "Unauthorized"})

        assert await login.login("seller@example.com", "wrong") is False

        assert token_store.get() is None
        assert notifier.last.message == "Invalid email or password"
        assert navigator.current == View.LOGIN

    @pytest.mark.asyncio
    async def test_missing_fields(self, login, fake_api, notifier):
        assert await login.login("", "") is False

        assert fake_api.requests == []
        assert notifier.last.message == "Missing required fields: email, password"

    @pytest.mark.asyncio
    async def test_response_without_token(self, login, fake_api, notifier):
        fake_api.add("POST", "/auth/login", json={"user": "seller"})

        assert await login.login("seller@example.com", "secret") is False

        assert notifier.last.level == "error"

    def test_login_with_token(self, login, token_store, navigator):
        assert login.login_with_token("  pasted-token ") is True
        assert token_store.get() == "pasted-token"
        assert navigator.current == View.DASHBOARD

    def test_login_with_blank_token(self, login, token_store):
        assert login.login_with_token(" ") is False
        assert token_store.get() is None

    def test_logout(self, login, token_store, navigator):
        token_store.set("abc")
        login.logout()
        assert token_store.get() is None
        assert navigator.current == View.LOGIN


class TestNotifier:
    """Test notification history."""

    def test_levels_recorded(self):
        notifier = Notifier()
        notifier.success("saved")
        notifier.error("failed")

        assert notifier.messages() == ["saved", "failed"]
        assert notifier.messages("error") == ["failed"]
        assert notifier.last.level == "error"

    def test_history_bounded(self):
        notifier = Notifier(history_size=2)
        for i in range(5):
            notifier.info(str(i))
        assert notifier.messages() == ["3", "4"]

    def test_empty(self):
        assert Notifier().last is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
