"""Shared fixtures: a scripted seller API behind httpx.MockTransport."""

import json

import httpx
import pytest

from seller_dashboard.api import ApiClient, SellerApi
from seller_dashboard.config import Settings
from seller_dashboard.dashboard import SellerDashboard
from seller_dashboard.observability import MetricsCollector
from seller_dashboard.session import MemoryTokenStore
from seller_dashboard.views import NavigationGuard, Navigator, Notifier, View


class FakeSellerApi:
    """Answers requests from scripted routes and records every request."""

    def __init__(self):
        self.routes = {}
        self.requests: list[httpx.Request] = []

    def add(self, method, path, status=200, json=None, error=None, handler=None):
        """Script the response for ``method path``; later calls replace earlier ones."""
        self.routes[(method, path)] = {"status": status, "json": json, "error": error, "handler": handler}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"message": f"No route for {request.method} {request.url.path}"})
        if route["handler"] is not None:
            return route["handler"](request)
        if route["error"] is not None:
            raise route["error"]
        if route["json"] is None:
            return httpx.Response(route["status"])
        return httpx.Response(route["status"], json=route["json"])

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def calls(self, method=None, path=None) -> list[httpx.Request]:
        return [
            r
            for r in self.requests
            if (method is None or r.method == method) and (path is None or r.url.path == path)
        ]

    @staticmethod
    def body(request: httpx.Request):
        return json.loads(request.content) if request.content else None


def make_order(order_id=7, status="Pending", **overrides):
    order = {
        "id": order_id,
        "product": {"name": "Wireless Mouse", "price": 29.99},
        "buyer": {"email": "buyer@example.com"},
        "quantity": 2,
        "amount": "59.98",
        "status": status,
        "shippingAddress": "1 Main St, Springfield",
        "trackingNumber": None,
        "invoiceNumber": None,
        "createdAt": "2024-01-15T09:00:00Z",
    }
    order.update(overrides)
    return order


def make_product(product_id=1, category="Electronics", **overrides):
    product = {
        "id": product_id,
        "name": f"Product {product_id}",
        "description": "A product",
        "price": 10.0,
        "category": category,
        "stock": 5,
        "images": [],
        "isActive": True,
    }
    product.update(overrides)
    return product


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        seller_api_base_url="http://api.test",
        token_store="memory",
        langfuse_enabled=False,
    )


@pytest.fixture
def token_store():
    return MemoryTokenStore("test-token")


@pytest.fixture
def fake_api():
    return FakeSellerApi()


@pytest.fixture
def metrics():
    return MetricsCollector()


@pytest.fixture
def client(settings, token_store, fake_api, metrics):
    return ApiClient(token_store=token_store, settings=settings, metrics=metrics, transport=fake_api.transport())


@pytest.fixture
def seller_api(client):
    return SellerApi(client)


@pytest.fixture
def notifier():
    return Notifier()


@pytest.fixture
def navigator():
    return Navigator(initial=View.DASHBOARD)


@pytest.fixture
def guard(token_store, navigator):
    return NavigationGuard(token_store, navigator)


@pytest.fixture
def app(settings, token_store, notifier, fake_api):
    return SellerDashboard(settings=settings, token_store=token_store, notifier=notifier, transport=fake_api.transport())
