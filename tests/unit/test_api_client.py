"""Unit tests for the authenticated API client."""

import httpx
import pytest

from seller_dashboard.api import ApiClient, HttpError, NetworkError, SessionExpired
from seller_dashboard.session import MemoryTokenStore


class TestBearerToken:
    """Test request augmentation with the session token."""

    @pytest.mark.asyncio
    async def test_token_attached_when_present(self, client, fake_api):
        fake_api.add("GET", "/orders", json=[])

        await client.get("/orders")

        request = fake_api.requests[0]
        assert request.headers["Authorization"] == "Bearer test-token"
        assert str(request.url) == "http://api.test/orders"

    @pytest.mark.asyncio
    async def test_no_authorization_header_without_token(self, client, fake_api, token_store):
        token_store.clear()
        fake_api.add("GET", "/orders", json=[])

        await client.get("/orders")

        assert "Authorization" not in fake_api.requests[0].headers

    @pytest.mark.asyncio
    async def test_token_read_at_send_time(self, client, fake_api, token_store):
        fake_api.add("GET", "/orders", json=[])

        token_store.set("rotated")
        await client.get("/orders")

        assert fake_api.requests[0].headers["Authorization"] == "Bearer rotated"


class TestResponseNormalization:
    """Test status handling and the 401 session clearing."""

    @pytest.mark.asyncio
    async def test_returns_parsed_json(self, client, fake_api):
        fake_api.add("GET", "/products", json=[{"id": 1}])
        assert await client.get("/products") == [{"id": 1}]

    @pytest.mark.asyncio
    async def test_empty_body_is_none(self, client, fake_api):
        fake_api.add("DELETE", "/products/1", status=204)
        assert await client.delete("/products/1") is None

    @pytest.mark.asyncio
    async def test_text_body_returned_as_text(self, client, fake_api):
        fake_api.add("DELETE", "/products/1", handler=lambda r: httpx.Response(200, text="Product removed"))
        assert await client.delete("/products/1") == "Product removed"

    @pytest.mark.asyncio
    async def test_401_clears_token_and_raises(self, client, fake_api, token_store):
        fake_api.add("GET", "/orders", status=401, json={"message": "jwt expired"})

        with pytest.raises(SessionExpired) as exc_info:
            await client.get("/orders")

        assert token_store.get() is None
        assert exc_info.value.status == 401
        assert exc_info.value.server_message == "jwt expired"

    @pytest.mark.asyncio
    async def test_next_request_after_401_is_unauthenticated(self, client, fake_api):
        fake_api.add("GET", "/orders", status=401)
        with pytest.raises(SessionExpired):
            await client.get("/orders")

        fake_api.add("GET", "/orders", json=[])
        await client.get("/orders")

        assert "Authorization" not in fake_api.requests[1].headers

    @pytest.mark.asyncio
    async def test_other_errors_keep_token(self, client, fake_api, token_store):
        fake_api.add("PATCH", "/orders/7", status=403, json={"message": "Not your order"})

        with pytest.raises(HttpError) as exc_info:
            await client.patch("/orders/7", {"status": "Shipped"})

        assert not isinstance(exc_info.value, SessionExpired)
        assert exc_info.value.status == 403
        assert exc_info.value.server_message == "Not your order"
        assert token_store.get() == "test-token"

    @pytest.mark.asyncio
    async def test_error_field_used_as_server_message(self, client, fake_api):
        fake_api.add("GET", "/orders", status=500, json={"error": "Database unavailable"})

        with pytest.raises(HttpError) as exc_info:
            await client.get("/orders")

        assert exc_info.value.server_message == "Database unavailable"

    @pytest.mark.asyncio
    async def test_transport_failure_becomes_network_error(self, client, fake_api, token_store):
        fake_api.add("GET", "/orders", error=httpx.ConnectError("connection refused"))

        with pytest.raises(NetworkError):
            await client.get("/orders")

        assert token_store.get() == "test-token"


class TestRequestBodies:
    """Test JSON and multipart encoding."""

    @pytest.mark.asyncio
    async def test_json_body(self, client, fake_api):
        fake_api.add("PATCH", "/orders/7", json={})

        await client.patch("/orders/7", {"status": "Shipped"})

        request = fake_api.requests[0]
        assert request.headers["Content-Type"] == "application/json"
        assert fake_api.body(request) == {"status": "Shipped"}

    @pytest.mark.asyncio
    async def test_multipart_has_no_json_content_type(self, client, fake_api):
        fake_api.add("POST", "/products/upload", json={"urls": []})

        await client.post("/products/upload", files=[("files", ("a.png", b"\x89PNG", "image/png"))])

        content_type = fake_api.requests[0].headers["Content-Type"]
        assert content_type.startswith("multipart/form-data; boundary=")


class TestMetricsRecording:
    """Test request metrics bookkeeping."""

    @pytest.mark.asyncio
    async def test_records_success_and_failure(self, client, fake_api, metrics):
        fake_api.add("GET", "/orders", json=[])
        fake_api.add("GET", "/products", status=500)

        await client.get("/orders")
        with pytest.raises(HttpError):
            await client.get("/products")

        data = metrics.get_dashboard_data()
        assert data["total_requests"] == 2
        assert data["error_count"] == 1
        assert data["recent_activity"][0]["name"] == "GET /products"

    @pytest.mark.asyncio
    async def test_records_network_failure(self, client, fake_api, metrics):
        fake_api.add("GET", "/orders", error=httpx.ReadError("reset"))

        with pytest.raises(NetworkError):
            await client.get("/orders")

        activity = metrics.get_dashboard_data()["recent_activity"][0]
        assert activity["code"] is None
        assert activity["status"] == "error"


class TestClientLifecycle:
    """Test construction and closing."""

    @pytest.mark.asyncio
    async def test_async_context_manager(self, settings, fake_api):
        fake_api.add("GET", "/orders", json=[])
        async with ApiClient(MemoryTokenStore(), settings=settings, transport=fake_api.transport()) as client:
            assert await client.get("/orders") == []

        assert client._client.is_closed


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
