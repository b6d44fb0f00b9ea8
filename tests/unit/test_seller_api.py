"""Unit tests for the typed seller API endpoints."""

import httpx
import pytest
from conftest import make_order, make_product

from seller_dashboard.api import InvalidResponse
from seller_dashboard.data import ProductCreate, ProductEdit


class TestOrderEndpoints:
    """Test order endpoints."""

    @pytest.mark.asyncio
    async def test_list_orders(self, seller_api, fake_api):
        fake_api.add("GET", "/orders", json=[make_order(7), make_order(8, status="Shipped", trackingNumber="T1")])

        orders = await seller_api.list_orders()

        assert [o.id for o in orders] == [7, 8]
        assert orders[0].amount == pytest.approx(59.98)
        assert orders[0].shipping_address == "1 Main St, Springfield"
        assert orders[1].tracking_number == "T1"

    @pytest.mark.asyncio
    async def test_update_order_status_sends_only_status(self, seller_api, fake_api):
        fake_api.add("PATCH", "/orders/7", json={"id": 7, "status": "Shipped", "trackingNumber": "TRK1"})

        update = await seller_api.update_order_status(7, "Shipped")

        assert fake_api.body(fake_api.requests[0]) == {"status": "Shipped"}
        assert update.model_dump(exclude_unset=True) == {"id": 7, "status": "Shipped", "tracking_number": "TRK1"}

    @pytest.mark.asyncio
    async def test_update_order_status_invalid_body(self, seller_api, fake_api):
        fake_api.add("PATCH", "/orders/7", json={"status": "Lost"})

        with pytest.raises(InvalidResponse):
            await seller_api.update_order_status(7, "Shipped")

    @pytest.mark.asyncio
    async def test_get_invoice_keeps_extra_fields(self, seller_api, fake_api):
        fake_api.add("GET", "/orders/7/invoice", json={"invoiceNumber": "INV-7", "total": 59.98})

        invoice = await seller_api.get_invoice(7)

        assert invoice.invoice_number == "INV-7"
        assert invoice.model_extra == {"total": 59.98}


class TestProductEndpoints:
    """Test product endpoints."""

    @pytest.mark.asyncio
    async def test_list_products(self, seller_api, fake_api):
        fake_api.add("GET", "/products", json=[make_product(1, discountPrice=8.0, isActive=False)])

        products = await seller_api.list_products()

        assert products[0].discount_price == 8.0
        assert products[0].display_price == 8.0
        assert products[0].is_active is False

    @pytest.mark.asyncio
    async def test_upload_images_multipart(self, seller_api, fake_api, tmp_path):
        first = tmp_path / "front.png"
        second = tmp_path / "back.jpg"
        first.write_bytes(b"front-bytes")
        second.write_bytes(b"back-bytes")
        fake_api.add("POST", "/products/upload", json={"urls": ["/uploads/front.png", "/uploads/back.jpg"]})

        result = await seller_api.upload_images([first, second])

        request = fake_api.requests[0]
        assert request.headers["Content-Type"].startswith("multipart/form-data")
        assert request.content.count(b'name="files"') == 2
        assert b"front-bytes" in request.content
        assert b"back-bytes" in request.content
        assert result.urls == ["/uploads/front.png", "/uploads/back.jpg"]

    @pytest.mark.asyncio
    async def test_create_product_wire_names(self, seller_api, fake_api):
        fake_api.add("POST", "/products", status=201, json={"id": 9})
        product = ProductCreate(
            name="Lamp", description="Desk lamp", price=19.5, category="Home", stock=3, images=["/uploads/l.png"]
        )

        await seller_api.create_product(product)

        assert fake_api.body(fake_api.requests[0]) == {
            "name": "Lamp",
            "description": "Desk lamp",
            "price": 19.5,
            "category": "Home",
            "stock": 3,
            "images": ["/uploads/l.png"],
        }

    @pytest.mark.asyncio
    async def test_update_product(self, seller_api, fake_api):
        fake_api.add("PATCH", "/products/1", json={"id": 1, "price": 12.0, "stock": 4})

        update = await seller_api.update_product(1, ProductEdit(price=12.0, stock=4))

        assert fake_api.body(fake_api.requests[0]) == {"price": 12.0, "stock": 4}
        assert update.price == 12.0

    @pytest.mark.asyncio
    async def test_toggle_product_tolerates_empty_body(self, seller_api, fake_api):
        fake_api.add("PATCH", "/products/1/toggle", status=204)

        update = await seller_api.toggle_product(1)

        assert update.model_dump(exclude_unset=True) == {}

    @pytest.mark.asyncio
    async def test_delete_product_text_body(self, seller_api, fake_api):
        fake_api.add("DELETE", "/products/1", handler=lambda r: httpx.Response(200, text="Product deleted successfully"))

        result = await seller_api.delete_product(1)

        assert result.message == "Product deleted successfully"


class TestDashboardAndLogin:
    """Test dashboard and login endpoints."""

    @pytest.mark.asyncio
    async def test_get_dashboard(self, seller_api, fake_api):
        fake_api.add(
            "GET",
            "/seller/dashboard",
            json={
                "totalSales": 12,
                "pendingOrders": 3,
                "totalEarnings": 450.5,
                "recentSales": [{"month": "Jan", "sales": 4}],
                "monthlyEarnings": [100, 200.5],
            },
        )

        summary = await seller_api.get_dashboard()

        assert summary.total_sales == 12
        assert summary.pending_orders == 3
        assert summary.recent_sales[0].label == "Jan"
        assert summary.recent_sales[0].value == 4
        assert [p.value for p in summary.monthly_earnings] == [100, 200.5]
        assert [p.label for p in summary.monthly_earnings] == ["1", "2"]

    @pytest.mark.asyncio
    async def test_login_posts_credentials(self, seller_api, fake_api):
        fake_api.add("POST", "/auth/login", json={"accessToken": "new-token"})

        result = await seller_api.login("seller@example.com", "secret")

        assert fake_api.body(fake_api.requests[0]) == {"email": "seller@example.com", "password": "secret"}
        assert result.token == "new-token"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
