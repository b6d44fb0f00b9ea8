"""Typed bindings for the seller API endpoints."""

import logging
import mimetypes
from collections.abc import Sequence
from contextlib import ExitStack
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from seller_dashboard.api.client import ApiClient
from seller_dashboard.api.errors import InvalidResponse
from seller_dashboard.data.models import (
    DashboardSummary,
    DeleteResult,
    Invoice,
    LoginResult,
    Order,
    OrderStatus,
    OrderStatusChange,
    OrderUpdate,
    Product,
    ProductCreate,
    ProductEdit,
    ProductUpdate,
    UploadResult,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_orders_adapter = TypeAdapter(list[Order])
_products_adapter = TypeAdapter(list[Product])


def _validate(model: type[ModelT], body: Any, endpoint: str) -> ModelT:
    try:
        return model.model_validate(body if body is not None else {})
    except ValidationError as e:
        logger.error(f"Unexpected response from {endpoint}: {e}")
        raise InvalidResponse(f"Unexpected response from {endpoint}") from e


def _validate_list(adapter: TypeAdapter, body: Any, endpoint: str) -> list:
    try:
        return adapter.validate_python(body if body is not None else [])
    except ValidationError as e:
        logger.error(f"Unexpected response from {endpoint}: {e}")
        raise InvalidResponse(f"Unexpected response from {endpoint}") from e


class SellerApi:
    """Endpoint methods returning validated DTOs."""

    def __init__(self, client: ApiClient):
        self.client = client

    # Authentication

    async def login(self, email: str, password: str) -> LoginResult:
        path = self.client.settings.login_path
        body = await self.client.post(path, {"email": email, "password": password})
        return _validate(LoginResult, body, f"POST {path}")

    # Orders

    async def list_orders(self) -> list[Order]:
        body = await self.client.get("/orders")
        return _validate_list(_orders_adapter, body, "GET /orders")

    async def update_order_status(self, order_id: int, status: OrderStatus) -> OrderUpdate:
        payload = OrderStatusChange(status=status).to_wire()
        body = await self.client.patch(f"/orders/{order_id}", payload)
        return _validate(OrderUpdate, body, "PATCH /orders/:id")

    async def get_invoice(self, order_id: int) -> Invoice:
        body = await self.client.get(f"/orders/{order_id}/invoice")
        return _validate(Invoice, body, "GET /orders/:id/invoice")

    # Products

    async def list_products(self) -> list[Product]:
        body = await self.client.get("/products")
        return _validate_list(_products_adapter, body, "GET /products")

    async def upload_images(self, paths: Sequence[str | Path]) -> UploadResult:
        """Upload local image files as one multipart payload (field ``files``)."""
        with ExitStack() as stack:
            files = []
            for path in paths:
                path = Path(path)
                content_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
                handle = stack.enter_context(path.open("rb"))
                files.append(("files", (path.name, handle, content_type)))
            body = await self.client.post("/products/upload", files=files)
        return _validate(UploadResult, body, "POST /products/upload")

    async def create_product(self, product: ProductCreate) -> Any:
        return await self.client.post("/products", product.to_wire())

    async def update_product(self, product_id: int, edit: ProductEdit) -> ProductUpdate:
        body = await self.client.patch(f"/products/{product_id}", edit.to_wire())
        return _validate(ProductUpdate, body if isinstance(body, dict) else {}, "PATCH /products/:id")

    async def toggle_product(self, product_id: int) -> ProductUpdate:
        body = await self.client.patch(f"/products/{product_id}/toggle", {})
        return _validate(ProductUpdate, body if isinstance(body, dict) else {}, "PATCH /products/:id/toggle")

    async def delete_product(self, product_id: int) -> DeleteResult:
        body = await self.client.delete(f"/products/{product_id}")
        if isinstance(body, str):
            body = {"message": body}
        return _validate(DeleteResult, body, "DELETE /products/:id")

    # Dashboard

    async def get_dashboard(self) -> DashboardSummary:
        body = await self.client.get("/seller/dashboard")
        return _validate(DashboardSummary, body, "GET /seller/dashboard")
