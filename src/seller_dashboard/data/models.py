"""Pydantic models for data exchanged with the seller API."""

from datetime import datetime
from typing import Any, Literal, get_args

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

OrderStatus = Literal["Pending", "Processing", "Shipped", "Delivered", "Canceled"]

ORDER_STATUSES: tuple[str, ...] = get_args(OrderStatus)


class ApiModel(BaseModel):
    """Base for DTOs: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_wire(self, **kwargs: Any) -> dict[str, Any]:
        """Dump using wire (camelCase) names."""
        return self.model_dump(mode="json", by_alias=True, **kwargs)


class Product(ApiModel):
    """Product listing owned by the seller."""

    id: int = Field(..., description="Product identifier")
    name: str = Field(..., description="Product name")
    description: str = Field(default="", description="Product description")
    price: float = Field(ge=0, description="Listed price")
    discount_price: float | None = Field(default=None, ge=0, description="Discounted price (optional)")
    category: str = Field(default="", description="Product category")
    stock: int = Field(default=0, ge=0, description="Units in stock")
    images: list[str] = Field(default_factory=list, description="Ordered image URLs")
    is_active: bool = Field(default=True, description="Whether the listing is visible to buyers")

    @property
    def display_price(self) -> float:
        """Price shown to buyers: the discount price when one is set."""
        return self.discount_price if self.discount_price else self.price

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": 3,
                    "name": "Wireless Mouse",
                    "description": "Ergonomic wireless mouse with 6 buttons",
                    "price": 29.99,
                    "discountPrice": 24.99,
                    "category": "Electronics",
                    "stock": 45,
                    "images": ["https://cdn.example.com/uploads/mouse.jpg"],
                    "isActive": True,
                }
            ]
        }
    }


class ProductCreate(ApiModel):
    """Payload for ``POST /products``."""

    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    price: float = Field(ge=0)
    category: str = Field(..., min_length=1)
    stock: int = Field(ge=0)
    images: list[str] = Field(default_factory=list, description="Durable URLs returned by the upload endpoint")


class ProductEdit(ApiModel):
    """Payload for ``PATCH /products/:id``."""

    price: float = Field(ge=0)
    stock: int = Field(ge=0)


class ProductUpdate(ApiModel):
    """Fields a product mutation endpoint may echo back."""

    id: int | None = None
    name: str | None = None
    description: str | None = None
    price: float | None = Field(default=None, ge=0)
    discount_price: float | None = Field(default=None, ge=0)
    category: str | None = None
    stock: int | None = Field(default=None, ge=0)
    images: list[str] | None = None
    is_active: bool | None = None


class ProductRef(ApiModel):
    """Product as embedded in an order."""

    name: str = ""
    price: float = 0.0


class BuyerRef(ApiModel):
    """Buyer as embedded in an order."""

    email: str = ""


class Order(ApiModel):
    """Order placed against one of the seller's products."""

    id: int = Field(..., description="Order identifier")
    product: ProductRef = Field(default_factory=ProductRef)
    buyer: BuyerRef = Field(default_factory=BuyerRef)
    quantity: int = Field(default=1, ge=0)
    amount: float = Field(default=0.0)
    status: OrderStatus = Field(..., description="Order status")
    shipping_address: str = Field(default="")
    tracking_number: str | None = Field(default=None)
    invoice_number: str | None = Field(default=None)
    created_at: datetime | None = Field(default=None)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": 7,
                    "product": {"name": "Wireless Mouse", "price": 29.99},
                    "buyer": {"email": "buyer@example.com"},
                    "quantity": 2,
                    "amount": 59.98,
                    "status": "Pending",
                    "shippingAddress": "1 Main St, Springfield",
                    "trackingNumber": None,
                    "invoiceNumber": None,
                    "createdAt": "2024-01-15T09:00:00Z",
                }
            ]
        }
    }


class OrderStatusChange(ApiModel):
    """Payload for ``PATCH /orders/:id``."""

    status: OrderStatus


class OrderUpdate(ApiModel):
    """Fields the order status endpoint may return, merged into the local order."""

    id: int | None = None
    product: ProductRef | None = None
    buyer: BuyerRef | None = None
    quantity: int | None = Field(default=None, ge=0)
    amount: float | None = None
    status: OrderStatus | None = None
    shipping_address: str | None = None
    tracking_number: str | None = None
    invoice_number: str | None = None
    created_at: datetime | None = None


class Invoice(ApiModel):
    """Invoice returned by ``GET /orders/:id/invoice``; extra fields are kept."""

    model_config = ConfigDict(extra="allow")

    invoice_number: str | None = None


class TimeSeriesPoint(ApiModel):
    """One point of a dashboard chart."""

    label: str = Field(
        default="",
        validation_alias=AliasChoices("label", "month", "date", "period", "name"),
    )
    value: float = Field(
        default=0.0,
        validation_alias=AliasChoices("value", "amount", "total", "sales", "earnings"),
    )

    @field_validator("label", mode="before")
    @classmethod
    def stringify_label(cls, v: Any) -> str:
        return "" if v is None else str(v)


class DashboardSummary(ApiModel):
    """Aggregates returned by ``GET /seller/dashboard``."""

    total_sales: float = 0
    pending_orders: int = 0
    total_earnings: float = 0.0
    recent_sales: list[TimeSeriesPoint] = Field(default_factory=list)
    monthly_earnings: list[TimeSeriesPoint] = Field(default_factory=list)

    @field_validator("recent_sales", "monthly_earnings", mode="before")
    @classmethod
    def wrap_bare_numbers(cls, v: Any) -> Any:
        """Accept plain number lists by numbering their points."""
        if not isinstance(v, list):
            return v
        return [{"label": str(i), "value": item} if isinstance(item, int | float) else item for i, item in enumerate(v, 1)]


class UploadResult(ApiModel):
    """Response of ``POST /products/upload``."""

    urls: list[str] = Field(default_factory=list)


class DeleteResult(ApiModel):
    """Response of ``DELETE /products/:id``."""

    message: str | None = None


class LoginResult(ApiModel):
    """Response of the login endpoint."""

    token: str = Field(..., min_length=1, validation_alias=AliasChoices("token", "accessToken", "access_token"))
