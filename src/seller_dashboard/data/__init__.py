"""Data models for the seller dashboard."""

from seller_dashboard.data.models import (
    ORDER_STATUSES,
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
    TimeSeriesPoint,
    UploadResult,
)

__all__ = [
    "ORDER_STATUSES",
    "DashboardSummary",
    "DeleteResult",
    "Invoice",
    "LoginResult",
    "Order",
    "OrderStatus",
    "OrderStatusChange",
    "OrderUpdate",
    "Product",
    "ProductCreate",
    "ProductEdit",
    "ProductUpdate",
    "TimeSeriesPoint",
    "UploadResult",
]
