"""Formatting of dashboard data for Gradio components."""

import logging
from typing import Any

import pandas as pd

from seller_dashboard.data.models import DashboardSummary, Invoice, Order, Product, TimeSeriesPoint
from seller_dashboard.utils import format_currency
from seller_dashboard.views.orders import status_color

logger = logging.getLogger(__name__)

ORDER_HEADERS = ["Order", "Product", "Quantity", "Amount", "Customer Email", "Shipping Address", "Order Date", "Status"]
PRODUCT_HEADERS = ["ID", "Category", "Name", "Price", "Discount", "Stock", "Images", "Active"]


def format_order_rows(orders: list[Order]) -> list[list[Any]]:
    """
    Format orders for the orders Dataframe.

    Args:
        orders: Orders in display order

    Returns:
        One row per order, columns as ``ORDER_HEADERS``
    """
    if not orders:
        return [["No orders found", "", "", "", "", "", "", ""]]

    rows = []
    for order in orders:
        created = order.created_at.strftime("%Y-%m-%d") if order.created_at else ""
        rows.append(
            [
                f"#{order.id}",
                order.product.name,
                order.quantity,
                format_currency(order.amount),
                order.buyer.email,
                order.shipping_address,
                created,
                order.status,
            ]
        )
    return rows


def format_order_details(order: Order | None) -> str:
    """Markdown block describing one order, including tracking and invoice numbers."""
    if order is None:
        return "Select an order"

    color = status_color(order.status)
    lines = [
        f"### Order #{order.id}",
        f'<span style="background:{color};color:white;padding:2px 8px;border-radius:8px">{order.status}</span>',
        "",
        f"**Product:** {order.product.name} ({format_currency(order.product.price)})",
        f"**Quantity:** {order.quantity} | **Amount:** {format_currency(order.amount)}",
        f"**Customer:** {order.buyer.email}",
        f"**Shipping Address:** {order.shipping_address}",
    ]
    if order.tracking_number:
        lines.append(f"**Tracking Number:** {order.tracking_number}")
    if order.invoice_number:
        lines.append(f"**Invoice Number:** {order.invoice_number}")
    return "\n".join(lines)


def order_choices(orders: list[Order]) -> list[tuple[str, int]]:
    """Dropdown choices ``(label, order id)``."""
    return [(f"#{o.id} · {o.product.name} · {o.status}", o.id) for o in orders]


def format_product_rows(groups: dict[str, list[Product]]) -> list[list[Any]]:
    """
    Format products for the products Dataframe, grouped by category.

    Args:
        groups: Output of ``ProductsController.by_category``
    """
    rows = []
    for category, products in groups.items():
        for product in products:
            rows.append(
                [
                    product.id,
                    category,
                    product.name,
                    format_currency(product.price),
                    format_currency(product.discount_price) if product.discount_price else "",
                    product.stock,
                    len(product.images),
                    "✅" if product.is_active else "⛔",
                ]
            )
    if not rows:
        return [["", "", "No products yet", "", "", "", "", ""]]
    return rows


def product_choices(groups: dict[str, list[Product]]) -> list[tuple[str, int]]:
    """Dropdown choices ``(label, product id)``."""
    return [(f"{category} · {p.name} (#{p.id})", p.id) for category, products in groups.items() for p in products]


def format_product_details(product: Product | None) -> str:
    if product is None:
        return "Select a product"
    price = f"**{format_currency(product.display_price)}**"
    if product.discount_price:
        price += f" ~~{format_currency(product.price)}~~"
    state = "Active" if product.is_active else "Inactive"
    return (
        f"### {product.name}\n"
        f"{product.description}\n\n"
        f"{price} | Stock: {product.stock} | {state}"
    )


def format_summary(summary: DashboardSummary) -> tuple[float, int, float]:
    """Counters for the three overview cards."""
    return summary.total_sales, summary.pending_orders, summary.total_earnings


def series_frame(points: list[TimeSeriesPoint], value_label: str) -> pd.DataFrame:
    """Chart data for a Gradio Line/Bar plot."""
    return pd.DataFrame(
        {
            "period": [p.label for p in points],
            value_label: [p.value for p in points],
        }
    )


def format_invoice(invoice: Invoice | None) -> dict[str, Any]:
    """Invoice payload for a JSON component."""
    if invoice is None:
        return {}
    return invoice.model_dump(mode="json", by_alias=True, exclude_none=True)
