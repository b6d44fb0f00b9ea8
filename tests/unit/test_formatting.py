"""Unit tests for Gradio formatting helpers."""

import pytest
from conftest import make_order, make_product

from seller_dashboard.data import DashboardSummary, Invoice, Order, Product
from seller_dashboard.ui.formatting import (
    ORDER_HEADERS,
    format_invoice,
    format_order_details,
    format_order_rows,
    format_product_details,
    format_product_rows,
    format_summary,
    order_choices,
    product_choices,
    series_frame,
)
from seller_dashboard.ui.metrics_dashboard import format_activity_log, format_metrics_for_display


class TestOrderFormatting:
    """Test order table and detail formatting."""

    def test_rows(self):
        rows = format_order_rows([Order.model_validate(make_order(7))])

        assert len(rows[0]) == len(ORDER_HEADERS)
        assert rows[0][0] == "#7"
        assert rows[0][3] == "$59.98"
        assert rows[0][6] == "2024-01-15"
        assert rows[0][7] == "Pending"

    def test_empty(self):
        assert format_order_rows([])[0][0] == "No orders found"

    def test_details_show_tracking_and_invoice(self):
        order = Order.model_validate(make_order(7, status="Delivered", trackingNumber="TRK1", invoiceNumber="INV-1"))

        details = format_order_details(order)

        assert "TRK1" in details
        assert "INV-1" in details
        assert "Delivered" in details

    def test_choices(self):
        choices = order_choices([Order.model_validate(make_order(7))])
        assert choices[0][1] == 7


class TestProductFormatting:
    """Test product table and detail formatting."""

    def test_rows_follow_groups(self):
        groups = {
            "Home": [Product.model_validate(make_product(1, "Home"))],
            "Books": [Product.model_validate(make_product(2, "Books", discountPrice=7.5))],
        }

        rows = format_product_rows(groups)

        assert [r[1] for r in rows] == ["Home", "Books"]
        assert rows[1][4] == "$7.50"
        assert [c[1] for c in product_choices(groups)] == [1, 2]

    def test_empty(self):
        assert format_product_rows({})[0][2] == "No products yet"

    def test_details_show_discount(self):
        product = Product.model_validate(make_product(1, discountPrice=8.0, isActive=False))

        details = format_product_details(product)

        assert "$8.00" in details
        assert "~~$10.00~~" in details
        assert "Inactive" in details


class TestDashboardFormatting:
    """Test overview cards and charts."""

    def test_summary(self):
        summary = DashboardSummary.model_validate({"totalSales": 3, "pendingOrders": 1, "totalEarnings": 10.5})
        assert format_summary(summary) == (3, 1, 10.5)

    def test_series_frame(self):
        summary = DashboardSummary.model_validate({"monthlyEarnings": [{"month": "Jan", "earnings": 100}]})

        frame = series_frame(summary.monthly_earnings, "earnings")

        assert list(frame.columns) == ["period", "earnings"]
        assert frame.iloc[0]["period"] == "Jan"
        assert frame.iloc[0]["earnings"] == 100

    def test_invoice(self):
        invoice = Invoice.model_validate({"invoiceNumber": "INV-1", "total": 5})
        assert format_invoice(invoice) == {"invoiceNumber": "INV-1", "total": 5}
        assert format_invoice(None) == {}


class TestActivityFormatting:
    """Test request activity formatting."""

    def test_metrics_tuple(self):
        metrics = {"total_requests": 4, "avg_response_time": 0.2, "error_count": 1, "success_rate": 75.0}
        assert format_metrics_for_display(metrics) == (4, 0.2, 1, 75.0)

    def test_activity_rows(self):
        metrics = {
            "recent_activity": [
                {"timestamp": "2024-01-15T09:30:00", "name": "GET /orders", "status": "success", "code": 200},
                {"timestamp": "2024-01-15T09:31:00", "name": "GET /products", "status": "error", "code": None},
            ]
        }

        rows = format_activity_log(metrics)

        assert rows[0] == ["09:30:00", "GET /orders", "✅ 200"]
        assert rows[1] == ["09:31:00", "GET /products", "❌ network error"]

    def test_no_activity(self):
        assert format_activity_log({})[0][0] == "No recent activity"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
