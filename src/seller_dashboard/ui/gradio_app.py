"""Main Gradio application for the seller dashboard."""

import logging

import gradio as gr

from seller_dashboard.dashboard import DashboardRegistry, SellerDashboard, get_registry
from seller_dashboard.data.models import ORDER_STATUSES
from seller_dashboard.state import ControlValue
from seller_dashboard.ui.formatting import (
    ORDER_HEADERS,
    PRODUCT_HEADERS,
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
from seller_dashboard.views import Notification, Notifier, View

logger = logging.getLogger(__name__)


class GradioNotifier(Notifier):
    """Shows notifications as Gradio toasts."""

    def _emit(self, notification: Notification) -> None:
        super()._emit(notification)
        if notification.level in ("success", "info"):
            gr.Info(notification.message)
        else:
            gr.Warning(notification.message)


def create_gradio_interface(registry: DashboardRegistry | None = None):
    """
    Create and configure the Gradio interface.

    Every handler resolves the dashboard of the browser session that
    triggered it, so isolated sessions never share a token or a view.

    Args:
        registry: Dashboards per session (uses the singleton with toast notifications if not provided)

    Returns:
        Gradio Blocks interface
    """
    if registry is None:
        registry = get_registry(notifier_factory=GradioNotifier)

    def session(request: gr.Request | None) -> SellerDashboard:
        return registry.get(request.session_hash if request else None)

    def selected_tab(app):
        return gr.Tabs(selected=app.navigator.current.value)

    # Login

    async def do_login(email, password, request: gr.Request):
        app = session(request)
        await app.login.login(email or "", password or "")
        return "", selected_tab(app)

    def use_token(token, request: gr.Request):
        app = session(request)
        app.login.login_with_token(token or "")
        return "", selected_tab(app)

    def do_logout(request: gr.Request):
        app = session(request)
        app.login.logout()
        return selected_tab(app)

    # Dashboard

    async def load_dashboard(request: gr.Request):
        app = session(request)
        await app.dashboard.activate()
        total_sales, pending, earnings = format_summary(app.dashboard.summary)
        return (
            total_sales,
            pending,
            earnings,
            series_frame(app.dashboard.summary.recent_sales, "sales"),
            series_frame(app.dashboard.summary.monthly_earnings, "earnings"),
            selected_tab(app),
        )

    # Products

    def products_outputs(app, selected_id=None):
        groups = app.products.by_category()
        choices = product_choices(groups)
        ids = [value for _, value in choices]
        if selected_id not in ids:
            selected_id = None
        product = app.products.products.get(selected_id) if selected_id is not None else None
        return (
            format_product_rows(groups),
            gr.Dropdown(choices=choices, value=selected_id),
            format_product_details(product),
            product.price if product else None,
            product.stock if product else None,
            gr.Button(value="Deactivate" if product and product.is_active else "Activate"),
            selected_tab(app),
        )

    async def load_products(selected_id, request: gr.Request):
        app = session(request)
        await app.products.activate()
        return products_outputs(app, selected_id)

    def select_product(product_id, request: gr.Request):
        app = session(request)
        if product_id is not None:
            app.products.start_edit(product_id)
        else:
            app.products.cancel_edit()
        return products_outputs(app, product_id)

    async def save_product_edit(product_id, price, stock, request: gr.Request):
        app = session(request)
        if product_id is None:
            return products_outputs(app, None)
        if app.products.editing is None or app.products.editing.product_id != product_id:
            app.products.start_edit(product_id)
        await app.products.save_edit(price=price, stock=stock)
        return products_outputs(app, product_id)

    async def toggle_product(product_id, request: gr.Request):
        app = session(request)
        if product_id is not None:
            await app.products.toggle_active(product_id)
        return products_outputs(app, product_id)

    async def delete_product(product_id, confirmed, request: gr.Request):
        app = session(request)
        if product_id is not None:
            if not confirmed:
                gr.Warning("Tick 'Confirm deletion' to delete this product")
            await app.products.delete_product(product_id, confirmed=bool(confirmed))
        return (*products_outputs(app, product_id), False)

    def preview_images(files, request: gr.Request):
        app = session(request)
        try:
            return app.products.select_images(files or [])
        except OSError as e:
            logger.error(f"Error creating image previews: {e}")
            app.notifier.error("Could not read the selected images")
            return []

    async def create_product(name, description, price, category, stock, request: gr.Request):
        app = session(request)
        form = {
            "name": name,
            "description": description,
            "price": price,
            "category": category,
            "stock": stock,
        }
        created = await app.products.create_product(form)
        if created:
            form_values = ("", "", None, "", None, None, [])
        else:
            form_values = tuple(gr.update() for _ in range(7))
        return (*form_values, *products_outputs(app, None))

    # Orders

    def orders_outputs(app, selected_id=None):
        orders = app.orders.orders.items
        ids = [o.id for o in orders]
        if selected_id not in ids:
            selected_id = None
        order = app.orders.orders.get(selected_id) if selected_id is not None else None
        return (
            format_order_rows(orders),
            gr.Dropdown(choices=order_choices(orders), value=selected_id),
            gr.Dropdown(value=order.status if order else None, interactive=order is not None),
            format_order_details(order),
            gr.Button(interactive=bool(order and order.status == "Delivered")),
            gr.Button(visible=app.orders.reload_prompt),
            selected_tab(app),
        )

    async def load_orders(selected_id, request: gr.Request):
        app = session(request)
        await app.orders.activate()
        return orders_outputs(app, selected_id)

    def select_order(order_id, request: gr.Request):
        return orders_outputs(session(request), order_id)

    async def change_status(order_id, new_status, request: gr.Request):
        app = session(request)
        if order_id is None or new_status is None:
            return orders_outputs(app, order_id)
        control = ControlValue(new_status)
        await app.orders.update_order_status(order_id, new_status, control=control)
        outputs = list(orders_outputs(app, order_id))
        outputs[2] = gr.Dropdown(value=control.value, interactive=True)
        return tuple(outputs)

    async def generate_invoice(order_id, request: gr.Request):
        app = session(request)
        invoice = None
        if order_id is not None:
            invoice = await app.orders.generate_invoice(order_id)
        return (format_invoice(invoice), *orders_outputs(app, order_id))

    async def reload_orders(order_id, request: gr.Request):
        app = session(request)
        await app.orders.reload()
        return orders_outputs(app, order_id)

    # Activity

    def refresh_metrics(request: gr.Request):
        metrics = session(request).get_metrics()
        total, avg_time, errors, success = format_metrics_for_display(metrics)
        return total, avg_time, errors, success, format_activity_log(metrics)

    async def initial_load(request: gr.Request):
        app = session(request)
        if app.login.is_authenticated:
            return await load_dashboard(request)
        return (0, 0, 0.0, series_frame([], "sales"), series_frame([], "earnings"), selected_tab(app))

    async def end_session(request: gr.Request):
        await registry.release(request.session_hash if request else None)

    # Create Gradio interface
    with gr.Blocks(title="Seller Dashboard") as demo:
        with gr.Row():
            gr.Markdown("# 🛍️ Seller Dashboard")
            logout_btn = gr.Button("Logout", size="sm", scale=0)

        with gr.Tabs(selected=View.LOGIN.value) as tabs:
            with gr.Tab("Login", id="login"):
                with gr.Column():
                    email_input = gr.Textbox(label="Email")
                    password_input = gr.Textbox(label="Password", type="password")
                    login_btn = gr.Button("Login", variant="primary")
                with gr.Accordion("Use an existing token", open=False):
                    token_input = gr.Textbox(label="Bearer token", type="password")
                    token_btn = gr.Button("Save token")

            with gr.Tab("Dashboard", id="dashboard") as dashboard_tab:
                with gr.Row():
                    total_sales = gr.Number(label="Total Sales", value=0, interactive=False)
                    pending_orders = gr.Number(label="Pending Orders", value=0, interactive=False)
                    total_earnings = gr.Number(label="Total Earnings ($)", value=0.0, precision=2, interactive=False)
                with gr.Row():
                    sales_plot = gr.LinePlot(
                        value=series_frame([], "sales"),
                        x="period",
                        y="sales",
                        title="Sales Trend",
                    )
                    earnings_plot = gr.BarPlot(
                        value=series_frame([], "earnings"),
                        x="period",
                        y="earnings",
                        title="Monthly Earnings",
                    )
                dashboard_refresh_btn = gr.Button("🔄 Refresh", size="sm")

            with gr.Tab("Products", id="products") as products_tab:
                products_table = gr.Dataframe(headers=PRODUCT_HEADERS, interactive=False)
                with gr.Row():
                    with gr.Column(scale=2):
                        product_select = gr.Dropdown(label="Product", choices=[], interactive=True)
                        product_details = gr.Markdown("Select a product")
                    with gr.Column(scale=1):
                        edit_price = gr.Number(label="Price", precision=2)
                        edit_stock = gr.Number(label="Stock", precision=0)
                        save_edit_btn = gr.Button("Save", variant="primary")
                        toggle_btn = gr.Button("Deactivate")
                        confirm_delete = gr.Checkbox(label="Confirm deletion", value=False)
                        delete_btn = gr.Button("Delete", variant="stop")

                with gr.Accordion("Add Product", open=False):
                    new_name = gr.Textbox(label="Name")
                    new_description = gr.Textbox(label="Description", lines=3)
                    with gr.Row():
                        new_price = gr.Number(label="Price", precision=2)
                        new_stock = gr.Number(label="Stock", precision=0)
                    new_category = gr.Textbox(label="Category")
                    new_images = gr.File(label="Images", file_count="multiple", file_types=["image"], type="filepath")
                    image_previews = gr.Gallery(label="Preview", columns=4, height=200)
                    create_btn = gr.Button("Create Product", variant="primary")

            with gr.Tab("Orders", id="orders") as orders_tab:
                orders_table = gr.Dataframe(headers=ORDER_HEADERS, interactive=False)
                with gr.Row():
                    with gr.Column(scale=2):
                        order_select = gr.Dropdown(label="Order", choices=[], interactive=True)
                        order_details = gr.Markdown("Select an order")
                    with gr.Column(scale=1):
                        status_select = gr.Dropdown(
                            label="Status",
                            choices=list(ORDER_STATUSES),
                            interactive=False,
                        )
                        invoice_btn = gr.Button("Generate Invoice", interactive=False)
                        reload_btn = gr.Button("🔄 Session expired, reload", visible=False, variant="stop")
                invoice_view = gr.JSON(label="Invoice")

            with gr.Tab("Activity", id="activity") as activity_tab:
                with gr.Row():
                    total_requests = gr.Number(label="Requests", value=0, interactive=False)
                    avg_response_time = gr.Number(label="Avg Response (s)", value=0.0, precision=3, interactive=False)
                    error_count = gr.Number(label="Errors", value=0, interactive=False)
                    success_rate = gr.Number(label="Success Rate (%)", value=100.0, precision=1, interactive=False)
                activity_log = gr.Dataframe(
                    headers=["Time", "Request", "Status"],
                    value=[["No activity yet", "", ""]],
                    interactive=False,
                )
                metrics_refresh_btn = gr.Button("🔄 Refresh Metrics", size="sm")

        dashboard_outputs = [total_sales, pending_orders, total_earnings, sales_plot, earnings_plot, tabs]
        product_outputs = [products_table, product_select, product_details, edit_price, edit_stock, toggle_btn, tabs]
        order_outputs = [orders_table, order_select, status_select, order_details, invoice_btn, reload_btn, tabs]
        metrics_outputs = [total_requests, avg_response_time, error_count, success_rate, activity_log]

        # Event handlers
        login_btn.click(fn=do_login, inputs=[email_input, password_input], outputs=[password_input, tabs])
        password_input.submit(fn=do_login, inputs=[email_input, password_input], outputs=[password_input, tabs])
        token_btn.click(fn=use_token, inputs=[token_input], outputs=[token_input, tabs])
        logout_btn.click(fn=do_logout, outputs=[tabs])

        dashboard_tab.select(fn=load_dashboard, outputs=dashboard_outputs)
        dashboard_refresh_btn.click(fn=load_dashboard, outputs=dashboard_outputs)

        products_tab.select(fn=load_products, inputs=[product_select], outputs=product_outputs)
        product_select.input(fn=select_product, inputs=[product_select], outputs=product_outputs)
        save_edit_btn.click(
            fn=save_product_edit,
            inputs=[product_select, edit_price, edit_stock],
            outputs=product_outputs,
        )
        toggle_btn.click(fn=toggle_product, inputs=[product_select], outputs=product_outputs)
        delete_btn.click(
            fn=delete_product,
            inputs=[product_select, confirm_delete],
            outputs=[*product_outputs, confirm_delete],
        )
        new_images.change(fn=preview_images, inputs=[new_images], outputs=[image_previews])
        create_btn.click(
            fn=create_product,
            inputs=[new_name, new_description, new_price, new_category, new_stock],
            outputs=[
                new_name,
                new_description,
                new_price,
                new_category,
                new_stock,
                new_images,
                image_previews,
                *product_outputs,
            ],
        )

        orders_tab.select(fn=load_orders, inputs=[order_select], outputs=order_outputs)
        order_select.input(fn=select_order, inputs=[order_select], outputs=order_outputs)
        status_select.input(fn=change_status, inputs=[order_select, status_select], outputs=order_outputs)
        invoice_btn.click(fn=generate_invoice, inputs=[order_select], outputs=[invoice_view, *order_outputs])
        reload_btn.click(fn=reload_orders, inputs=[order_select], outputs=order_outputs)

        activity_tab.select(fn=refresh_metrics, outputs=metrics_outputs)
        metrics_refresh_btn.click(fn=refresh_metrics, outputs=metrics_outputs)

        demo.load(fn=initial_load, outputs=dashboard_outputs)
        demo.unload(end_session)

    return demo

