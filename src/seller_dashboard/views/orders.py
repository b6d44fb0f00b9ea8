"""Order management view."""

import logging

from seller_dashboard.api import (
    ApiError,
    MutationInProgress,
    NotFound,
    SessionExpired,
    ValidationFailure,
    describe_failure,
)
from seller_dashboard.data.models import ORDER_STATUSES, Invoice, Order
from seller_dashboard.observability import trace
from seller_dashboard.state import BoundControl, OptimisticCollection
from seller_dashboard.views.base import ViewController
from seller_dashboard.views.navigation import View

logger = logging.getLogger(__name__)

SESSION_EXPIRED_MESSAGE = "Your session has expired. Please refresh the page to continue."
UPDATE_FAILED_MESSAGE = "Failed to update order status. Please try again."

STATUS_COLORS = {
    "Pending": "#facc15",
    "Processing": "#3b82f6",
    "Shipped": "#a855f7",
    "Delivered": "#22c55e",
    "Canceled": "#ef4444",
}
DEFAULT_STATUS_COLOR = "#9ca3af"


def status_color(status: str) -> str:
    """Badge color for an order status."""
    return STATUS_COLORS.get(status, DEFAULT_STATUS_COLOR)


class OrdersController(ViewController):
    """
    Lists orders and drives their status lifecycle.

    Status changes are optimistic: the new status shows immediately and is
    replaced by the server's response once the PATCH settles, or reverted
    to the previous status (including the status dropdown) when it fails.
    """

    view = View.ORDERS

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.orders: OptimisticCollection[Order] = OptimisticCollection(name="Order")
        self.updating_order_id: int | None = None
        self.reload_prompt = False

    @trace(name="orders_refresh", trace_type="view")
    async def refresh(self) -> None:
        try:
            self.orders.replace_all(await self.api.list_orders())
        except SessionExpired:
            logger.error("Session expired while fetching orders")
            self.guard.navigator.redirect(View.LOGIN)
        except ApiError as e:
            logger.error(f"Error fetching orders: {e}")
            self.notifier.error("Failed to fetch orders")

    async def reload(self) -> bool:
        """Manual reload offered after a session expired mid-update."""
        self.reload_prompt = False
        return await self.activate()

    @trace(name="update_order_status", trace_type="view")
    async def update_order_status(
        self,
        order_id: int,
        new_status: str,
        control: BoundControl | None = None,
    ) -> bool:
        """
        Change an order's status optimistically.

        Args:
            order_id: Order to update
            new_status: One of ``ORDER_STATUSES``
            control: Status dropdown whose displayed value is reset on failure

        Returns:
            True when the server confirmed the change
        """
        if new_status not in ORDER_STATUSES:
            raise ValidationFailure(f"Unknown order status: {new_status}", ["status"])

        if not self.guard.token_store.get():
            self.notifier.error("Please login to update order status")
            self.guard.navigator.redirect(View.LOGIN)
            return False

        controls = {"status": control} if control is not None else None
        try:
            pending = self.orders.apply(order_id, {"status": new_status}, controls=controls)
        except NotFound:
            self.notifier.error("Order not found")
            return False
        except MutationInProgress:
            current = self.orders.get(order_id)
            if control is not None and current is not None:
                control.set_value(current.status)
            self.notifier.warning("This order is still being updated. Please wait.")
            return False

        logger.info(f"Updating order {order_id} status to {new_status}")
        self.updating_order_id = order_id
        try:
            with pending:
                try:
                    update = await self.api.update_order_status(order_id, new_status)
                except ApiError as e:
                    logger.error(f"Error updating order {order_id} status: {e}")
                    pending.rollback()
                    self._notify_update_failure(e)
                    return False
                try:
                    pending.commit(update)
                except ValidationFailure as e:
                    logger.error(f"Could not apply server response for order {order_id}: {e}")
                    pending.rollback()
                    self.notifier.error(UPDATE_FAILED_MESSAGE)
                    return False
        finally:
            self.updating_order_id = None

        self.notifier.success("Order status updated successfully")
        return True

    def _notify_update_failure(self, error: ApiError) -> None:
        if isinstance(error, SessionExpired):
            self.reload_prompt = True
            self.notifier.error(SESSION_EXPIRED_MESSAGE)
        else:
            self.notifier.error(describe_failure(error, UPDATE_FAILED_MESSAGE))

    @trace(name="generate_invoice", trace_type="view")
    async def generate_invoice(self, order_id: int) -> Invoice | None:
        """
        Request the invoice of a delivered order.

        Returns:
            The invoice, or None when it could not be generated
        """
        order = self.orders.get(order_id)
        if order is None:
            self.notifier.error("Order not found")
            return None
        if order.status != "Delivered":
            self.notifier.error("Invoices can only be generated for delivered orders")
            return None

        try:
            invoice = await self.api.get_invoice(order_id)
        except SessionExpired:
            self.notifier.error("Session expired. Please refresh the page and login again.")
            return None
        except ApiError as e:
            logger.error(f"Error generating invoice for order {order_id}: {e}")
            self.notifier.error("Failed to generate invoice")
            return None

        if invoice.invoice_number and not self.orders.is_pending(order_id):
            pending = self.orders.apply(order_id, {"invoice_number": invoice.invoice_number})
            pending.commit()
        logger.info(f"Generated invoice for order {order_id}: {invoice.model_dump(by_alias=True)}")
        self.notifier.success("Invoice generated successfully")
        return invoice
