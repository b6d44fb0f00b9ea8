"""View controllers for the seller dashboard."""

from seller_dashboard.views.dashboard import DashboardController
from seller_dashboard.views.login import LoginController
from seller_dashboard.views.navigation import NavigationGuard, Navigator, View
from seller_dashboard.views.notifications import Notification, Notifier
from seller_dashboard.views.orders import OrdersController, status_color
from seller_dashboard.views.previews import PreviewSet
from seller_dashboard.views.products import ProductsController, build_product

__all__ = [
    "DashboardController",
    "LoginController",
    "NavigationGuard",
    "Navigator",
    "Notification",
    "Notifier",
    "OrdersController",
    "PreviewSet",
    "ProductsController",
    "View",
    "build_product",
    "status_color",
]
