"""Remote seller API access."""

from seller_dashboard.api.client import ApiClient
from seller_dashboard.api.errors import (
    ApiError,
    DashboardError,
    HttpError,
    InvalidResponse,
    MutationInProgress,
    NetworkError,
    NotFound,
    SessionExpired,
    Unauthenticated,
    ValidationFailure,
    describe_failure,
)
from seller_dashboard.api.seller_api import SellerApi

__all__ = [
    "ApiClient",
    "SellerApi",
    "DashboardError",
    "Unauthenticated",
    "NotFound",
    "ValidationFailure",
    "MutationInProgress",
    "ApiError",
    "HttpError",
    "SessionExpired",
    "NetworkError",
    "InvalidResponse",
    "describe_failure",
]
