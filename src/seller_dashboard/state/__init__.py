"""In-memory view state."""

from seller_dashboard.state.optimistic import (
    BoundControl,
    ControlValue,
    OptimisticCollection,
    PendingMutation,
)

__all__ = [
    "BoundControl",
    "ControlValue",
    "OptimisticCollection",
    "PendingMutation",
]
