"""Form input helpers for the seller dashboard."""

import math
from collections.abc import Iterable, Mapping
from typing import Any

from seller_dashboard.api.errors import ValidationFailure


def normalize_text(text: Any, max_length: int = 5000) -> str:
    """
    Normalize free-text form input.

    Args:
        text: Raw widget value (None is treated as empty)
        max_length: Maximum allowed length (default: 5000)

    Returns:
        Stripped text with internal whitespace runs collapsed
    """
    if text is None:
        return ""
    text = str(text)[:max_length]
    return " ".join(text.split())


def require_fields(form: Mapping[str, Any], names: Iterable[str]) -> None:
    """
    Check that every named field holds a non-blank value.

    Raises:
        ValidationFailure: Listing every missing field
    """
    missing = [name for name in names if form.get(name) is None or str(form.get(name)).strip() == ""]
    if missing:
        raise ValidationFailure(f"Missing required fields: {', '.join(missing)}", missing)


def parse_amount(value: Any, field: str) -> float:
    """Parse a non-negative money amount such as ``"19.99"``."""
    try:
        amount = float(str(value).strip().lstrip("$"))
    except (TypeError, ValueError) as e:
        raise ValidationFailure(f"{field} must be a number", [field]) from e
    if not math.isfinite(amount):
        raise ValidationFailure(f"{field} must be a number", [field])
    if amount < 0:
        raise ValidationFailure(f"{field} cannot be negative", [field])
    return amount


def parse_count(value: Any, field: str) -> int:
    """Parse a non-negative whole number such as a stock level."""
    try:
        number = float(str(value).strip())
    except (TypeError, ValueError) as e:
        raise ValidationFailure(f"{field} must be a whole number", [field]) from e
    if not number.is_integer():
        raise ValidationFailure(f"{field} must be a whole number", [field])
    if number < 0:
        raise ValidationFailure(f"{field} cannot be negative", [field])
    return int(number)


def format_currency(value: float | None) -> str:
    """Format an amount as ``$1,234.50``."""
    if value is None:
        return "-"
    return f"${value:,.2f}"
