from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Optional


def is_blank(value: Optional[str]) -> bool:
    return not value or not value.strip()


def has_min_length(value: Optional[str], min_len: int) -> bool:
    return value is not None and len(value) >= min_len


def parse_id(value: Any) -> Optional[int]:
    """Parse a record id coming from a command or URL.

    Empty, missing or non-numeric ids mean "no id" (an unsaved record).
    """

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    s = str(value).strip()
    if not s.isdigit():
        return None
    parsed = int(s)
    return parsed if parsed > 0 else None


def parse_decimal(value: Any) -> Optional[Decimal]:
    if value is None or value == "":
        return None
    try:
        parsed = Decimal(str(value))
    except InvalidOperation:
        return None
    return parsed if parsed.is_finite() else None
