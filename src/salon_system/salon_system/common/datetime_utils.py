from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD (or a full ISO timestamp) into date."""
    return datetime.fromisoformat(value.strip()).date()


def parse_optional_date(value) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(str(value))
    except ValueError:
        return None


def utc_now() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now(timezone.utc)


def add_years(moment: datetime, years: int) -> datetime:
    """Same calendar date `years` later; Feb 29 falls back to Feb 28."""
    try:
        return moment.replace(year=moment.year + years)
    except ValueError:
        return moment.replace(year=moment.year + years, day=28)
