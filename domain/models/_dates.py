"""
Timestamp parsing shared by the domain models.

Files written by the original mobile app store dates as a bare number of
seconds since 2001-01-01T00:00:00Z. Everything written by this package uses
ISO-8601 with a UTC offset.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

# Epoch used by the mobile app's JSON encoder
REFERENCE_DATE = datetime(2001, 1, 1, tzinfo=timezone.utc)


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def coerce_datetime(value: Any) -> Any:
    """
    Normalize incoming timestamp values before pydantic validation.

    Args:
        value: Raw value from JSON or a caller.

    Returns:
        An aware datetime when the value is recognised, otherwise the value
        unchanged so pydantic reports the type error.

    Raises:
        ValueError: If a numeric date is NaN, infinite or outside the
            range datetime can represent.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        try:
            return REFERENCE_DATE + timedelta(seconds=value)
        except (OverflowError, ValueError) as e:
            raise ValueError(f"Date {value!r} is out of range") from e
    if isinstance(value, str) and value.endswith("Z"):
        value = value[:-1] + "+00:00"
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return value
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
