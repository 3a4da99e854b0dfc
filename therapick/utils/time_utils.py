# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Therapick project.
# Licensed under the MIT License - see the LICENSE file for details.

from datetime import datetime, timezone
from typing import Optional, Union


def utcnow() -> datetime:
    """Naive UTC timestamp, matching how the DateTime columns are stored."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def parse_datetime(value: Union[str, datetime, None]) -> Optional[datetime]:
    """
    Accepts ISO dates ("2025-03-01") and datetimes ("2025-03-01T09:00:00Z").
    Returns a naive UTC datetime, or raises ValueError.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return to_naive_utc(value)
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return to_naive_utc(datetime.fromisoformat(text))


def start_of_day(value: datetime) -> datetime:
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach the UTC offset to a stored naive timestamp before it goes on the wire."""
    if value is None:
        return None
    return value.replace(tzinfo=timezone.utc)
