"""Timestamp values and their rendering with an extended strftime format."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import ClassVar

from .errors import InvalidCalendarValue, TemplateBufferExhausted
from .limits import MAX_TIME_LEN
from .time_template import byte_width, expand_template

NOT_AVAILABLE = "N/A"
NANOS_PER_SECOND = 1_000_000_000


@dataclass(frozen=True, order=True)
class Timestamp:
    seconds: int
    nanoseconds: int = 0

    UNSET: ClassVar["Timestamp"]

    def __post_init__(self) -> None:
        if (self.seconds, self.nanoseconds) == (-1, -1):
            return
        if not 0 <= self.nanoseconds < NANOS_PER_SECOND:
            raise ValueError(f"nanoseconds out of range: {self.nanoseconds}")

    @property
    def is_set(self) -> bool:
        return self != Timestamp.UNSET

    @classmethod
    def from_ns(cls, total_ns: int) -> "Timestamp":
        """Split integer nanoseconds since the epoch; floor keeps ns non-negative."""
        seconds, nanoseconds = divmod(total_ns, NANOS_PER_SECOND)
        return cls(seconds, nanoseconds)


Timestamp.UNSET = Timestamp(-1, -1)


def calendar_fields(seconds: int, use_utc: bool) -> time.struct_time:
    """Break epoch seconds into calendar fields for UTC or the local zone."""
    try:
        return time.gmtime(seconds) if use_utc else time.localtime(seconds)
    except (OverflowError, OSError, ValueError) as err:
        zone = "gmtime" if use_utc else "localtime"
        raise InvalidCalendarValue(f"{zone}: {seconds}: {err}") from err


def format_timestamp(ts: Timestamp, template: str, use_utc: bool = False) -> str:
    """Render ``ts`` with ``template``; an unset timestamp renders as ``N/A``.

    Raises:
        InvalidCalendarValue: the seconds cannot be broken down.
        TemplateBufferExhausted: the template or its result is too long.
    """
    if not ts.is_set:
        return NOT_AVAILABLE
    calendar = calendar_fields(ts.seconds, use_utc)
    expanded = expand_template(template, ts.nanoseconds, calendar)
    try:
        text = time.strftime(expanded, calendar)
    except (OverflowError, ValueError) as err:
        raise InvalidCalendarValue(f"strftime: {err}") from err
    if byte_width(text) >= MAX_TIME_LEN:
        raise TemplateBufferExhausted(f"formatted time exceeds {MAX_TIME_LEN} bytes")
    return text


__all__ = [
    "NOT_AVAILABLE",
    "Timestamp",
    "calendar_fields",
    "format_timestamp",
]
