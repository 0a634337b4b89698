"""Expand the two strftime extensions understood by ``--time-format``.

``%[width]N``
    ``width`` digits (default and maximum 9) of the subsecond value,
    truncated rather than rounded.
``%:z``
    the UTC offset with a colon, ``+HH:MM``, as used by RFC 3339.

Every other directive is copied through untouched so that
:func:`time.strftime` can resolve it afterwards.
"""

from __future__ import annotations

import time

from .errors import InvalidCalendarValue, TemplateBufferExhausted
from .limits import MAX_TIME_LEN

FLAG_CHARS = "_-0^#"
MODIFIER_CHARS = "EO"
DIGITS = "0123456789"
MAX_SUBSECOND_DIGITS = 9


def byte_width(text: str) -> int:
    """Return the UTF-8 size of ``text``; surrogate escapes count as one byte."""
    return len(text.encode("utf-8", "surrogateescape"))


class _Output:
    """Bounded UTF-8 byte buffer; one slot is kept for the terminator."""

    def __init__(self, capacity: int) -> None:
        self.limit = capacity - 1
        self.parts: list[str] = []
        self.length = 0

    def reserve(self, width: int) -> None:
        if self.length + width > self.limit:
            raise TemplateBufferExhausted(f"time format exceeds {self.limit + 1} bytes")

    def write(self, text: str) -> None:
        self.parts.append(text)
        self.length += byte_width(text)

    def getvalue(self) -> str:
        return "".join(self.parts)


def subsecond_digits(nanoseconds: int, width: int = MAX_SUBSECOND_DIGITS) -> str:
    """Return the leading ``width`` digits of the zero-padded nanoseconds."""
    return f"{nanoseconds:09d}"[: min(width, MAX_SUBSECOND_DIGITS)]


def colon_offset(calendar: time.struct_time) -> str:
    """Return the ``%z`` offset of ``calendar`` as ``+HH:MM``."""
    offset = time.strftime("%z", calendar)
    if len(offset) != 5:
        raise InvalidCalendarValue(f"unexpected UTC offset {offset!r}")
    return f"{offset[:3]}:{offset[3:]}"


def expand_template(
    template: str,
    nanoseconds: int,
    calendar: time.struct_time,
    capacity: int = MAX_TIME_LEN,
) -> str:
    """Rewrite ``%N`` and ``%:z`` in ``template``; keep everything else."""
    out = _Output(capacity)
    end = len(template)
    pos = 0
    while pos < end:
        if template[pos] != "%":
            literal = template[pos]
            out.reserve(byte_width(literal))
            out.write(literal)
            pos += 1
            continue

        start = pos
        pos += 1
        while pos < end and template[pos] in FLAG_CHARS:
            pos += 1
        width_start = pos
        while pos < end and template[pos] in DIGITS:
            pos += 1
        width_text = template[width_start:pos]
        if pos < end and template[pos] in MODIFIER_CHARS:
            pos += 1

        if pos < end:
            letter = template[pos]
            pos += 1
            if letter == "N":
                width = int(width_text) if width_text else MAX_SUBSECOND_DIGITS
                out.reserve(MAX_SUBSECOND_DIGITS + 1)
                out.write(subsecond_digits(nanoseconds, width))
                continue
            if letter == ":" and pos < end and template[pos] == "z":
                pos += 1
                offset = colon_offset(calendar)
                out.reserve(len(offset) + 1)
                out.write(offset)
                continue

        # a native strftime directive, or something unparseable
        span = template[start:pos]
        out.reserve(byte_width(span))
        out.write(span)

    return out.getvalue()


__all__ = [
    "FLAG_CHARS",
    "MAX_SUBSECOND_DIGITS",
    "byte_width",
    "colon_offset",
    "expand_template",
    "subsecond_digits",
]
