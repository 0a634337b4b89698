"""Interpret the ``--item-format`` template for one file."""

from __future__ import annotations

from typing import BinaryIO, Optional

from .errors import ItemFormatError
from .path_format import PathFormatter
from .stat_path import FileTimes
from .timestamp import format_timestamp

TIME_DIRECTIVES = {
    "m": "mtime",
    "a": "atime",
    "c": "ctime",
    "b": "btime",
}


def _text(value: str) -> bytes:
    return value.encode("utf-8", "surrogateescape")


def render_item(
    info: FileTimes,
    item_format: str,
    time_format: str,
    use_utc: bool = False,
    debug: bool = False,
    formatter: Optional[PathFormatter] = None,
) -> bytes:
    """Return the output line(s) for ``info`` as bytes.

    Raises:
        ItemFormatError: ``item_format`` holds an unknown directive.
    """
    formatter = formatter or PathFormatter()
    out = bytearray()
    pos = 0
    end = len(item_format)
    while pos < end:
        ch = item_format[pos]
        pos += 1
        if ch != "%":
            out += _text(ch)
            continue
        if pos >= end:
            raise ItemFormatError("unrecognized --item-format directive: trailing %")
        directive = item_format[pos]
        pos += 1
        if directive in TIME_DIRECTIVES:
            ts = getattr(info, TIME_DIRECTIVES[directive])
            out += _text(format_timestamp(ts, time_format, use_utc))
        elif directive == "p":
            out += _text(formatter.format_path(info.path, False, debug))
        elif directive == "u":
            out += _text(formatter.format_path(info.path, True, debug))
        elif directive == "r":
            out += info.path
        elif directive == "n":
            out += b"\n"
        elif directive == "z":
            out += b"\0"
        elif directive == "%":
            out += b"%"
        else:
            raise ItemFormatError(f"unrecognized --item-format directive: %{directive}")
    return bytes(out)


def write_item(
    stream: BinaryIO,
    info: FileTimes,
    item_format: str,
    time_format: str,
    use_utc: bool = False,
    debug: bool = False,
    formatter: Optional[PathFormatter] = None,
) -> None:
    """Render ``info`` and write it to a binary stream."""
    stream.write(render_item(info, item_format, time_format, use_utc, debug, formatter))


__all__ = ["TIME_DIRECTIVES", "render_item", "write_item"]
