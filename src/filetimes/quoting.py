"""Render bytes or codepoints as bash-compatible quoted text."""

from __future__ import annotations

from typing import Dict, Sequence

from .display_level import DisplayLevel
from .errors import PathTooLong
from .limits import MAX_ESCAPE_WIDTH, MAX_PATH_LEN

NAMED_ESCAPES: Dict[int, bytes] = {
    0x07: b"\\a",
    0x08: b"\\b",
    0x1B: b"\\E",
    0x0C: b"\\f",
    0x0A: b"\\n",
    0x0D: b"\\r",
    0x09: b"\\t",
    0x0B: b"\\v",
    0x5C: b"\\\\",
    0x27: b"\\'",
    0x22: b'\\"',
}


def unicode_escape(codepoint: int) -> bytes:
    """Return ``\\uHHHH`` or, above the BMP, ``\\UHHHHHHHH``."""
    if codepoint <= 0xFFFF:
        return b"\\u%04X" % codepoint
    return b"\\U%08X" % codepoint


def hex_escape(value: int) -> bytes:
    """Return ``\\xHH`` for a single byte value."""
    if value > 0xFF:
        raise ValueError(f"hex escapes hold one byte, got {value:#x}")
    return b"\\x%02X" % value


def _raw(unit: int, is_codepoints: bool) -> bytes:
    if is_codepoints:
        return chr(unit).encode("utf-8")
    return bytes((unit,))


def encode(
    units: Sequence[int],
    level: DisplayLevel,
    is_codepoints: bool = False,
    capacity: int = MAX_PATH_LEN,
) -> str:
    """Quote ``units`` for display at the given level.

    ``units`` holds raw byte values, or codepoints when ``is_codepoints`` is
    true.  Only the byte form is meaningful for ``HEX_ESCAPES``.

    Raises:
        PathTooLong: the quoted text would not fit in ``capacity`` bytes.
    """
    out = bytearray()
    if level >= DisplayLevel.ESCAPES:
        out += b"$"
    if level >= DisplayLevel.SHELL_META:
        out += b"'"

    limit = capacity - MAX_ESCAPE_WIDTH
    for unit in units:
        if len(out) > limit:
            raise PathTooLong(f"quoted path exceeds {capacity} bytes")

        if level <= DisplayLevel.MULTIBYTE:
            out += _raw(unit, is_codepoints)
        elif unit in NAMED_ESCAPES:
            out += NAMED_ESCAPES[unit]
        elif 0x20 <= unit <= 0x7E:
            out.append(unit)
        elif level == DisplayLevel.ESCAPES:
            if unit <= 0x7F:
                out += unicode_escape(unit)
            else:
                # multibyte UTF-8 is trusted to render
                out += _raw(unit, is_codepoints)
        elif level == DisplayLevel.UNICODE_ESCAPES:
            out += unicode_escape(unit)
        else:
            out += hex_escape(unit)

    if level >= DisplayLevel.SHELL_META:
        out += b"'"
    # Raw bytes only survive at levels whose input was validated as UTF-8.
    return out.decode("utf-8", "surrogateescape")


__all__ = ["NAMED_ESCAPES", "encode", "hex_escape", "unicode_escape"]
