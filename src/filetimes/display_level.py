"""Decide how much quoting a path needs before it is shown in a terminal."""

from __future__ import annotations

from enum import IntEnum


class DisplayLevel(IntEnum):
    PLAIN = 1
    SHELL_META = 2
    MULTIBYTE = 3
    ESCAPES = 4
    UNICODE_ESCAPES = 5
    HEX_ESCAPES = 6

    @property
    def label(self) -> str:
        if self is DisplayLevel.PLAIN:
            return "plain"
        elif self is DisplayLevel.SHELL_META:
            return "single-quoted"
        elif self is DisplayLevel.MULTIBYTE:
            return "single-quoted UTF-8"
        elif self is DisplayLevel.ESCAPES:
            return "ANSI-C escaped"
        elif self is DisplayLevel.UNICODE_ESCAPES:
            return "codepoint escaped"
        else:
            return "hex escaped"


SHELL_META_BYTES = frozenset(b" \"|&;()<>{}!$`\\*?[]")


def classify(path: bytes, escape_unicode: bool) -> DisplayLevel:
    """Return the smallest display level that shows ``path`` safely."""
    level = DisplayLevel.PLAIN
    high = DisplayLevel.UNICODE_ESCAPES if escape_unicode else DisplayLevel.MULTIBYTE
    for byte in path:
        if byte in SHELL_META_BYTES:
            wanted = DisplayLevel.SHELL_META
        elif byte == 0x27:
            # the only printable character that cannot sit inside '...'
            wanted = DisplayLevel.ESCAPES
        elif byte < 0x20 or byte == 0x7F:
            wanted = DisplayLevel.ESCAPES
        elif byte < 0x80:
            continue
        else:
            wanted = high
        if wanted > level:
            level = wanted
    return level


__all__ = ["DisplayLevel", "SHELL_META_BYTES", "classify"]
