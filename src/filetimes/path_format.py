"""Format a path for safe display: classify, validate, then quote."""

from __future__ import annotations

import os
from typing import Optional, Sequence, Tuple, Union

from .codepoints import Utf8Decoder, default_decoder
from .display_level import DisplayLevel, classify
from .errors import InvalidUtf8, PathTooLong
from .limits import MAX_PATH_LEN
from .quoting import encode

PathLike = Union[bytes, str, "os.PathLike[str]", "os.PathLike[bytes]"]

_NEEDS_DECODE = (
    DisplayLevel.MULTIBYTE,
    DisplayLevel.ESCAPES,
    DisplayLevel.UNICODE_ESCAPES,
)


def path_bytes(path: PathLike) -> bytes:
    """Return the raw bytes of ``path`` and check the length and NUL limits."""
    raw = os.fsencode(path)
    if len(raw) > MAX_PATH_LEN:
        raise PathTooLong(f"path of {len(raw)} bytes exceeds {MAX_PATH_LEN}")
    if b"\0" in raw:
        raise ValueError("path contains a NUL byte")
    return raw


class PathFormatter:
    """Turn arbitrary path bytes into shell-safe, faithful text.

    The formatter borrows a :class:`Utf8Decoder`; it does not close it.
    """

    def __init__(self, decoder: Optional[Utf8Decoder] = None) -> None:
        self.decoder = decoder if decoder is not None else default_decoder()

    def resolve(
        self, path: bytes, escape_unicode: bool, debug: bool = False
    ) -> Tuple[DisplayLevel, Sequence[int], bool]:
        """Return the final display level, the units to encode and whether they are codepoints."""
        level = classify(path, escape_unicode)
        units: Sequence[int] = path
        is_codepoints = False
        if level in _NEEDS_DECODE:
            try:
                codepoints = self.decoder.decode(path, debug=debug)
            except InvalidUtf8:
                level = DisplayLevel.HEX_ESCAPES
            else:
                # only codepoint escapes need per-codepoint granularity
                if level == DisplayLevel.UNICODE_ESCAPES:
                    units = codepoints
                    is_codepoints = True
        return level, units, is_codepoints

    def format_path(self, path: PathLike, escape_unicode: bool, debug: bool = False) -> str:
        raw = path_bytes(path)
        level, units, is_codepoints = self.resolve(raw, escape_unicode, debug)
        return encode(units, level, is_codepoints)


def format_path(path: PathLike, escape_unicode: bool = False, debug: bool = False) -> str:
    """Format ``path`` with the process-wide decoder.

    Raises:
        PathTooLong: the path or its quoted form exceeds the static limits.
    """
    return PathFormatter().format_path(path, escape_unicode, debug)


__all__ = ["PathFormatter", "format_path", "path_bytes"]
