"""Strict UTF-8 decoding of path bytes into Unicode codepoints.

The decoder keeps a single incremental codec handle that is created on first
use and released with :meth:`Utf8Decoder.close`.  The handle is reset before
every conversion, so one decoder can be shared by every formatter in the
process.  Applications that prefer an explicit lifetime can use the decoder as
a context manager; the rest of the package falls back to a lazily created
process-wide instance from :func:`default_decoder`.
"""

from __future__ import annotations

import codecs
import logging
from typing import Optional, Tuple

from .errors import InvalidUtf8
from .limits import MAX_PATH_LEN

logger = logging.getLogger(__name__)

Codepoints = Tuple[int, ...]


class Utf8Decoder:
    """Validate UTF-8 and convert it into a tuple of codepoints."""

    def __init__(self, capacity: int = MAX_PATH_LEN) -> None:
        self.capacity = capacity
        self._handle: Optional[codecs.IncrementalDecoder] = None

    @property
    def is_open(self) -> bool:
        return self._handle is not None

    def open(self) -> codecs.IncrementalDecoder:
        """Create the codec handle if needed and return it."""
        if self._handle is None:
            self._handle = codecs.getincrementaldecoder("utf-8")(errors="strict")
        return self._handle

    def close(self) -> None:
        """Release the codec handle; the next decode reopens it."""
        self._handle = None

    def __enter__(self) -> "Utf8Decoder":
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def decode(self, data: bytes, debug: bool = False) -> Codepoints:
        """Return the codepoints of ``data``.

        Raises:
            InvalidUtf8: the bytes are malformed, end inside a multibyte
                sequence, or decode to more than ``capacity`` codepoints.
        """
        handle = self.open()
        handle.reset()
        try:
            text = handle.decode(data, final=True)
        except UnicodeDecodeError as err:
            handle.reset()
            if debug:
                if err.reason == "unexpected end of data":
                    logger.warning(
                        "UTF-8 conversion incomplete: %s: remaining=%d",
                        err.reason,
                        len(data) - err.start,
                    )
                else:
                    logger.warning("UTF-8 conversion failed: %s at byte %d", err.reason, err.start)
            raise InvalidUtf8(f"invalid UTF-8 at byte {err.start}: {err.reason}") from err

        if len(text) > self.capacity:
            if debug:
                logger.warning("UTF-8 conversion exceeded %d codepoints", self.capacity)
            raise InvalidUtf8(f"more than {self.capacity} codepoints")
        return tuple(ord(ch) for ch in text)


_default_decoder: Optional[Utf8Decoder] = None


def default_decoder() -> Utf8Decoder:
    """Return the process-wide decoder, creating it on first use."""
    global _default_decoder
    if _default_decoder is None:
        _default_decoder = Utf8Decoder()
    return _default_decoder


def release_default_decoder() -> None:
    """Tear down the process-wide decoder and its codec handle."""
    global _default_decoder
    if _default_decoder is not None:
        _default_decoder.close()
        _default_decoder = None


__all__ = [
    "Codepoints",
    "Utf8Decoder",
    "default_decoder",
    "release_default_decoder",
]
