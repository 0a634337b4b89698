"""Exceptions raised by the formatting core and the command line."""

from __future__ import annotations


class FileTimesError(Exception):
    """Base class for errors the caller is expected to report."""


class PathTooLong(FileTimesError):
    """Raised when a path or its quoted form exceeds the output capacity."""


class TemplateBufferExhausted(FileTimesError):
    """Raised when an expanded time template or formatted time is too long."""


class InvalidCalendarValue(FileTimesError):
    """Raised when epoch seconds cannot be broken down into calendar fields."""


class ItemFormatError(FileTimesError):
    """Raised for an unrecognized directive in an item format."""


class StatError(FileTimesError):
    """Raised when the timestamps of a path cannot be read."""


class InvalidUtf8(ValueError):
    """Raised by the decoder when a path is not valid UTF-8.

    The path formatter absorbs this by switching to hex escapes, so it never
    reaches callers of :func:`filetimes.path_format.format_path`.
    """


__all__ = [
    "FileTimesError",
    "PathTooLong",
    "TemplateBufferExhausted",
    "InvalidCalendarValue",
    "ItemFormatError",
    "StatError",
    "InvalidUtf8",
]
