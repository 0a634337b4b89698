"""Public interface for filetimes."""

from .codepoints import Utf8Decoder, default_decoder, release_default_decoder
from .display_level import DisplayLevel, classify
from .errors import (
    FileTimesError,
    InvalidCalendarValue,
    ItemFormatError,
    PathTooLong,
    StatError,
    TemplateBufferExhausted,
)
from .path_format import PathFormatter, format_path
from .timestamp import Timestamp, format_timestamp

__version__ = "1.1.0"
__all__ = [
    "DisplayLevel",
    "FileTimesError",
    "InvalidCalendarValue",
    "ItemFormatError",
    "PathFormatter",
    "PathTooLong",
    "StatError",
    "TemplateBufferExhausted",
    "Timestamp",
    "Utf8Decoder",
    "classify",
    "default_decoder",
    "format_path",
    "format_timestamp",
    "release_default_decoder",
    "__version__",
]
