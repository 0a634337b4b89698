"""Ordering of collected file timestamps."""

from __future__ import annotations

import locale
import os
from enum import Enum
from typing import Callable, Dict, List

from .stat_path import FileTimes
from .timestamp import Timestamp


class SortField(Enum):
    MTIME = "m"
    ATIME = "a"
    CTIME = "c"
    BTIME = "b"
    PATH = "p"
    NONE = "n"

    @property
    def label(self) -> str:
        if self is SortField.MTIME:
            return "mtime"
        elif self is SortField.ATIME:
            return "atime"
        elif self is SortField.CTIME:
            return "ctime"
        elif self is SortField.BTIME:
            return "btime"
        elif self is SortField.PATH:
            return "path"
        else:
            return "none"


_TIME_GETTERS: Dict[SortField, Callable[[FileTimes], Timestamp]] = {
    SortField.MTIME: lambda item: item.mtime,
    SortField.ATIME: lambda item: item.atime,
    SortField.CTIME: lambda item: item.ctime,
    SortField.BTIME: lambda item: item.btime,
}


def parse_sort_field(value: str) -> SortField:
    """Accept a one-letter code or the full field name."""
    for candidate in SortField:
        if value in (candidate.value, candidate.label):
            return candidate
    raise ValueError(f"unknown sort value: {value}")


def collation_key(path: bytes) -> str:
    """Return the locale collation key for a raw path."""
    return locale.strxfrm(os.fsdecode(path))


def sort_items(items: List[FileTimes], sort_field: SortField, reverse: bool = False) -> None:
    """Sort ``items`` in place.

    Times sort newest first unless ``reverse``; paths sort ascending by the
    current locale's collation unless ``reverse``.
    """
    if sort_field is SortField.NONE or not items:
        return
    if sort_field is SortField.PATH:
        for item in items:
            item.sort_key = collation_key(item.path)
        items.sort(key=lambda item: item.sort_key, reverse=reverse)
        return
    getter = _TIME_GETTERS[sort_field]
    items.sort(key=getter, reverse=not reverse)


__all__ = ["SortField", "collation_key", "parse_sort_field", "sort_items"]
