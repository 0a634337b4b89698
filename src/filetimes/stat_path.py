"""Collect the four timestamps of a path."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

from .errors import StatError
from .path_format import PathLike
from .timestamp import Timestamp


@dataclass
class FileTimes:
    path: bytes
    mtime: Timestamp = Timestamp.UNSET
    atime: Timestamp = Timestamp.UNSET
    ctime: Timestamp = Timestamp.UNSET
    btime: Timestamp = Timestamp.UNSET
    sort_key: Optional[str] = field(default=None, compare=False)

    @property
    def display_path(self) -> str:
        """Return the path decoded the way the OS decodes file names."""
        return os.fsdecode(self.path)


def _birth_time(st: os.stat_result) -> Timestamp:
    birth_ns = getattr(st, "st_birthtime_ns", None)
    if birth_ns is not None:
        return Timestamp.from_ns(birth_ns)
    birth = getattr(st, "st_birthtime", None)
    if birth is not None:
        return Timestamp.from_ns(int(birth * 1_000_000_000))
    return Timestamp.UNSET


def stat_path(path: PathLike, follow_symlinks: bool = True) -> FileTimes:
    """Read mtime, atime, ctime and, where the platform has it, btime.

    Raises:
        StatError: the path does not exist or cannot be examined.
    """
    raw = os.fsencode(path)
    try:
        st = os.stat(raw, follow_symlinks=follow_symlinks)
    except (OSError, ValueError) as err:
        reason = err.strerror if isinstance(err, OSError) and err.strerror else str(err)
        raise StatError(f"{os.fsdecode(raw)}: {reason}") from err
    return FileTimes(
        path=raw,
        mtime=Timestamp.from_ns(st.st_mtime_ns),
        atime=Timestamp.from_ns(st.st_atime_ns),
        ctime=Timestamp.from_ns(st.st_ctime_ns),
        btime=_birth_time(st),
    )


__all__ = ["FileTimes", "stat_path"]
