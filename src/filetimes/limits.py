"""Static capacity limits shared by the formatters."""

from __future__ import annotations

# Longest path accepted, and the capacity of the quoted output for one path.
MAX_PATH_LEN = 8192

# Capacity of an expanded time template and of one formatted timestamp.
MAX_TIME_LEN = 1024

# Widest output of a single escaped unit: \UHHHHHHHH plus closing quote and terminator.
MAX_ESCAPE_WIDTH = 12


__all__ = ["MAX_PATH_LEN", "MAX_TIME_LEN", "MAX_ESCAPE_WIDTH"]
