"""Run-time options and the presets behind the convenience switches."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .sorting import SortField, parse_sort_field

DEFAULT_ITEM_FORMAT = "%m  %a  %p%n"
DEFAULT_TIME_FORMAT = "%FT%T.%3N"

ITEM_PRESETS = {
    "mtime": "%m  %p%n",
    "atime": "%a  %p%n",
    "ctime": "%c  %p%n",
    "btime": "%b  %p%n",
}

EVERYTHING_ITEM_FORMAT = (
    "%p\n"
    "    modified  %m\n"
    "    accessed  %a\n"
    "     changed  %c\n"
    "        born  %b\n"
    "\n"
)
EVERYTHING_TIME_FORMAT = "%F %T.%9N %:z"


@dataclass
class Options:
    item_format: str = DEFAULT_ITEM_FORMAT
    time_format: str = DEFAULT_TIME_FORMAT
    path_input_file: Optional[str] = None
    input_delimiter: bytes = b"\n"
    sort_field: SortField = SortField.NONE
    reverse: bool = False
    use_utc: bool = False
    follow_symlinks: bool = True
    debug: bool = False

    @classmethod
    def from_defaults(cls, defaults: Dict[str, Any]) -> "Options":
        """Build options from the ``[defaults]`` section of the config file."""
        opts = cls()
        opts.item_format = str(defaults.get("item_format", opts.item_format))
        opts.time_format = str(defaults.get("time_format", opts.time_format))
        opts.use_utc = bool(defaults.get("utc", opts.use_utc))
        opts.reverse = bool(defaults.get("reverse", opts.reverse))
        opts.follow_symlinks = bool(defaults.get("follow_symlinks", opts.follow_symlinks))
        sort_value = defaults.get("sort")
        if sort_value:
            opts.sort_field = parse_sort_field(str(sort_value))
        return opts

    def to_defaults(self) -> Dict[str, Any]:
        """Return the settings worth persisting between runs."""
        return {
            "item_format": self.item_format,
            "time_format": self.time_format,
            "utc": self.use_utc,
            "sort": self.sort_field.label,
            "reverse": self.reverse,
            "follow_symlinks": self.follow_symlinks,
        }


def show_options(opts: Options) -> List[str]:
    """Describe ``opts`` as the command-line switches that reproduce them."""
    lines = [
        f'--item-format="{opts.item_format}"',
        f'--time-format="{opts.time_format}"',
    ]
    if opts.path_input_file:
        lines.append(f'--file="{opts.path_input_file}"')
    lines.append("--follow-links" if opts.follow_symlinks else "--stat-links")
    lines.append(f"--sort={opts.sort_field.value}")
    if opts.reverse:
        lines.append("--reverse")
    lines.append("--null" if opts.input_delimiter == b"\0" else "--newline")
    lines.append("--utc" if opts.use_utc else "--local-time")
    if opts.debug:
        lines.append("--debug")
    return lines


__all__ = [
    "DEFAULT_ITEM_FORMAT",
    "DEFAULT_TIME_FORMAT",
    "EVERYTHING_ITEM_FORMAT",
    "EVERYTHING_TIME_FORMAT",
    "ITEM_PRESETS",
    "Options",
    "show_options",
]
