"""Command-line entry point for filetimes.

The command reads paths from the arguments and, optionally, from a file or
standard input, looks up their timestamps and prints one item per path:

1. Set up the locale (a UTF-8 codeset is required).
2. Merge saved defaults with the command-line switches.
3. Stat every path, writing each item at once or, when sorting, after all
   paths have been collected.
4. Report any failure on stderr and exit with a non-zero status.
"""

from __future__ import annotations

import argparse
import locale
import logging
import os
import sys
from typing import BinaryIO, Iterable, Iterator, List, Optional, Sequence

from filetimes import __version__
from filetimes.codepoints import release_default_decoder
from filetimes.config import get_defaults, save_defaults
from filetimes.errors import FileTimesError
from filetimes.item_format import write_item
from filetimes.messages import LOGGER_NAME, configure_logging
from filetimes.options import (
    EVERYTHING_ITEM_FORMAT,
    EVERYTHING_TIME_FORMAT,
    ITEM_PRESETS,
    Options,
    show_options,
)
from filetimes.path_format import PathFormatter
from filetimes.sorting import SortField, parse_sort_field, sort_items
from filetimes.stat_path import FileTimes, stat_path

logger = logging.getLogger(LOGGER_NAME)

FALLBACK_LOCALE = "C.UTF-8"
EXIT_LOCALE = 14
READ_CHUNK = 64 * 1024

EPILOG = """\
The item format specifies which timestamp fields to output, their order,
and the surrounding context:
   %m    mtime, last modification timestamp
   %a    atime, last access timestamp
   %c    ctime, last change of metadata (inode) timestamp
   %b    btime, birth (creation) timestamp
   %r    raw item pathname (raw OS bytes)
   %p    item pathname (includes escapes for unusual characters)
   %u    item pathname (also has escapes for codepoints)
   %n    newline
   %z    zero-byte, nul character
   %%    literal percent sign
   (anything else is literal output)

The time format follows strftime(3), with two extensions:
   %[1-9]N   1 to 9 digits of subsecond time (%N means 9 digits)
   %:z       UTC offset as [+-]HH:MM, as in RFC 3339

Times sort most recent first; paths sort by the locale's collation.
Missing timestamps display as 'N/A'. Birth time (%b) comes from os.stat,
which does not report it on Linux, so %b shows 'N/A' there.
"""


class LocaleSetupError(FileTimesError):
    """Raised when no locale with a UTF-8 codeset can be selected."""


class _EverythingAction(argparse.Action):
    def __call__(self, parser, namespace, values, option_string=None):
        namespace.item_format = EVERYTHING_ITEM_FORMAT
        namespace.time_format = EVERYTHING_TIME_FORMAT


def _try_locale(name: str) -> bool:
    try:
        locale.setlocale(locale.LC_ALL, name)
    except locale.Error as err:
        logger.error('setlocale failed: "%s": %s: Check LANG, LC_CTYPE, LC_ALL', name, err)
        return False
    codeset = locale.nl_langinfo(locale.CODESET)
    if codeset.upper().replace("-", "") != "UTF8":
        logger.error('locale "%s": not a UTF-8 codeset: "%s"', name, codeset)
        return False
    return True


def setup_locale() -> None:
    """Select the environment's locale, or ``C.UTF-8`` as a fallback."""
    if _try_locale(""):
        return
    logger.warning('trying a fallback locale: "%s"', FALLBACK_LOCALE)
    if not _try_locale(FALLBACK_LOCALE):
        raise LocaleSetupError("need a locale with a UTF-8 charset")


def _sort_field(value: str) -> SortField:
    try:
        return parse_sort_field(value)
    except ValueError as err:
        raise argparse.ArgumentTypeError(str(err)) from err


def build_parser(prog: str, defaults: Options) -> argparse.ArgumentParser:
    """Create the argument parser with ``defaults`` as the starting values."""
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Display a file's associated timestamps.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("paths", nargs="*", help="Paths to examine.")
    parser.add_argument("-i", "--item-format", dest="item_format", help="Item (overall) format.")
    parser.add_argument("-t", "--time-format", dest="time_format", help="strftime format for timestamps.")
    parser.add_argument(
        "-l", "--local-time", dest="use_utc", action="store_const", const=False,
        help="Use the local (TZ) timezone (default).",
    )
    parser.add_argument(
        "-u", "--utc", dest="use_utc", action="store_const", const=True,
        help="Use the UTC timezone.",
    )
    parser.add_argument(
        "-f", "--file", dest="path_input_file",
        help="Read pathnames from a file (use - for stdin).",
    )
    parser.add_argument(
        "-n", "--newline", dest="input_delimiter", action="store_const", const=b"\n",
        help="Read paths with newline termination (default).",
    )
    parser.add_argument(
        "-z", "--null", dest="input_delimiter", action="store_const", const=b"\0",
        help="Read paths with nul termination.",
    )
    parser.add_argument(
        "-o", "--show-options", action="store_true",
        help="Show option settings (including defaults) on stderr.",
    )
    parser.add_argument(
        "-r", "--reverse", action="count", default=0,
        help="Reverse the sorting order (toggles on each use).",
    )
    parser.add_argument(
        "-s", "--sort", dest="sort_field", type=_sort_field,
        help="Sort by m[time] | a[time] | c[time] | b[time] | p[ath] | n[one].",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Show some debug messages.")
    parser.add_argument(
        "-v", "--version", action="version", version=f"%(prog)s version {__version__}",
        help="Show version number and exit.",
    )
    for letter, name in (("m", "mtime"), ("a", "atime"), ("c", "ctime"), ("b", "btime")):
        parser.add_argument(
            f"-{letter}", f"--{name}", dest="item_format", action="store_const",
            const=ITEM_PRESETS[name], help=f"Preset: {name} only.",
        )
    parser.add_argument(
        "-e", "--everything", nargs=0, action=_EverythingAction,
        help="Preset: expanded multiline format with labels.",
    )
    parser.add_argument(
        "-L", "--follow-links", dest="follow_symlinks", action="store_const", const=True,
        help="Follow symlinks to target timestamps (default).",
    )
    parser.add_argument(
        "-P", "--stat-links", dest="follow_symlinks", action="store_const", const=False,
        help="Show timestamps of the symlink itself.",
    )
    parser.add_argument(
        "--save-defaults", action="store_true",
        help="Store the current formats, zone and sort settings as defaults.",
    )
    parser.set_defaults(
        item_format=defaults.item_format,
        time_format=defaults.time_format,
        use_utc=defaults.use_utc,
        input_delimiter=defaults.input_delimiter,
        sort_field=defaults.sort_field,
        follow_symlinks=defaults.follow_symlinks,
    )
    return parser


def options_from_args(args: argparse.Namespace, defaults: Options) -> Options:
    """Turn parsed arguments into an :class:`Options` value."""
    return Options(
        item_format=args.item_format,
        time_format=args.time_format,
        path_input_file=args.path_input_file,
        input_delimiter=args.input_delimiter,
        sort_field=args.sort_field,
        reverse=defaults.reverse != bool(args.reverse % 2),
        use_utc=args.use_utc,
        follow_symlinks=args.follow_symlinks,
        debug=args.debug,
    )


def iter_delimited(stream: BinaryIO, delimiter: bytes) -> Iterator[bytes]:
    """Yield the delimiter-terminated records of ``stream`` without buffering it all."""
    pending = b""
    while True:
        chunk = stream.read(READ_CHUNK)
        if not chunk:
            break
        pending += chunk
        *records, pending = pending.split(delimiter)
        for record in records:
            if record:
                yield record
    if pending:
        yield pending


def read_path_list(name: str, delimiter: bytes) -> Iterator[bytes]:
    """Yield paths from a file, or from stdin when ``name`` is ``-``."""
    if name == "-":
        yield from iter_delimited(sys.stdin.buffer, delimiter)
        return
    try:
        with open(name, "rb") as stream:
            yield from iter_delimited(stream, delimiter)
    except OSError as err:
        raise FileTimesError(f"cannot read {name}: {err.strerror or err}") from err


def collect_paths(opts: Options, positional: Sequence[str]) -> Iterator[bytes]:
    if opts.path_input_file:
        yield from read_path_list(opts.path_input_file, opts.input_delimiter)
    for path in positional:
        yield os.fsencode(path)


def run(opts: Options, paths: Iterable[bytes], out: BinaryIO, formatter: Optional[PathFormatter] = None) -> int:
    """Examine ``paths`` and write one item each; return the item count."""
    formatter = formatter or PathFormatter()
    pending: List[FileTimes] = []
    count = 0
    for path in paths:
        info = stat_path(path, opts.follow_symlinks)
        if opts.sort_field is SortField.NONE:
            write_item(out, info, opts.item_format, opts.time_format, opts.use_utc, opts.debug, formatter)
        else:
            pending.append(info)
        count += 1

    sort_items(pending, opts.sort_field, opts.reverse)
    for info in pending:
        write_item(out, info, opts.item_format, opts.time_format, opts.use_utc, opts.debug, formatter)
    out.flush()
    return count


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the command line, print the timestamps, and return an exit status."""
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "filetimes"
    configure_logging(prog)

    try:
        setup_locale()
    except LocaleSetupError as err:
        logger.error("terminating: %s", err)
        return EXIT_LOCALE

    try:
        defaults = Options.from_defaults(get_defaults())
    except ValueError as err:
        logger.warning("ignoring saved defaults: %s", err)
        defaults = Options()

    parser = build_parser(prog, defaults)
    args = parser.parse_args(argv)
    opts = options_from_args(args, defaults)
    configure_logging(prog, opts.debug)

    if args.show_options:
        print("\n".join(show_options(opts)) + "\n", file=sys.stderr)
    if args.save_defaults:
        save_defaults(opts.to_defaults())

    try:
        run(opts, collect_paths(opts, args.paths), sys.stdout.buffer)
    except FileTimesError as err:
        logger.error("%s", err)
        return 1
    except KeyboardInterrupt:
        # User pressed Ctrl+C - this is a normal exit
        return 130
    finally:
        release_default_decoder()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
