from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import (
    DEFAULT_THRESHOLD,
    DEFAULT_TOP_N,
    FILE_ERROR_POLICIES,
    ON_FILE_ERROR_ABORT,
    parse_threshold,
    parse_top_n,
)
from .drives import partition_for
from .logging_utils import setup_logging
from .models import ScanResult
from .scanner import WalkError, scan_path
from .selector import top_n, total_size
from .utils import format_bytes, format_line

APP_NAME = "dua"

log = logging.getLogger(__name__)

DESCRIPTION = """\
"dua" stands for "disk usage analyzer"; it scans the target directory
for files and directories taking up the most space.

A directory is reported as a single entry unless one of its children holds
more than THRESHOLD of its size, in which case the children are reported
in its place."""


class _Parser(argparse.ArgumentParser):
    # bad usage exits with 1, not argparse's 2
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    p = _Parser(
        prog=APP_NAME,
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("directory", metavar="DIRECTORY", help="Directory to scan.")
    p.add_argument(
        "-t", "--threshold", type=parse_threshold, default=DEFAULT_THRESHOLD, metavar="THRESHOLD",
        help=f"Set the threshold (default: {DEFAULT_THRESHOLD}; range (0.0 - 1.0)).",
    )
    limit = p.add_mutually_exclusive_group()
    limit.add_argument(
        "-n", dest="top", type=parse_top_n, default=DEFAULT_TOP_N, metavar="N",
        help=f"Show top N results (default: {DEFAULT_TOP_N}).",
    )
    limit.add_argument("-a", "--all", action="store_true", help="Show every result.")
    p.add_argument(
        "--on-file-error", choices=FILE_ERROR_POLICIES, default=ON_FILE_ERROR_ABORT,
        help="Abort the scan on an unreadable file, or skip it and count it as empty "
             f"(default: {ON_FILE_ERROR_ABORT}).",
    )
    p.add_argument("-v", "--verbose", action="count", default=0,
                   help="Print a scan summary to stderr (-vv: also each directory visited).")
    p.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return p


def _log_summary(path: str, res: ScanResult):
    log.info("scanned %s: %d files, %d directories, %d other entries in %.2fs",
             path, res.files, res.dirs, res.others, res.elapsed_sec)
    log.info("total size: %s", format_bytes(total_size(res.root)).strip())
    if res.errors:
        log.info("%d entries could not be read", len(res.errors))
    part = partition_for(path)
    if part:
        log.info("partition %s (%s): %s used of %s (%.1f%%)",
                 part["mountpoint"], part["fstype"],
                 format_bytes(part["used"]).strip(), format_bytes(part["total"]).strip(),
                 part["percent"])


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        res = scan_path(args.directory, on_file_error=args.on_file_error)
    except WalkError as e:
        log.error("scan aborted: %s", e)
        return 1

    n = 0 if args.all else args.top
    for node in top_n(res.root, n=n, threshold=args.threshold):
        print(format_line(node))

    if log.isEnabledFor(logging.INFO):
        _log_summary(args.directory, res)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
