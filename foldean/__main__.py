#!/usr/bin/env python3
"""
foldean - CLI Entry Point
=========================

Usage:
    python -m foldean                      # dry run on ~/Downloads
    python -m foldean --dir ~/Desktop -y   # organize and move
    python -m foldean --depth 1 --include-hidden
"""

import argparse
import sys
from pathlib import Path

from . import __version__
from .config import OrganizeOptions
from .errors import OrganizerError
from .executor import apply_plan
from .planning import build_plan, validate_plan
from .utils import console, print_header, print_error, print_warning, print_success, print_plan_table


def non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"depth must be 0 or more, got {number}")
    return number


def run(options: OrganizeOptions, show_progress: bool = True) -> int:
    """Plan, print, and optionally apply. Errors propagate to main()."""
    root = options.directory

    plan = build_plan(root, options.depth, options.include_hidden)

    if not plan:
        console.print(f"Nothing to organize in {root}", markup=False, soft_wrap=True)
        return 0

    mode = "APPLY" if options.apply else "DRY-RUN"
    print_header(f"[{mode}] Organizing {root}", f"depth={options.depth}, include_hidden={options.include_hidden}")
    print_plan_table(plan, root)

    if not options.apply:
        print_warning("Dry run. Pass --apply to move files.")
        return 0

    validate_plan(plan)
    report = apply_plan(root, plan, show_progress=show_progress)
    print_success(f"Done. {report['executed_moves_count']} files moved.")
    return 0


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="foldean",
        description="Organize your Downloads into tidy folders. "
                    "Safe by default: runs in dry-run mode unless --apply is passed.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-d", "--dir", type=Path, default=None,
                        help="Directory to organize (defaults to OS Downloads directory)")
    parser.add_argument("-y", "--apply", action="store_true",
                        help="Actually move files instead of printing the plan")
    parser.add_argument("--include-hidden", action="store_true",
                        help="Include hidden files")
    parser.add_argument("--depth", type=non_negative_int, default=0, metavar="N",
                        help="Maximum depth to scan (0 means only the target directory)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = OrganizeOptions.from_args(args)
        return run(options, show_progress=sys.stderr.isatty())
    except OrganizerError as e:
        print_error(str(e))
        return 1
    except KeyboardInterrupt:
        print("\n[ABORT] Operation cancelled by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
