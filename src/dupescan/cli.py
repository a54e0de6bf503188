#!/usr/bin/env python3
"""
dupescan CLI — Command line interface for duplicate file detection.
Prints each duplicate group as the first file found followed by its duplicates,
one path per line, with a blank line after each group. Never modifies files.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from typing import List, Optional, NoReturn
import logging

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

# === EARLY DEPENDENCY VALIDATION ===
_MISSING_DEPS = []
try:
    import xxhash  # noqa: F401
except ImportError:
    _MISSING_DEPS.append("xxhash")

if _MISSING_DEPS:
    print("Missing required dependencies:", file=sys.stderr)
    print(f"   pip install {' '.join(_MISSING_DEPS)}", file=sys.stderr)
    sys.exit(1)

# === NORMAL IMPORTS (after validation) ===
from dupescan.core.models import DuplicateGroup, ScanParams
from dupescan.commands import ScanCommand
from dupescan.aliases import (
    PROG_DESCRIPTION, PRECISION_CHOICES, PRECISION_HELP_TEXT,
    SIZE_HELP_TEXT, EPILOG_TEXT, PARSE_ERROR_HEADER
)


class _ArgumentParser(argparse.ArgumentParser):
    """Reports parse errors with exit code 1 instead of argparse's 2."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{PARSE_ERROR_HEADER}{message}\n")


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        parser = _ArgumentParser(
            prog="dupescan",
            usage="%(prog)s [options] directory",
            description=PROG_DESCRIPTION,
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "directory",
            nargs="*",
            help="Directory to scan for duplicates (exactly one)"
        )

        # Filtering options
        parser.add_argument(
            "--size", "-s",
            default=None,
            type=str,
            metavar="SIZE",
            help=SIZE_HELP_TEXT
        )
        parser.add_argument(
            "--recurse", "-r",
            action="store_true",
            help="Recurse into subdirectories"
        )
        parser.add_argument(
            "--regex", "-R",
            default=None,
            type=str,
            metavar="REGEX",
            help="Regular expression the whole file name must match"
        )
        parser.add_argument(
            "--invert-regex", "-i",
            action="store_true",
            dest="invert_regex",
            help="Only examine files NOT matching --regex"
        )

        # Comparison options
        parser.add_argument(
            "--precision", "-p",
            choices=PRECISION_CHOICES,
            default=2,
            type=int,
            help=PRECISION_HELP_TEXT
        )

        # Output options
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show progress and detailed statistics"
        )
        return parser

    def parse_args(self, args=None) -> argparse.Namespace:
        """Parse command-line arguments; exits 0 on --help and 1 on errors."""
        parser = self.build_parser()
        parsed = parser.parse_args(args)
        if len(parsed.directory) != 1:
            parser.print_usage(sys.stderr)
            sys.exit(1)
        parsed.directory = parsed.directory[0]
        return parsed

    def create_params(self, args: argparse.Namespace) -> ScanParams:
        """Create ScanParams from CLI arguments; size and regex errors end the run."""
        if not os.path.isdir(args.directory):
            self.error_exit(f"Directory not found: {args.directory}")
        try:
            return ScanParams.from_cli_values(
                root_dir=args.directory,
                size_str=args.size,
                recurse=args.recurse,
                regex=args.regex,
                invert_regex=args.invert_regex,
                precision=args.precision,
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress on stderr."""
        if not self.verbose:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(
                f"\r  [{stage}] {current}/{total} ({percent:.1f}%)"
            )
        else:
            sys.stderr.write(f"\r  [{stage}] {current} files processed...")
        sys.stderr.flush()

    def run_scan(self, params: ScanParams) -> List[DuplicateGroup]:
        """Execute the scan workflow."""
        command = ScanCommand()
        callback = self.progress_callback if self.verbose else None

        sys.stderr.write("Building file list...")
        sys.stderr.flush()
        try:
            files = command.scan(params, progress_callback=callback)
        except RuntimeError as e:
            sys.stderr.write("\n")
            self.error_exit(str(e))
        if self.verbose:
            sys.stderr.write("\n")
        sys.stderr.write(f"done. ({len(files)} files to examine)\n")
        sys.stderr.flush()

        if self.verbose:
            logging.getLogger(__name__).info(f"Precision: {params.precision.display_name}")

        try:
            groups, stats = command.execute(params, progress_callback=callback, files=files)
        except RuntimeError as e:
            self.error_exit(f"Scan failed: {e}")

        if self.verbose:
            sys.stderr.write("\n")
            print(stats.print_summary(), file=sys.stderr)

        return groups

    @staticmethod
    def format_group(group: DuplicateGroup) -> str:
        """Anchor first, then duplicates, one path per line, blank line after."""
        lines = [group.anchor.path] + [file.path for file in group.duplicates]
        return "\n".join(lines) + "\n\n"

    def output_results(self, groups: List[DuplicateGroup]) -> None:
        """Output duplicate groups as plain text, in discovery order."""
        for group in groups:
            sys.stdout.write(self.format_group(group))
            sys.stdout.flush()

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, args=None) -> None:
        """Main entry point."""
        parsed = self.parse_args(args)
        self.verbose = parsed.verbose
        if self.verbose:
            logging.getLogger("dupescan").setLevel(logging.INFO)

        params = self.create_params(parsed)
        groups = self.run_scan(params)
        self.output_results(groups)

        if self.verbose:
            elapsed = time.time() - self.start_time
            print(f"\nCompleted in {elapsed:.2f} seconds", file=sys.stderr)


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
