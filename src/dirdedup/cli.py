#!/usr/bin/env python3
"""
dirdedup CLI: finds files duplicated within the same directory and
deletes all but one copy after confirmation.
Deletion is permanent: files are removed, not moved to trash.
"""
import argparse
import sys
import os
import time
from typing import List, Optional, NoReturn
import logging

from dirdedup.commands import CleanupSession
from dirdedup.core.errors import DedupError, InvalidRootError
from dirdedup.core.models import DuplicateGroup, HashAlgorithmName, ScanParams, ScanResult, DeletionReport
from dirdedup.core.walker import TreeWalkerImpl
from dirdedup.utils.convert_utils import ConvertUtils

LOG_FORMAT = "%(levelname)-8s | %(name)-25s | %(message)s"

SEPARATOR = "-" * 50

EPILOG_TEXT = """
Examples:
  Scan the current directory
  %(prog)s

  Scan Downloads, hashing with xxHash instead of SHA-256
  %(prog)s --dir ~/Downloads --algorithm xxh128

  Delete without confirmation (for scripts)
  %(prog)s --dir ~/Downloads --yes
"""


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="dirdedup",
            description="Delete files duplicated within the same directory level",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "--dir",
            default=".",
            type=str,
            dest="directory",
            help="Root directory to scan (default: current directory)"
        )
        parser.add_argument(
            "--algorithm",
            choices=[a.value for a in HashAlgorithmName],
            default=HashAlgorithmName.SHA256.value,
            help="Content hash: 'sha256' (default) or 'xxh128' (faster, non-cryptographic)"
        )
        parser.add_argument(
            "--yes", "-y",
            action="store_true",
            help="Delete without asking for confirmation"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show debug logging on stderr"
        )

        return parser.parse_args(args)

    @staticmethod
    def configure_logging(verbose: bool) -> None:
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.ERROR,
            format=LOG_FORMAT
        )

    def create_params(self, args: argparse.Namespace) -> ScanParams:
        """Create ScanParams from CLI arguments."""
        try:
            return ScanParams(
                root_dir=args.directory,
                algorithm=HashAlgorithmName(args.algorithm),
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def validate_root(self, params: ScanParams) -> None:
        """Exit with code 1 before any work if the root is unusable."""
        try:
            TreeWalkerImpl.validate_root(params.root_dir)
        except InvalidRootError:
            self.error_exit(f"Directory '{params.root_dir}' does not exist or is not a directory")

    # ---- scan-phase output ----

    @staticmethod
    def print_banner(params: ScanParams) -> None:
        print(SEPARATOR)
        print(f"Scanning directory: {params.root_dir}")
        print(f"Hashing with {params.algorithm.display_name} and comparing files within each directory...")
        print(SEPARATOR)

    def on_directory(self, directory: str) -> None:
        if self.verbose:
            print(f"  [scan] {directory}")

    @staticmethod
    def on_group(group: DuplicateGroup) -> None:
        print(f"Duplicate (hash: {group.short_digest}...): keeping [{group.keep.name}]")

    def on_error(self, error: DedupError) -> None:
        self.warning(str(error))

    @staticmethod
    def print_candidates(result: ScanResult) -> None:
        paths = result.files_to_delete
        print()
        print(SEPARATOR)
        print(f"Scan complete. Found {len(paths)} duplicate file(s) to remove:")
        print(SEPARATOR)
        for idx, path in enumerate(paths, 1):
            print(f"[{idx}] {path}")
        print(f"\nSpace to be freed: {ConvertUtils.bytes_to_human(result.reclaimable_bytes)}")

    # ---- confirmation and deletion ----

    @staticmethod
    def ask_confirmation() -> str:
        print("\nWARNING: the files above will be permanently deleted and cannot be recovered.")
        try:
            return input("Delete them? (y/n): ")
        except EOFError:
            return ""

    def on_deleted(self, path: str, error: Optional[DedupError]) -> None:
        if error is None:
            print(f"[deleted] {path}")
        else:
            print(f"[failed]  {path}: {error.reason}")

    @staticmethod
    def print_report(report: DeletionReport) -> None:
        print(SEPARATOR)
        print(f"Done: {report.success_count} deleted, {report.failure_count} failed.")

    def print_error_summary(self, errors: List[DedupError]) -> None:
        if errors:
            self.warning(f"{len(errors)} path(s) could not be processed during the scan")

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        print(f"Warning: {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv=None) -> None:
        """Main entry point: scan, list, confirm, delete."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.configure_logging(self.verbose)

        params = self.create_params(args)
        self.validate_root(params)
        session = CleanupSession(params)

        self.print_banner(params)
        result = session.scan(
            on_directory=self.on_directory,
            on_group=self.on_group,
            on_error=self.on_error,
        )

        self.print_error_summary(result.errors)

        if session.finished:
            print("\nNo duplicate files found within any directory level.")
            return

        self.print_candidates(result)

        answer = "y" if args.yes else self.ask_confirmation()
        if not session.confirm(answer):
            print("\nCancelled. No files were deleted.")
            return

        print("\nDeleting...")
        report = session.delete(on_result=self.on_deleted)
        self.print_report(report)

        if self.verbose:
            elapsed = time.time() - self.start_time
            print(f"Completed in {elapsed:.2f} seconds")


def main(argv=None) -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run(argv)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user (Ctrl+C)")
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
