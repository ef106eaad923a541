#!/usr/bin/env python3
"""
dedupr CLI — Command line interface for duplicate file detection and removal.
Wraps the core engine: parses flags and DEDUPR_* environment variables,
configures logging, runs one pass and maps failures to exit codes.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import logging
import os
import sys
from typing import List, Mapping, NoReturn, Optional

from dedupr.aliases import (
    ENV_OPTIONS, ENV_PREFIX, EPILOG_TEXT, HASH_HELP_TEXT, SIZE_HELP_TEXT,
    SPEED_SHORTCUTS, SPEED_SHORTCUT_HELP, TRUE_VALUES,
)
from dedupr.commands import DeduplicationCommand
from dedupr.core.errors import ConfigError
from dedupr.core.models import DeduplicationParams
from dedupr.utils.convert_utils import ConvertUtils

LOG_FORMAT = "%(levelname)-8s | %(name)-25s | %(message)s"

logger = logging.getLogger("dedupr")


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self, env: Optional[Mapping[str, str]] = None):
        self.env = os.environ if env is None else env
        self.verbose: bool = False
        self.quiet: bool = False

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        # -h is taken by --hash, so help is registered by hand
        parser = argparse.ArgumentParser(
            prog="dedupr",
            description="dedupr — find duplicate files by sampling their content",
            formatter_class=argparse.RawTextHelpFormatter,
            usage="%(prog)s [options...] folders...",
            epilog=EPILOG_TEXT,
            add_help=False,
        )

        parser.add_argument("folders", nargs="*", help="Folders to scan, in priority order")

        options = parser.add_argument_group("Options")
        options.add_argument(
            "--extensions", "-e",
            nargs="+",
            default=None,
            metavar="EXT",
            help="Allowed file extensions (space separated), default is all extensions"
        )
        options.add_argument(
            "--output", "-o",
            default=None,
            metavar="FILE",
            help="Full path to the JSON output file, default is dedupr.json"
        )
        options.add_argument(
            "--reverse", "-r",
            action="store_true",
            default=None,
            help="Reverse the folders and files order (alphabetically descending)"
        )
        options.add_argument(
            "--filename", "-f",
            action="store_true",
            default=None,
            help="Also consider filenames to check if a file is a duplicate"
        )
        options.add_argument(
            "--delete", "-d",
            action="store_true",
            default=None,
            help="Delete duplicate files (the first file found is always kept)"
        )
        options.add_argument(
            "--trash",
            action="store_true",
            default=None,
            help="With --delete, move duplicates to the system trash instead of removing them"
        )
        options.add_argument(
            "--verbose", "-v",
            action="store_true",
            default=None,
            help="Verbose mode with extra logging"
        )
        options.add_argument(
            "--quiet", "-q",
            action="store_true",
            default=None,
            help="Only log errors"
        )
        options.add_argument("--help", action="help", help="Show this help message and exit")

        advanced = parser.add_argument_group("Advanced")
        advanced.add_argument(
            "--parallel", "-p",
            type=int,
            default=None,
            metavar="N",
            help="How many files processed in parallel (default 5)"
        )
        advanced.add_argument(
            "--size", "-s",
            default=None,
            metavar="KB",
            help=SIZE_HELP_TEXT
        )
        advanced.add_argument(
            "--hash", "-h",
            default=None,
            metavar="ALGORITHM",
            help=HASH_HELP_TEXT
        )

        shortcuts = parser.add_argument_group("Shortcuts")
        exclusive = shortcuts.add_mutually_exclusive_group()
        for name in SPEED_SHORTCUTS:
            exclusive.add_argument(f"--{name}", action="store_true", help=SPEED_SHORTCUT_HELP[name])

        return parser

    def parse_args(self, args: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments, filling unset options from the environment."""
        parser = self.build_parser()
        namespace = parser.parse_args(args)
        if not namespace.folders:
            parser.error("at least one folder is required")
        return self.apply_environment(namespace)

    def apply_environment(self, namespace: argparse.Namespace) -> argparse.Namespace:
        """Explicit flags win; DEDUPR_<OPTION> only fills options left unset."""
        for dest, suffix in ENV_OPTIONS.items():
            if getattr(namespace, dest) is not None:
                continue
            raw = self.env.get(ENV_PREFIX + suffix)
            if raw is None or raw == "":
                continue

            if dest == "extensions":
                value = [ext for ext in raw.replace(",", " ").split() if ext]
            elif dest == "parallel":
                try:
                    value = int(raw)
                except ValueError:
                    self.error_exit(f"Invalid value for {ENV_PREFIX + suffix}: '{raw}'")
            elif dest in ("output", "size", "hash"):
                value = raw
            else:
                value = raw.strip().lower() in TRUE_VALUES
            setattr(namespace, dest, value)
        return namespace

    def create_params(self, args: argparse.Namespace) -> DeduplicationParams:
        """Create DeduplicationParams from CLI arguments."""
        hash_size = 0
        if args.size is not None:
            try:
                hash_size = ConvertUtils.human_to_kilobytes(args.size)
            except ValueError as e:
                self.error_exit(f"Invalid size format: {e}")
        hash_algorithm = args.hash

        # Hash size shortcuts override --size and --hash
        for name, (size, algorithm) in SPEED_SHORTCUTS.items():
            if getattr(args, name, False):
                hash_size, hash_algorithm = size, algorithm
                break

        if args.trash and not args.delete:
            self.warning("--trash has no effect without --delete")

        try:
            return DeduplicationParams(
                folders=args.folders,
                extensions=args.extensions,
                output=args.output,
                parallel=args.parallel or 0,
                hash_size=hash_size,
                hash_algorithm=hash_algorithm,
                verbose=bool(args.verbose),
                reverse=bool(args.reverse),
                filename=bool(args.filename),
                delete=bool(args.delete),
                trash=bool(args.trash),
            )
        except ConfigError as e:
            self.error_exit(f"Parameter error: {e.message}")

    def configure_logging(self) -> None:
        if self.quiet:
            level = logging.ERROR
        elif self.verbose:
            level = logging.DEBUG
        else:
            level = logging.INFO
        logging.basicConfig(level=level, format=LOG_FORMAT, force=True)

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, args: Optional[List[str]] = None) -> int:
        """Main entry point. Returns the process exit code."""
        namespace = self.parse_args(args)
        self.verbose = bool(namespace.verbose)
        self.quiet = bool(namespace.quiet)
        self.configure_logging()

        params = self.create_params(namespace)

        try:
            DeduplicationCommand(log=logger).execute(params)
        except ConfigError as e:
            self.error_exit(e.message)
        except OSError as e:
            self.error_exit(f"Could not save output to {params.output}: {e}")

        return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        sys.exit(app.run(argv))
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
