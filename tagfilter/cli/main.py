"""
tagfilter CLI - Command-line interface.

Usage:
    tagfilter select                                        # Default catalogers
    tagfilter select --override-default-catalogers directory
    tagfilter select --select-catalogers "python,+sbom-cataloger"
    tagfilter list                                          # Known catalogers
    tagfilter --version
"""

import argparse
import sys
from typing import List, Optional

from tagfilter import __version__
from tagfilter.core.exceptions import TagFilterError
from tagfilter.logging_config import setup_logging, get_logger
from tagfilter.cli.output import echo, error

logger = get_logger(__name__)


def cmd_version(args):
    """Show version information."""
    echo(f"tagfilter {__version__}")


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="tagfilter",
        description="tagfilter - Tag-based cataloger selection",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tagfilter select                                          # Default catalogers
  tagfilter select --override-default-catalogers image,file
  tagfilter select --select-catalogers "-rpm-db-cataloger,+sbom-cataloger"
  tagfilter list --tags
        """,
    )
    parser.add_argument(
        "--version", "-V",
        action="store_true",
        help="Show version and exit",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Quiet mode (errors only)",
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write logs to file (JSON format)",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Write console logs as JSON",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    from tagfilter.cli.commands import add_select_parser, add_list_parser

    add_select_parser(subparsers)
    add_list_parser(subparsers)

    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    from tagfilter.cli.commands import attach_dash_values

    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(attach_dash_values(argv))

    if args.version:
        cmd_version(args)
        return

    setup_logging(
        verbose=args.verbose,
        quiet=args.quiet,
        log_file=args.log_file,
        json_format=args.log_json,
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        result = args.func(args)

        if isinstance(result, int):
            sys.exit(result)

    except KeyboardInterrupt:
        sys.exit(130)

    except TagFilterError as e:
        error(str(e))
        sys.exit(1)

    except Exception as e:
        # Stack trace only with --verbose
        if args.verbose:
            logger.exception("Unexpected error")
        error(f"{type(e).__name__}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
