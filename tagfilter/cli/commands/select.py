"""
tagfilter select command.

Resolve which catalogers are active for a run.

Usage:
    tagfilter select
    tagfilter select --override-default-catalogers directory
    tagfilter select --select-catalogers "python,+sbom-cataloger,-python-package-cataloger"
    tagfilter select --registry catalogers.json --format json
"""

import json
from pathlib import Path
from typing import List

from tagfilter.config import Config
from tagfilter.core.selection import SelectionRequest, filter_set, split_tokens
from tagfilter.cli.output import echo, table, warn
from tagfilter.logging_config import get_logger

logger = get_logger(__name__)

# Flags whose values may start with "-" (remove tokens)
DASH_VALUE_FLAGS = ("--select-catalogers",)


def attach_dash_values(argv: List[str]) -> List[str]:
    """
    Join each DASH_VALUE_FLAGS flag with the argument after it.

    argparse reads "--select-catalogers -py-1" as two options. Rewriting it
    to "--select-catalogers=-py-1" keeps "-name" tokens as values.
    Arguments after "--" are left alone.
    """
    result = []
    args = iter(argv)
    for arg in args:
        if arg == "--":
            result.append(arg)
            result.extend(args)
            break
        if arg in DASH_VALUE_FLAGS:
            value = next(args, None)
            if value is None:
                result.append(arg)
                break
            result.append(f"{arg}={value}")
        else:
            result.append(arg)
    return result


def unmatched_tokens(request: SelectionRequest, known_tags: List[str]) -> List[str]:
    """Return request tokens that no cataloger carries, in request order."""
    known = set(known_tags)
    unmatched = []
    for token in request.base + request.select + request.remove + request.add:
        if token not in known and token not in unmatched:
            unmatched.append(token)
    return unmatched


def build_request(args, config: Config) -> SelectionRequest:
    """Build the selection request; config default tags apply without an override."""
    base = split_tokens(args.override_default_catalogers) or list(config.default_tags)
    return SelectionRequest.from_expressions(
        base=base,
        expressions=args.select_catalogers,
    )


def cmd_select(args) -> int:
    """Execute the select command."""
    config = Config.from_env()
    if args.registry:
        config.registry_path = Path(args.registry).expanduser()

    registry = config.load_registry()
    universe = registry.universe()
    request = build_request(args, config)
    logger.debug(f"Selection request: {request}")

    for token in unmatched_tokens(request, universe.tags()):
        logger.warning(f"'{token}' does not match any cataloger")

    selected = filter_set(universe, request)

    if args.format == "json":
        echo(json.dumps(selected.values(), indent=2))
        return 0

    if not selected:
        warn("No catalogers selected")
        return 0

    table(
        headers=["Cataloger", "Tags"],
        rows=[(name, ", ".join(registry.get(name).tags)) for name in selected.values()],
        title="Selected catalogers",
    )
    echo(f"{len(selected)} of {len(universe)} catalogers selected")
    return 0


def add_select_parser(subparsers):
    """Add the select subparser."""
    parser = subparsers.add_parser(
        "select",
        help="Show which catalogers a selection activates",
    )
    parser.add_argument(
        "--registry", "-r",
        metavar="PATH",
        help="JSON cataloger registry (default: built-in catalogers)",
    )
    parser.add_argument(
        "--override-default-catalogers",
        action="append",
        metavar="TAGS",
        help="Comma-separated tags replacing the default catalogers",
    )
    parser.add_argument(
        "--select-catalogers",
        action="append",
        metavar="EXPR",
        help="Comma-separated tags to narrow by, +name to add, -name to remove",
    )
    parser.add_argument(
        "--format", "-f",
        choices=["text", "json"],
        default="text",
        help="Output format",
    )
    parser.set_defaults(func=cmd_select)

    return parser
