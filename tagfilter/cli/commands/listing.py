"""
tagfilter list command.

List known catalogers and the tags they can be selected by.

Usage:
    tagfilter list
    tagfilter list --tags
    tagfilter list --registry catalogers.json --format json
"""

import json
from pathlib import Path

from tagfilter.config import Config
from tagfilter.cli.output import dim, echo, table


def cmd_list(args) -> int:
    """Execute the list command."""
    config = Config.from_env()
    if args.registry:
        config.registry_path = Path(args.registry).expanduser()

    registry = config.load_registry()
    tags = registry.universe().tags()

    if args.format == "json":
        echo(json.dumps({
            "catalogers": [
                {"name": d.name, "tags": d.tags, "description": d.description}
                for d in registry
            ],
            "tags": tags,
        }, indent=2))
        return 0

    if args.tags:
        for tag in tags:
            echo(tag)
        return 0

    table(
        headers=["Cataloger", "Tags", "Description"],
        rows=[(d.name, ", ".join(d.tags), d.description) for d in registry],
        title="Catalogers",
    )
    dim(f"{len(registry)} catalogers, {len(tags)} tags (including names)")
    return 0


def add_list_parser(subparsers):
    """Add the list subparser."""
    parser = subparsers.add_parser(
        "list",
        help="List catalogers and their tags",
    )
    parser.add_argument(
        "--registry", "-r",
        metavar="PATH",
        help="JSON cataloger registry (default: built-in catalogers)",
    )
    parser.add_argument(
        "--tags", "-t",
        action="store_true",
        help="Only print the known tags, one per line",
    )
    parser.add_argument(
        "--format", "-f",
        choices=["text", "json"],
        default="text",
        help="Output format",
    )
    parser.set_defaults(func=cmd_list)

    return parser
