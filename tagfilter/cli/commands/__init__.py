"""
tagfilter CLI commands.

Commands:
    select      Show which catalogers a selection activates
    list        List catalogers and their tags
"""

from .select import add_select_parser, attach_dash_values, cmd_select
from .listing import add_list_parser, cmd_list

__all__ = [
    "attach_dash_values",
    # Parsers
    "add_select_parser",
    "add_list_parser",
    # Commands
    "cmd_select",
    "cmd_list",
]
