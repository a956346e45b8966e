"""
tagfilter CLI.

Command-line interface for resolving cataloger selections.

Usage:
    tagfilter select [--override-default-catalogers TAGS] [--select-catalogers EXPR]
    tagfilter list [--tags]
"""

from .main import main, build_parser

__all__ = [
    "main",
    "build_parser",
]
