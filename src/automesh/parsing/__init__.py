"""
Alias resolution components.

This package provides message resolution against the command tree, the
resolution result types and help text rendering.
"""

from automesh.parsing.help import (
    format_command_help,
    format_group_help,
    format_help_listing,
)
from automesh.parsing.outcomes import AliasResult, HelpText, ResolvedCommand
from automesh.parsing.resolver import (
    DEFAULT_TRIGGER,
    AliasResolver,
    match_command,
    parse_tokens,
    resolve_alias,
)

__all__ = [
    "AliasResolver",
    "AliasResult",
    "DEFAULT_TRIGGER",
    "HelpText",
    "ResolvedCommand",
    "format_command_help",
    "format_group_help",
    "format_help_listing",
    "match_command",
    "parse_tokens",
    "resolve_alias",
]
