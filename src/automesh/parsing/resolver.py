"""
Resolver for alias messages.

This module matches a free-text message against the command tree. Matching
descends through groups by name, then the remainder of the message is split
into tokens and bound to the leaf's positional arguments and flags. The
result is either the leaf's command template with a binding map, or help
text rendered for the level that was reached.
"""

import logging
from collections.abc import Sequence

from automesh.config.models import Command
from automesh.core.types import Bindings
from automesh.exceptions import (
    MissingFlagValueError,
    MissingRequiredArgError,
    MissingRequiredFlagError,
    TooManyArgsError,
    UnknownAliasError,
    UnknownFlagError,
)
from automesh.parsing.help import (
    format_command_help,
    format_group_help,
    format_help_listing,
)
from automesh.parsing.outcomes import AliasResult, HelpText, ResolvedCommand

logger = logging.getLogger(__name__)

DEFAULT_TRIGGER = "!"
HELP_TOKENS = frozenset({"-h", "--help"})


def match_command(input_text: str, command: Command) -> str | None:
    """
    Match one command name against the start of the input.

    A name matches when it equals the input or is followed by a space; a
    name that is merely a textual prefix of a longer word does not match.

    Params:
        input_text: Unmatched part of the message
        command: Candidate command

    Returns:
        The trimmed remainder after the name, or None if the name does not match
    """
    if input_text == command.name:
        return ""
    if input_text.startswith(command.name + " "):
        return input_text[len(command.name) :].strip()
    return None


def parse_tokens(tokens: Sequence[str], command: Command) -> Bindings:
    """
    Bind tokens to a leaf's positional arguments and flags.

    Tokens starting with ``-`` are looked up as flags; other tokens fill
    positional arguments in declaration order. A greedy argument or value
    flag takes every remaining token, space-joined, and ends binding. Unfilled
    arguments and unbound flags then receive their defaults.

    Params:
        tokens: Whitespace-split remainder of the message
        command: Leaf command whose parameters are bound

    Returns:
        Binding map from variable name to string value

    Raises:
        UnknownFlagError: If a dash-prefixed token names no declared flag
        MissingFlagValueError: If a value flag has no following token
        TooManyArgsError: If there are more positional tokens than arguments
        MissingRequiredArgError: If an argument without default is unfilled
        MissingRequiredFlagError: If a required flag without default is unbound
    """
    bindings: Bindings = {}
    positional_idx = 0
    i = 0

    while i < len(tokens):
        token = tokens[i]

        if token.startswith("-"):
            flag = command.find_flag(token)
            if flag is None:
                raise UnknownFlagError(token)

            if flag.is_boolean:
                bindings[flag.var_name] = "true"
            else:
                i += 1
                if i >= len(tokens):
                    raise MissingFlagValueError(flag.long)
                if flag.greedy:
                    bindings[flag.var_name] = " ".join(tokens[i:])
                    break
                bindings[flag.var_name] = tokens[i]
        else:
            if positional_idx >= len(command.args):
                raise TooManyArgsError(len(command.args))

            arg = command.args[positional_idx]
            if arg.greedy:
                bindings[arg.var_name] = " ".join(tokens[i:])
                positional_idx = len(command.args)
                break
            bindings[arg.var_name] = token
            positional_idx += 1

        i += 1

    for arg in command.args[positional_idx:]:
        if arg.default is None:
            raise MissingRequiredArgError(arg.name)
        bindings[arg.var_name] = arg.default

    for flag in command.flags:
        if flag.var_name in bindings:
            continue
        if flag.default is not None:
            bindings[flag.var_name] = flag.default
        elif flag.required:
            raise MissingRequiredFlagError(flag.long)

    return bindings


class AliasResolver:
    """Resolver for alias messages against a fixed command tree."""

    def __init__(self, commands: Sequence[Command], trigger: str = DEFAULT_TRIGGER):
        """
        Initialize the resolver.

        Params:
            commands: Top-level commands of a loaded configuration
            trigger: Character that introduces an alias message
        """
        if not trigger:
            raise ValueError("Trigger must be a non-empty string")
        self.commands = tuple(commands)
        self.trigger = trigger

    def resolve(self, message: str) -> AliasResult:
        """
        Resolve a message into a command or help text.

        Params:
            message: Inbound text, starting with the trigger

        Returns:
            ResolvedCommand for a leaf, or HelpText for any help request

        Raises:
            ValueError: If the message does not start with the trigger
            AliasError: If the message cannot be matched or bound
        """
        if not message.startswith(self.trigger):
            raise ValueError(f"Alias messages must start with '{self.trigger}'")

        rest = message[len(self.trigger) :]
        if rest == "help":
            return HelpText(format_help_listing(self.commands, self.trigger))

        result = self.resolve_from(rest, self.commands, self.trigger)
        logger.debug("Resolved %r to %r", message, result)
        return result

    def resolve_from(
        self, input_text: str, commands: Sequence[Command], prefix: str
    ) -> AliasResult:
        """
        Resolve input against one level of the tree, descending into groups.

        Candidates are tried longest name first, so a short alias never
        shadows a longer one that shares its prefix.

        Params:
            input_text: Unmatched part of the message
            commands: Sibling commands at this level
            prefix: Display prefix of the path matched so far

        Returns:
            Resolution outcome for the matched node

        Raises:
            UnknownAliasError: If no sibling matches
        """
        candidates = sorted(commands, key=lambda command: len(command.name), reverse=True)

        for command in candidates:
            remainder = match_command(input_text, command)
            if remainder is not None:
                break
        else:
            words = input_text.split()
            first_word = words[0] if words else input_text
            raise UnknownAliasError(f"{prefix}{first_word}")

        if command.is_group:
            if not remainder or remainder in HELP_TOKENS:
                return HelpText(format_group_help(command, prefix))
            return self.resolve_from(remainder, command.commands, f"{prefix}{command.name} ")

        tokens = remainder.split()
        if any(token in HELP_TOKENS for token in tokens):
            return HelpText(format_command_help(command, prefix))

        return ResolvedCommand(command=command.command, env=parse_tokens(tokens, command))


def resolve_alias(
    message: str, commands: Sequence[Command], trigger: str = DEFAULT_TRIGGER
) -> AliasResult:
    """
    Convenience function to resolve a message.

    Params:
        message: Inbound text, starting with the trigger
        commands: Top-level commands of a loaded configuration
        trigger: Character that introduces an alias message

    Returns:
        ResolvedCommand for a leaf, or HelpText for any help request

    Raises:
        AliasError: If the message cannot be matched or bound
    """
    resolver = AliasResolver(commands, trigger)
    return resolver.resolve(message)
