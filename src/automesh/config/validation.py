"""
Structural validation for the command tree.

Validation runs recursively over the two node shapes (group and leaf) and
raises ConfigValidationError on the first broken rule. A failure aborts the
whole load; callers never receive a partially valid tree.
"""

import re

from automesh.config.models import Arg, Command, Config, Flag
from automesh.exceptions import ConfigValidationError

LONG_FLAG_PATTERN = re.compile(r"^--[a-zA-Z0-9-]*$")
SHORT_FLAG_PATTERN = re.compile(r"^-[a-zA-Z0-9]$")


def _serialize(node: Arg | Flag) -> str:
    return repr(node.model_dump())


def validate_arg(arg: Arg) -> None:
    """
    Validate a positional argument.

    Params:
        arg: Argument to validate

    Raises:
        ConfigValidationError: If the argument declares an empty default
    """
    if arg.default is not None and arg.default == "":
        raise ConfigValidationError(
            f"Default values in arguments cannot be empty: {_serialize(arg)}"
        )


def validate_flag(flag: Flag) -> None:
    """
    Validate a flag's names and greedy declaration.

    Params:
        flag: Flag to validate

    Raises:
        ConfigValidationError: If a name does not match its pattern, or a
            greedy flag has no bound argument name
    """
    if not LONG_FLAG_PATTERN.match(flag.long.strip()):
        raise ConfigValidationError(f"Invalid long flag value: {flag.long}")

    if flag.short is not None and not SHORT_FLAG_PATTERN.match(flag.short.strip()):
        raise ConfigValidationError(f"Invalid short flag value: {flag.short}")

    if flag.greedy and flag.arg is None:
        raise ConfigValidationError(
            f"Greedy flag {flag.long} must have an 'arg' field: {_serialize(flag)}"
        )


def validate_command(command: Command) -> None:
    """
    Validate a command node and, for groups, all of its descendants.

    Group rules are checked before leaf rules. Leaves may declare at most one
    greedy element across args and flags, and a greedy element must be the
    last of its kind.

    Params:
        command: Node to validate

    Raises:
        ConfigValidationError: On the first rule the node breaks
    """
    if not command.name:
        raise ConfigValidationError(
            f"Command names cannot be empty: {command.model_dump()!r}"
        )

    if command.is_group and command.is_leaf:
        raise ConfigValidationError(
            f"Command '{command.name}': cannot have both 'command' and 'commands'"
        )

    if not command.is_group and not command.is_leaf:
        raise ConfigValidationError(
            f"Command '{command.name}': must have either 'command' or 'commands'"
        )

    if command.is_group:
        if command.args or command.flags:
            raise ConfigValidationError(
                f"Command '{command.name}': group commands cannot have args or flags"
            )
        for subcommand in command.commands:
            validate_command(subcommand)
        return

    for arg in command.args:
        validate_arg(arg)

    for flag in command.flags:
        validate_flag(flag)

    greedy_args = sum(1 for arg in command.args if arg.greedy)
    greedy_flags = sum(1 for flag in command.flags if flag.greedy)

    if greedy_args + greedy_flags > 1:
        raise ConfigValidationError(
            f"Command '{command.name}': only one arg or flag can be greedy"
        )

    if greedy_args == 1 and not command.args[-1].greedy:
        raise ConfigValidationError(
            f"Command '{command.name}': greedy arg must be the last arg"
        )

    if greedy_flags == 1 and not command.flags[-1].greedy:
        raise ConfigValidationError(
            f"Command '{command.name}': greedy flag must be the last flag"
        )


def validate_config(config: Config) -> None:
    """
    Validate a loaded configuration.

    Params:
        config: Configuration to validate

    Raises:
        ConfigValidationError: If no commands are defined or any command is invalid
    """
    if not config.commands:
        raise ConfigValidationError("At least one command is required to be defined")

    for command in config.commands:
        validate_command(command)
