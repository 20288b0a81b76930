"""
Help text rendering for the command tree.

Three shapes are rendered: the flat top-level listing, group help and leaf
help. All functions are pure string formatting over the tree nodes and
produce identical output for identical trees.
"""

from collections.abc import Sequence

from automesh.config.models import Command


def _title(name: str, help_text: str | None) -> str:
    if help_text:
        return f"{name} - {help_text}"
    return name


def format_help_listing(commands: Sequence[Command], prefix: str) -> str:
    """
    Render the flat listing of top-level commands.

    Params:
        commands: Top-level commands in declaration order
        prefix: Display prefix, normally just the trigger character

    Returns:
        One line per command followed by a hint on per-command help
    """
    lines = ["Commands:"]
    for command in commands:
        lines.append("  " + _title(f"{prefix}{command.name}", command.help))
    lines.append("")
    lines.append(f"Send {prefix}<command> --help for details.")
    return "\n".join(lines)


def format_group_help(group: Command, prefix: str) -> str:
    """
    Render help for a group: its own title, then each immediate child.

    Params:
        group: Group node to describe
        prefix: Display prefix of the path leading to the group

    Returns:
        Group help text ending with a hint on subcommand help
    """
    sub_prefix = f"{prefix}{group.name} "
    lines = [_title(f"{prefix}{group.name}", group.help), "", "Subcommands:"]
    for subcommand in group.commands:
        lines.append("  " + _title(f"{sub_prefix}{subcommand.name}", subcommand.help))
    lines.append("")
    lines.append(f"Send {sub_prefix}<command> --help for details.")
    return "\n".join(lines)


def format_command_help(command: Command, prefix: str) -> str:
    """
    Render help for a leaf: title, positional args and flags.

    Greedy elements are shown as ``<name...>``; defaults and required flags
    are annotated inline.

    Params:
        command: Leaf node to describe
        prefix: Display prefix of the path leading to the leaf

    Returns:
        Leaf help text, newline-terminated
    """
    output = _title(f"{prefix}{command.name}", command.help) + "\n"

    if command.args:
        output += "\nArgs:\n"
        for arg in command.args:
            placeholder = f"<{arg.name}...>" if arg.greedy else f"<{arg.name}>"
            output += "  " + _title(placeholder, arg.help)
            if arg.default is not None:
                output += f" (default: {arg.default})"
            output += "\n"

    if command.flags:
        output += "\nFlags:\n"
        for flag in command.flags:
            usage = f"{flag.short}, {flag.long}" if flag.short else flag.long
            if flag.arg is not None:
                usage += f" <{flag.arg}...>" if flag.greedy else f" <{flag.arg}>"
            output += "  " + _title(usage, flag.help)
            if flag.required:
                output += " (required)"
            if flag.default is not None:
                output += f" (default: {flag.default})"
            output += "\n"

    return output
