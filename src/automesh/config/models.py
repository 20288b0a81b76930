"""
Entity models for the declarative command tree.

This module contains the pydantic models built from configuration files:
positional arguments, flags, commands (leaf or group) and the top-level
configuration. All models are frozen and store sequences as tuples, so a
loaded tree is read-only for the rest of the process.
"""

from pydantic import BaseModel, ConfigDict


class Arg(BaseModel):
    """A positional parameter of a leaf command."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    name: str
    help: str = ""
    default: str | None = None
    greedy: bool = False

    @property
    def var_name(self) -> str:
        """Binding key for this argument (hyphens become underscores)."""
        return self.name.replace("-", "_")


class Flag(BaseModel):
    """A named parameter of a leaf command, either a boolean toggle or a value flag."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    long: str
    short: str | None = None
    help: str | None = None
    arg: str | None = None
    required: bool = False
    default: str | None = None
    greedy: bool = False

    @property
    def is_boolean(self) -> bool:
        """True when the flag binds no value of its own."""
        return self.arg is None

    @property
    def var_name(self) -> str:
        """
        Binding key for this flag.

        Value flags bind under their declared ``arg`` name verbatim. Boolean
        flags bind under the long name without leading dashes, with the
        remaining hyphens replaced by underscores.

        Returns:
            The key used in the binding map
        """
        if self.arg is not None:
            return self.arg
        return self.long.lstrip("-").replace("-", "_")

    def matches(self, token: str) -> bool:
        """Check whether a token names this flag by its long or short form."""
        return token == self.long or (self.short is not None and token == self.short)


class Command(BaseModel):
    """
    A node of the command tree.

    A node is a leaf when it carries a non-empty ``command`` template and a
    group when it carries child ``commands``. Exactly one of the two shapes
    is allowed; this is enforced by ``validate_command`` rather than at
    construction so that validation errors can name the offending node.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    help: str = ""
    args: tuple[Arg, ...] = ()
    flags: tuple[Flag, ...] = ()
    command: str = ""
    commands: tuple["Command", ...] = ()

    @property
    def is_group(self) -> bool:
        return bool(self.commands)

    @property
    def is_leaf(self) -> bool:
        return bool(self.command)

    def find_flag(self, token: str) -> Flag | None:
        """
        Look up a flag by exact long or short name.

        Params:
            token: Raw input token, including its leading dashes

        Returns:
            The first declared flag matching the token, or None
        """
        for flag in self.flags:
            if flag.matches(token):
                return flag
        return None


class Config(BaseModel):
    """
    Top-level configuration.

    Device and transport parameters are passed through untouched; only
    ``commands`` is interpreted by the loader and the resolver.
    """

    model_config = ConfigDict(frozen=True)

    device: str
    channel: int
    baud: int | None = None
    shell: str
    shell_args: tuple[str, ...] = ()
    max_text_bytes: int
    chunk_delay: int  # milliseconds between chunks
    max_content_bytes: int
    commands: tuple[Command, ...]
