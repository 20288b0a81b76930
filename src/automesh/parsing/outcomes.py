"""
Result types produced by alias resolution.
"""

from attrs import field, frozen


@frozen
class ResolvedCommand:
    """A leaf command template together with its binding map.

    The template is returned unmodified; substituting the bindings (for
    example as process environment variables) is the executor's job.
    """

    command: str
    env: dict[str, str] = field(factory=dict)


@frozen
class HelpText:
    """Rendered help to send back to the originator."""

    text: str

    def __str__(self) -> str:
        return self.text


AliasResult = ResolvedCommand | HelpText
