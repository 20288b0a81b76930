"""
automesh - Resolve text messages against a declarative tree of command aliases

automesh loads a tree of named command aliases from YAML, resolves inbound
messages into a command template with bound variables or into help text, and
splits output into transport-sized chunks.
"""

from importlib.metadata import PackageNotFoundError, version

from automesh.config import Config, load_config
from automesh.parsing import AliasResolver, HelpText, ResolvedCommand, resolve_alias
from automesh.transport import chunk_lines_with_footer

try:
    __version__ = version("automesh")
except PackageNotFoundError:
    __version__ = "0+unknown"

__all__ = [
    "__version__",
    "AliasResolver",
    "Config",
    "HelpText",
    "ResolvedCommand",
    "chunk_lines_with_footer",
    "load_config",
    "resolve_alias",
]
