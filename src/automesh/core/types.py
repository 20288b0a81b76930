"""
Core type definitions for automesh.

This module contains type aliases shared by the resolver, the dispatcher and
the executor.
"""

from collections.abc import Callable

Bindings = dict[str, str]

TextChunks = list[str]

# Receives each outgoing chunk in order; the transport owns sending
ChunkSink = Callable[[str], None]
