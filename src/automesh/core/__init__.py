"""
Core automesh type definitions.
"""

from automesh.core.types import Bindings, ChunkSink, TextChunks

__all__ = [
    "Bindings",
    "ChunkSink",
    "TextChunks",
]
