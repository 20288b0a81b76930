"""
Output preparation for the transport.

This package splits output text into byte-bounded chunks and filters them
against the transport's size limit. Sending itself is the transport's job.
"""

from automesh.transport.chunking import chunk_lines_with_footer, truncate_utf8
from automesh.transport.outbox import prepare_outgoing

__all__ = [
    "chunk_lines_with_footer",
    "prepare_outgoing",
    "truncate_utf8",
]
