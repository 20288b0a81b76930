"""
Preparation of outgoing text for the transport.
"""

import logging

from automesh.config.models import Config
from automesh.core.types import TextChunks
from automesh.transport.chunking import chunk_lines_with_footer

logger = logging.getLogger(__name__)


def prepare_outgoing(text: str, config: Config) -> TextChunks:
    """
    Chunk text for sending and drop chunks the transport could not carry.

    Chunks are sized by ``max_content_bytes``. A chunk larger than the
    transport's ``max_text_bytes`` limit is logged and skipped rather than
    sent truncated.

    Params:
        text: Help text, error text or command output
        config: Loaded configuration providing both byte budgets

    Returns:
        Chunks that fit the transport, in order
    """
    chunks = chunk_lines_with_footer(text, config.max_content_bytes)
    ready: TextChunks = []

    for idx, part in enumerate(chunks, start=1):
        size = len(part.encode("utf-8"))
        if size > config.max_text_bytes:
            logger.error("part %d is %d bytes (> %d)", idx, size, config.max_text_bytes)
            continue
        logger.info("Outgoing chunk: %s", part)
        ready.append(part)

    return ready
