"""
Splitting of output text into transport-sized chunks.

Chunk sizes are measured in UTF-8 bytes. Text is split at line boundaries
where lines fit; a line that is too long on its own is hard-truncated at the
last character boundary within the budget. When more than one chunk results,
each chunk ends with a ``[i/total]`` footer that counts against the budget.
"""

from automesh.core.types import TextChunks


def truncate_utf8(text: str, max_bytes: int) -> str:
    """
    Cut text to at most ``max_bytes`` UTF-8 bytes without splitting a character.

    Params:
        text: Text to truncate
        max_bytes: Byte budget, zero or more

    Returns:
        The longest prefix of ``text`` whose encoding fits the budget
    """
    encoded = text.encode("utf-8")
    if len(encoded) <= max_bytes:
        return text
    # errors="ignore" drops only the partial character at the cut
    return encoded[: max(max_bytes, 0)].decode("utf-8", errors="ignore")


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def _split_lines_inclusive(text: str) -> list[str]:
    lines = text.split("\n")
    result = [line + "\n" for line in lines[:-1]]
    if lines[-1]:
        result.append(lines[-1])
    return result


def _footer(index: int, total: int, max_bytes: int) -> str:
    footer = f"\n\n[{index}/{total}]"
    if _byte_len(footer) <= max_bytes:
        return footer
    return truncate_utf8(footer.lstrip("\n"), max_bytes)


def chunk_lines_with_footer(text: str, max_bytes: int) -> TextChunks:
    """
    Split text into chunks of at most ``max_bytes`` UTF-8 bytes.

    Lines accumulate into a chunk while they fit. A single line longer than
    the budget flushes the current chunk and becomes its own chunk, truncated.
    Only multi-chunk results receive footers; chunk content is truncated as
    needed to make room for its footer. With a budget too small for the
    footer, the footer is shortened so the budget always holds.

    Params:
        text: Output text to split
        max_bytes: Positive byte budget per chunk

    Returns:
        Ordered chunks; empty for empty text

    Raises:
        ValueError: If ``max_bytes`` is less than 1
    """
    if max_bytes < 1:
        raise ValueError(f"max_bytes must be positive, got {max_bytes}")

    raw_chunks: list[str] = []
    current = ""
    current_bytes = 0

    for line in _split_lines_inclusive(text):
        line_bytes = _byte_len(line)

        if line_bytes > max_bytes:
            if current:
                raw_chunks.append(current)
                current = ""
                current_bytes = 0
            raw_chunks.append(truncate_utf8(line, max_bytes))
            continue

        if current_bytes + line_bytes > max_bytes:
            raw_chunks.append(current)
            current = ""
            current_bytes = 0

        current += line
        current_bytes += line_bytes

    if current:
        raw_chunks.append(current)

    total = len(raw_chunks)
    if total <= 1:
        return raw_chunks

    chunks: TextChunks = []
    for index, chunk in enumerate(raw_chunks, start=1):
        footer = _footer(index, total, max_bytes)
        available = max_bytes - _byte_len(footer)
        chunks.append(truncate_utf8(chunk, available) + footer)
    return chunks
