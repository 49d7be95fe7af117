"""Text processing utilities for review images."""

from typing import List
from .errors import InvalidArgument


def wrap_text(text: str, max_line_length: int) -> List[str]:
    """Break every line of text on word boundaries so no line exceeds max_line_length characters."""
    if max_line_length <= 0:
        raise InvalidArgument(f"max_line_length must be positive, got {max_line_length}")

    lines = []
    for segment in text.split('\n'):
        lines.extend(_wrap_segment(segment, max_line_length))
    return lines


def _wrap_segment(segment: str, max_line_length: int) -> List[str]:
    """Greedily wrap a single line, forcing a hard break inside words longer than the limit."""
    lines = []
    offset = 0

    while len(segment) - offset > max_line_length:
        pos = segment.rfind(' ', offset, offset + max_line_length) - offset
        if pos <= 0:
            pos = max_line_length

        lines.append(segment[offset:offset + pos])

        # Skip the separating space, unless it is missing or too far away
        space = segment.find(' ', offset + pos, offset + pos + max_line_length)
        start = space - offset + 1 if space != -1 else pos
        if start < pos:
            start = pos
        offset += start

    lines.append(segment[offset:])
    return lines


def longest_line_length(text: str) -> int:
    """Character count of the longest explicit line in text."""
    return max(len(line) for line in text.split('\n'))
