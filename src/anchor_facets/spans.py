"""UTF-8 byte offset helpers.

Regex matches report code point offsets; the wire format counts UTF-8 bytes.
Every detector converts its matches here immediately, so only byte offsets
leave a detector.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .facets import Annotation

logger = logging.getLogger(__name__)


def utf8_length(text: str) -> int:
    """Number of bytes in the UTF-8 encoding of *text*."""
    return len(text.encode("utf-8"))


def byte_range(text: str, start: int, end: int) -> tuple[int, int] | None:
    """Convert a code point range of *text* into a UTF-8 byte range.

    Returns ``None`` when the range is empty, falls outside *text*, or the
    text around it cannot be encoded (lone surrogates). Callers skip the match.
    """
    if start < 0 or end > len(text) or start >= end:
        return None
    try:
        byte_start = utf8_length(text[:start])
        byte_end = byte_start + utf8_length(text[start:end])
    except UnicodeEncodeError:
        logger.debug("Cannot encode text before match at %d:%d", start, end)
        return None
    return byte_start, byte_end


class SegmentMap:
    """Maps per-segment byte offsets into a composed text.

    The composed text joins all segments with ``separator``.
    ``byte_offsets[i]`` records the byte position where ``segments[i]``
    begins, so annotations detected on a segment alone can be moved into the
    composed coordinate space with :meth:`shift`.
    """

    __slots__ = ("segments", "byte_offsets", "text", "separator")

    def __init__(
        self,
        segments: list[str],
        byte_offsets: list[int],
        text: str,
        separator: str,
    ) -> None:
        self.segments = segments
        self.byte_offsets = byte_offsets
        self.text = text
        self.separator = separator

    @staticmethod
    def build(segments: list[str], separator: str = "") -> SegmentMap:
        """Join *segments* with *separator* and record each segment's byte offset."""
        offsets: list[int] = []
        pos = 0
        sep_len = utf8_length(separator)
        for segment in segments:
            offsets.append(pos)
            pos += utf8_length(segment) + sep_len

        return SegmentMap(
            segments=list(segments),
            byte_offsets=offsets,
            text=separator.join(segments),
            separator=separator,
        )

    def shift(self, index: int, annotations: Iterable[Annotation]) -> list[Annotation]:
        """Move annotations found in ``segments[index]`` into composed coordinates."""
        offset = self.byte_offsets[index]
        return [a.shifted(offset) for a in annotations]

    @property
    def byte_length(self) -> int:
        return utf8_length(self.text)
