"""Helpers for displaying check-in posts read back from a feed."""

from __future__ import annotations

import re
from collections.abc import Iterable

import grapheme

DEFAULT_ICON = "📍"

# Lead code point ranges treated as emoji
EMOJI_RANGES: tuple[tuple[int, int], ...] = (
    (0x1F600, 0x1F64F),  # Emoticons
    (0x1F300, 0x1F5FF),  # Misc Symbols and Pictographs
    (0x1F680, 0x1F6FF),  # Transport and Map Symbols
    (0x1F1E6, 0x1F1FF),  # Regional indicators
    (0x2600, 0x26FF),  # Misc symbols
    (0x2700, 0x27BF),  # Dingbats
    (0x1F900, 0x1F9FF),  # Supplemental Symbols and Pictographs
    (0x1F018, 0x1F270),
    (0xFE00, 0xFE0F),  # Variation selectors
)

_MULTI_SPACE = re.compile(r" {2,}")


def is_emoji(char: str) -> bool:
    code = ord(char)
    return any(low <= code <= high for low, high in EMOJI_RANGES)


def extract_personal_message(
    text: str, location_names: Iterable[str] | None = None
) -> str | None:
    """Return what the user wrote once venue names are removed.

    Returns None when 3 characters or fewer remain, e.g. only an emoji.
    """
    processed = text
    for name in location_names or ():
        if name:
            processed = re.sub(re.escape(name), "", processed, flags=re.IGNORECASE)

    cleaned = _MULTI_SPACE.sub(" ", processed.strip())
    return cleaned if len(cleaned) > 3 else None


def extract_category_icon(text: str, default: str = DEFAULT_ICON) -> str:
    """First emoji in *text*, or *default*.

    Returns the whole grapheme cluster, so flags and ZWJ sequences stay intact.
    """
    for cluster in grapheme.graphemes(text):
        if is_emoji(cluster[0]):
            return cluster
    return default
