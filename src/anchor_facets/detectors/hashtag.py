"""Hashtag detection."""

from __future__ import annotations

import re
import unicodedata

from ..facets import Feature, Hashtag
from .base import PatternDetector

# "#" or the full-width number sign at the start of text or after whitespace, not the
# keycap emoji sequence (# + U+FE0F), first tag character not a digit.
HASHTAG_PATTERN = re.compile(r"(?<!\S)[#\uff03](?!\ufe0f)(?P<tag>[^\d\s#\uff03]\S*)")


def _is_punctuation(char: str) -> bool:
    return unicodedata.category(char).startswith("P")


def strip_trailing_punctuation(tag: str) -> str:
    end = len(tag)
    while end and _is_punctuation(tag[end - 1]):
        end -= 1
    return tag[:end]


class HashtagDetector(PatternDetector):
    pattern = HASHTAG_PATTERN

    @classmethod
    def name(cls) -> str:
        return "hashtag"

    def accept(self, match: re.Match[str]) -> tuple[int, int, Feature] | None:
        tag = strip_trailing_punctuation(match.group("tag"))
        if not any(not c.isdigit() and not _is_punctuation(c) for c in tag):
            return None
        # +1 for the marker
        if len(tag) + 1 > self._config.hashtag_max_length:
            return None

        start = match.start()
        return start, start + len(tag) + 1, Hashtag(tag=tag)
