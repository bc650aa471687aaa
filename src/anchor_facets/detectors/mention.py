"""Mention detection for domain-style handles (``@alice.bsky.social``)."""

from __future__ import annotations

import logging
import re

from ..facets import Feature, Mention
from .base import PatternDetector

logger = logging.getLogger(__name__)

MENTION_PATTERN = re.compile(
    r"(?<![^\s(])@"
    r"(?P<handle>"
    r"(?:[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?\.)+"
    r"[a-zA-Z](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r")"
    r"(?![\w-]|\.[\w-])"  # must not be a prefix of a longer token
)


class MentionDetector(PatternDetector):
    pattern = MENTION_PATTERN

    @classmethod
    def name(cls) -> str:
        return "mention"

    def accept(self, match: re.Match[str]) -> tuple[int, int, Feature] | None:
        handle = match.group("handle")
        if not self._is_valid_domain(handle):
            logger.debug("Discarding mention of non-domain handle %r", handle)
            return None
        return match.start(), match.end(), Mention(identifier=handle)
