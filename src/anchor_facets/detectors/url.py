"""Link detection: explicit ``http(s)://`` URLs and bare ``domain.tld/path`` tokens."""

from __future__ import annotations

import logging
import re

from ..facets import Feature, Link
from .base import PatternDetector

logger = logging.getLogger(__name__)

URL_PATTERN = re.compile(
    r"(?<![^\s(])"  # start of text, whitespace or "("
    r"(?:"
    r"https?://\S+"
    r"|[a-z][a-z0-9-]*(?:\.[a-z0-9-]+)+(?:[/?#]\S*)?(?![\w@-])"
    r")",
    re.IGNORECASE,
)

SCHEME_PATTERN = re.compile(r"https?://", re.IGNORECASE)

TRAILING_PUNCTUATION = ".,;!?"


def strip_trailing(candidate: str) -> str:
    """Drop sentence punctuation and unbalanced closing parens from the end."""
    while True:
        stripped = candidate.rstrip(TRAILING_PUNCTUATION)
        if stripped.endswith(")") and stripped.count(")") > stripped.count("("):
            stripped = stripped[:-1]
        if stripped == candidate:
            return stripped
        candidate = stripped


class UrlDetector(PatternDetector):
    pattern = URL_PATTERN

    @classmethod
    def name(cls) -> str:
        return "link"

    def accept(self, match: re.Match[str]) -> tuple[int, int, Feature] | None:
        cleaned = strip_trailing(match.group(0))
        start = match.start()
        end = start + len(cleaned)

        scheme = SCHEME_PATTERN.match(cleaned)
        if scheme is not None:
            if scheme.end() == len(cleaned):
                return None
            return start, end, Link(uri=cleaned)

        host = re.split(r"[/?#]", cleaned, maxsplit=1)[0]
        if not self._is_valid_domain(host):
            logger.debug("Discarding bare link with implausible host %r", host)
            return None
        return start, end, Link(uri=f"https://{cleaned}")
