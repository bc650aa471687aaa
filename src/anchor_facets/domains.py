"""Heuristic gate for domain-shaped tokens (handles and bare link hosts).

This is not a DNS check: anything dotted with a plausible final label passes.
"""

from __future__ import annotations

from collections.abc import Iterable

# Fast-path allow-list; any other alphabetic final label of 2+ characters is
# still accepted.
KNOWN_TLDS: frozenset[str] = frozenset(
    {
        "com",
        "org",
        "net",
        "edu",
        "gov",
        "io",
        "co",
        "app",
        "dev",
        "social",
        "me",
        "info",
        "xyz",
        "blog",
        "online",
        "site",
        "tech",
        "ai",
        "uk",
        "de",
        "fr",
        "nl",
        "eu",
        "ca",
        "au",
        "jp",
        "test",
    }
)

# Reserved placeholder names that never identify a real account or site.
# ``test`` is reserved too (RFC 6761) but used by real test handles.
INVALID_TLDS: frozenset[str] = frozenset({"invalid", "localhost", "local", "example"})


def is_valid_domain(
    candidate: str,
    *,
    known_tlds: Iterable[str] = KNOWN_TLDS,
    invalid_tlds: Iterable[str] = INVALID_TLDS,
) -> bool:
    """Return True when *candidate* looks like ``label(.label)+`` with a usable TLD."""
    segments = candidate.split(".")
    if len(segments) < 2 or not all(segments):
        return False

    tld = segments[-1].lower()
    if tld in invalid_tlds:
        return False
    if tld in known_tlds:
        return True
    return len(tld) >= 2 and tld.isalpha()


class DomainValidator:
    """:func:`is_valid_domain` bound to a configured pair of TLD sets."""

    __slots__ = ("known_tlds", "invalid_tlds")

    def __init__(
        self,
        known_tlds: Iterable[str] = KNOWN_TLDS,
        invalid_tlds: Iterable[str] = INVALID_TLDS,
    ) -> None:
        self.known_tlds = frozenset(t.lower() for t in known_tlds)
        self.invalid_tlds = frozenset(t.lower() for t in invalid_tlds)

    def __call__(self, candidate: str) -> bool:
        return is_valid_domain(
            candidate, known_tlds=self.known_tlds, invalid_tlds=self.invalid_tlds
        )
