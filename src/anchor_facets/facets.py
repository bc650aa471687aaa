"""Rich-text annotation values.

An :class:`Annotation` tags a half-open ``[byte_start, byte_end)`` range over
the UTF-8 encoding of a text with one feature: a link, a mention or a hashtag.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Link:
    uri: str


@dataclass(frozen=True, slots=True)
class Mention:
    identifier: str
    """Handle or DID of the mentioned account."""


@dataclass(frozen=True, slots=True)
class Hashtag:
    tag: str
    """Tag text without the leading ``#``."""


Feature = Link | Mention | Hashtag


class AnnotationOrderError(ValueError):
    """Annotations were not sorted by start or overlapped each other."""


@dataclass(frozen=True, slots=True)
class Annotation:
    """A feature attached to a UTF-8 byte range of some text."""

    byte_start: int
    """Inclusive start (bytes)."""

    byte_end: int
    """Exclusive end (bytes)."""

    feature: Feature

    def __post_init__(self) -> None:
        if self.byte_start < 0 or self.byte_start >= self.byte_end:
            raise ValueError(
                f"Invalid annotation range [{self.byte_start}, {self.byte_end})"
            )

    @property
    def byte_length(self) -> int:
        return self.byte_end - self.byte_start

    def shifted(self, offset: int) -> Annotation:
        """Return a copy moved ``offset`` bytes to the right."""
        return replace(
            self, byte_start=self.byte_start + offset, byte_end=self.byte_end + offset
        )

    def overlaps(self, other: Annotation) -> bool:
        return self.byte_start < other.byte_end and other.byte_start < self.byte_end


def is_sorted_non_overlapping(annotations: Iterable[Annotation]) -> bool:
    """Check that each annotation ends at or before the next one starts."""
    previous: Annotation | None = None
    for annotation in annotations:
        if previous is not None and previous.byte_end > annotation.byte_start:
            return False
        previous = annotation
    return True
