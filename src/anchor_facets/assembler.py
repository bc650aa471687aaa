"""Check-in post assembly under a visible-character budget.

A post is the user's message (truncated to fit), a blank line, then a
generated suffix naming the venue and carrying the check-in hashtags::

    Great coffee here! https://cafe.example.org

    Dropped ⚓ at Cafe X #checkin #dropanchor

Each segment is scanned on its own and its annotations are moved into the
coordinates of the final string with a :class:`~anchor_facets.spans.SegmentMap`.
"""

from __future__ import annotations

from dataclasses import dataclass

import grapheme

from .config import DEFAULT_PLACE_URL, DEFAULT_SUFFIX_TEMPLATE, FacetConfig, validate_budget
from .detector import FacetDetector
from .facets import Annotation, Link
from .spans import SegmentMap, byte_range
from .styles import apply_style

OSM_ELEMENT_TYPES = ("node", "way", "relation")


@dataclass(frozen=True, slots=True)
class TextBudget:
    """Length limits and the generated suffix of an assembled post."""

    max_length: int = 300
    """Visible characters (grapheme clusters), not bytes."""

    minimum_reserved: int = 50
    """Floor for the user's share, even if the suffix is unexpectedly long."""

    suffix_template: str = DEFAULT_SUFFIX_TEMPLATE
    """Never truncated; ``{venue}`` is replaced by the venue name."""

    separator: str = "\n\n"

    def __post_init__(self) -> None:
        validate_budget(self.max_length, self.minimum_reserved, self.suffix_template)

    @classmethod
    def from_config(cls, config: FacetConfig) -> TextBudget:
        return cls(
            max_length=config.max_length,
            minimum_reserved=config.minimum_reserved,
            suffix_template=config.suffix_template,
            separator=config.separator,
        )

    def max_user_length(self, suffix_length: int) -> int:
        return max(self.minimum_reserved, self.max_length - suffix_length)


def build_place_url(
    element_type: str, element_id: int | str, template: str = DEFAULT_PLACE_URL
) -> str:
    """URL of an OpenStreetMap node, way or relation."""
    if element_type not in OSM_ELEMENT_TYPES:
        raise ValueError(
            f"Unknown element type {element_type!r}. "
            f"Available types: {', '.join(OSM_ELEMENT_TYPES)}"
        )
    return template.format(element_type=element_type, element_id=element_id)


def truncate_graphemes(text: str, limit: int) -> str:
    """Cut *text* to at most *limit* grapheme clusters."""
    if grapheme.length(text, limit + 1) <= limit:
        return text
    return grapheme.slice(text, 0, limit)


class CheckinTextAssembler:
    """Build check-in post text and its annotations."""

    def __init__(
        self,
        config: FacetConfig | None = None,
        budget: TextBudget | None = None,
        detector: FacetDetector | None = None,
    ) -> None:
        self.config = config or FacetConfig()
        self.budget = budget or TextBudget.from_config(self.config)
        self._detector = detector or FacetDetector(config=self.config)

    def place_url(self, element_type: str, element_id: int | str) -> str:
        return build_place_url(element_type, element_id, self.config.place_url)

    def build_suffix(self, venue_name: str) -> tuple[str, int, int]:
        """Render the suffix template.

        Returns:
            The suffix and the code point range of the venue name inside it.
        """
        venue = apply_style(venue_name, self.config.venue_style)
        before, _, after = self.budget.suffix_template.partition("{venue}")
        return before + venue + after, len(before), len(before) + len(venue)

    def assemble(
        self,
        user_message: str | None,
        venue_name: str,
        *,
        place_url: str | None = None,
    ) -> tuple[str, list[Annotation]]:
        """Compose the post text and its sorted, non-overlapping annotations.

        Args:
            user_message: Free text typed by the user. Blank messages fall back
                          to the configured default message, or are omitted.
            venue_name: Substituted into the suffix template.
            place_url: If given, the venue name is linked to it.

        Returns:
            ``(text, annotations)`` with byte offsets into ``text``.
        """
        suffix, venue_start, venue_end = self.build_suffix(venue_name)
        suffix_length = grapheme.length(self.budget.separator + suffix)
        max_user_length = self.budget.max_user_length(suffix_length)

        message = self._resolve_message(user_message)
        segments: list[str] = []
        if message:
            segments.append(truncate_graphemes(message, max_user_length))
        segments.append(suffix)
        segment_map = SegmentMap.build(segments, self.budget.separator)

        annotations: list[Annotation] = []
        if message:
            annotations.extend(segment_map.shift(0, self._detector.detect(segments[0])))

        suffix_annotations = self._detector.detect(suffix)
        venue_span = byte_range(suffix, venue_start, venue_end) if place_url else None
        if venue_span is not None:
            venue_link = Annotation(venue_span[0], venue_span[1], Link(uri=place_url))
            suffix_annotations = sorted(
                [a for a in suffix_annotations if not a.overlaps(venue_link)] + [venue_link],
                key=lambda a: a.byte_start,
            )
        annotations.extend(segment_map.shift(len(segments) - 1, suffix_annotations))

        return segment_map.text, annotations

    def _resolve_message(self, user_message: str | None) -> str | None:
        if user_message is None or not user_message.strip():
            return self.config.default_message
        return user_message


def assemble(
    user_message: str | None,
    venue_name: str,
    budget: TextBudget | None = None,
    *,
    place_url: str | None = None,
    config: FacetConfig | None = None,
) -> tuple[str, list[Annotation]]:
    """Assemble a check-in post with the default detectors."""
    return CheckinTextAssembler(config=config, budget=budget).assemble(
        user_message, venue_name, place_url=place_url
    )
