"""Facet detection entry point."""

from __future__ import annotations

from collections.abc import Sequence

from .config import FacetConfig
from .detectors import DEFAULT_ORDER, PatternDetector, get_detector
from .facets import Annotation
from .overlap import resolve_overlaps


class FacetDetector:
    """Detect links, hashtags and mentions in text.

    Runs each registered detector in order, concatenates their output and
    resolves overlaps. The result is sorted by ``byte_start`` and pairwise
    non-overlapping, ready to attach to an outbound record.
    """

    def __init__(
        self,
        detectors: Sequence[str] | None = None,
        config: FacetConfig | None = None,
    ):
        """Initialize the detector.

        Args:
            detectors: Names of registered detectors in evaluation order.
                       Earlier detectors win overlaps. Defaults to
                       link, hashtag, mention.
            config: Engine settings. Defaults to the built-in configuration.
        """
        self.config = config or FacetConfig()
        names = DEFAULT_ORDER if detectors is None else tuple(detectors)
        self._detectors: list[PatternDetector] = [
            get_detector(name)(self.config) for name in names
        ]

    @property
    def detector_names(self) -> list[str]:
        return [d.name() for d in self._detectors]

    def detect(self, text: str) -> list[Annotation]:
        """Return the non-overlapping annotations found in *text*."""
        candidates: list[Annotation] = []
        for detector in self._detectors:
            candidates.extend(detector.find(text))
        return resolve_overlaps(candidates)


def detect(text: str, config: FacetConfig | None = None) -> list[Annotation]:
    """Detect facets in *text* with the default detectors."""
    return FacetDetector(config=config).detect(text)
