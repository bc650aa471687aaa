"""Base class for pattern detectors."""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod

from ..config import FacetConfig
from ..domains import DomainValidator
from ..facets import Annotation, Feature
from ..spans import byte_range

logger = logging.getLogger(__name__)


class PatternDetector(ABC):
    """Scan text with one compiled pattern and emit byte-range annotations.

    Subclasses provide ``pattern`` and :meth:`accept`, which vets a single
    match and returns the code point range to annotate plus its feature.
    Conversion to UTF-8 byte offsets happens here, per match, so a match that
    cannot be converted is dropped without aborting the scan.
    """

    pattern: re.Pattern[str]

    def __init__(self, config: FacetConfig | None = None) -> None:
        self._config = config or FacetConfig()
        self._is_valid_domain = DomainValidator(
            self._config.known_tlds, self._config.invalid_tlds
        )

    @classmethod
    @abstractmethod
    def name(cls) -> str:
        """Return the unique name of this detector."""
        ...

    @abstractmethod
    def accept(self, match: re.Match[str]) -> tuple[int, int, Feature] | None:
        """Vet a raw match.

        Returns:
            ``(start, end, feature)`` in code points of the scanned text, or
            ``None`` to discard the match.
        """
        ...

    def find(self, text: str) -> list[Annotation]:
        """Return every accepted match in *text*, in match order."""
        annotations: list[Annotation] = []
        for match in self.pattern.finditer(text):
            accepted = self.accept(match)
            if accepted is None:
                continue

            start, end, feature = accepted
            span = byte_range(text, start, end)
            if span is None:
                logger.debug("%s: skipping unindexable match %r", self.name(), match.group(0))
                continue

            annotations.append(Annotation(span[0], span[1], feature))
        return annotations
