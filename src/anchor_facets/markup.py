"""Markdown rendering of annotated text.

Each annotated span becomes ``[span](target)``; everything else is copied
verbatim. Spans are cut from the UTF-8 bytes, so the annotations must use the
same byte offsets the protocol does.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from urllib.parse import quote

from .config import FacetConfig
from .facets import (
    Annotation,
    AnnotationOrderError,
    Feature,
    Link,
    Mention,
    is_sorted_non_overlapping,
)

logger = logging.getLogger(__name__)


def target_url(feature: Feature, config: FacetConfig | None = None) -> str:
    """Where a rendered span should point."""
    config = config or FacetConfig()
    if isinstance(feature, Link):
        return feature.uri
    if isinstance(feature, Mention):
        return config.profile_url.format(identifier=feature.identifier)
    return config.search_url.format(tag=quote(feature.tag, safe=""))


def render(
    text: str,
    annotations: Iterable[Annotation],
    *,
    config: FacetConfig | None = None,
) -> str:
    """Render *text* with each annotation turned into a Markdown link.

    Raises:
        AnnotationOrderError: If the annotations are unsorted or overlap.
    """
    annotations = list(annotations)
    if not is_sorted_non_overlapping(annotations):
        raise AnnotationOrderError("annotations must be sorted by byte_start and not overlap")

    config = config or FacetConfig()
    raw = text.encode("utf-8", "surrogatepass")
    parts: list[str] = []
    cursor = 0

    for annotation in annotations:
        if annotation.byte_end > len(raw):
            logger.debug(
                "Skipping annotation [%d, %d) beyond text of %d bytes",
                annotation.byte_start,
                annotation.byte_end,
                len(raw),
            )
            continue
        try:
            before = raw[cursor : annotation.byte_start].decode("utf-8", "surrogatepass")
            span = raw[annotation.byte_start : annotation.byte_end].decode(
                "utf-8", "surrogatepass"
            )
        except UnicodeDecodeError:
            logger.debug(
                "Skipping annotation [%d, %d) that splits a character",
                annotation.byte_start,
                annotation.byte_end,
            )
            continue

        parts.append(before)
        parts.append(f"[{span}]({target_url(annotation.feature, config)})")
        cursor = annotation.byte_end

    parts.append(raw[cursor:].decode("utf-8", "surrogatepass"))
    return "".join(parts)
