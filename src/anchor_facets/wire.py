"""Conversion between protocol facets and engine annotations.

On the wire a facet looks like::

    {
        "index": {"byteStart": 4, "byteEnd": 23},
        "features": [{"$type": "app.bsky.richtext.facet#link", "uri": "https://..."}]
    }

``byteEnd`` is exclusive, which is also the engine's convention, so ranges
pass through unchanged. A facet may list several candidate features; only the
first recognized one is kept.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from .facets import Annotation, Feature, Hashtag, Link, Mention

logger = logging.getLogger(__name__)

LINK_TYPE = "app.bsky.richtext.facet#link"
MENTION_TYPE = "app.bsky.richtext.facet#mention"
TAG_TYPE = "app.bsky.richtext.facet#tag"

# type tag -> payload field name
PAYLOAD_FIELDS: dict[str, str] = {
    LINK_TYPE: "uri",
    MENTION_TYPE: "did",
    TAG_TYPE: "tag",
}


@dataclass(slots=True)
class WireAnnotation:
    """A facet as received from the protocol."""

    start_byte: int
    end_byte_exclusive: int
    candidate_features: list[tuple[str, str | None]] = field(default_factory=list)
    """``(type_tag, payload)`` pairs in wire order."""

    @classmethod
    def from_dict(cls, raw: Any) -> WireAnnotation | None:
        """Read the JSON facet shape. Returns None if it is structurally malformed."""
        if not isinstance(raw, dict):
            return None
        index = raw.get("index")
        features = raw.get("features")
        if not isinstance(index, dict) or not isinstance(features, list):
            return None

        start = index.get("byteStart")
        end = index.get("byteEnd")
        if not _is_int(start) or not _is_int(end):
            return None

        candidates: list[tuple[str, str | None]] = []
        for feature in features:
            if not isinstance(feature, dict):
                continue
            type_tag = feature.get("$type")
            if not isinstance(type_tag, str):
                continue
            payload = feature.get(PAYLOAD_FIELDS.get(type_tag, ""))
            candidates.append((type_tag, payload if isinstance(payload, str) else None))

        return cls(start_byte=start, end_byte_exclusive=end, candidate_features=candidates)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def decode_feature(type_tag: str, payload: str | None) -> Feature | None:
    """Map one tagged payload to a feature; unknown tags or missing payloads give None."""
    if payload is None:
        return None
    if type_tag == LINK_TYPE:
        return Link(uri=payload)
    if type_tag == MENTION_TYPE:
        return Mention(identifier=payload)
    if type_tag == TAG_TYPE:
        return Hashtag(tag=payload)
    return None


def _first_supported(candidates: Iterable[tuple[str, str | None]]) -> Feature | None:
    for type_tag, payload in candidates:
        feature = decode_feature(type_tag, payload)
        if feature is not None:
            return feature
    return None


def decode(raw_annotations: Iterable[WireAnnotation]) -> list[Annotation]:
    """Convert wire facets to annotations, dropping invalid or unsupported ones.

    Output keeps input order; it is not sorted or de-overlapped.
    """
    annotations: list[Annotation] = []
    for raw in raw_annotations:
        if raw.start_byte < 0 or raw.start_byte >= raw.end_byte_exclusive:
            logger.debug(
                "Dropping facet with empty range [%d, %d)",
                raw.start_byte,
                raw.end_byte_exclusive,
            )
            continue

        feature = _first_supported(raw.candidate_features)
        if feature is None:
            logger.debug(
                "Dropping facet at %d with no supported feature: %s",
                raw.start_byte,
                [tag for tag, _ in raw.candidate_features],
            )
            continue

        annotations.append(Annotation(raw.start_byte, raw.end_byte_exclusive, feature))
    return annotations


def decode_records(raw_facets: Iterable[Any]) -> list[Annotation]:
    """Decode facets straight from parsed JSON, skipping malformed entries."""
    wire: list[WireAnnotation] = []
    for raw in raw_facets:
        parsed = WireAnnotation.from_dict(raw)
        if parsed is None:
            logger.debug("Skipping malformed facet %r", raw)
            continue
        wire.append(parsed)
    return decode(wire)


def encode_feature(feature: Feature) -> dict[str, str]:
    if isinstance(feature, Link):
        return {"$type": LINK_TYPE, "uri": feature.uri}
    if isinstance(feature, Mention):
        return {"$type": MENTION_TYPE, "did": feature.identifier}
    return {"$type": TAG_TYPE, "tag": feature.tag}


def encode(annotations: Iterable[Annotation]) -> list[dict[str, Any]]:
    """Serialize annotations as facet dicts for an outbound record."""
    return [
        {
            "index": {"byteStart": a.byte_start, "byteEnd": a.byte_end},
            "features": [encode_feature(a.feature)],
        }
        for a in annotations
    ]
