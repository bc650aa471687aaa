"""anchor-facets: rich-text facet engine for check-in posts."""

from .assembler import CheckinTextAssembler, TextBudget, assemble, build_place_url
from .config import FacetConfig, load_config
from .detector import FacetDetector, detect
from .detectors import PatternDetector, get_detector, list_detectors, register_detector
from .domains import DomainValidator, is_valid_domain
from .facets import (
    Annotation,
    AnnotationOrderError,
    Feature,
    Hashtag,
    Link,
    Mention,
    is_sorted_non_overlapping,
)
from .markup import render, target_url
from .overlap import resolve_overlaps
from .wire import WireAnnotation, decode, decode_records, encode

__all__ = [
    "Annotation",
    "AnnotationOrderError",
    "Feature",
    "Link",
    "Mention",
    "Hashtag",
    "is_sorted_non_overlapping",
    "is_valid_domain",
    "DomainValidator",
    "FacetConfig",
    "load_config",
    "FacetDetector",
    "detect",
    "PatternDetector",
    "get_detector",
    "list_detectors",
    "register_detector",
    "resolve_overlaps",
    "CheckinTextAssembler",
    "TextBudget",
    "assemble",
    "build_place_url",
    "WireAnnotation",
    "decode",
    "decode_records",
    "encode",
    "render",
    "target_url",
]
