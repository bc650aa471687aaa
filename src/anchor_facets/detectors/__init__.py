"""Pattern detector registry.

Detectors are registered at import time and looked up by name.
Third parties can register custom detectors via register_detector().
"""

from .base import PatternDetector

_REGISTRY: dict[str, type[PatternDetector]] = {}

# Evaluation order; earlier detectors win overlaps at the same position.
DEFAULT_ORDER: tuple[str, ...] = ("link", "hashtag", "mention")


def register_detector(cls: type[PatternDetector]) -> type[PatternDetector]:
    """Register a detector class. Can be used as a decorator."""
    _REGISTRY[cls.name()] = cls
    return cls


def get_detector(name: str) -> type[PatternDetector]:
    """Look up a registered detector by name.

    Raises:
        ValueError: If the detector name is not registered.
    """
    if name not in _REGISTRY:
        available = ", ".join(sorted(_REGISTRY.keys()))
        raise ValueError(f"Unknown detector {name!r}. Available detectors: {available}")
    return _REGISTRY[name]


def list_detectors() -> list[str]:
    """Return sorted list of registered detector names."""
    return sorted(_REGISTRY.keys())


# Register built-in detectors
from .hashtag import HashtagDetector  # noqa: E402
from .mention import MentionDetector  # noqa: E402
from .url import UrlDetector  # noqa: E402

register_detector(UrlDetector)
register_detector(HashtagDetector)
register_detector(MentionDetector)

__all__ = [
    "DEFAULT_ORDER",
    "PatternDetector",
    "register_detector",
    "get_detector",
    "list_detectors",
    "UrlDetector",
    "HashtagDetector",
    "MentionDetector",
]
