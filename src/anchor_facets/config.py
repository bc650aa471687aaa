"""Configuration loader for the facet engine.

Loads ``facets.yaml`` with priority resolution:
1. User config: ~/.config/{app_name}/facets.yaml (highest priority)
2. Project config: .{app_name}/facets.yaml in current directory
3. Package defaults: shipped with anchor-facets (fallback)

``FacetConfig()`` without arguments is the built-in default and never touches
the filesystem; only :func:`load_config` reads files.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .domains import INVALID_TLDS, KNOWN_TLDS

logger = logging.getLogger(__name__)

# Lazy import yaml to avoid startup cost
_yaml = None

CONFIG_FILENAME = "facets.yaml"

DEFAULT_SUFFIX_TEMPLATE = "Dropped ⚓ at {venue} #checkin #dropanchor"
DEFAULT_PROFILE_URL = "https://bsky.app/profile/{identifier}"
DEFAULT_SEARCH_URL = "https://bsky.app/search?q=%23{tag}"
DEFAULT_PLACE_URL = "https://www.openstreetmap.org/{element_type}/{element_id}"

VENUE_STYLES = ("plain", "italic", "bold_italic")


def _get_yaml():
    """Lazy-load PyYAML."""
    global _yaml
    if _yaml is None:
        import yaml

        _yaml = yaml
    return _yaml


def _get_package_defaults_path() -> Path:
    """Get path to package default config using importlib.resources."""
    try:
        from importlib.resources import files

        return files("anchor_facets.config_data") / "_defaults"
    except (ImportError, TypeError):
        # Fallback for editable installs
        return Path(__file__).parent / "config_data" / "_defaults"


def validate_budget(max_length: int, minimum_reserved: int, suffix_template: str) -> None:
    """Raise ValueError for a budget that cannot produce a post."""
    if suffix_template.count("{venue}") != 1:
        raise ValueError("suffix_template must contain '{venue}' exactly once")
    if max_length <= 0:
        raise ValueError("max_length must be positive")
    if minimum_reserved < 0:
        raise ValueError("minimum_reserved must not be negative")


@dataclass(frozen=True)
class FacetConfig:
    """Settings shared by the detectors, the assembler and the renderer."""

    known_tlds: frozenset[str] = KNOWN_TLDS
    invalid_tlds: frozenset[str] = INVALID_TLDS

    hashtag_max_length: int = 66
    """Longest accepted hashtag in characters, including the ``#``."""

    max_length: int = 300
    """Visible-character (grapheme) budget of an assembled post."""

    minimum_reserved: int = 50
    """Characters always left for the user message, even with a long suffix."""

    separator: str = "\n\n"
    suffix_template: str = DEFAULT_SUFFIX_TEMPLATE
    default_message: str | None = None
    venue_style: str = "plain"

    profile_url: str = DEFAULT_PROFILE_URL
    search_url: str = DEFAULT_SEARCH_URL
    place_url: str = DEFAULT_PLACE_URL

    def __post_init__(self) -> None:
        validate_budget(self.max_length, self.minimum_reserved, self.suffix_template)
        if self.venue_style not in VENUE_STYLES:
            raise ValueError(
                f"Unknown venue_style {self.venue_style!r}. "
                f"Available styles: {', '.join(VENUE_STYLES)}"
            )
        if self.hashtag_max_length < 2:
            raise ValueError("hashtag_max_length must allow at least one tag character")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FacetConfig:
        """Build a config from the parsed YAML sections, keeping defaults for gaps."""
        kwargs: dict[str, Any] = {}

        domains = data.get("domains") or {}
        if "known_tlds" in domains:
            kwargs["known_tlds"] = frozenset(str(t).lower() for t in domains["known_tlds"])
        if "invalid_tlds" in domains:
            kwargs["invalid_tlds"] = frozenset(
                str(t).lower() for t in domains["invalid_tlds"]
            )

        hashtags = data.get("hashtags") or {}
        if "max_length" in hashtags:
            kwargs["hashtag_max_length"] = int(hashtags["max_length"])

        budget = data.get("budget") or {}
        for key in ("max_length", "minimum_reserved"):
            if key in budget:
                kwargs[key] = int(budget[key])
        for key in ("separator", "suffix_template", "venue_style"):
            if key in budget:
                kwargs[key] = str(budget[key])
        if budget.get("default_message"):
            kwargs["default_message"] = str(budget["default_message"])

        links = data.get("links") or {}
        for key in ("profile_url", "search_url", "place_url"):
            if key in links:
                kwargs[key] = str(links[key])

        return cls(**kwargs)


class ConfigLoader:
    """Find and parse ``facets.yaml`` with priority resolution.

    Config locations are checked in priority order:
    1. ~/.config/{app_name}/ - User overrides
    2. .{app_name}/ - Project-specific settings
    3. Package defaults - Shipped with anchor-facets

    The first file found is used as a whole; keys it omits keep their
    built-in defaults.
    """

    def __init__(self, app_name: str = "anchor-facets"):
        self._app_name = app_name
        self._config_locations = [
            Path.home() / ".config" / app_name,  # User overrides
            Path.cwd() / f".{app_name}",  # Project config
        ]

    def _find_config_file(self):
        """Return the highest-priority config file, or None if none exists."""
        for config_dir in self._config_locations:
            config_file = config_dir / CONFIG_FILENAME
            if config_file.exists():
                return config_file

        default_file = _get_package_defaults_path() / CONFIG_FILENAME
        if default_file.is_file():
            return default_file
        return None

    def load(self) -> FacetConfig:
        config_file = self._find_config_file()
        if config_file is None:
            return FacetConfig()

        yaml = _get_yaml()
        content = config_file.read_text(encoding="utf-8")
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            logger.warning("Ignoring unparseable config %s: %s", config_file, exc)
            return FacetConfig()

        if not data:
            return FacetConfig()
        if not isinstance(data, dict):
            logger.warning("Ignoring config %s: top level is not a mapping", config_file)
            return FacetConfig()

        logger.debug("Loaded facet config from %s", config_file)
        return FacetConfig.from_dict(data)


def load_config(app_name: str = "anchor-facets") -> FacetConfig:
    """Load the highest-priority ``facets.yaml`` for *app_name*."""
    return ConfigLoader(app_name).load()
