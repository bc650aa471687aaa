"""End-to-end tests for detection and rendering."""

import re

import pytest

from anchor_facets import detect, render
from anchor_facets.detector import FacetDetector
from anchor_facets.detectors import _REGISTRY, PatternDetector, register_detector
from anchor_facets.facets import Annotation, Hashtag, Link, Mention, is_sorted_non_overlapping

TRICKY_TEXTS = [
    "",
    "no facets at all",
    "(see example.com) and #tag, @bob.test!",
    "https://a.com/#x #x",
    "##double # lonely #",
    "日本語 #タグ https://例え.jp/パス",
    "a.b.c.d e.f g.123",
    "@@x.com mail bob@example.com",
    "#️⃣ #1 #2024 #v2",
    "x" * 50 + ".com/" + "y" * 50,
    "⚓⚓⚓ #⚓ ＃full @alice.bsky.social. https://bsky.app).",
    "#" + "a" * 100,
]


@pytest.mark.parametrize("text", TRICKY_TEXTS)
def test_detect_is_sorted_non_overlapping_and_in_bounds(text):
    annotations = detect(text)
    raw = text.encode("utf-8")

    assert is_sorted_non_overlapping(annotations)
    for annotation in annotations:
        assert 0 <= annotation.byte_start < annotation.byte_end <= len(raw)
        # Every range falls on character boundaries
        raw[annotation.byte_start : annotation.byte_end].decode("utf-8")


def test_offsets_are_utf8_bytes():
    text = "⚓ check #anchor"
    assert detect(text) == [Annotation(10, 17, Hashtag("anchor"))]
    assert len("⚓ check ".encode("utf-8")) == 10 > len("⚓ check ")


def test_render_own_detections():
    text = "see https://example.com now"
    annotations = detect(text)
    assert annotations == [Annotation(4, 23, Link("https://example.com"))]
    assert render(text, annotations) == "see [https://example.com](https://example.com) now"


def test_hashtag_must_not_start_with_digit():
    assert detect("#123abc") == []
    assert detect("#abc123") == [Annotation(0, 7, Hashtag("abc123"))]


def test_mixed_text():
    text = "Coffee with @alice.bsky.social at cafe.com #latte"
    annotations = detect(text)
    assert annotations == [
        Annotation(12, 30, Mention("alice.bsky.social")),
        Annotation(34, 42, Link("https://cafe.com")),
        Annotation(43, 49, Hashtag("latte")),
    ]
    assert render(text, annotations) == (
        "Coffee with [@alice.bsky.social](https://bsky.app/profile/alice.bsky.social)"
        " at [cafe.com](https://cafe.com)"
        " [#latte](https://bsky.app/search?q=%23latte)"
    )


def test_trailing_punctuation_excluded():
    text = "Try https://cafe.example.org/menu. Or #coffee!"
    assert detect(text) == [
        Annotation(4, 33, Link("https://cafe.example.org/menu")),
        Annotation(38, 45, Hashtag("coffee")),
    ]


class DottedWordDetector(PatternDetector):
    """Tags every dotted word, so it collides with bare links."""

    pattern = re.compile(r"\w+\.\w+")

    @classmethod
    def name(cls) -> str:
        return "_test_dotted"

    def accept(self, match):
        return match.start(), match.end(), Hashtag(match.group(0))


@pytest.fixture
def dotted_detector():
    register_detector(DottedWordDetector)
    yield DottedWordDetector.name()
    _REGISTRY.pop(DottedWordDetector.name(), None)


class TestPrecedence:
    def test_earlier_detector_wins(self, dotted_detector):
        text = "visit cafe.com today"
        link_first = FacetDetector(detectors=["link", dotted_detector])
        assert link_first.detect(text) == [Annotation(6, 14, Link("https://cafe.com"))]

    def test_order_is_configurable(self, dotted_detector):
        text = "visit cafe.com today"
        dotted_first = FacetDetector(detectors=[dotted_detector, "link"])
        assert dotted_first.detect(text) == [Annotation(6, 14, Hashtag("cafe.com"))]


def test_unknown_detector_name():
    with pytest.raises(ValueError, match="Unknown detector"):
        FacetDetector(detectors=["link", "emoji"])


def test_detector_names():
    assert FacetDetector().detector_names == ["link", "hashtag", "mention"]
