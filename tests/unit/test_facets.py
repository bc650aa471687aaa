"""Tests for annotation values."""

import pytest

from anchor_facets.facets import Annotation, Hashtag, Link, Mention, is_sorted_non_overlapping


class TestAnnotation:
    def test_rejects_empty_range(self):
        with pytest.raises(ValueError, match="Invalid annotation range"):
            Annotation(3, 3, Hashtag("x"))

    def test_rejects_negative_start(self):
        with pytest.raises(ValueError):
            Annotation(-1, 3, Hashtag("x"))

    def test_is_immutable(self):
        ann = Annotation(0, 4, Link("https://a.com"))
        with pytest.raises(AttributeError):
            ann.byte_start = 1

    def test_shifted(self):
        ann = Annotation(2, 5, Mention("alice.bsky.social"))
        assert ann.shifted(10) == Annotation(12, 15, Mention("alice.bsky.social"))
        assert ann.byte_length == 3

    def test_overlaps_is_half_open(self):
        a = Annotation(0, 5, Hashtag("a"))
        assert a.overlaps(Annotation(4, 8, Hashtag("b")))
        assert not a.overlaps(Annotation(5, 8, Hashtag("b")))


class TestIsSortedNonOverlapping:
    def test_empty(self):
        assert is_sorted_non_overlapping([]) is True

    def test_adjacent_ranges(self):
        anns = [Annotation(0, 5, Hashtag("a")), Annotation(5, 9, Hashtag("b"))]
        assert is_sorted_non_overlapping(anns) is True

    def test_unsorted(self):
        anns = [Annotation(5, 9, Hashtag("b")), Annotation(0, 5, Hashtag("a"))]
        assert is_sorted_non_overlapping(anns) is False

    def test_overlapping(self):
        anns = [Annotation(0, 6, Hashtag("a")), Annotation(5, 9, Hashtag("b"))]
        assert is_sorted_non_overlapping(anns) is False
