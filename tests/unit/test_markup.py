"""Tests for Markdown rendering."""

import pytest

from anchor_facets.config import FacetConfig
from anchor_facets.facets import Annotation, AnnotationOrderError, Hashtag, Link, Mention
from anchor_facets.markup import render, target_url


class TestTargetUrl:
    def test_link_uses_uri(self):
        assert target_url(Link("https://example.com/a?b=c")) == "https://example.com/a?b=c"

    def test_mention_profile_url(self):
        assert target_url(Mention("did:plc:alice")) == "https://bsky.app/profile/did:plc:alice"

    def test_hashtag_search_url_is_encoded(self):
        assert (
            target_url(Hashtag("café au lait"))
            == "https://bsky.app/search?q=%23caf%C3%A9%20au%20lait"
        )

    def test_custom_profile_url(self):
        config = FacetConfig(profile_url="https://example.social/@{identifier}")
        assert target_url(Mention("alice.test"), config) == "https://example.social/@alice.test"


class TestRender:
    def test_no_annotations(self):
        assert render("plain text", []) == "plain text"

    def test_single_link(self):
        text = "see https://example.com now"
        anns = [Annotation(4, 23, Link("https://example.com"))]
        assert render(text, anns) == "see [https://example.com](https://example.com) now"

    def test_multibyte_offsets(self):
        text = "⚓ check #anchor"
        anns = [Annotation(10, 17, Hashtag("anchor"))]
        assert render(text, anns) == "⚓ check [#anchor](https://bsky.app/search?q=%23anchor)"

    def test_annotation_past_end_is_skipped(self):
        anns = [
            Annotation(0, 2, Link("https://a")),
            Annotation(3, 99, Link("https://b")),
        ]
        assert render("hello", anns) == "[he](https://a)llo"

    def test_annotation_splitting_character_is_skipped(self):
        assert render("é!", [Annotation(1, 3, Hashtag("x"))]) == "é!"

    def test_unsorted_raises(self):
        anns = [Annotation(5, 6, Hashtag("b")), Annotation(0, 2, Hashtag("a"))]
        with pytest.raises(AnnotationOrderError):
            render("hello world", anns)

    def test_overlapping_raises(self):
        anns = [Annotation(0, 4, Hashtag("a")), Annotation(3, 6, Hashtag("b"))]
        with pytest.raises(AnnotationOrderError):
            render("hello world", anns)

    def test_order_error_is_value_error(self):
        assert issubclass(AnnotationOrderError, ValueError)

    def test_adjacent_annotations(self):
        anns = [Annotation(0, 2, Hashtag("a")), Annotation(2, 4, Hashtag("b"))]
        assert render("#a#b", anns) == (
            "[#a](https://bsky.app/search?q=%23a)[#b](https://bsky.app/search?q=%23b)"
        )

    def test_custom_config(self):
        config = FacetConfig(search_url="https://tags.example.org/{tag}")
        assert render("#hi", [Annotation(0, 3, Hashtag("hi"))], config=config) == (
            "[#hi](https://tags.example.org/hi)"
        )
