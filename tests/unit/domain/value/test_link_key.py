"""Unit tests for LinkKey."""

import pytest
from pydantic import ValidationError

from customlinks.domain.value import LinkKey


class TestNormalize:
    """Tests for LinkKey.normalize."""

    @pytest.mark.parametrize("raw", ["", "/", "///", None])
    def test_empty_inputs_normalize_to_root(self, raw):
        assert LinkKey.normalize(raw).root == "/"

    @pytest.mark.parametrize("raw", ["foo", "/foo", "///foo"])
    def test_leading_slashes_collapse(self, raw):
        assert LinkKey.normalize(raw).root == "/foo"

    def test_inner_slashes_are_kept(self):
        assert LinkKey.normalize("//foo/bar/").root == "/foo/bar/"

    def test_normalized_keys_compare_equal(self):
        assert LinkKey.normalize("foo") == LinkKey.normalize("///foo")


class TestConstruction:
    """Direct construction only accepts canonical keys."""

    def test_rejects_missing_slash(self):
        with pytest.raises(ValidationError):
            LinkKey("foo")

    def test_rejects_double_slash(self):
        with pytest.raises(ValidationError):
            LinkKey("//foo")


class TestViews:
    """Tests for the derived views of a key."""

    def test_trimmed_and_relative(self):
        key = LinkKey.normalize("foo")

        assert key.trimmed == "foo"
        assert key.relative == "/foo"
        assert not key.is_root

    def test_root_key(self):
        key = LinkKey.normalize("")

        assert key.is_root
        assert key.trimmed == ""

    def test_full_joins_origin(self):
        key = LinkKey.normalize("foo")

        assert key.full("https://go.example.com") == "https://go.example.com/foo"
        assert key.full("https://go.example.com/") == "https://go.example.com/foo"

    def test_anchor_links_relative_path_and_shows_full_url(self):
        key = LinkKey.normalize("foo")

        assert (
            key.anchor("https://go.example.com")
            == "<a href='/foo'>https://go.example.com/foo</a>"
        )

    def test_anchor_escapes_markup(self):
        key = LinkKey.normalize("<b>'x'")

        anchor = key.anchor("http://localhost:8000")

        assert "<b>" not in anchor
        assert "&lt;b&gt;" in anchor
        assert "href='/&lt;b&gt;&#x27;x&#x27;'" in anchor


class TestReserved:
    """Tests for keys the application answers itself."""

    @pytest.mark.parametrize(
        "raw", ["id", "logout", "health", "api/links", "auth/google/callback"]
    )
    def test_application_paths_are_reserved(self, raw):
        assert LinkKey.normalize(raw).is_reserved

    @pytest.mark.parametrize("raw", ["foo", "api", "auth", "idea", "health/check"])
    def test_other_paths_are_free(self, raw):
        assert not LinkKey.normalize(raw).is_reserved
