"""Unit tests for link outcome messages."""

from customlinks.application import message
from customlinks.domain.error import (
    AlreadyExistsError,
    EmptyTargetError,
    ForbiddenError,
    NotFoundError,
)
from tests.conftest import key

ORIGIN = "https://go.example.com"
ANCHOR = "<a href='/foo'>https://go.example.com/foo</a>"


class TestSuccessMessages:
    """Tests for success messages."""

    def test_created(self):
        assert message.created(key("foo"), "https://x.com/", ORIGIN) == (
            f"{ANCHOR} now redirects to https://x.com/"
        )

    def test_target_unchanged(self):
        assert message.target_unchanged(key("foo"), "https://x.com/", ORIGIN) == (
            f"{ANCHOR} already redirects to https://x.com/; the target remains the same"
        )

    def test_owner_changed(self):
        assert message.owner_changed(key("foo"), "u2@x.com", ORIGIN) == (
            f"{ANCHOR} is now owned by u2@x.com"
        )

    def test_owner_unchanged(self):
        assert message.owner_unchanged(key("foo"), "u1@x.com", ORIGIN) == (
            f"{ANCHOR} is already owned by u1@x.com; the owner remains the same"
        )

    def test_deleted_uses_plain_url(self):
        assert message.deleted(key("foo"), ORIGIN) == (
            "https://go.example.com/foo has been deleted"
        )


class TestFailureMessages:
    """Tests for failure messages."""

    def test_not_found(self):
        error = NotFoundError(key("foo"))

        assert message.describe_error(error, ORIGIN) == (
            "https://go.example.com/foo does not exist"
        )

    def test_already_exists(self):
        error = AlreadyExistsError(key("foo"))

        assert message.describe_error(error, ORIGIN) == f"{ANCHOR} already exists"

    def test_forbidden_names_owner(self):
        error = ForbiddenError(key("foo"), owner="u1@x.com", user_id="u2@x.com")

        assert message.describe_error(error, ORIGIN) == f"{ANCHOR} is owned by u1@x.com"

    def test_validation_errors_keep_their_text(self):
        assert message.describe_error(EmptyTargetError(), ORIGIN) == (
            "Redirect location field must not be empty."
        )

    def test_server_error(self):
        assert message.server_error(key("foo"), "created", ORIGIN) == (
            "A server error occurred; https://go.example.com/foo wasn't created"
        )

    def test_server_error_with_status(self):
        assert message.server_error(
            key("foo"), "deleted", ORIGIN, status_text="Service Unavailable"
        ) == (
            "A server error occurred; https://go.example.com/foo wasn't deleted: "
            "Service Unavailable"
        )


class TestEscaping:
    """Interpolated values can't inject markup into a message."""

    MARKUP = "<img src=x onerror=alert(1)>"
    ESCAPED = "&lt;img src=x onerror=alert(1)&gt;"

    def test_owner_changed_escapes_owner(self):
        rendered = message.owner_changed(key("foo"), self.MARKUP, ORIGIN)

        assert rendered == f"{ANCHOR} is now owned by {self.ESCAPED}"

    def test_owner_unchanged_escapes_owner(self):
        rendered = message.owner_unchanged(key("foo"), self.MARKUP, ORIGIN)

        assert self.MARKUP not in rendered
        assert self.ESCAPED in rendered

    def test_forbidden_escapes_owner(self):
        error = ForbiddenError(key("foo"), owner=self.MARKUP, user_id="u2@x.com")

        assert message.describe_error(error, ORIGIN) == (
            f"{ANCHOR} is owned by {self.ESCAPED}"
        )

    def test_target_is_escaped(self):
        target = "https://x.com/?a=1&b=<script>"

        for build in (message.created, message.target_updated, message.target_unchanged):
            rendered = build(key("foo"), target, ORIGIN)
            assert "https://x.com/?a=1&amp;b=&lt;script&gt;" in rendered
            assert "<script>" not in rendered

    def test_plain_url_is_escaped(self):
        odd = key("<b>x")

        assert message.deleted(odd, ORIGIN) == (
            "https://go.example.com/&lt;b&gt;x has been deleted"
        )
        assert "<b>" not in message.describe_error(NotFoundError(odd), ORIGIN)
