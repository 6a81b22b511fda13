"""Test configuration and fixtures."""

import logfire
import pytest

from customlinks.domain.value import LinkKey

logfire.configure(send_to_logfire=False, console=False)

TEST_AUTH_VARIABLE = "CUSTOM_LINKS_TEST_AUTH"

ALLOWED_USER = "alice@example.com"
OTHER_USER = "bob@example.com"
ALLOWED_DOMAIN = "acme.com"


@pytest.fixture(autouse=True)
def test_settings_env(monkeypatch):
    """Test configuration: test identity provider and small allow-lists."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("AUTH__PROVIDERS", '["test"]')
    monkeypatch.setenv("AUTH__USERS", f'["{ALLOWED_USER}", "{OTHER_USER}"]')
    monkeypatch.setenv("AUTH__DOMAINS", f'["{ALLOWED_DOMAIN}"]')
    monkeypatch.setenv("AUTH__SESSION_SECRET", "test-session-secret")
    monkeypatch.delenv(TEST_AUTH_VARIABLE, raising=False)


def key(raw: str) -> LinkKey:
    """Shorthand for a normalized link key."""
    return LinkKey.normalize(raw)
