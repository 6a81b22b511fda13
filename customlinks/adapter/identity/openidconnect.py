"""Generic OpenID Connect identity adapter (Okta and similar providers)."""

from typing import Any, Mapping

from customlinks.adapter.identity.oauth import OAuthIdentityAdapter
from customlinks.config import OIDCSettings


class OIDCIdentityAdapter(OAuthIdentityAdapter):
    """OIDC adapter reading the single email claim of the userinfo profile."""

    name = "openidconnect"

    def __init__(self, settings: OIDCSettings) -> None:
        super().__init__(
            client_id=settings.client_id,
            client_secret=settings.client_secret,
            redirect_uri=settings.callback_url,
            authorize_url=settings.authorization_url,
            token_url=settings.token_url,
            user_info_url=settings.user_info_url,
        )
        self.issuer = settings.issuer

    def extract_claims(self, payload: Mapping[str, Any]) -> list[str]:
        """Return the profile email, if any."""
        profile = payload.get("userinfo") or {}
        email = profile.get("email") if isinstance(profile, Mapping) else None
        return [email] if email else []

    def build_payload(self, user_info: dict[str, Any]) -> dict:
        return {"userinfo": user_info}
