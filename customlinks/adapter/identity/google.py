"""Google identity adapter.

Google profiles carry a list of email entries; every ``account`` entry is a
candidate identifier, in the order Google lists them.
"""

from typing import Any, Mapping

from customlinks.adapter.identity.oauth import OAuthIdentityAdapter
from customlinks.config import GoogleSettings

AUTHORIZE_URL = "https://accounts.google.com/o/oauth2/v2/auth"
TOKEN_URL = "https://oauth2.googleapis.com/token"
USER_INFO_URL = "https://openidconnect.googleapis.com/v1/userinfo"

EMAIL_TYPE = "account"


class GoogleIdentityAdapter(OAuthIdentityAdapter):
    """OAuth adapter reading the profile's email list."""

    name = "google"

    def __init__(self, settings: GoogleSettings) -> None:
        super().__init__(
            client_id=settings.client_id,
            client_secret=settings.client_secret,
            redirect_uri=settings.callback_url,
            authorize_url=AUTHORIZE_URL,
            token_url=TOKEN_URL,
            user_info_url=USER_INFO_URL,
        )

    def extract_claims(self, payload: Mapping[str, Any]) -> list[str]:
        """Return every account email, preserving order."""
        emails = payload.get("emails") or []
        return [
            entry["value"]
            for entry in emails
            if isinstance(entry, Mapping)
            and entry.get("type") == EMAIL_TYPE
            and entry.get("value")
        ]

    def build_payload(self, user_info: dict[str, Any]) -> dict:
        """Shape the OpenID userinfo like a Google profile email list."""
        email = user_info.get("email")
        if not email or user_info.get("email_verified") is False:
            return {"emails": []}
        return {"emails": [{"value": email, "type": EMAIL_TYPE}]}
