"""Shared OAuth 2.0 authorization-code flow for identity adapters.

Subclasses set the provider endpoints and turn the userinfo response into
the payload shape their ``extract_claims`` reads.
"""

from abc import abstractmethod
from typing import Any
from urllib.parse import urlencode

import httpx
import logfire

from customlinks.adapter.error import ProviderError
from customlinks.domain.service.auth_service import IdentityAdapter


class OAuthIdentityAdapter(IdentityAdapter):
    """Identity adapter backed by an OAuth 2.0 / OpenID Connect provider."""

    scope = "openid email profile"

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        authorize_url: str,
        token_url: str,
        user_info_url: str,
    ) -> None:
        """Initialize OAuth identity adapter.

        Args:
            client_id: OAuth client ID
            client_secret: OAuth client secret
            redirect_uri: Callback URL registered with the provider
            authorize_url: Provider authorization endpoint
            token_url: Provider token endpoint
            user_info_url: Provider userinfo endpoint
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.authorize_url = authorize_url
        self.token_url = token_url
        self.user_info_url = user_info_url

    def authorization_url(self, state: str) -> str:
        """Build the provider authorization URL."""
        params = {
            "response_type": "code",
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "scope": self.scope,
            "state": state,
        }
        return f"{self.authorize_url}?{urlencode(params)}"

    async def fetch_payload(self, code: str | None, state: str | None) -> dict:
        """Exchange the callback code and fetch the user's profile.

        Raises:
            ProviderError: If the callback carries no code or the provider fails
        """
        if not code:
            raise ProviderError(f"{self.name} callback is missing the authorization code")

        access_token = await self._exchange_code_for_token(code)
        user_info = await self._get_user_info(access_token)

        logfire.info("OAuth profile fetched", provider=self.name)
        return self.build_payload(user_info)

    @abstractmethod
    def build_payload(self, user_info: dict[str, Any]) -> dict:
        """Convert a userinfo response into this adapter's payload shape."""
        raise NotImplementedError

    async def _exchange_code_for_token(self, code: str) -> str:
        """Exchange authorization code for access token.

        Raises:
            ProviderError: If token exchange fails
        """
        data = {
            "code": code,
            "grant_type": "authorization_code",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": self.redirect_uri,
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.token_url,
                    data=data,
                    headers={"Accept": "application/json"},
                    timeout=30.0,
                )
        except httpx.HTTPError as e:
            logfire.error("Token exchange HTTP error", provider=self.name, error=str(e))
            raise ProviderError(f"HTTP error during {self.name} token exchange: {e}")

        if response.status_code != 200:
            logfire.error(
                "Token exchange failed",
                provider=self.name,
                status_code=response.status_code,
                error=response.text,
            )
            raise ProviderError(
                f"{self.name} token exchange failed: {response.status_code}"
            )

        token = response.json().get("access_token")
        if not token:
            raise ProviderError(f"{self.name} token response has no access_token")
        return token

    async def _get_user_info(self, access_token: str) -> dict[str, Any]:
        """Fetch the userinfo document.

        Raises:
            ProviderError: If the request fails
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self.user_info_url,
                    headers={"Authorization": f"Bearer {access_token}"},
                    timeout=30.0,
                )
        except httpx.HTTPError as e:
            logfire.error("User info HTTP error", provider=self.name, error=str(e))
            raise ProviderError(f"HTTP error fetching {self.name} user info: {e}")

        if response.status_code != 200:
            logfire.error(
                "User info request failed",
                provider=self.name,
                status_code=response.status_code,
                error=response.text,
            )
            raise ProviderError(
                f"{self.name} user info request failed: {response.status_code}"
            )

        return response.json()
