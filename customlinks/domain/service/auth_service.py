"""Identity verification domain service.

Identity adapters turn a provider payload into candidate identifiers; the
authorization policy picks at most one of them; the verification service
turns that into a user record.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Mapping, Sequence

import logfire

from customlinks.domain.model.user import User
from customlinks.domain.repository import UserRepository
from customlinks.domain.value import AuthorizationPolicy, UserId
from customlinks.domain.value.identifiers import normalize_user_id

from .base import Service


def find_verified_id(
    candidates: Sequence[str], policy: AuthorizationPolicy
) -> UserId | None:
    """Pick the first candidate identifier the policy allows.

    Candidates are lowercased before matching and the lowercased form is
    returned. Earlier candidates win, so a principal with several email
    aliases is always verified under the same one.

    Args:
        candidates: Identifiers claimed by an identity provider, in order
        policy: Allow-lists of users and domains

    Returns:
        The matching identifier, or None if nothing matches
    """
    for candidate in candidates:
        user_id = normalize_user_id(candidate)
        if user_id and policy.allows(user_id):
            return user_id
    return None


class IdentityAdapter(ABC):
    """Provider-specific identity extraction.

    Each adapter knows how to send a browser to its provider, how to fetch
    the provider payload once the browser comes back, and how to pull
    candidate identifiers out of that payload.
    """

    name: ClassVar[str]

    @abstractmethod
    def extract_claims(self, payload: Mapping[str, Any]) -> list[str]:
        """Extract candidate identifiers from a provider payload.

        Missing optional fields yield an empty list rather than an error.

        Args:
            payload: Provider-specific profile data

        Returns:
            Candidate identifiers in provider order
        """
        raise NotImplementedError

    def authorization_url(self, state: str) -> str:
        """URL that starts the provider login.

        Args:
            state: State parameter for CSRF protection

        Returns:
            URL to redirect the browser to
        """
        return f"/auth/{self.name}/callback?state={state}"

    async def fetch_payload(self, code: str | None, state: str | None) -> dict:
        """Fetch the provider payload after the login callback.

        Args:
            code: Authorization code from the callback, if any
            state: State parameter from the callback, if any

        Returns:
            Provider-specific profile data
        """
        return {}


@dataclass
class VerificationResult:
    """Outcome of a provider login.

    ``user`` is None when no claimed identifier was authorized.
    """

    provider: str
    claims: list[str]
    user: User | None

    @property
    def reason(self) -> str:
        """Human-readable denial reason."""
        if self.user is not None:
            return ""
        if not self.claims:
            return f"authentication with {self.provider} failed"
        return "unknown user: " + ", ".join(self.claims)


class VerificationService(Service):
    """Domain service turning claimed identifiers into verified users."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize verification service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def verify(
        self, claims: Sequence[str], policy: AuthorizationPolicy
    ) -> User | None:
        """Verify claimed identifiers against the policy.

        Args:
            claims: Candidate identifiers, in provider order
            policy: Authorization policy

        Returns:
            The verified user (created on first login), or None if no
            claim is authorized

        Raises:
            Exception: Repository errors propagate unchanged so callers can
                tell a denial from an unavailable backend
        """
        with logfire.span("verification_service.verify", claim_count=len(claims)):
            user_id = find_verified_id(claims, policy)
            if user_id is None:
                logfire.warn("Identity not authorized", claims=list(claims))
                return None

            user = await self.user_repository.find_or_create(user_id)
            logfire.info("Identity verified", user_id=user.id)
            return user


class AuthService(Service):
    """Domain service for multi-provider login.

    Coordinates the configured identity adapters with the verification
    service under a single authorization policy.
    """

    def __init__(
        self,
        adapters: dict[str, IdentityAdapter],
        verification_service: VerificationService,
        policy: AuthorizationPolicy,
    ) -> None:
        """Initialize auth service.

        Args:
            adapters: Map of provider name to identity adapter
            verification_service: Verification service
            policy: Authorization policy
        """
        self.adapters = adapters
        self.verification_service = verification_service
        self.policy = policy

    @property
    def open_mode(self) -> bool:
        """True when no identity provider is configured."""
        return not self.adapters

    def get_adapter(self, provider: str) -> IdentityAdapter:
        """Look up a configured adapter.

        Raises:
            ValueError: If provider not configured
        """
        adapter = self.adapters.get(provider)
        if not adapter:
            raise ValueError(f"Unsupported provider: {provider}")
        return adapter

    def initiate_login(self, provider: str, state: str) -> str:
        """Start a login with the named provider.

        Args:
            provider: Provider name
            state: State parameter for CSRF protection

        Returns:
            URL to redirect the browser to

        Raises:
            ValueError: If provider not configured
        """
        return self.get_adapter(provider).authorization_url(state)

    async def complete_login(
        self, provider: str, code: str | None = None, state: str | None = None
    ) -> VerificationResult:
        """Finish a login with the named provider.

        Args:
            provider: Provider name
            code: Authorization code from the callback
            state: State parameter from the callback

        Returns:
            Verification result; ``user`` is None on denial

        Raises:
            ValueError: If provider not configured
            ProviderError: If the provider can't be reached
            ConfigurationError: If the provider is misconfigured
        """
        adapter = self.get_adapter(provider)
        with logfire.span("auth_service.complete_login", provider=provider):
            payload = await adapter.fetch_payload(code, state)
            claims = adapter.extract_claims(payload)
            user = await self.verification_service.verify(claims, self.policy)
            return VerificationResult(provider=provider, claims=claims, user=user)
