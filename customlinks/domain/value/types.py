"""Domain value objects for custom links.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from urllib.parse import urlsplit

from pydantic import field_validator

from customlinks.domain.error import EmptyTargetError, TargetProtocolError
from customlinks.domain.value.common import RootValueObject, ValueObject

ALLOWED_TARGET_SCHEMES = ("http", "https")


class Target(RootValueObject[str]):
    """Redirect target: an absolute http:// or https:// URL.

    Construct with ``Target.parse`` to get the domain errors the UI expects.
    """

    @field_validator("root")
    @classmethod
    def validate_target(cls, v: str) -> str:
        if not is_valid_target(v):
            raise ValueError("Redirect location protocol must be http:// or https://.")
        return v

    @classmethod
    def parse(cls, raw: str | None) -> "Target":
        """Validate a raw target.

        Raises:
            EmptyTargetError: If target is empty or whitespace only
            TargetProtocolError: If target is not an absolute http(s) URL
        """
        value = (raw or "").strip()
        if not value:
            raise EmptyTargetError()
        if not is_valid_target(value):
            raise TargetProtocolError(value)
        return cls(value)


def is_valid_target(value: str) -> bool:
    """Check that value is an absolute URL with an allowed scheme and a host."""
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return parts.scheme.lower() in ALLOWED_TARGET_SCHEMES and bool(parts.netloc)


class AuthorizationPolicy(ValueObject):
    """Allow-lists deciding which verified identities may use the service.

    Both lists are compared case-insensitively. With both lists empty,
    nobody is authorized.
    """

    users: frozenset[str] = frozenset()
    domains: frozenset[str] = frozenset()

    @field_validator("users", "domains", mode="before")
    @classmethod
    def lowercase_entries(cls, v):
        if v is None:
            return frozenset()
        return frozenset(entry.strip().lower() for entry in v)

    def allows(self, user_id: str) -> bool:
        """Check a lowercased identifier against both allow-lists."""
        if user_id in self.users:
            return True
        _, at, domain = user_id.rpartition("@")
        return bool(at) and domain in self.domains
