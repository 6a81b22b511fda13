"""Link aggregate root.

A link maps a canonical key to a redirect target and records who owns it
and how often it has been followed.
"""

from datetime import datetime, timezone

from pydantic import Field, field_validator

from customlinks.domain.model.common import DomainModel
from customlinks.domain.value import LinkKey, Target, UserId


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Link(DomainModel):
    """Link aggregate root.

    ``clicks`` only grows, and only through the repository's atomic
    increment. ``created_at`` never changes after insert; ``updated_at``
    moves on every target or owner change.
    """

    key: LinkKey
    target: Target
    owner: UserId
    clicks: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @field_validator("owner")
    @classmethod
    def lowercase_owner(cls, v: str) -> str:
        """Owners are stored in canonical lowercase form."""
        return v.strip().lower()

    def is_owned_by(self, user_id: str) -> bool:
        return self.owner == user_id.strip().lower()
