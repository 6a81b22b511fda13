"""User record.

Users are created the first time an identity passes the authorization
policy and are never modified afterwards.
"""

from datetime import datetime

from pydantic import Field, field_validator

from customlinks.domain.model.common import DomainModel
from customlinks.domain.model.link import utcnow
from customlinks.domain.value import UserId


class User(DomainModel):
    """Verified user."""

    id: UserId
    created_at: datetime = Field(default_factory=utcnow)

    @field_validator("id")
    @classmethod
    def lowercase_id(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("User ID must not be empty")
        return v.strip().lower()
