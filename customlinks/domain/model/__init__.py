"""Domain models for custom links."""

from customlinks.domain.model.common import DomainModel
from customlinks.domain.model.link import Link
from customlinks.domain.model.user import User

__all__ = [
    "DomainModel",
    "Link",
    "User",
]
