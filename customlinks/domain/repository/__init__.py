"""Repository interfaces for custom links.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from customlinks.domain.repository.link import LinkRepository
from customlinks.domain.repository.user import UserRepository

__all__ = [
    "LinkRepository",
    "UserRepository",
]
