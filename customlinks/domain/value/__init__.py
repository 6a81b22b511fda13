"""Domain value objects for custom links."""

from customlinks.domain.value.identifiers import UserId
from customlinks.domain.value.link_key import LinkKey
from customlinks.domain.value.types import AuthorizationPolicy, Target

__all__ = [
    "UserId",
    "LinkKey",
    "Target",
    "AuthorizationPolicy",
]
