"""Domain layer errors."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from customlinks.domain.value.link_key import LinkKey


class DomainError(Exception):
    """Base domain error."""

    pass


class LinkError(DomainError):
    """Base error for operations on a single link."""

    def __init__(self, key: "LinkKey", message: str):
        self.key = key
        super().__init__(message)


class NotFoundError(LinkError):
    """Raised when a link does not exist."""

    def __init__(self, key: "LinkKey"):
        super().__init__(key, f"{key.relative} does not exist")


class AlreadyExistsError(LinkError):
    """Raised when creating a link whose key is already taken."""

    def __init__(self, key: "LinkKey"):
        super().__init__(key, f"{key.relative} already exists")


class ForbiddenError(LinkError):
    """Raised when a user attempts to modify a link they don't own."""

    def __init__(self, key: "LinkKey", owner: str, user_id: str):
        self.owner = owner
        self.user_id = user_id
        super().__init__(key, f"{key.relative} is owned by {owner}")


class InvalidLinkError(LinkError):
    """Raised when the custom link itself is unusable."""

    def __init__(
        self, key: "LinkKey", message: str = "Custom link field must not be empty."
    ):
        super().__init__(key, message)


class ReservedLinkError(InvalidLinkError):
    """Raised when the custom link is a path the service answers itself."""

    def __init__(self, key: "LinkKey"):
        super().__init__(
            key, f"{key.relative} is reserved and cannot be used as a custom link."
        )


class InvalidTargetError(DomainError):
    """Base error for redirect target validation."""

    pass


class EmptyTargetError(InvalidTargetError):
    """Raised when the redirect target is empty or whitespace."""

    def __init__(self):
        super().__init__("Redirect location field must not be empty.")


class TargetProtocolError(InvalidTargetError):
    """Raised when the redirect target is not an absolute http(s) URL."""

    def __init__(self, target: str):
        self.target = target
        super().__init__("Redirect location protocol must be http:// or https://.")


class AccessDeniedError(DomainError):
    """Raised when a session or identity is not (or no longer) authorized."""

    pass
