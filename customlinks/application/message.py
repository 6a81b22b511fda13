"""Human-readable outcome messages for link operations.

Every message is a single sentence ready for display. Messages that point at
a link the user can still visit render it as an anchor; messages about a
link that is gone (or never existed) use its plain full URL.
Every value interpolated into a message is HTML-escaped.
"""

from html import escape

from customlinks.domain.error import (
    AlreadyExistsError,
    DomainError,
    ForbiddenError,
    NotFoundError,
)
from customlinks.domain.value import LinkKey


def created(key: LinkKey, target: str, origin: str) -> str:
    return f"{key.anchor(origin)} now redirects to {escape(target)}"


def target_updated(key: LinkKey, target: str, origin: str) -> str:
    return f"{key.anchor(origin)} now redirects to {escape(target)}"


def target_unchanged(key: LinkKey, target: str, origin: str) -> str:
    return (
        f"{key.anchor(origin)} already redirects to {escape(target)}; "
        "the target remains the same"
    )


def owner_changed(key: LinkKey, owner: str, origin: str) -> str:
    return f"{key.anchor(origin)} is now owned by {escape(owner)}"


def owner_unchanged(key: LinkKey, owner: str, origin: str) -> str:
    return (
        f"{key.anchor(origin)} is already owned by {escape(owner)}; "
        "the owner remains the same"
    )


def deleted(key: LinkKey, origin: str) -> str:
    return f"{escape(key.full(origin))} has been deleted"


def server_error(
    key: LinkKey, verb: str, origin: str, status_text: str | None = None
) -> str:
    """Generic backend failure message.

    Args:
        key: Link the operation was for
        verb: Past participle of the failed operation ("created", "deleted")
        origin: Site origin
        status_text: Optional short status to append

    Returns:
        Message that doesn't leak backend details
    """
    message = f"A server error occurred; {escape(key.full(origin))} wasn't {verb}"
    if status_text:
        message = f"{message}: {escape(status_text)}"
    return message


def describe_error(error: DomainError, origin: str) -> str:
    """Render a domain error as a message for the user.

    Link errors are re-rendered against the site origin; other errors
    already carry their display text.
    """
    if isinstance(error, NotFoundError):
        return f"{escape(error.key.full(origin))} does not exist"
    if isinstance(error, AlreadyExistsError):
        return f"{error.key.anchor(origin)} already exists"
    if isinstance(error, ForbiddenError):
        return f"{error.key.anchor(origin)} is owned by {escape(error.owner)}"
    return escape(str(error))
