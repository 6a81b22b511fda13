"""Mappers for converting between database rows and domain models."""

from typing import Any, Dict

from customlinks.domain.model import Link, User
from customlinks.domain.value import LinkKey, Target, UserId


def row_to_link(row: Dict[str, Any]) -> Link:
    """Convert database row to Link domain model.

    Args:
        row: Database row as dict

    Returns:
        Link domain model
    """
    return Link(
        key=LinkKey(row["key"]),
        target=Target(row["target"]),
        owner=UserId(row["owner"]),
        clicks=row["clicks"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def link_to_dict(link: Link) -> Dict[str, Any]:
    """Convert Link domain model to database dict.

    Args:
        link: Link domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return link.model_dump()


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(id=UserId(row["id"]), created_at=row["created_at"])
