"""Identifier types.

Users are identified by their verified, lowercased identifier (usually an
email address) rather than a generated key, so links can name their owner
directly.
"""

from typing import NewType

UserId = NewType("UserId", str)


def normalize_user_id(raw: str) -> UserId:
    """Lowercase and strip a raw identifier."""
    return UserId(raw.strip().lower())
