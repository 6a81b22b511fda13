"""Canonical link keys.

A link key is the storage form of a user-supplied custom link: every leading
slash is stripped and a single one is put back, so ``foo``, ``/foo`` and
``///foo`` all address ``/foo`` and the empty string addresses the root ``/``.
"""

from html import escape

from pydantic import field_validator

from customlinks.domain.value.common import RootValueObject

# Paths the application routes before link lookup, so links there never resolve
RESERVED_PATHS = frozenset({"/id", "/logout", "/health"})
RESERVED_PREFIXES = ("/api/", "/auth/")


class LinkKey(RootValueObject[str]):
    """Canonical, slash-prefixed link key."""

    @field_validator("root")
    @classmethod
    def validate_canonical(cls, v: str) -> str:
        """Only canonical keys may be constructed directly."""
        if not v.startswith("/") or v.startswith("//"):
            raise ValueError(f"Link key must start with a single '/': {v!r}")
        return v

    @classmethod
    def normalize(cls, raw: str | None) -> "LinkKey":
        """Canonicalize a raw custom link.

        Total over any string (and None): never raises.
        """
        return cls("/" + (raw or "").lstrip("/"))

    @property
    def trimmed(self) -> str:
        """Key without its leading slash."""
        return self.root[1:]

    @property
    def relative(self) -> str:
        """Site-relative path for this key."""
        return self.root

    @property
    def is_root(self) -> bool:
        return self.root == "/"

    @property
    def is_reserved(self) -> bool:
        return self.root in RESERVED_PATHS or self.root.startswith(RESERVED_PREFIXES)

    def full(self, origin: str) -> str:
        """Absolute URL for this key under the given site origin."""
        return origin.rstrip("/") + self.relative

    def anchor(self, origin: str) -> str:
        """HTML anchor pointing at the relative path, showing the full URL."""
        return "<a href='{}'>{}</a>".format(
            escape(self.relative, quote=True), escape(self.full(origin))
        )
