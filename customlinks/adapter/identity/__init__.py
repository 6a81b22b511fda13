"""Identity provider adapters."""

from .fixed import TestIdentityAdapter
from .google import GoogleIdentityAdapter
from .oauth import OAuthIdentityAdapter
from .openidconnect import OIDCIdentityAdapter
from .registry import assemble_adapters

__all__ = [
    "GoogleIdentityAdapter",
    "OAuthIdentityAdapter",
    "OIDCIdentityAdapter",
    "TestIdentityAdapter",
    "assemble_adapters",
]
