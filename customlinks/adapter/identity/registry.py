"""Identity adapter registry.

Adapters are looked up by provider name in a table built at import time;
an unknown name is a configuration error raised at startup.
"""

from typing import Callable, Sequence

import logfire

from customlinks.adapter.identity.fixed import TestIdentityAdapter
from customlinks.adapter.identity.google import GoogleIdentityAdapter
from customlinks.adapter.identity.openidconnect import OIDCIdentityAdapter
from customlinks.config import AuthSettings
from customlinks.domain.service.auth_service import IdentityAdapter
from customlinks.util.error import ConfigurationError

AdapterFactory = Callable[[AuthSettings], IdentityAdapter]

ADAPTER_FACTORIES: dict[str, AdapterFactory] = {
    TestIdentityAdapter.name: lambda auth: TestIdentityAdapter(
        auth.test_auth_variable
    ),
    GoogleIdentityAdapter.name: lambda auth: GoogleIdentityAdapter(auth.google),
    OIDCIdentityAdapter.name: lambda auth: OIDCIdentityAdapter(auth.oidc),
}


def assemble_adapters(
    provider_names: Sequence[str], auth_settings: AuthSettings
) -> dict[str, IdentityAdapter]:
    """Build the adapters for the configured providers, in order.

    Args:
        provider_names: Provider names from AUTH_PROVIDERS
        auth_settings: Authentication settings with provider credentials

    Returns:
        Map of provider name to adapter

    Raises:
        ConfigurationError: If a provider name is unknown
    """
    adapters: dict[str, IdentityAdapter] = {}
    for name in provider_names:
        factory = ADAPTER_FACTORIES.get(name)
        if factory is None:
            raise ConfigurationError(
                f"Failed to load {name} provider: unknown identity provider "
                f"module 'customlinks.adapter.identity.{name}'"
            )
        adapters[name] = factory(auth_settings)
        logfire.info("Identity provider registered", provider=name)
    return adapters
