"""Identity provider adapters."""

from dishka import Scope, provide

from customlinks.adapter.identity import assemble_adapters
from customlinks.config import AuthSettings
from customlinks.domain.service import IdentityAdapter
from customlinks.util.di.base import ProviderBase


class IdentityAdapterProvider(ProviderBase):
    """Provider assembling the adapters named in AUTH_PROVIDERS."""

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_identity_adapters(
        self, auth_settings: AuthSettings
    ) -> dict[str, IdentityAdapter]:
        """Provide adapters keyed by provider name.

        Raises:
            ConfigurationError: If a provider name is unknown
        """
        return assemble_adapters(auth_settings.providers, auth_settings)
