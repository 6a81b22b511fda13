"""Fixed-identity adapter for integration testing.

Logs in as whatever identifier the configured environment variable holds,
without talking to any provider.
"""

import os
from typing import Any, Mapping

import logfire

from customlinks.domain.service.auth_service import IdentityAdapter
from customlinks.util.error import ConfigurationError

FAIL_SENTINEL = "fail"


class TestIdentityAdapter(IdentityAdapter):
    """Adapter claiming the identity named by an environment variable.

    The variable is read on every login so tests can change it between
    requests. Setting it to ``fail`` forces an authentication failure.
    """

    __test__ = False  # Not a pytest test class

    name = "test"

    def __init__(self, variable: str = "CUSTOM_LINKS_TEST_AUTH") -> None:
        self.variable = variable

    def extract_claims(self, payload: Mapping[str, Any]) -> list[str]:
        """Return the configured identifier.

        Raises:
            ConfigurationError: If the environment variable is not set
        """
        user_id = os.environ.get(self.variable)
        if user_id is None:
            raise ConfigurationError(f"{self.variable} must be defined")

        if user_id == FAIL_SENTINEL:
            logfire.warn("Forced authentication failure", provider=self.name)
            return []
        return [user_id]
