"""
Environment-backed secrets.

Account credentials are read from `ARK_SECRET_ACCOUNT_ADDRESS` and
`ARK_SECRET_ACCOUNT_PRIVATE_KEY` (prefix configurable). Values are never logged.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

from arksdk.ports.secrets_provider import SecretsProvider

logger = logging.getLogger(__name__)

# logical name -> environment variable suffix
ACCOUNT_SECRETS: dict[str, str] = {
    "account_address": "ACCOUNT_ADDRESS",
    "account_private_key": "ACCOUNT_PRIVATE_KEY",
}


class MissingSecretError(ValueError):
    """Unknown logical name, or its environment variable is unset or blank."""

    def __init__(self, secret_name: str, env_var: Optional[str] = None) -> None:
        super().__init__(secret_name)
        self.secret_name = secret_name
        self.env_var = env_var

    def __str__(self) -> str:
        if self.env_var:
            return f"Secret '{self.secret_name}' is unavailable (set {self.env_var})"
        return f"Secret '{self.secret_name}' is unavailable"


class EnvSecretsProvider(SecretsProvider):
    def __init__(
        self,
        prefix: str = "ARK_SECRET_",
        allowed: Optional[dict[str, str]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        if not prefix:
            raise ValueError("Environment prefix must be a non-empty string")
        self._prefix = prefix
        self._names = {**ACCOUNT_SECRETS, **(allowed or {})}
        self._environ = environ

    def env_var(self, secret_name: str) -> str:
        if secret_name not in self._names:
            raise MissingSecretError(secret_name)
        return f"{self._prefix}{self._names[secret_name]}"

    def get(self, secret_name: str) -> str:
        env_var = self.env_var(secret_name)
        environ = self._environ if self._environ is not None else os.environ
        value = environ.get(env_var, "").strip()
        if not value:
            raise MissingSecretError(secret_name, env_var)

        logger.debug(
            "secret_resolved",
            extra={"event": "secret_resolved", "secret_name": secret_name, "source": "env"},
        )
        return value
