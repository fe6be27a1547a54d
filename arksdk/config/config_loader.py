"""
Purpose:
    - Loads a network config file (TOML)
    - Validate it into a NetworkConfig

Expected layout:

    [network]
    network = "sepolia"
    node_url = "https://..."
    executor_address = "0x..."
    currency_address = "0x..."   # optional
"""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from arksdk.config.configs import NetworkConfig
from arksdk.errors.errors import ConfigurationError

logger = logging.getLogger(__name__)


class ConfigLoader:
    """
    Config-loader; loading toml file.
    """

    def __init__(self, base_dir: str = ".") -> None:
        self._base_dir = base_dir

    def load(self, file_name: str) -> dict[str, Any]:
        path = Path(file_name)
        if not path.is_absolute():
            path = Path(self._base_dir) / file_name

        if not path.exists():
            raise ConfigurationError(f"Config file not found: {path}", field="path", value=path)

        with path.open("rb") as f:
            try:
                return tomllib.load(f)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigurationError(
                    f"Config file is not valid TOML: {exc}", field="path", value=path
                ) from exc

    def load_network_config(self, file_name: str) -> NetworkConfig:
        data = self.load(file_name)
        section = data.get("network")
        if not isinstance(section, dict):
            raise ConfigurationError("Missing [network] section", field="network")

        try:
            cfg = NetworkConfig(**section)
        except ValidationError as exc:
            first = exc.errors()[0]
            path = ".".join(str(p) for p in first.get("loc", ()))
            raise ConfigurationError(
                f"Invalid network config: {first.get('msg')}",
                field=path or None,
                details={"errors": len(exc.errors())},
            ) from exc

        logger.info(
            "config_loaded",
            extra={"event": "config_loaded", "network": cfg.network, "source": file_name},
        )
        return cfg
