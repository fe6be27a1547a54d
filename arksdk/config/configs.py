from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from arksdk.adapters.starknet import FullNodeProvider, SystemClock
from arksdk.errors.errors import InvalidFeltError
from arksdk.ports.clock import Clock
from arksdk.ports.provider import StarknetProvider
from arksdk.types.cairo import to_felt

"""
Here, we collect the SDK configuration
"""

# ETH ERC-20 token; same address on mainnet and sepolia.
STARKNET_ETH_CONTRACT = 0x049D36570D4E46F48E99674BD3FCC84644DDD6B96F7C741B1562B82F9E004DC7

SECONDS_PER_DAY = 60 * 60 * 24
DEFAULT_ORDER_DURATION_S = SECONDS_PER_DAY
MAX_ORDER_DURATION_S = 30 * SECONDS_PER_DAY
TX_RETRY_INTERVAL_S = 1.0

Network = Literal["mainnet", "sepolia", "dev"]


class NetworkConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    network: Network = Field(default="sepolia", description="Target network")
    node_url: str = Field(description="JSON-RPC endpoint of a Starknet full node")
    executor_address: int = Field(description="Marketplace executor contract")
    currency_address: int = Field(
        default=STARKNET_ETH_CONTRACT, description="Default order currency (ERC-20)"
    )

    @field_validator("executor_address", "currency_address", mode="before")
    @classmethod
    def _normalise_address(cls, value: object) -> int:
        try:
            return to_felt(value)  # type: ignore[arg-type]
        except InvalidFeltError as exc:
            # pydantic collects ValueError into a ValidationError
            raise ValueError(str(exc)) from exc

    @field_validator("node_url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("node_url must be an http(s) URL")
        return value


@dataclass(frozen=True)
class Config:
    """
    Immutable handle passed explicitly to every operation.

    Safe to share between concurrent calls: nothing here is mutated after
    construction.
    """

    network: NetworkConfig
    provider: StarknetProvider
    clock: Clock = field(default_factory=SystemClock)

    @property
    def executor_address(self) -> int:
        return self.network.executor_address

    @property
    def currency_address(self) -> int:
        return self.network.currency_address


def create_config(
    network: NetworkConfig,
    provider: Optional[StarknetProvider] = None,
    clock: Optional[Clock] = None,
) -> Config:
    """Build a Config, connecting to `network.node_url` unless a provider is supplied."""
    return Config(
        network=network,
        provider=provider if provider is not None else FullNodeProvider(network.node_url),
        clock=clock if clock is not None else SystemClock(),
    )
