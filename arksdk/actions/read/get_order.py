from __future__ import annotations

from dataclasses import dataclass

from arksdk.actions import calls
from arksdk.config.configs import Config
from arksdk.types.types import OrderHash, OrderV1


@dataclass(frozen=True, slots=True)
class GetOrderParameters:
    order_hash: OrderHash


async def get_order(config: Config, parameters: GetOrderParameters) -> OrderV1:
    """Fetch the stored order record; it hashes back to `parameters.order_hash`."""
    response = await config.provider.call(
        calls.executor_query(config.executor_address, "get_order", parameters.order_hash)
    )
    return OrderV1.from_calldata(response, entrypoint="get_order")
