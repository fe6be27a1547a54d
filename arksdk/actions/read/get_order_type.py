from __future__ import annotations

from dataclasses import dataclass

from arksdk.actions import calls
from arksdk.config.configs import Config
from arksdk.types.types import OrderHash, OrderType, decode_enum_variant


@dataclass(frozen=True, slots=True)
class GetOrderTypeParameters:
    order_hash: OrderHash


@dataclass(frozen=True, slots=True)
class OrderTypeResult:
    order_type: OrderType


async def get_order_type(config: Config, parameters: GetOrderTypeParameters) -> OrderTypeResult:
    response = await config.provider.call(
        calls.executor_query(config.executor_address, "get_order_type", parameters.order_hash)
    )
    return OrderTypeResult(order_type=decode_enum_variant(OrderType, response, "get_order_type"))
