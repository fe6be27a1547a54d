from __future__ import annotations

from dataclasses import dataclass

from arksdk.actions import calls
from arksdk.config.configs import Config
from arksdk.types.types import OrderHash, OrderStatus, decode_enum_variant


@dataclass(frozen=True, slots=True)
class GetOrderStatusParameters:
    order_hash: OrderHash


@dataclass(frozen=True, slots=True)
class OrderStatusResult:
    order_status: OrderStatus


async def get_order_status(
    config: Config, parameters: GetOrderStatusParameters
) -> OrderStatusResult:
    response = await config.provider.call(
        calls.executor_query(config.executor_address, "get_order_status", parameters.order_hash)
    )
    return OrderStatusResult(
        order_status=decode_enum_variant(OrderStatus, response, "get_order_status")
    )
