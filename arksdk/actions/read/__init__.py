from arksdk.actions.read.get_allowance import get_allowance
from arksdk.actions.read.get_order import GetOrderParameters, get_order
from arksdk.actions.read.get_order_status import (
    GetOrderStatusParameters,
    OrderStatusResult,
    get_order_status,
)
from arksdk.actions.read.get_order_type import (
    GetOrderTypeParameters,
    OrderTypeResult,
    get_order_type,
)

__all__ = [
    "get_allowance",
    "get_order",
    "get_order_status",
    "get_order_type",
    "GetOrderParameters",
    "GetOrderStatusParameters",
    "GetOrderTypeParameters",
    "OrderStatusResult",
    "OrderTypeResult",
]
