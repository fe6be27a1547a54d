"""
Ark marketplace SDK for Starknet.

Builds orders (listings, offers, auctions), derives their hashes, submits
them through an account and reads order state back from the executor.

Usage:
    from arksdk import CreateListingParameters, NetworkConfig, create_config, create_listing

    config = create_config(NetworkConfig(node_url=..., executor_address=...))
    result = await create_listing(
        config,
        CreateListingParameters(
            account=account,
            broker_address=broker,
            token_address=collection,
            token_id=1,
            amount=10**16,
        ),
    )
"""

from arksdk.actions.order import (
    CancelOrderParameters,
    CreateAuctionParameters,
    CreateListingParameters,
    CreateOfferParameters,
    FulfillListingParameters,
    FulfillOfferParameters,
    cancel_order,
    create_auction,
    create_listing,
    create_offer,
    fulfill_listing,
    fulfill_offer,
)
from arksdk.actions.read import (
    GetOrderParameters,
    GetOrderStatusParameters,
    GetOrderTypeParameters,
    get_allowance,
    get_order,
    get_order_status,
    get_order_type,
)
from arksdk.config.configs import Config, NetworkConfig, create_config
from arksdk.errors.errors import (
    ArkError,
    ConfigurationError,
    EndDateTooFarError,
    InvalidAmountError,
    InvalidEndAmountError,
    InvalidEndDateError,
    InvalidStartDateError,
    OrderValidationError,
)
from arksdk.types.types import CreateOrderResult, OrderStatus, OrderType, OrderV1, RouteType
from arksdk.utils.order_hash import get_order_hash_from_order_v1

__version__ = "0.1.0"

__all__ = [
    # Orders
    "create_listing",
    "create_offer",
    "create_auction",
    "cancel_order",
    "fulfill_listing",
    "fulfill_offer",
    "CreateListingParameters",
    "CreateOfferParameters",
    "CreateAuctionParameters",
    "CancelOrderParameters",
    "FulfillListingParameters",
    "FulfillOfferParameters",
    # Reads
    "get_allowance",
    "get_order",
    "get_order_status",
    "get_order_type",
    "GetOrderParameters",
    "GetOrderStatusParameters",
    "GetOrderTypeParameters",
    # Config
    "Config",
    "NetworkConfig",
    "create_config",
    # Types
    "CreateOrderResult",
    "OrderStatus",
    "OrderType",
    "OrderV1",
    "RouteType",
    "get_order_hash_from_order_v1",
    # Errors
    "ArkError",
    "ConfigurationError",
    "OrderValidationError",
    "InvalidStartDateError",
    "InvalidEndDateError",
    "EndDateTooFarError",
    "InvalidAmountError",
    "InvalidEndAmountError",
]
