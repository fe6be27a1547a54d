from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from arksdk.actions import calls
from arksdk.actions.order.validation import ensure_positive_amount, now_seconds, resolve_time_window
from arksdk.config.configs import TX_RETRY_INTERVAL_S, Config
from arksdk.ports.account import AccountPort
from arksdk.types.cairo import CairoOption, FeltLike, U256, to_felt
from arksdk.types.types import (
    ORDER_QUANTITY,
    ORDER_SALT,
    CreateOrderResult,
    OrderV1,
    RouteType,
    UnixSeconds,
)
from arksdk.utils.order_hash import get_order_hash_from_order_v1

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateListingParameters:
    account: AccountPort
    broker_address: FeltLike
    token_address: FeltLike
    token_id: int
    amount: int
    currency_address: Optional[FeltLike] = None
    start_date: Optional[UnixSeconds] = None
    end_date: Optional[UnixSeconds] = None
    wait_for_transaction: bool = True


async def create_listing(
    config: Config, parameters: CreateListingParameters
) -> CreateOrderResult:
    """
    Create a fixed-price listing of a single ERC-721 token.

    Builds the OrderV1 with defaults for unspecified fields, then submits
    `approve(executor, token_id)` and `create_order(order)` as one multicall.

    Args:
        config: SDK config (provider, executor and default currency).
        parameters: Listing details; `amount` is the asking price.

    Returns:
        The locally derived order hash and the submitted transaction hash.
    """
    now = now_seconds(config.clock)
    started_at, ended_at = resolve_time_window(now, parameters.start_date, parameters.end_date)
    ensure_positive_amount(parameters.amount)

    currency_address = (
        to_felt(parameters.currency_address)
        if parameters.currency_address is not None
        else config.currency_address
    )
    token_address = to_felt(parameters.token_address)
    account = parameters.account

    chain_id = await config.provider.get_chain_id()
    order = OrderV1(
        route=RouteType.ERC721_TO_ERC20,
        currency_address=currency_address,
        currency_chain_id=chain_id,
        salt=ORDER_SALT,
        offerer=account.address,
        token_chain_id=chain_id,
        token_address=token_address,
        token_id=CairoOption.some(U256.from_int(parameters.token_id)),
        quantity=U256.from_int(ORDER_QUANTITY),
        start_amount=U256.from_int(parameters.amount),
        end_amount=U256.from_int(0),
        start_date=started_at,
        end_date=ended_at,
        broker_id=to_felt(parameters.broker_address),
    )

    transaction_hash = await account.execute(
        [
            calls.approve_erc721(token_address, config.executor_address, parameters.token_id),
            calls.create_order(config.executor_address, order),
        ]
    )

    if parameters.wait_for_transaction:
        await config.provider.wait_for_transaction(
            transaction_hash, retry_interval=TX_RETRY_INTERVAL_S
        )

    order_hash = get_order_hash_from_order_v1(order)
    logger.info(
        "order_submitted",
        extra={
            "event": "order_submitted",
            "order_kind": "listing",
            "order_hash": hex(order_hash),
            "transaction_hash": transaction_hash,
        },
    )
    return CreateOrderResult(order_hash=order_hash, transaction_hash=transaction_hash)
