from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from arksdk.actions import calls
from arksdk.actions.order.validation import ensure_positive_amount, now_seconds, resolve_time_window
from arksdk.actions.read.get_allowance import get_allowance
from arksdk.config.configs import TX_RETRY_INTERVAL_S, Config
from arksdk.ports.account import AccountPort
from arksdk.types.cairo import FeltLike, U256, to_felt
from arksdk.types.types import (
    ORDER_QUANTITY,
    ORDER_SALT,
    CreateOrderResult,
    OrderV1,
    RouteType,
    UnixSeconds,
    optional_token_id,
)
from arksdk.utils.order_hash import get_order_hash_from_order_v1

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateOfferParameters:
    account: AccountPort
    broker_address: FeltLike
    token_address: FeltLike
    amount: int
    token_id: Optional[int] = None  # None: any token of the collection
    currency_address: Optional[FeltLike] = None
    start_date: Optional[UnixSeconds] = None
    end_date: Optional[UnixSeconds] = None
    wait_for_transaction: bool = True


async def create_offer(config: Config, parameters: CreateOfferParameters) -> CreateOrderResult:
    """
    Create an ERC-20 offer for an ERC-721 token.

    The currency approval is a top-up: the executor is approved for the
    current allowance plus `amount`, so concurrent open offers keep their
    share of the allowance.
    """
    now = now_seconds(config.clock)
    started_at, ended_at = resolve_time_window(now, parameters.start_date, parameters.end_date)
    ensure_positive_amount(parameters.amount)

    currency_address = (
        to_felt(parameters.currency_address)
        if parameters.currency_address is not None
        else config.currency_address
    )
    account = parameters.account

    chain_id = await config.provider.get_chain_id()
    current_allowance = await get_allowance(config, currency_address, account.address)
    allowance = current_allowance + parameters.amount

    order = OrderV1(
        route=RouteType.ERC20_TO_ERC721,
        currency_address=currency_address,
        currency_chain_id=chain_id,
        salt=ORDER_SALT,
        offerer=account.address,
        token_chain_id=chain_id,
        token_address=to_felt(parameters.token_address),
        token_id=optional_token_id(parameters.token_id),
        quantity=U256.from_int(ORDER_QUANTITY),
        start_amount=U256.from_int(parameters.amount),
        end_amount=U256.from_int(0),
        start_date=started_at,
        end_date=ended_at,
        broker_id=to_felt(parameters.broker_address),
    )

    transaction_hash = await account.execute(
        [
            calls.approve_erc20(currency_address, config.executor_address, allowance),
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
            "order_kind": "offer",
            "order_hash": hex(order_hash),
            "transaction_hash": transaction_hash,
            "allowance": allowance,
        },
    )
    return CreateOrderResult(order_hash=order_hash, transaction_hash=transaction_hash)
