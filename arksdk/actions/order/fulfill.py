"""
Fulfilment of open orders by a counterparty.

- fulfill_listing: buyer tops up the currency allowance, then fulfils.
- fulfill_offer: token owner approves the token, then fulfils.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from arksdk.actions import calls
from arksdk.actions.order.validation import ensure_positive_amount
from arksdk.actions.read.get_allowance import get_allowance
from arksdk.config.configs import TX_RETRY_INTERVAL_S, Config
from arksdk.ports.account import AccountPort
from arksdk.types.cairo import CairoOption, FeltLike, U256, to_felt
from arksdk.types.types import ContractCall, FulfillInfo, OrderHash, TransactionResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FulfillListingParameters:
    account: AccountPort
    order_hash: OrderHash
    token_address: FeltLike
    token_id: int
    amount: int
    broker_address: FeltLike
    currency_address: Optional[FeltLike] = None
    wait_for_transaction: bool = True


@dataclass(frozen=True)
class FulfillOfferParameters:
    account: AccountPort
    order_hash: OrderHash
    token_address: FeltLike
    token_id: int
    broker_address: FeltLike
    wait_for_transaction: bool = True


async def fulfill_listing(
    config: Config, parameters: FulfillListingParameters
) -> TransactionResult:
    ensure_positive_amount(parameters.amount)
    account = parameters.account
    currency_address = (
        to_felt(parameters.currency_address)
        if parameters.currency_address is not None
        else config.currency_address
    )

    chain_id = await config.provider.get_chain_id()
    current_allowance = await get_allowance(config, currency_address, account.address)
    info = FulfillInfo(
        order_hash=parameters.order_hash,
        related_order_hash=CairoOption.none(),
        fulfiller=account.address,
        token_chain_id=chain_id,
        token_address=to_felt(parameters.token_address),
        token_id=CairoOption.some(U256.from_int(parameters.token_id)),
        fulfill_broker_address=to_felt(parameters.broker_address),
    )
    return await _submit(
        config,
        account,
        [
            calls.approve_erc20(
                currency_address, config.executor_address, current_allowance + parameters.amount
            ),
            calls.fulfill_order(config.executor_address, info),
        ],
        order_hash=parameters.order_hash,
        wait=parameters.wait_for_transaction,
    )


async def fulfill_offer(config: Config, parameters: FulfillOfferParameters) -> TransactionResult:
    account = parameters.account
    token_address = to_felt(parameters.token_address)

    chain_id = await config.provider.get_chain_id()
    info = FulfillInfo(
        order_hash=parameters.order_hash,
        related_order_hash=CairoOption.none(),
        fulfiller=account.address,
        token_chain_id=chain_id,
        token_address=token_address,
        token_id=CairoOption.some(U256.from_int(parameters.token_id)),
        fulfill_broker_address=to_felt(parameters.broker_address),
    )
    return await _submit(
        config,
        account,
        [
            calls.approve_erc721(token_address, config.executor_address, parameters.token_id),
            calls.fulfill_order(config.executor_address, info),
        ],
        order_hash=parameters.order_hash,
        wait=parameters.wait_for_transaction,
    )


async def _submit(
    config: Config,
    account: AccountPort,
    batch: list[ContractCall],
    *,
    order_hash: OrderHash,
    wait: bool,
) -> TransactionResult:
    transaction_hash = await account.execute(batch)
    if wait:
        await config.provider.wait_for_transaction(
            transaction_hash, retry_interval=TX_RETRY_INTERVAL_S
        )
    logger.info(
        "order_fulfilled",
        extra={
            "event": "order_fulfilled",
            "order_hash": hex(order_hash),
            "transaction_hash": transaction_hash,
        },
    )
    return TransactionResult(transaction_hash=transaction_hash)
