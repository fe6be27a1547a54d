from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from arksdk.actions import calls
from arksdk.config.configs import TX_RETRY_INTERVAL_S, Config
from arksdk.ports.account import AccountPort
from arksdk.types.cairo import FeltLike, to_felt
from arksdk.types.types import CancelInfo, OrderHash, TransactionResult, optional_token_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CancelOrderParameters:
    account: AccountPort
    order_hash: OrderHash
    token_address: FeltLike
    token_id: Optional[int] = None
    wait_for_transaction: bool = True


async def cancel_order(config: Config, parameters: CancelOrderParameters) -> TransactionResult:
    """Cancel an open order owned by `parameters.account`; the executor marks it CancelledUser."""
    account = parameters.account
    chain_id = await config.provider.get_chain_id()
    info = CancelInfo(
        order_hash=parameters.order_hash,
        canceller=account.address,
        token_chain_id=chain_id,
        token_address=to_felt(parameters.token_address),
        token_id=optional_token_id(parameters.token_id),
    )

    transaction_hash = await account.execute([calls.cancel_order(config.executor_address, info)])

    if parameters.wait_for_transaction:
        await config.provider.wait_for_transaction(
            transaction_hash, retry_interval=TX_RETRY_INTERVAL_S
        )

    logger.info(
        "order_cancelled",
        extra={
            "event": "order_cancelled",
            "order_hash": hex(parameters.order_hash),
            "transaction_hash": transaction_hash,
        },
    )
    return TransactionResult(transaction_hash=transaction_hash)
