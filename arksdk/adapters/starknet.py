"""
starknet-py adapters for the provider, account and clock ports.

Usage:
    async with FullNodeProvider.open("https://...") as provider:
        config = create_config(network, provider=provider)
        account = await StarknetAccount.from_key(provider, address, private_key)
        await create_listing(config, CreateListingParameters(account=account, ...))
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional, Sequence

import aiohttp
from starknet_py.hash.selector import get_selector_from_name
from starknet_py.net.account.account import Account
from starknet_py.net.client_models import Call
from starknet_py.net.full_node_client import FullNodeClient
from starknet_py.net.signer.stark_curve_signer import KeyPair

from arksdk.types.cairo import FeltLike, to_felt
from arksdk.types.types import ContractCall

logger = logging.getLogger(__name__)


def to_starknet_call(call: ContractCall) -> Call:
    return Call(
        to_addr=call.contract_address,
        selector=get_selector_from_name(call.entrypoint),
        calldata=list(call.calldata),
    )


class SystemClock:
    """Clock adapter that returns the current UTC time."""

    def now(self) -> datetime:
        """Return the current UTC timestamp."""
        return datetime.now(timezone.utc)


class FullNodeProvider:
    """
    StarknetProvider backed by a JSON-RPC full node.

    The aiohttp session is owned by the provider only when it was created
    through `open()`; a session passed in by the caller is left open.
    """

    def __init__(
        self,
        node_url: str,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> None:
        self._node_url = node_url
        self._session = session
        self._owns_session = False
        self._client = FullNodeClient(node_url=node_url, session=session)

    @classmethod
    def open(cls, node_url: str) -> "FullNodeProvider":
        provider = cls(node_url, session=aiohttp.ClientSession())
        provider._owns_session = True
        return provider

    @property
    def client(self) -> FullNodeClient:
        return self._client

    @property
    def node_url(self) -> str:
        return self._node_url

    async def close(self) -> None:
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> "FullNodeProvider":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def get_chain_id(self) -> int:
        chain_id = await self._client.get_chain_id()
        return to_felt(chain_id)

    async def call(self, call: ContractCall) -> list[int]:
        result = await self._client.call_contract(
            call=to_starknet_call(call), block_number="latest"
        )
        return list(result)

    async def wait_for_transaction(self, transaction_hash: str, retry_interval: float) -> None:
        logger.debug(f"Waiting for transaction {transaction_hash}")
        await self._client.wait_for_tx(
            tx_hash=to_felt(transaction_hash), check_interval=retry_interval
        )
        logger.info(
            "transaction_confirmed",
            extra={"event": "transaction_confirmed", "transaction_hash": transaction_hash},
        )


class StarknetAccount:
    """AccountPort backed by a starknet-py `Account` (stark-curve key pair)."""

    def __init__(self, account: Account) -> None:
        self._account = account

    @classmethod
    async def from_key(
        cls,
        provider: FullNodeProvider,
        address: FeltLike,
        private_key: FeltLike,
        chain_id: Optional[int] = None,
    ) -> "StarknetAccount":
        """Build a key-pair account; the signer needs a chain id, fetched from the node if omitted."""
        if chain_id is None:
            chain_id = await provider.get_chain_id()
        account = Account(
            address=to_felt(address),
            client=provider.client,
            key_pair=KeyPair.from_private_key(to_felt(private_key)),
            chain=chain_id,
        )
        return cls(account)

    @property
    def address(self) -> int:
        return self._account.address

    async def execute(self, calls: Sequence[ContractCall]) -> str:
        response = await self._account.execute_v3(
            calls=[to_starknet_call(c) for c in calls], auto_estimate=True
        )
        return hex(response.transaction_hash)
