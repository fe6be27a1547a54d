"""StarknetProvider Port Interface.

Contract: Read chain state and wait for transaction inclusion. Never signs.
"""

from __future__ import annotations

from typing import Protocol

from arksdk.types.types import ContractCall


class StarknetProvider(Protocol):
    async def get_chain_id(self) -> int:
        """Return the chain id of the connected network as a felt."""
        ...

    async def call(self, call: ContractCall) -> list[int]:
        """Execute a read-only contract call against the latest block."""
        ...

    async def wait_for_transaction(self, transaction_hash: str, retry_interval: float) -> None:
        """Block until the transaction is included; polling and timeout are provider-owned."""
        ...
