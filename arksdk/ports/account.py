"""Account Port Interface.

Contract: Sign and submit a batch of calls as one atomic multicall transaction.
"""

from __future__ import annotations

from typing import Protocol, Sequence

from arksdk.types.types import ContractCall


class AccountPort(Protocol):
    @property
    def address(self) -> int: ...

    async def execute(self, calls: Sequence[ContractCall]) -> str:
        """Submit `calls` as a single transaction and return its hash (hex)."""
        ...
