from __future__ import annotations

from arksdk.actions import calls
from arksdk.config.configs import Config
from arksdk.errors.errors import ContractResponseError
from arksdk.types.cairo import CalldataReader, FeltLike, to_felt


async def get_allowance(config: Config, currency_address: FeltLike, owner: FeltLike) -> int:
    """Current ERC-20 allowance granted by `owner` to the executor contract."""
    call = calls.allowance(to_felt(currency_address), to_felt(owner), config.executor_address)
    response = await config.provider.call(call)
    if len(response) != 2:
        raise ContractResponseError(
            f"Expected a u256 allowance, got {len(response)} felts",
            entrypoint="allowance",
            response=response,
        )
    return int(CalldataReader(response, entrypoint="allowance").u256())
