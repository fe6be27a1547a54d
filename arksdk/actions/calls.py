"""
Builders for the contract entrypoints the SDK invokes.

Calldata shapes must match the deployed contracts exactly.
"""

from __future__ import annotations

from arksdk.types.cairo import U256
from arksdk.types.types import Address, CancelInfo, ContractCall, FulfillInfo, OrderHash, OrderV1


def approve_erc721(token_address: Address, to: Address, token_id: int) -> ContractCall:
    """`approve(to, token_id)` on an ERC-721 contract."""
    return ContractCall(
        contract_address=token_address,
        entrypoint="approve",
        calldata=(to, *U256.from_int(token_id).to_calldata()),
    )


def approve_erc20(currency_address: Address, spender: Address, amount: int) -> ContractCall:
    """`approve(spender, amount)` on an ERC-20 contract."""
    return ContractCall(
        contract_address=currency_address,
        entrypoint="approve",
        calldata=(spender, *U256.from_int(amount).to_calldata()),
    )


def create_order(executor_address: Address, order: OrderV1) -> ContractCall:
    return ContractCall(
        contract_address=executor_address,
        entrypoint="create_order",
        calldata=tuple(order.to_calldata()),
    )


def cancel_order(executor_address: Address, info: CancelInfo) -> ContractCall:
    return ContractCall(
        contract_address=executor_address,
        entrypoint="cancel_order",
        calldata=tuple(info.to_calldata()),
    )


def fulfill_order(executor_address: Address, info: FulfillInfo) -> ContractCall:
    return ContractCall(
        contract_address=executor_address,
        entrypoint="fulfill_order",
        calldata=tuple(info.to_calldata()),
    )


def allowance(currency_address: Address, owner: Address, spender: Address) -> ContractCall:
    return ContractCall(
        contract_address=currency_address,
        entrypoint="allowance",
        calldata=(owner, spender),
    )


def executor_query(executor_address: Address, entrypoint: str, order_hash: OrderHash) -> ContractCall:
    """Read-only executor lookups keyed by order hash (`get_order_status`, `get_order`, ...)."""
    return ContractCall(
        contract_address=executor_address,
        entrypoint=entrypoint,
        calldata=(order_hash,),
    )
