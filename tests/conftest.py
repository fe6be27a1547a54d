"""
Shared fixtures: an in-memory marketplace standing in for the provider and
the deployed contracts, a recording account and a fixed clock.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Sequence

import pytest

from arksdk.config.configs import Config, NetworkConfig
from arksdk.types.cairo import U256, encode_short_string
from arksdk.types.types import ContractCall, OrderStatus, OrderType, OrderV1, RouteType
from arksdk.utils.order_hash import get_order_hash_from_order_v1

NOW = 1_700_000_000
EXECUTOR = 0xE7EC
CURRENCY = 0xC0FFEE
COLLECTION = 0xC011
SELLER = 0x5E11
BUYER = 0xB0B
BROKER = 0xB20CE2
CHAIN_ID = encode_short_string("SN_SEPOLIA")


class FakeContractError(Exception):
    """Mirrors a contract panic."""


class FixedClock:
    def __init__(self, ts: int = NOW) -> None:
        self.ts = ts

    def now(self) -> datetime:
        return datetime.fromtimestamp(self.ts, tz=timezone.utc)


@dataclass
class FakeMarketplace:
    """StarknetProvider double that also executes the calls an account submits."""

    chain_id: int = CHAIN_ID
    executor: int = EXECUTOR
    currencies: set[int] = field(default_factory=lambda: {CURRENCY})
    allowances: dict[tuple[int, int, int], int] = field(default_factory=dict)
    token_approvals: dict[tuple[int, int], int] = field(default_factory=dict)
    orders: dict[int, OrderV1] = field(default_factory=dict)
    statuses: dict[int, OrderStatus] = field(default_factory=dict)
    reads: list[ContractCall] = field(default_factory=list)
    waited: list[tuple[str, float]] = field(default_factory=list)
    chain_id_calls: int = 0

    # --- provider port ---

    async def get_chain_id(self) -> int:
        self.chain_id_calls += 1
        return self.chain_id

    async def call(self, call: ContractCall) -> list[int]:
        self.reads.append(call)
        if call.entrypoint == "allowance":
            owner, spender = call.calldata
            value = self.allowances.get((call.contract_address, owner, spender), 0)
            return U256.from_int(value).to_calldata()

        order_hash = call.calldata[0]
        if order_hash not in self.orders:
            raise FakeContractError(f"order {order_hash:#x} not found")
        if call.entrypoint == "get_order_status":
            return [list(OrderStatus).index(self.statuses[order_hash])]
        if call.entrypoint == "get_order_type":
            return [list(OrderType).index(self._order_type(self.orders[order_hash]))]
        if call.entrypoint == "get_order":
            return self.orders[order_hash].to_calldata()
        raise FakeContractError(f"unknown entrypoint {call.entrypoint}")

    async def wait_for_transaction(self, transaction_hash: str, retry_interval: float) -> None:
        self.waited.append((transaction_hash, retry_interval))

    # --- contract behaviour ---

    def apply(self, caller: int, calls: Sequence[ContractCall]) -> None:
        for call in calls:
            if call.entrypoint == "approve":
                spender, low, high = call.calldata
                amount = int(U256(low=low, high=high))
                if call.contract_address in self.currencies:
                    self.allowances[(call.contract_address, caller, spender)] = amount
                else:
                    self.token_approvals[(call.contract_address, amount)] = spender
            elif call.entrypoint == "create_order":
                order = OrderV1.from_calldata(list(call.calldata), entrypoint="create_order")
                self._order_type(order)
                order_hash = get_order_hash_from_order_v1(order)
                self.orders[order_hash] = order
                self.statuses[order_hash] = OrderStatus.OPEN
            elif call.entrypoint == "cancel_order":
                order_hash, canceller = call.calldata[0], call.calldata[1]
                if self.orders[order_hash].offerer != canceller:
                    raise FakeContractError("only the offerer can cancel")
                self.statuses[order_hash] = OrderStatus.CANCELLED_USER
            elif call.entrypoint == "fulfill_order":
                self.statuses[call.calldata[0]] = OrderStatus.FULFILLED
            else:
                raise FakeContractError(f"unknown entrypoint {call.entrypoint}")

    @staticmethod
    def _order_type(order: OrderV1) -> OrderType:
        if order.route == RouteType.ERC20_TO_ERC721:
            return OrderType.OFFER if order.token_id.is_some else OrderType.COLLECTION_OFFER
        end_amount = int(order.end_amount)
        if end_amount == 0:
            return OrderType.LISTING
        if end_amount > int(order.start_amount):
            return OrderType.AUCTION
        raise FakeContractError("auction end amount must exceed its start amount")


class FakeAccount:
    """AccountPort double: records every multicall and runs it on the marketplace."""

    def __init__(self, address: int, marketplace: FakeMarketplace) -> None:
        self._address = address
        self._marketplace = marketplace
        self.batches: list[list[ContractCall]] = []

    @property
    def address(self) -> int:
        return self._address

    async def execute(self, calls: Sequence[ContractCall]) -> str:
        self.batches.append(list(calls))
        self._marketplace.apply(self._address, calls)
        return hex(0x7000 + len(self.batches))


@pytest.fixture
def marketplace() -> FakeMarketplace:
    return FakeMarketplace()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def network() -> NetworkConfig:
    return NetworkConfig(
        network="dev",
        node_url="http://localhost:5050",
        executor_address=hex(EXECUTOR),
        currency_address=hex(CURRENCY),
    )


@pytest.fixture
def config(network: NetworkConfig, marketplace: FakeMarketplace, clock: FixedClock) -> Config:
    return Config(network=network, provider=marketplace, clock=clock)


@pytest.fixture
def seller(marketplace: FakeMarketplace) -> FakeAccount:
    return FakeAccount(SELLER, marketplace)


@pytest.fixture
def buyer(marketplace: FakeMarketplace) -> FakeAccount:
    return FakeAccount(BUYER, marketplace)
