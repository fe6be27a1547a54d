"""
define canonical types
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional, TypeVar

from arksdk.errors.errors import ContractResponseError, InvalidFeltError
from arksdk.types.cairo import CairoOption, CalldataReader, Felt, U256

# -------- Aliases (clarify intent) --------
UnixSeconds = int
Address = Felt
ChainId = Felt
OrderHash = Felt

ORDER_SALT = 1
ORDER_QUANTITY = 1

# -------- Enums --------


class RouteType(IntEnum):
    """Direction of exchange; values are the Cairo enum variant indices."""

    ERC20_TO_ERC721 = 0  # offers
    ERC721_TO_ERC20 = 1  # listings, auctions


class OrderStatus(str, Enum):
    """Executor order status, in Cairo variant order."""

    OPEN = "Open"
    FULFILLED = "Fulfilled"
    EXECUTED = "Executed"
    CANCELLED_USER = "CancelledUser"
    CANCELLED_BY_NEW_ORDER = "CancelledByNewOrder"
    CANCELLED_ASSET_FAULT = "CancelledAssetFault"
    CANCELLED_OWNERSHIP = "CancelledOwnership"

    @property
    def is_cancelled(self) -> bool:
        return self.value.startswith("Cancelled")


class OrderType(str, Enum):
    LISTING = "Listing"
    AUCTION = "Auction"
    OFFER = "Offer"
    COLLECTION_OFFER = "CollectionOffer"


E = TypeVar("E", bound=Enum)


def decode_enum_variant(enum_cls: type[E], response: list[Felt], entrypoint: str) -> E:
    """Map a serialised Cairo enum (variant index, declaration order) onto `enum_cls`."""
    members = list(enum_cls)
    if not response:
        raise ContractResponseError(
            f"Empty {enum_cls.__name__} response", entrypoint=entrypoint, response=response
        )
    index = response[0]
    if index >= len(members):
        raise ContractResponseError(
            f"Unknown {enum_cls.__name__} variant {index}",
            entrypoint=entrypoint,
            response=response,
        )
    return members[index]


# -------- Contract calls --------


@dataclass(frozen=True, slots=True)
class ContractCall:
    """A single invocation inside a multicall, independent of the transport library."""

    contract_address: Address
    entrypoint: str
    calldata: tuple[Felt, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class TransactionResult:
    transaction_hash: str


@dataclass(frozen=True, slots=True)
class CreateOrderResult:
    order_hash: OrderHash
    transaction_hash: str


# -------- Orders --------


@dataclass(frozen=True)
class OrderV1:
    """
    Versioned order record submitted to `create_order`.

    Field order is the Cairo struct order; `to_calldata` and the order hash
    both depend on it.
    """

    route: RouteType
    currency_address: Address
    currency_chain_id: ChainId
    salt: Felt
    offerer: Address
    token_chain_id: ChainId
    token_address: Address
    token_id: CairoOption[U256]
    quantity: U256
    start_amount: U256
    end_amount: U256
    start_date: UnixSeconds
    end_date: UnixSeconds
    broker_id: Address
    additional_data: tuple[Felt, ...] = ()

    def __post_init__(self) -> None:
        if self.start_date > self.end_date:
            raise ValueError("OrderV1.start_date must be <= end_date.")

    def to_calldata(self) -> list[Felt]:
        return [
            int(self.route),
            self.currency_address,
            self.currency_chain_id,
            self.salt,
            self.offerer,
            self.token_chain_id,
            self.token_address,
            *self.token_id.to_calldata(),
            *self.quantity.to_calldata(),
            *self.start_amount.to_calldata(),
            *self.end_amount.to_calldata(),
            self.start_date,
            self.end_date,
            self.broker_id,
            len(self.additional_data),
            *self.additional_data,
        ]

    @classmethod
    def from_calldata(cls, data: list[Felt], entrypoint: str = "get_order") -> "OrderV1":
        reader = CalldataReader(data, entrypoint=entrypoint)
        route_index = reader.felt()
        try:
            route = RouteType(route_index)
        except ValueError as exc:
            raise ContractResponseError(
                f"Unknown route variant {route_index}", entrypoint=entrypoint, response=data
            ) from exc
        try:
            order = cls(
                route=route,
                currency_address=reader.felt(),
                currency_chain_id=reader.felt(),
                salt=reader.felt(),
                offerer=reader.felt(),
                token_chain_id=reader.felt(),
                token_address=reader.felt(),
                token_id=reader.option(reader.u256),
                quantity=reader.u256(),
                start_amount=reader.u256(),
                end_amount=reader.u256(),
                start_date=reader.felt(),
                end_date=reader.felt(),
                broker_id=reader.felt(),
                additional_data=reader.span(),
            )
        except (ValueError, InvalidFeltError) as exc:
            raise ContractResponseError(
                f"Malformed order: {exc}", entrypoint=entrypoint, response=data
            ) from exc
        if reader.remaining:
            raise ContractResponseError(
                f"{reader.remaining} trailing felts after order", entrypoint=entrypoint, response=data
            )
        return order


@dataclass(frozen=True, slots=True)
class CancelInfo:
    order_hash: OrderHash
    canceller: Address
    token_chain_id: ChainId
    token_address: Address
    token_id: CairoOption[U256]

    def to_calldata(self) -> list[Felt]:
        return [
            self.order_hash,
            self.canceller,
            self.token_chain_id,
            self.token_address,
            *self.token_id.to_calldata(),
        ]


@dataclass(frozen=True, slots=True)
class FulfillInfo:
    order_hash: OrderHash
    related_order_hash: CairoOption[Felt]
    fulfiller: Address
    token_chain_id: ChainId
    token_address: Address
    token_id: CairoOption[U256]
    fulfill_broker_address: Address

    def to_calldata(self) -> list[Felt]:
        return [
            self.order_hash,
            *self.related_order_hash.to_calldata(),
            self.fulfiller,
            self.token_chain_id,
            self.token_address,
            *self.token_id.to_calldata(),
            self.fulfill_broker_address,
        ]


def optional_token_id(token_id: Optional[int]) -> CairoOption[U256]:
    """`None` means "any token"; it is encoded as Option::None, never as zero."""
    if token_id is None:
        return CairoOption.none()
    return CairoOption.some(U256.from_int(token_id))
