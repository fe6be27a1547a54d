"""
Unit tests for order records and their calldata layout.
"""

import pytest

from arksdk.errors.errors import ContractResponseError
from arksdk.types.cairo import CairoOption, U256
from arksdk.types.types import (
    CancelInfo,
    FulfillInfo,
    OrderStatus,
    OrderType,
    OrderV1,
    RouteType,
    decode_enum_variant,
    optional_token_id,
)


def make_order(**overrides) -> OrderV1:
    fields = dict(
        route=RouteType.ERC721_TO_ERC20,
        currency_address=0xC0FFEE,
        currency_chain_id=0x534E,
        salt=1,
        offerer=0x5E11,
        token_chain_id=0x534E,
        token_address=0xC011,
        token_id=CairoOption.some(U256.from_int(7)),
        quantity=U256.from_int(1),
        start_amount=U256.from_int(100),
        end_amount=U256.from_int(0),
        start_date=1_000,
        end_date=2_000,
        broker_id=0xB20CE2,
    )
    fields.update(overrides)
    return OrderV1(**fields)


class TestOrderV1:
    def test_calldata_layout(self) -> None:
        assert make_order().to_calldata() == [
            1,  # route Erc721ToErc20
            0xC0FFEE,
            0x534E,
            1,
            0x5E11,
            0x534E,
            0xC011,
            0, 7, 0,  # Some(u256 7)
            1, 0,
            100, 0,
            0, 0,
            1_000,
            2_000,
            0xB20CE2,
            0,  # empty additional_data
        ]

    def test_none_token_id_layout(self) -> None:
        order = make_order(route=RouteType.ERC20_TO_ERC721, token_id=CairoOption.none())
        data = order.to_calldata()
        assert data[0] == 0
        assert data[7] == 1
        assert len(data) == len(make_order().to_calldata()) - 2

    def test_from_calldata_restores_order(self) -> None:
        order = make_order(token_id=CairoOption.none(), additional_data=(5, 6))
        assert OrderV1.from_calldata(order.to_calldata()) == order

    def test_from_calldata_rejects_trailing_data(self) -> None:
        with pytest.raises(ContractResponseError):
            OrderV1.from_calldata(make_order().to_calldata() + [9])

    def test_from_calldata_rejects_unknown_route(self) -> None:
        data = make_order().to_calldata()
        data[0] = 4
        with pytest.raises(ContractResponseError):
            OrderV1.from_calldata(data)

    def test_start_after_end_rejected(self) -> None:
        with pytest.raises(ValueError):
            make_order(start_date=3_000, end_date=2_000)

    def test_from_calldata_inverted_window_is_response_error(self) -> None:
        data = make_order().to_calldata()
        data[16], data[17] = 300, 200
        with pytest.raises(ContractResponseError) as exc_info:
            OrderV1.from_calldata(data)
        assert exc_info.value.entrypoint == "get_order"

    def test_from_calldata_oversized_u256_limb_is_response_error(self) -> None:
        data = make_order().to_calldata()
        data[12] = 2**128
        with pytest.raises(ContractResponseError):
            OrderV1.from_calldata(data)


class TestInfoRecords:
    def test_cancel_info_layout(self) -> None:
        info = CancelInfo(
            order_hash=0xAA,
            canceller=0x5E11,
            token_chain_id=0x534E,
            token_address=0xC011,
            token_id=optional_token_id(7),
        )
        assert info.to_calldata() == [0xAA, 0x5E11, 0x534E, 0xC011, 0, 7, 0]

    def test_fulfill_info_layout(self) -> None:
        info = FulfillInfo(
            order_hash=0xAA,
            related_order_hash=CairoOption.none(),
            fulfiller=0xB0B,
            token_chain_id=0x534E,
            token_address=0xC011,
            token_id=optional_token_id(None),
            fulfill_broker_address=0xB20CE2,
        )
        assert info.to_calldata() == [0xAA, 1, 0xB0B, 0x534E, 0xC011, 1, 0xB20CE2]


class TestEnumDecoding:
    def test_order_status_variants(self) -> None:
        assert decode_enum_variant(OrderStatus, [0], "x") is OrderStatus.OPEN
        assert decode_enum_variant(OrderStatus, [3], "x") is OrderStatus.CANCELLED_USER
        assert OrderStatus.CANCELLED_USER.is_cancelled
        assert not OrderStatus.FULFILLED.is_cancelled

    def test_order_type_variants(self) -> None:
        assert decode_enum_variant(OrderType, [3], "x") is OrderType.COLLECTION_OFFER

    def test_unknown_variant(self) -> None:
        with pytest.raises(ContractResponseError) as exc_info:
            decode_enum_variant(OrderStatus, [42], "get_order_status")
        assert exc_info.value.entrypoint == "get_order_status"

    def test_empty_response(self) -> None:
        with pytest.raises(ContractResponseError):
            decode_enum_variant(OrderType, [], "get_order_type")
