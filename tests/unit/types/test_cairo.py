"""
Unit tests for Cairo value encodings.
"""

import pytest
from starknet_py.constants import FIELD_PRIME

from arksdk.errors.errors import ContractResponseError, InvalidFeltError
from arksdk.types.cairo import (
    CairoOption,
    CalldataReader,
    U256,
    decode_short_string,
    encode_short_string,
    to_felt,
)


class TestToFelt:
    """Tests for felt normalisation."""

    def test_accepts_int(self) -> None:
        assert to_felt(42) == 42

    def test_accepts_hex_string(self) -> None:
        assert to_felt("0x2a") == 42
        assert to_felt("0X2A") == 42

    def test_accepts_decimal_string(self) -> None:
        assert to_felt("42") == 42

    def test_rejects_negative(self) -> None:
        with pytest.raises(InvalidFeltError) as exc_info:
            to_felt(-1)
        assert "negative" in str(exc_info.value)

    def test_rejects_field_overflow(self) -> None:
        with pytest.raises(InvalidFeltError):
            to_felt(FIELD_PRIME)

    def test_rejects_garbage(self) -> None:
        with pytest.raises(InvalidFeltError):
            to_felt("0xnothex")

    def test_rejects_bool(self) -> None:
        with pytest.raises(InvalidFeltError):
            to_felt(True)


class TestU256:
    """Tests for U256 limbs."""

    def test_small_value(self) -> None:
        assert U256.from_int(5).to_calldata() == [5, 0]

    def test_large_value_splits_limbs(self) -> None:
        value = (7 << 128) | 9
        u = U256.from_int(value)
        assert (u.low, u.high) == (9, 7)
        assert int(u) == value

    def test_out_of_range(self) -> None:
        with pytest.raises(InvalidFeltError):
            U256.from_int(2**256)
        with pytest.raises(InvalidFeltError):
            U256.from_int(-1)


class TestCairoOption:
    """Tests for Option encoding."""

    def test_some_u256(self) -> None:
        assert CairoOption.some(U256.from_int(3)).to_calldata() == [0, 3, 0]

    def test_some_felt(self) -> None:
        assert CairoOption.some(0xABC).to_calldata() == [0, 0xABC]

    def test_none(self) -> None:
        assert CairoOption.none().to_calldata() == [1]

    def test_none_differs_from_some_zero(self) -> None:
        none = CairoOption.none()
        zero = CairoOption.some(U256.from_int(0))
        assert none != zero
        assert none.to_calldata() != zero.to_calldata()

    def test_unwrap_none_raises(self) -> None:
        with pytest.raises(ValueError):
            CairoOption.none().unwrap()


class TestCalldataReader:
    """Tests for sequential decoding."""

    def test_reads_in_order(self) -> None:
        reader = CalldataReader([1, 2, 0, 0, 7, 0, 2, 10, 11])
        assert reader.felt() == 1
        assert int(reader.u256()) == 2
        assert reader.option(reader.u256).unwrap() == U256.from_int(7)
        assert reader.span() == (10, 11)
        assert reader.remaining == 0

    def test_unexpected_end(self) -> None:
        reader = CalldataReader([1], entrypoint="get_order")
        reader.felt()
        with pytest.raises(ContractResponseError) as exc_info:
            reader.felt()
        assert exc_info.value.entrypoint == "get_order"

    def test_unknown_option_variant(self) -> None:
        reader = CalldataReader([5])
        with pytest.raises(ContractResponseError):
            reader.option(reader.felt)


def test_short_string_chain_id() -> None:
    assert decode_short_string(encode_short_string("SN_MAIN")) == "SN_MAIN"
    assert encode_short_string("SN_MAIN") == 0x534E5F4D41494E
