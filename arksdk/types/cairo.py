"""
Cairo value encodings used in contract calldata.

Serialisation follows Cairo serde: a u256 is two felts (low, high), an
Option is its variant index followed by the payload (Some=0, None=1), a span
is its length followed by its elements.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterator, Optional, TypeVar, Union

from starknet_py.cairo.felt import decode_shortstring, encode_shortstring
from starknet_py.constants import FIELD_PRIME

from arksdk.errors.errors import ContractResponseError, InvalidFeltError

Felt = int
FeltLike = Union[int, str]

U128_MAX = 2**128 - 1
U256_MAX = 2**256 - 1

T = TypeVar("T")


def to_felt(value: FeltLike) -> Felt:
    """Normalise an int, `0x` hex string or decimal string to a felt."""
    if isinstance(value, bool):
        raise InvalidFeltError(value, "booleans are not felts")
    if isinstance(value, str):
        text = value.strip()
        try:
            parsed = int(text, 16) if text.lower().startswith("0x") else int(text)
        except ValueError as exc:
            raise InvalidFeltError(value, "not a hex or decimal number") from exc
    elif isinstance(value, int):
        parsed = value
    else:
        raise InvalidFeltError(value, f"unsupported type {type(value).__name__}")

    if parsed < 0:
        raise InvalidFeltError(value, "negative")
    if parsed >= FIELD_PRIME:
        raise InvalidFeltError(value, "exceeds the field prime")
    return parsed


def to_hex(value: Felt) -> str:
    return hex(value)


def encode_short_string(text: str) -> Felt:
    return encode_shortstring(text)


def decode_short_string(value: Felt) -> str:
    """Chain ids are short strings, e.g. 'SN_MAIN'."""
    return decode_shortstring(value)


@dataclass(frozen=True, slots=True)
class U256:
    low: int
    high: int

    def __post_init__(self) -> None:
        if not (0 <= self.low <= U128_MAX) or not (0 <= self.high <= U128_MAX):
            raise InvalidFeltError((self.low, self.high), "u256 limbs must fit in 128 bits")

    @classmethod
    def from_int(cls, value: int) -> "U256":
        if not (0 <= value <= U256_MAX):
            raise InvalidFeltError(value, "out of u256 range")
        return cls(low=value & U128_MAX, high=value >> 128)

    def __int__(self) -> int:
        return (self.high << 128) | self.low

    def to_calldata(self) -> list[Felt]:
        return [self.low, self.high]


@dataclass(frozen=True, slots=True)
class CairoOption(Generic[T]):
    """
    Cairo `Option<T>`.

    `CairoOption.none()` is a distinct value: it is not the same as
    `CairoOption.some(U256.from_int(0))` and serialises differently.
    """

    value: Optional[T] = None
    is_some: bool = False

    SOME = 0
    NONE = 1

    @classmethod
    def some(cls, value: T) -> "CairoOption[T]":
        return cls(value=value, is_some=True)

    @classmethod
    def none(cls) -> "CairoOption[T]":
        return cls(value=None, is_some=False)

    @property
    def is_none(self) -> bool:
        return not self.is_some

    def unwrap(self) -> T:
        if not self.is_some or self.value is None:
            raise ValueError("Called unwrap() on a None option")
        return self.value

    def to_calldata(self) -> list[Felt]:
        if not self.is_some:
            return [self.NONE]
        payload = self.value
        if isinstance(payload, U256):
            return [self.SOME, *payload.to_calldata()]
        return [self.SOME, to_felt(payload)]  # type: ignore[arg-type]


class CalldataReader:
    """Sequential reader over a felt list returned by a contract call."""

    def __init__(self, data: list[Felt], entrypoint: Optional[str] = None) -> None:
        self._data = data
        self._pos = 0
        self._entrypoint = entrypoint

    def __iter__(self) -> Iterator[Felt]:
        return iter(self._data[self._pos :])

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    def felt(self) -> Felt:
        if self._pos >= len(self._data):
            raise ContractResponseError(
                f"Unexpected end of response at position {self._pos}",
                entrypoint=self._entrypoint,
                response=self._data,
            )
        value = self._data[self._pos]
        self._pos += 1
        return value

    def u256(self) -> U256:
        low = self.felt()
        high = self.felt()
        return U256(low=low, high=high)

    def option(self, read: Callable[[], T]) -> CairoOption[T]:
        variant = self.felt()
        if variant == CairoOption.SOME:
            return CairoOption.some(read())
        if variant == CairoOption.NONE:
            return CairoOption.none()
        raise ContractResponseError(
            f"Unknown Option variant {variant}",
            entrypoint=self._entrypoint,
            response=self._data,
        )

    def span(self) -> tuple[Felt, ...]:
        length = self.felt()
        return tuple(self.felt() for _ in range(length))
