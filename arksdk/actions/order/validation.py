"""
Parameter checks shared by every order-creating action.

All checks run before any network call and fail fatally.
"""

from __future__ import annotations

from typing import Optional

from arksdk.config.configs import DEFAULT_ORDER_DURATION_S, MAX_ORDER_DURATION_S
from arksdk.errors.errors import (
    EndDateTooFarError,
    InvalidAmountError,
    InvalidEndAmountError,
    InvalidEndDateError,
    InvalidStartDateError,
)
from arksdk.ports.clock import Clock
from arksdk.types.types import UnixSeconds


def now_seconds(clock: Clock) -> UnixSeconds:
    return int(clock.now().timestamp())


def resolve_time_window(
    now: UnixSeconds,
    start_date: Optional[UnixSeconds],
    end_date: Optional[UnixSeconds],
) -> tuple[UnixSeconds, UnixSeconds]:
    """
    Apply defaults and validate an order window.

    Returns (started_at, ended_at). Defaults: start now, end one day after now.
    The window may not end more than 30 days after now.
    """
    started_at = start_date if start_date is not None else now
    ended_at = end_date if end_date is not None else now + DEFAULT_ORDER_DURATION_S
    max_ended_at = now + MAX_ORDER_DURATION_S

    if started_at < now:
        raise InvalidStartDateError(start_date, now)

    if ended_at < started_at:
        raise InvalidEndDateError(start_date, end_date)

    if ended_at > max_ended_at:
        raise EndDateTooFarError(end_date, max_ended_at)

    return started_at, ended_at


def ensure_positive_amount(amount: int) -> None:
    if amount <= 0:
        raise InvalidAmountError(amount)


def ensure_auction_amounts(start_amount: int, end_amount: int) -> None:
    """
    An auction's end amount must be strictly above its start amount.

    The executor classifies an Erc721->Erc20 order with a zero end amount as a
    listing and one with `end_amount > start_amount` as an auction.
    """
    if end_amount <= start_amount:
        raise InvalidEndAmountError(start_amount, end_amount)
