"""
Custom exceptions for the Ark SDK.

Exception hierarchy:
- ArkError (base)
  - OrderValidationError: rejected order parameters (raised before any network call)
    - InvalidStartDateError
    - InvalidEndDateError
    - EndDateTooFarError
    - InvalidAmountError
    - InvalidEndAmountError
  - ConfigurationError: invalid network configuration
  - InvalidFeltError: value cannot be represented as a Starknet field element
  - ContractResponseError: malformed data returned by a contract call

Provider and account failures are not wrapped; they reach the caller unmodified.
"""

from __future__ import annotations

from typing import Any, Optional


class ArkError(Exception):
    """Base exception for all SDK errors."""

    def __init__(
        self,
        message: str,
        *,
        component: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.component = component
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.component:
            parts.append(f"[component={self.component}]")
        if self.details:
            parts.append(f"[details={self.details}]")
        return " ".join(parts)


# --- Orders ---


class OrderValidationError(ArkError):
    """Raised when order parameters are rejected locally."""


class InvalidStartDateError(OrderValidationError):
    """Start date lies in the past."""

    def __init__(self, start_date: Optional[int], now: int) -> None:
        self.start_date = start_date
        self.now = now
        super().__init__(
            f"Invalid start date. Start date ({start_date}) cannot be in the past.",
            component="order",
            details={"start_date": start_date, "now": now},
        )


class InvalidEndDateError(OrderValidationError):
    """End date lies before the start date."""

    def __init__(self, start_date: Optional[int], end_date: Optional[int]) -> None:
        self.start_date = start_date
        self.end_date = end_date
        super().__init__(
            f"Invalid end date. End date ({end_date}) must be after the start date "
            f"({start_date}).",
            component="order",
            details={"start_date": start_date, "end_date": end_date},
        )


class EndDateTooFarError(OrderValidationError):
    """End date exceeds the maximum order duration."""

    def __init__(self, end_date: Optional[int], max_end_date: int) -> None:
        self.end_date = end_date
        self.max_end_date = max_end_date
        super().__init__(
            f"End date too far in the future. End date ({end_date}) exceeds the maximum "
            f"allowed ({max_end_date}).",
            component="order",
            details={"end_date": end_date, "max_end_date": max_end_date},
        )


class InvalidAmountError(OrderValidationError):
    """Start amount is zero or negative."""

    def __init__(self, amount: int) -> None:
        self.amount = amount
        super().__init__(
            "Invalid start amount. The start amount must be greater than zero.",
            component="order",
            details={"amount": amount},
        )


class InvalidEndAmountError(OrderValidationError):
    """Auction end amount does not exceed the start amount."""

    def __init__(self, start_amount: int, end_amount: int) -> None:
        self.start_amount = start_amount
        self.end_amount = end_amount
        super().__init__(
            "Invalid end amount. The end amount must be greater than the start amount.",
            component="order",
            details={"start_amount": start_amount, "end_amount": end_amount},
        )


# --- Config ---


class ConfigurationError(ArkError):
    """Raised when configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        component: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.field = field
        self.value = value
        details = details or {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        super().__init__(message, component=component, details=details)


# --- Encoding ---


class InvalidFeltError(ArkError):
    """Raised when a value is not a valid field element."""

    def __init__(self, value: Any, reason: str) -> None:
        self.value = value
        super().__init__(
            f"Invalid felt value {value!r}: {reason}",
            component="cairo",
        )


class ContractResponseError(ArkError):
    """Raised when a contract returns data that cannot be decoded."""

    def __init__(
        self,
        message: str,
        *,
        entrypoint: Optional[str] = None,
        response: Optional[list[int]] = None,
    ) -> None:
        self.entrypoint = entrypoint
        self.response = response or []
        details: dict[str, Any] = {}
        if entrypoint:
            details["entrypoint"] = entrypoint
        super().__init__(message, component="contract", details=details)
