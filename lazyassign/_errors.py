# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar

__all__ = (
    "LazyAssignError",
    "OwnershipError",
    "SubscriptionError",
    "ValidationError",
)


class LazyAssignError(Exception):
    """Base error for rejected bind calls.

    ``details`` carries the offending values (target count, owner type,
    policy) and is appended to the message so it shows up in tracebacks.
    """

    default_message: ClassVar[str] = "lazyassign error"
    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
    ):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        extra = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        return f"{self.message} ({extra})"


class ValidationError(LazyAssignError):
    """Raised when a bind call is rejected before subscribing."""

    default_message = "Validation failed"
    __slots__ = ()

    @classmethod
    def from_value(
        cls,
        value: Any,
        *,
        expected: str | None = None,
        message: str | None = None,
        **extra: Any,
    ):
        """Build the error from the rejected value, recording its type."""
        details = {
            "type": type(value).__name__,
            **({"expected": expected} if expected else {}),
            **extra,
        }
        if message is None:
            message = f"Rejected {type(value).__name__} value {value!r}"
        return cls(message=message, details=details)


class OwnershipError(ValidationError):
    """Owner cannot be held under the requested ownership policy."""

    default_message = "Owner does not support the requested ownership"
    __slots__ = ()


class SubscriptionError(LazyAssignError):
    """Publisher did not hand back anything that can cancel the subscription."""

    default_message = "Subscription cannot be cancelled"
    __slots__ = ()
