# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Structural contracts for the publishers a binder consumes.

The library does not implement streams. Anything with a ``subscribe(callback)``
method is accepted, and whatever ``subscribe`` returns is normalised into a
zero-argument cancel function by :func:`open_subscription`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol, TypeVar, runtime_checkable

from ._errors import SubscriptionError, ValidationError

__all__ = (
    "Cancellable",
    "Publisher",
    "open_subscription",
)

T_co = TypeVar("T_co", covariant=True)

logger = logging.getLogger(__name__)


@runtime_checkable
class Publisher(Protocol[T_co]):
    """Delivers values to a registered callback, one at a time."""

    def subscribe(self, callback: Callable[[Any], Any], /) -> Any: ...


@runtime_checkable
class Cancellable(Protocol):
    """Subscription handle. ``cancel()`` must stop delivery for good."""

    def cancel(self) -> Any: ...


_DISPOSE_METHODS = ("cancel", "dispose", "unsubscribe")


def open_subscription(
    source: Publisher[Any], callback: Callable[[Any], None]
) -> Callable[[], None]:
    """Subscribe ``callback`` to ``source`` and return a cancel function.

    Accepted return values of ``source.subscribe``:
        - an object with ``cancel()``, ``dispose()`` or ``unsubscribe()``
        - a bare callable disposer
        - ``None``, if ``source`` has ``unsubscribe(callback)``

    Raises:
        ValidationError: ``source`` has no ``subscribe`` method.
        SubscriptionError: the subscription cannot be cancelled.
    """
    if not isinstance(source, Publisher):
        raise ValidationError.from_value(
            source,
            expected="object with subscribe(callback)",
            message=f"{type(source).__name__} is not a publisher",
        )

    result = source.subscribe(callback)

    for name in _DISPOSE_METHODS:
        method = getattr(result, name, None)
        if callable(method):
            return method

    if callable(result):
        return result

    unsubscribe = getattr(source, "unsubscribe", None)
    if result is None and callable(unsubscribe):
        logger.debug(
            f"{type(source).__name__}.subscribe() returned None, "
            "cancelling through unsubscribe(callback)"
        )
        return lambda: unsubscribe(callback)

    raise SubscriptionError(
        f"{type(source).__name__}.subscribe() returned {type(result).__name__}, "
        "expected a cancellable handle or disposer",
        details={"source_type": type(source).__name__, "result_type": type(result).__name__},
    )
