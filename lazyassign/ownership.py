# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Ownership policies and the owner references they produce.

A binder never holds an owner directly. It holds the zero-argument resolver
returned by :func:`retain`, which yields the owner (or ``None`` once a weakly
held owner has been collected).
"""

from __future__ import annotations

import weakref
from collections.abc import Callable
from enum import Enum
from typing import Any

from ._errors import OwnershipError, ValidationError

__all__ = (
    "Ownership",
    "OwnerResolver",
    "retain",
)

OwnerResolver = Callable[[], Any]


class Ownership(str, Enum):
    """How a subscription holds on to each target's owner.

    Attributes:
        STRONG: Ordinary reference; the owner lives at least as long as the
            subscription.
        WEAK: ``weakref.ref``; a collected owner is skipped silently.
        UNOWNED: ``weakref.ref`` that is never skipped; emitting to a
            collected owner raises ``ReferenceError``.
    """

    STRONG = "strong"
    WEAK = "weak"
    UNOWNED = "unowned"

    @classmethod
    def allowed(cls) -> tuple[str, ...]:
        """Return tuple of all enum values."""
        return tuple(e.value for e in cls)

    @classmethod
    def coerce(cls, value: Ownership | str) -> Ownership:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValidationError.from_value(
            value,
            expected=f"one of {cls.allowed()}",
            message=f"Unknown ownership policy: {value!r}",
        )


def retain(owner: Any, ownership: Ownership) -> OwnerResolver:
    """Return a resolver holding ``owner`` under ``ownership``.

    Raises:
        OwnershipError: ``owner`` does not support weak references and the
            policy needs one.
    """
    if ownership is Ownership.STRONG:
        return lambda: owner

    try:
        ref = weakref.ref(owner)
    except TypeError as e:
        raise OwnershipError(
            f"{type(owner).__name__} instances cannot be weakly referenced, "
            f"use ownership='strong' or add __weakref__ to __slots__",
            details={"owner_type": type(owner).__name__, "ownership": ownership.value},
        ) from e

    if ownership is Ownership.WEAK:
        return ref

    type_name = type(owner).__name__

    def _unowned() -> Any:
        # raised, not skipped
        target = ref()
        if target is None:
            raise ReferenceError(
                f"unowned {type_name} owner was collected while still bound"
            )
        return target

    return _unowned
