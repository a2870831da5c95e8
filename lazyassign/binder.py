# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Equality-gated assignment of a publisher's values to owner slots.

Every emission is written into each target's slot only when it differs from
what the slot already holds, so setters with side effects (change
notifications, re-renders) fire once per actual change.

Example::

    handle = assign_lazy(temperature, "label.text", panel, ownership="weak")
    ...
    handle.cancel()
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from . import config
from ._errors import SubscriptionError, ValidationError
from .accessor import Accessor
from .contracts import Publisher, open_subscription
from .handle import Handle
from .ownership import OwnerResolver, Ownership, retain

__all__ = (
    "MAX_TARGETS",
    "Target",
    "assign_lazy",
    "assign_lazy2",
    "assign_lazy3",
    "bind",
)

O = TypeVar("O")
T = TypeVar("T")

MAX_TARGETS = 3

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Target(Generic[O, T]):
    """An owner together with the accessor of the slot to write."""

    owner: O
    accessor: Accessor[O, T]

    @classmethod
    def of(cls, owner: Any, accessor: Accessor | str) -> Target[Any, Any]:
        if owner is None:
            raise ValidationError("Target owner cannot be None")
        return cls(owner, Accessor.coerce(accessor))

    @classmethod
    def coerce(cls, value: Target | tuple[Any, Accessor | str]) -> Target[Any, Any]:
        """Accept a target or an ``(owner, accessor)`` pair."""
        if isinstance(value, cls):
            return cls.of(value.owner, value.accessor)
        if isinstance(value, tuple) and len(value) == 2:
            return cls.of(*value)
        raise ValidationError.from_value(
            value,
            expected="Target or (owner, accessor) pair",
        )


class _Dispatcher:
    """Subscriber callback writing each value into the bound slots.

    Holds only resolvers, never the targets themselves, so closing it
    releases every strongly held owner.
    """

    __slots__ = ("_slots", "_closed", "_trace", "label")

    def __init__(
        self,
        slots: tuple[tuple[OwnerResolver, Accessor[Any, Any]], ...],
        *,
        label: str,
        trace: bool = False,
    ):
        self._slots = slots
        self._closed = False
        self._trace = trace
        self.label = label

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        self._closed = True
        self._slots = ()

    def __call__(self, value: Any) -> None:
        for index, (resolve, accessor) in enumerate(self._slots, start=1):
            # a setter may cancel the handle mid-emission
            if self._closed:
                return
            owner = resolve()
            if owner is None:
                logger.debug(
                    "%s: target %d (%s) was collected, skipping",
                    self.label,
                    index,
                    accessor.name,
                )
                continue
            if value != accessor.get(owner):
                accessor.set(owner, value)
                if self._trace:
                    logger.debug(f"{self.label}: target {index} ({accessor.name}) <- {value!r}")
            elif self._trace:
                logger.debug(f"{self.label}: target {index} ({accessor.name}) unchanged")


def _check_targets(targets: Any) -> tuple[Target[Any, Any], ...]:
    if isinstance(targets, (str, bytes)) or not isinstance(targets, Sequence):
        raise ValidationError.from_value(
            targets,
            expected=f"sequence of 1 to {MAX_TARGETS} targets",
        )
    if not 1 <= len(targets) <= MAX_TARGETS:
        raise ValidationError(
            f"Expected 1 to {MAX_TARGETS} targets, got {len(targets)}",
            details={"count": len(targets)},
        )
    return tuple(Target.coerce(t) for t in targets)


def bind(
    source: Publisher[T],
    targets: Sequence[Target[Any, T] | tuple[Any, Accessor | str]],
    ownership: Ownership | str | None = None,
) -> Handle:
    """Subscribe to ``source`` and write each value into every target slot.

    A slot is written only when the emitted value differs from its current
    value. Targets are visited in the given order and do not affect each
    other. Under ``weak`` ownership a collected owner is skipped; under
    ``unowned`` using a collected owner raises ``ReferenceError`` from the
    emission.

    Args:
        source: Object with ``subscribe(callback)``.
        targets: One to three ``Target`` or ``(owner, accessor)`` pairs.
        ownership: Policy for every owner in this call. ``None`` uses
            ``settings.LAZYASSIGN_DEFAULT_OWNERSHIP``.

    Returns:
        Handle: cancels the subscription when cancelled or collected.

    Raises:
        ValidationError: Wrong number of targets, bad accessor, unknown
            ownership, or ``source`` is not a publisher.
        OwnershipError: An owner cannot be weakly referenced.
        SubscriptionError: ``source.subscribe`` gave nothing to cancel with.
    """
    settings = config.settings
    policy = Ownership.coerce(
        settings.LAZYASSIGN_DEFAULT_OWNERSHIP if ownership is None else ownership
    )
    checked = _check_targets(targets)
    slots = tuple((retain(t.owner, policy), t.accessor) for t in checked)

    label = (
        f"{type(source).__name__}->"
        f"{','.join(accessor.name for _, accessor in slots)} ({policy.value})"
    )
    dispatcher = _Dispatcher(slots, label=label, trace=settings.LAZYASSIGN_TRACE_WRITES)

    try:
        unsubscribe = open_subscription(source, dispatcher)
    except SubscriptionError:
        dispatcher.close()
        raise

    def _cancel() -> None:
        dispatcher.close()
        unsubscribe()

    logger.debug(f"Bound {label}, {len(slots)} target(s)")
    return Handle(_cancel, label=label)


def assign_lazy(
    source: Publisher[T],
    to: Accessor[Any, T] | str,
    on: Any,
    *,
    ownership: Ownership | str | None = None,
) -> Handle:
    """Assign each value from ``source`` to ``to`` on ``on`` when it changes."""
    return bind(source, (Target.of(on, to),), ownership)


def assign_lazy2(
    source: Publisher[T],
    to1: Accessor[Any, T] | str,
    on1: Any,
    to2: Accessor[Any, T] | str,
    on2: Any,
    *,
    ownership: Ownership | str | None = None,
) -> Handle:
    """Two-target form of :func:`assign_lazy`."""
    return bind(source, (Target.of(on1, to1), Target.of(on2, to2)), ownership)


def assign_lazy3(
    source: Publisher[T],
    to1: Accessor[Any, T] | str,
    on1: Any,
    to2: Accessor[Any, T] | str,
    on2: Any,
    to3: Accessor[Any, T] | str,
    on3: Any,
    *,
    ownership: Ownership | str | None = None,
) -> Handle:
    """Three-target form of :func:`assign_lazy`."""
    return bind(
        source,
        (Target.of(on1, to1), Target.of(on2, to2), Target.of(on3, to3)),
        ownership,
    )
