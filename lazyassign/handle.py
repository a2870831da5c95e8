# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
import weakref
from collections.abc import Callable, MutableSequence, MutableSet
from typing import Any

__all__ = ("Handle",)

logger = logging.getLogger(__name__)


class _Teardown:
    """Runs a cancel function at most once.

    Held by both the handle and its finalizer, so it must not reference the
    handle itself.
    """

    __slots__ = ("_cancel", "label")

    def __init__(self, cancel: Callable[[], Any], label: str):
        self._cancel: Callable[[], Any] | None = cancel
        self.label = label

    @property
    def done(self) -> bool:
        return self._cancel is None

    def __call__(self) -> None:
        cancel, self._cancel = self._cancel, None
        if cancel is None:
            return
        logger.debug(f"Cancelling subscription {self.label}")
        cancel()


class Handle:
    """Sole owner of a live subscription created by a bind call.

    ``cancel()`` stops delivery immediately and for good; calling it again is
    a no-op. Garbage collection of the handle cancels the subscription too,
    so a handle that is dropped on the floor also ends the binding. Keep a
    reference for as long as values should flow.

    Example::

        with assign_lazy(source, "title", view) as handle:
            ...
        assert handle.cancelled
    """

    __slots__ = ("_teardown", "_finalizer", "__weakref__")

    def __init__(self, cancel: Callable[[], Any], *, label: str = ""):
        self._teardown = _Teardown(cancel, label or f"0x{id(self):x}")
        self._finalizer = weakref.finalize(self, self._teardown)

    @property
    def cancelled(self) -> bool:
        return self._teardown.done

    def cancel(self) -> None:
        """Cancel the subscription (idempotent)."""
        # detach first so collection later does not run the teardown again
        self._finalizer.detach()
        self._teardown()

    def store_in(self, collection: MutableSet[Handle] | MutableSequence[Handle]) -> Handle:
        """Park the handle in a caller-owned collection and return it."""
        if isinstance(collection, MutableSet):
            collection.add(self)
        else:
            collection.append(self)
        return self

    def __enter__(self) -> Handle:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.cancel()

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else "active"
        return f"Handle({self._teardown.label}, {state})"
