"""
Shared Test Utilities for lazyassign

The library consumes publishers but does not ship one, so the tests drive
bindings through these minimal stand-ins.
"""

from typing import Any, Callable, List, Optional


class _Subscription:
    def __init__(self, subject: "Subject", callback: Callable[[Any], None]):
        self._subject = subject
        self._callback = callback
        self.cancel_calls = 0

    def cancel(self) -> None:
        self.cancel_calls += 1
        if self._callback in self._subject.callbacks:
            self._subject.callbacks.remove(self._callback)


class Subject:
    """Synchronous publisher: ``emit`` delivers to every subscriber in turn."""

    def __init__(self) -> None:
        self.callbacks: List[Callable[[Any], None]] = []
        self.subscriptions: List[_Subscription] = []

    def subscribe(self, callback: Callable[[Any], None]) -> _Subscription:
        self.callbacks.append(callback)
        sub = _Subscription(self, callback)
        self.subscriptions.append(sub)
        return sub

    def emit(self, *values: Any) -> None:
        for value in values:
            for cb in list(self.callbacks):
                cb(value)

    @property
    def subscriber_count(self) -> int:
        return len(self.callbacks)


class LeakySubject(Subject):
    """Publisher that ignores cancellation and keeps delivering."""

    def subscribe(self, callback: Callable[[Any], None]) -> _Subscription:
        self.callbacks.append(callback)
        sub = _Subscription(Subject(), callback)
        self.subscriptions.append(sub)
        return sub


class Slot:
    """Owner with one observable ``value`` slot recording every write."""

    def __init__(self, value: Optional[Any] = None) -> None:
        self._value = value
        self.writes: List[Any] = []

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, new: Any) -> None:
        self.writes.append(new)
        self._value = new
