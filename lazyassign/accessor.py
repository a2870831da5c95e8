# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from ._errors import ValidationError

__all__ = ("Accessor",)

O = TypeVar("O")
T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Accessor(Generic[O, T]):
    """Getter/setter pair addressing one mutable slot on an owner.

    The accessor itself is stateless; the owner is supplied on every call,
    so one accessor can be shared by any number of targets.

    Example::

        count = Accessor.attr("count")
        count.set(counter, 3)
        assert count.get(counter) == 3
    """

    get: Callable[[O], T]
    set: Callable[[O, T], None]
    name: str = field(default="<accessor>", compare=False)

    @classmethod
    def attr(cls, name: str) -> Accessor[Any, Any]:
        """Accessor for a single attribute, equivalent to ``getattr``/``setattr``."""
        if not isinstance(name, str) or not name.isidentifier():
            raise ValidationError.from_value(
                name,
                expected="attribute name",
                message=f"Invalid attribute name: {name!r}",
            )

        def _get(owner):
            return getattr(owner, name)

        def _set(owner, value):
            setattr(owner, name, value)

        return cls(_get, _set, name=name)

    @classmethod
    def path(cls, dotted: str) -> Accessor[Any, Any]:
        """Accessor for a nested attribute such as ``"settings.theme.color"``.

        Intermediate objects are looked up on every access, so replacing
        ``owner.settings`` redirects subsequent writes to the new object.
        """
        if not isinstance(dotted, str):
            raise ValidationError.from_value(dotted, expected="str")
        parts = dotted.split(".")
        if not all(p.isidentifier() for p in parts):
            raise ValidationError.from_value(
                dotted,
                expected="dotted attribute path",
                message=f"Invalid attribute path: {dotted!r}",
            )
        if len(parts) == 1:
            return cls.attr(dotted)

        *parents, leaf = parts

        def _walk(owner):
            for p in parents:
                owner = getattr(owner, p)
            return owner

        def _get(owner):
            return getattr(_walk(owner), leaf)

        def _set(owner, value):
            setattr(_walk(owner), leaf, value)

        return cls(_get, _set, name=dotted)

    @classmethod
    def item(cls, key: Hashable) -> Accessor[Any, Any]:
        """Accessor for ``owner[key]`` on a mapping or mutable sequence."""

        def _get(owner):
            return owner[key]

        def _set(owner, value):
            owner[key] = value

        return cls(_get, _set, name=f"[{key!r}]")

    @classmethod
    def coerce(cls, value: Accessor | str) -> Accessor[Any, Any]:
        """Accept an accessor as-is, or read a string as a dotted attribute path."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.path(value)
        raise ValidationError.from_value(
            value,
            expected="Accessor or attribute path",
            message=f"Cannot use {type(value).__name__} as an accessor",
        )
