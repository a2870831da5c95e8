# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for Ownership and retain()."""

import gc
import weakref

import pytest

from lazyassign import Ownership, OwnershipError, ValidationError
from lazyassign.ownership import retain
from tests.utils import Slot


class TestOwnershipEnum:
    def test_allowed(self):
        assert Ownership.allowed() == ("strong", "weak", "unowned")

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("strong", Ownership.STRONG),
            ("WEAK", Ownership.WEAK),
            (" unowned ", Ownership.UNOWNED),
            (Ownership.WEAK, Ownership.WEAK),
        ],
    )
    def test_coerce(self, raw, expected):
        assert Ownership.coerce(raw) is expected

    @pytest.mark.parametrize("raw", ["shared", "", 1, None])
    def test_coerce_rejects_unknown(self, raw):
        with pytest.raises(ValidationError) as exc:
            Ownership.coerce(raw)
        assert "expected" in exc.value.details

    def test_is_str(self):
        assert Ownership.STRONG == "strong"


class TestRetain:
    def test_strong_returns_owner(self):
        owner = Slot()
        assert retain(owner, Ownership.STRONG)() is owner

    def test_weak_resolves_until_collected(self):
        owner = Slot()
        resolve = retain(owner, Ownership.WEAK)
        assert resolve() is owner

        del owner
        gc.collect()
        assert resolve() is None

    def test_unowned_returns_the_owner(self):
        owner = Slot(3)
        resolve = retain(owner, Ownership.UNOWNED)

        assert resolve() is owner
        assert hash(resolve()) == hash(owner)

    def test_unowned_does_not_keep_owner_alive(self):
        owner = Slot(3)
        owner_ref = weakref.ref(owner)
        retain(owner, Ownership.UNOWNED)
        del owner
        gc.collect()

        assert owner_ref() is None

    def test_unowned_raises_after_collection(self):
        owner = Slot(3)
        resolve = retain(owner, Ownership.UNOWNED)
        del owner
        gc.collect()

        with pytest.raises(ReferenceError):
            resolve()

    @pytest.mark.parametrize("policy", [Ownership.WEAK, Ownership.UNOWNED])
    def test_builtin_values_cannot_be_weak(self, policy):
        with pytest.raises(OwnershipError) as exc:
            retain({}, policy)
        assert exc.value.details == {"owner_type": "dict", "ownership": policy.value}
        assert isinstance(exc.value.__cause__, TypeError)
