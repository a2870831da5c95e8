# tests/conftest.py
import pytest

from lazyassign import config
from lazyassign.config import BinderSettings
from tests.utils import LeakySubject, Slot, Subject


@pytest.fixture
def subject():
    return Subject()


@pytest.fixture
def leaky_subject():
    return LeakySubject()


@pytest.fixture
def slot():
    return Slot(0)


@pytest.fixture
def override_settings(monkeypatch):
    """Swap the settings singleton read by bind() for the duration of a test."""

    def _override(**values):
        patched = BinderSettings(**values)
        monkeypatch.setattr(config, "settings", patched)
        return patched

    return _override
