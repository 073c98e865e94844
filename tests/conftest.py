"""Shared fixtures: credential-free settings and dispatchers."""

import pytest

from wishforge.core.config import Settings
from wishforge.core.dispatcher import Dispatcher
from wishforge.core.notes import NoteStore
from wishforge.core.remote import RemoteGenerator


@pytest.fixture
def settings():
    return Settings.from_env({})


@pytest.fixture
def dispatcher(settings):
    """Dispatcher with no credentials: every generation uses templates."""
    return Dispatcher(settings, store=NoteStore(), remote=RemoteGenerator([]))


@pytest.fixture
def make_dispatcher():
    def _make(*backends, profile: str = "full"):
        s = Settings.from_env({"WISHFORGE_PROFILE": profile})
        return Dispatcher(s, store=NoteStore(), remote=RemoteGenerator(list(backends)))
    return _make
