import random

import pytest

from src.chit_picker.adapters.chit_storage_memory import InMemoryChitStorage
from src.chit_picker.adapters.session_store_memory import DictSessionStore
from src.chit_picker.app.state import Settings
from src.chit_picker.services import app_state
from src.chit_picker.services.chit_store import ChitStore


class FakeClock:
    """Manually advanced clock for draw-delay tests."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FirstChoice:
    """RNG stand-in that always picks the first element."""

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def storage():
    return InMemoryChitStorage()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def chit_store(storage, rng):
    return ChitStore(storage, rng=rng)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def session(storage):
    """Session store initialised the way the entrypoint does it."""
    store = DictSessionStore()
    app_state.initialize_state(store, Settings(draw_delay_seconds=2.0), storage=storage)
    return store


@pytest.fixture
def first_choice():
    return FirstChoice()
