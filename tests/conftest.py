import os
import random
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from delve import EntityRegistry, LevelConfig, new_player  # noqa: E402
from delve.config import ENV_MAP  # noqa: E402


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep a developer's DELVE_* shell/.env settings out of the tests."""
    for key in ENV_MAP:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def player():
    return new_player()


@pytest.fixture
def registry(player):
    return EntityRegistry(player)


@pytest.fixture
def small_config():
    return LevelConfig(width=40, height=30, room_min_size=4, room_max_size=7, max_rooms=12, seed=7)


class FixedRng:
    """Stand-in RNG returning a fixed random() value (for coin-flip branches)."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def fixed_rng():
    return FixedRng
