from collections.abc import Generator
from contextlib import contextmanager

import pytest

from .config import ParkourConfig, get_config, restore_config, set_config


@contextmanager
def override_config(**changes: str) -> Generator[ParkourConfig, None, None]:
    """Apply config ``changes`` within the context, restoring the old config on exit."""
    previous = set_config(**changes)
    try:
        yield get_config()
    finally:
        restore_config(previous)


@contextmanager
def default_config() -> Generator[ParkourConfig, None, None]:
    previous = get_config()
    restore_config(ParkourConfig())
    try:
        yield get_config()
    finally:
        restore_config(previous)


@pytest.fixture()
def parkour_config() -> Generator[ParkourConfig, None, None]:
    """Run the test against a default config, ignoring ``PARKOUR_*`` variables."""
    with default_config() as config:
        yield config
