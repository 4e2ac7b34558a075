import pytest


@pytest.fixture(autouse=True)
def _default_parkour_config(parkour_config):
    """Keep ``PARKOUR_*`` variables in the environment from leaking into tests."""
    yield parkour_config
