import pytest

import parkour
from parkour import ParkourConfig, get_config, set_config
from parkour.testing import override_config


def test_defaults(parkour_config) -> None:
    assert parkour_config.delimiter == "."
    assert parkour_config.log_level == "WARNING"
    assert get_config() is parkour_config


def test_from_env_reads_variables(monkeypatch) -> None:
    monkeypatch.setenv("PARKOUR_DELIMITER", "/")
    monkeypatch.setenv("PARKOUR_LOG_LEVEL", "debug")

    config = ParkourConfig.from_env()

    assert config.delimiter == "/"
    assert config.log_level == "DEBUG"


def test_from_env_ignores_unset_variables(monkeypatch) -> None:
    monkeypatch.delenv("PARKOUR_DELIMITER", raising=False)
    monkeypatch.delenv("PARKOUR_LOG_LEVEL", raising=False)

    assert ParkourConfig.from_env().delimiter == "."


def test_config_rejects_empty_delimiter() -> None:
    with pytest.raises(ValueError, match="delimiter must be a non-empty string"):
        ParkourConfig(delimiter="")


def test_config_rejects_unknown_log_level() -> None:
    with pytest.raises(ValueError, match="unknown log level"):
        ParkourConfig(log_level="chatty")


def test_set_config_returns_previous(parkour_config) -> None:
    previous = set_config(delimiter="|")
    try:
        assert previous is parkour_config
        assert get_config().delimiter == "|"
        assert parkour.get_path({"a": {"b": 1}}, "a|b") == 1
    finally:
        parkour.config.restore_config(previous)
    assert get_config() is parkour_config


def test_override_config_restores_on_error(parkour_config) -> None:
    with pytest.raises(RuntimeError):
        with override_config(delimiter="/"):
            assert get_config().delimiter == "/"
            raise RuntimeError("boom")
    assert get_config() is parkour_config
