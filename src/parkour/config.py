from __future__ import annotations

import os

import chz

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


@chz.chz
class ParkourConfig:
    """Process-wide settings for parkour.

    ``delimiter`` separates segments of string paths such as ``"a.b.c"``.
    ``log_level`` is the level used by :func:`parkour.configure_logging` when
    none is given explicitly.
    """

    delimiter: str = "."
    log_level: str = "WARNING"

    @chz.validate
    def _check_delimiter(self) -> None:
        if not isinstance(self.delimiter, str) or not self.delimiter:
            raise ValueError("delimiter must be a non-empty string")

    @chz.validate
    def _check_log_level(self) -> None:
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(
                f"unknown log level {self.log_level!r}; expected one of {', '.join(_LOG_LEVELS)}"
            )

    @classmethod
    def from_env(cls) -> ParkourConfig:
        """
        Build a config from ``PARKOUR_DELIMITER`` and ``PARKOUR_LOG_LEVEL``.

        Unset variables fall back to the class defaults.
        """
        kwargs: dict[str, str] = {}
        delimiter = os.environ.get("PARKOUR_DELIMITER")
        if delimiter:
            kwargs["delimiter"] = delimiter
        log_level = os.environ.get("PARKOUR_LOG_LEVEL")
        if log_level:
            kwargs["log_level"] = log_level.upper()
        return cls(**kwargs)


PARKOUR_CONFIG: ParkourConfig = ParkourConfig.from_env()


def get_config() -> ParkourConfig:
    return PARKOUR_CONFIG


def set_config(**changes: str) -> ParkourConfig:
    """Replace fields of the global config, returning the previous instance."""
    global PARKOUR_CONFIG
    previous = PARKOUR_CONFIG
    PARKOUR_CONFIG = chz.replace(previous, **changes)
    return previous


def restore_config(config: ParkourConfig) -> None:
    global PARKOUR_CONFIG
    PARKOUR_CONFIG = config


__all__ = [
    "PARKOUR_CONFIG",
    "ParkourConfig",
    "get_config",
    "restore_config",
    "set_config",
]
