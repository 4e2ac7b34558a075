from __future__ import annotations


class _ParkourMissing:
    """Sentinel for values that are absent, as opposed to stored ``None``."""

    _instance: _ParkourMissing | None = None

    def __new__(cls) -> _ParkourMissing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "parkour.MISSING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "MISSING"


MISSING = _ParkourMissing()


class ParkourError(Exception):
    """Base class for errors raised by parkour."""


class InvalidPathError(ParkourError, ValueError):
    """Raised when a path is not a non-empty key sequence or delimited string."""

    def __init__(self, message: str, *, path: object = MISSING) -> None:
        super().__init__(message)
        self.path = path


__all__ = ["MISSING", "InvalidPathError", "ParkourError"]
