"""
Parkour: functional helpers for nested mappings.

This package uses a src-layout. Import the package as `parkour`.
"""

from importlib.metadata import version

__version__ = version("parkour")

from .access import (
    DelimitedPath,
    Key,
    KeySequence,
    PathLike,
    PathSpec,
    SegmentsPath,
    get_path,
    has_path,
    merge,
    resolve_path,
    set_path,
    to_path_spec,
    update_path,
)
from .config import ParkourConfig, get_config, set_config
from .errors import MISSING, InvalidPathError, ParkourError
from .runtime import configure_logging, get_logger
from . import traverse

__all__ = [
    "__version__",
    "DelimitedPath",
    "InvalidPathError",
    "Key",
    "KeySequence",
    "MISSING",
    "ParkourConfig",
    "ParkourError",
    "PathLike",
    "PathSpec",
    "SegmentsPath",
    "configure_logging",
    "get_config",
    "get_logger",
    "get_path",
    "has_path",
    "merge",
    "resolve_path",
    "set_config",
    "set_path",
    "to_path_spec",
    "traverse",
    "update_path",
]
