from .merge import merge
from .nested import get_path, has_path, set_path, update_path
from .paths import (
    DelimitedPath,
    Key,
    KeySequence,
    PathLike,
    PathSpec,
    SegmentsPath,
    resolve_path,
    to_path_spec,
)

__all__ = [
    "DelimitedPath",
    "Key",
    "KeySequence",
    "PathLike",
    "PathSpec",
    "SegmentsPath",
    "get_path",
    "has_path",
    "merge",
    "resolve_path",
    "set_path",
    "to_path_spec",
    "update_path",
]
