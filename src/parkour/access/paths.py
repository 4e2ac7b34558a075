"""Path resolution for nested mapping access."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Annotated, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ..config import get_config
from ..errors import InvalidPathError

Key: TypeAlias = str | int
KeySequence: TypeAlias = tuple[Key, ...]


class _PathNode(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, strict=True)

    def keys(self) -> KeySequence:
        raise NotImplementedError


class SegmentsPath(_PathNode):
    kind: Literal["segments"] = "segments"
    segments: tuple[Key, ...] = Field(min_length=1)

    def keys(self) -> KeySequence:
        return self.segments


class DelimitedPath(_PathNode):
    kind: Literal["delimited"] = "delimited"
    text: str
    delimiter: str = Field(default=".", min_length=1)

    @model_validator(mode="after")
    def _require_segment(self) -> DelimitedPath:
        if not self.keys():
            raise ValueError(
                f"path {self.text!r} has no segments when split on {self.delimiter!r}"
            )
        return self

    def keys(self) -> KeySequence:
        return tuple(part for part in self.text.split(self.delimiter) if part)


PathSpec: TypeAlias = Annotated[
    SegmentsPath | DelimitedPath,
    Field(discriminator="kind"),
]
PathLike: TypeAlias = str | Sequence[Key] | SegmentsPath | DelimitedPath


def to_path_spec(path: object, *, delimiter: str | None = None) -> PathSpec:
    """Wrap a raw path in its ``SegmentsPath``/``DelimitedPath`` form.

    Raises ``InvalidPathError`` for empty paths and unsupported types.
    """

    if isinstance(path, (SegmentsPath, DelimitedPath)):
        return path

    try:
        if isinstance(path, str):
            if delimiter is None:
                delimiter = get_config().delimiter
            return DelimitedPath(text=path, delimiter=delimiter)
        if isinstance(path, Sequence) and not isinstance(path, (bytes, bytearray)):
            return SegmentsPath(segments=tuple(path))
    except ValidationError as exc:
        raise InvalidPathError(_describe(exc, path), path=path) from exc

    raise InvalidPathError(
        f"path must be a string or a sequence of keys, got {type(path).__name__}",
        path=path,
    )


def resolve_path(path: object, *, delimiter: str | None = None) -> KeySequence:
    """Resolve ``path`` into a non-empty tuple of keys.

    Strings are split on ``delimiter`` (the configured delimiter by default)
    with empty segments dropped, so ``"a..b."`` resolves to ``("a", "b")``.
    Sequences are taken as-is and must hold ``str`` or ``int`` keys.
    """

    return to_path_spec(path, delimiter=delimiter).keys()


def _describe(exc: ValidationError, path: object) -> str:
    errors = exc.errors(include_url=False)
    if not errors:
        return f"invalid path {path!r}"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "invalid value")
    if location:
        return f"invalid path {path!r}: {location}: {message}"
    return f"invalid path {path!r}: {message}"


__all__ = [
    "DelimitedPath",
    "Key",
    "KeySequence",
    "PathLike",
    "PathSpec",
    "SegmentsPath",
    "resolve_path",
    "to_path_spec",
]
