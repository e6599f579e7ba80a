"""Relative path value type."""

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import PurePath
from typing import Any, ClassVar, Union

from segpath.config.models import FoldingPolicy
from segpath.errors import NoRelativePathError, PathKindError
from segpath.models.base import BasePath, checked_segments, has_prefix
from segpath.utils.native import as_pure_path
from segpath.utils.segments import PARENT, chunk, fold_ups

# Anything that can stand on the right of ``/``
SubPath = Union["RelativePath", str, Iterable[Union["RelativePath", str]]]


@dataclass(frozen=True)
class RelativePath(BasePath):
    """
    A normalized relative path.

    ``ups`` counts the leading "go up one level" steps; ``segments``
    never holds empty, ``.`` or ``..`` entries. Equality and hashing
    cover both fields.
    """

    ups: int = 0
    segments: tuple[str, ...] = ()

    up: ClassVar["RelativePath"]
    rel: ClassVar["RelativePath"]

    def __post_init__(self) -> None:
        if not isinstance(self.ups, int) or isinstance(self.ups, bool):
            raise TypeError(f"ups must be an int, got {type(self.ups).__name__}")
        if self.ups < 0:
            raise ValueError(f"ups must be non-negative, got {self.ups}")
        object.__setattr__(self, "segments", checked_segments(self.segments))

    @classmethod
    def of(cls, segments: str | Iterable[str], ups: int = 0) -> "RelativePath":
        """Build a path from literal segments, validating each one."""
        if isinstance(segments, str):
            segments = [segments]
        return cls(ups, tuple(segments))

    @classmethod
    def from_native(cls, native: Any, policy: FoldingPolicy = "partition") -> "RelativePath":
        """
        Parse a relative native path (string, PathLike or file handle).

        Raises:
            PathKindError: If the input is absolute or anchored to a drive.
        """
        pure = as_pure_path(native)
        if pure.anchor:
            raise PathKindError(f"{native} is not a relative path")
        ups, segments = fold_ups(chunk(pure), policy)
        return cls(ups, segments)

    @classmethod
    def from_segments(cls, parts: Iterable["RelativePath | str"]) -> "RelativePath":
        """Join a sequence of segments or relative paths onto ``rel``."""
        result = cls.rel
        for part in parts:
            result = result / part
        return result

    @classmethod
    def coerce(cls, sub: SubPath) -> "RelativePath":
        """Turn the right-hand side of ``/`` into a RelativePath."""
        if isinstance(sub, RelativePath):
            return sub
        if isinstance(sub, str):
            return cls.of(sub)
        if isinstance(sub, PurePath):
            raise TypeError("use RelativePath.from_native() to convert a native path")
        return cls.from_segments(sub)

    def __truediv__(self, sub: SubPath) -> "RelativePath":
        sub = self.coerce(sub)
        kept = self.segments[: max(len(self.segments) - sub.ups, 0)]
        return RelativePath(
            self.ups + max(sub.ups - len(self.segments), 0),
            kept + sub.segments,
        )

    def relative_to(self, base: "RelativePath") -> "RelativePath":
        """
        Find ``p`` such that ``base / p == self``.

        Raises:
            NoRelativePathError: If ``base`` climbs further up than this path.
        """
        if not isinstance(base, RelativePath):
            raise PathKindError(f"Can't relativize a relative path against {base!r}")

        if base.ups < self.ups:
            return RelativePath(self.ups - base.ups + len(base.segments), self.segments)

        if base.ups == self.ups:
            common = 0
            for mine, theirs in zip(self.segments, base.segments):
                if mine != theirs:
                    break
                common += 1
            return RelativePath(len(base.segments) - common, self.segments[common:])

        raise NoRelativePathError(self, base)

    def startswith(self, target: "RelativePath") -> bool:
        """True if ``target`` has the same ups and its segments lead this path's."""
        if not isinstance(target, RelativePath):
            raise PathKindError(f"Can't compare a relative path with {target!r}")
        return self.ups == target.ups and has_prefix(self.segments, target.segments)

    def _sort_key(self) -> tuple[int, int, tuple[str, ...]]:
        return self.ups, len(self.segments), self.segments

    def to_native(self) -> PurePath:
        return PurePath(*([PARENT] * self.ups), *self.segments)

    def __str__(self) -> str:
        return "/".join([PARENT] * self.ups + list(self.segments))


RelativePath.up = RelativePath(1)
RelativePath.rel = RelativePath(0)

up = RelativePath.up
rel = RelativePath.rel
