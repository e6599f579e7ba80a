"""Absolute path value type."""

from dataclasses import dataclass, field
from pathlib import Path, PurePath
from typing import Any, BinaryIO

from segpath.config.models import FoldingPolicy
from segpath.errors import AbsolutePathOutsideRootError, PathKindError
from segpath.models.base import BasePath, checked_segments, has_prefix
from segpath.models.relative import RelativePath, SubPath
from segpath.utils.native import as_pure_path
from segpath.utils.segments import chunk, fold_absolute


@dataclass(frozen=True)
class AbsolutePath(BasePath):
    """
    A normalized absolute path.

    ``root`` is the anchor the path hangs from (``/``, ``C:\\``, ...)
    and is carried along without being interpreted. Equality, hashing
    and ordering look at ``segments`` only.
    """

    root: PurePath = field(compare=False)
    segments: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        root = PurePath(self.root) if isinstance(self.root, str) else self.root
        if not root.anchor or root != PurePath(root.anchor):
            raise ValueError(f"root must be a bare path anchor, got {self.root!r}")
        object.__setattr__(self, "root", root)
        object.__setattr__(self, "segments", checked_segments(self.segments))

    @classmethod
    def from_native(
        cls,
        native: Any,
        base: "AbsolutePath | None" = None,
        policy: FoldingPolicy = "partition",
    ) -> "AbsolutePath":
        """
        Parse an absolute native path (string, PathLike or file handle).

        A relative input is resolved against ``base`` when one is given;
        ``policy`` controls how its ``..`` entries fold before the join.

        Raises:
            PathKindError: If the input is relative and no base is given.
            AbsolutePathOutsideRootError: If the input climbs above its root.
        """
        pure = as_pure_path(native)
        if not pure.is_absolute():
            if base is None:
                raise PathKindError(f"{native} is not an absolute path")
            return base / RelativePath.from_native(pure, policy)

        return cls(PurePath(pure.anchor), fold_absolute(chunk(pure)))

    def __truediv__(self, sub: SubPath) -> "AbsolutePath":
        sub = RelativePath.coerce(sub)
        if sub.ups > len(self.segments):
            raise AbsolutePathOutsideRootError()
        kept = self.segments[: len(self.segments) - sub.ups]
        return AbsolutePath(self.root, kept + sub.segments)

    def relative_to(self, base: "AbsolutePath") -> RelativePath:
        """Find ``p`` such that ``base / p == self``."""
        if not isinstance(base, AbsolutePath):
            raise PathKindError(f"Can't relativize an absolute path against {base!r}")

        trimmed = base.segments
        ups = 0
        while not has_prefix(self.segments, trimmed):
            trimmed = trimmed[:-1]
            ups += 1
        return RelativePath(ups, self.segments[len(trimmed) :])

    def startswith(self, target: "AbsolutePath") -> bool:
        """True if ``target``'s segments lead this path's; roots are ignored."""
        if not isinstance(target, AbsolutePath):
            raise PathKindError(f"Can't compare an absolute path with {target!r}")
        return has_prefix(self.segments, target.segments)

    def _sort_key(self) -> tuple[int, tuple[str, ...]]:
        return len(self.segments), self.segments

    def to_native(self) -> PurePath:
        return self.root.joinpath(*self.segments)

    def get_handle(self) -> BinaryIO:
        """Open the file at this path for seekable binary reading."""
        return Path(self.to_native()).open("rb")

    def __str__(self) -> str:
        return str(self.to_native())
