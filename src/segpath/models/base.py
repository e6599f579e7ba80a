"""Operations shared by relative and absolute paths."""

import functools
from collections.abc import Iterable, Sequence
from typing import Any

from segpath.config.models import ExtensionPolicy
from segpath.utils.segments import check_segment


def has_prefix(segments: Sequence[str], prefix: Sequence[str]) -> bool:
    """True if ``prefix`` is a literal leading run of ``segments``."""
    return len(prefix) <= len(segments) and tuple(segments[: len(prefix)]) == tuple(prefix)


def checked_segments(segments: Iterable[str]) -> tuple[str, ...]:
    """
    Freeze and validate the segments handed to a path constructor.

    Raises:
        TypeError: If ``segments`` is a bare string or holds non-strings.
        InvalidSegmentError: If any entry breaks the segment grammar.
    """
    if isinstance(segments, str):
        raise TypeError(f"segments must be a sequence of strings, not the string {segments!r}")
    frozen = tuple(segments)
    for segment in frozen:
        if not isinstance(segment, str):
            raise TypeError(f"segments must be strings, got {type(segment).__name__}")
        check_segment(segment)
    return frozen


def extension_of(name: str, policy: ExtensionPolicy = "split") -> str:
    """
    Read the extension of a single segment.

    ``split`` splits on every ``.`` and returns the last non-empty
    trailing piece: ``a.tar.gz`` -> ``gz``, ``.gitignore`` -> ``gitignore``,
    ``a.`` -> ``a``.

    ``hidden_aware`` ignores leading dots and returns whatever follows
    the last remaining dot: ``.gitignore`` -> ``""``, ``.env.local`` ->
    ``local``, ``a.`` -> ``""``.
    """
    if policy == "split":
        if "." not in name:
            return ""
        pieces = name.split(".")
        while pieces and not pieces[-1]:
            pieces.pop()
        return pieces[-1] if pieces else ""

    if policy == "hidden_aware":
        stem = name.lstrip(".")
        if "." not in stem:
            return ""
        return stem.rsplit(".", 1)[1]

    raise ValueError(f"Unknown extension policy: {policy!r}")


@functools.total_ordering
class BasePath:
    """
    Mixin for the normalized path values.

    Subclasses are frozen dataclasses with a ``segments`` tuple and
    provide ``_sort_key`` for ordering among values of the same type.
    """

    segments: tuple[str, ...]

    def _sort_key(self) -> tuple[Any, ...]:
        raise NotImplementedError

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._sort_key() < other._sort_key()  # type: ignore[attr-defined]

    @property
    def last(self) -> str:
        """The final segment, usually the file or folder name."""
        if not self.segments:
            raise IndexError(f"{self!r} has no segments")
        return self.segments[-1]

    @property
    def ext(self) -> str:
        """The extension of the last segment, or "" if there is none."""
        return extension_of(self.last)

    def extension(self, policy: ExtensionPolicy = "split") -> str:
        """The extension of the last segment under an explicit policy."""
        return extension_of(self.last, policy)

    def __fspath__(self) -> str:
        return str(self.to_native())  # type: ignore[attr-defined]
