"""Segment validation, chunking and up folding.

These are the leaves every path value is built from: a native
path is chunked into raw strings, literal segments are checked
against the segment grammar, and ``..`` entries are folded into
an up count.
"""

from collections.abc import Iterable
from pathlib import PurePath

from segpath.config.models import FoldingPolicy
from segpath.errors import AbsolutePathOutsideRootError, InvalidSegmentError

PARENT = ".."
CURRENT = "."

_CONVERT_HINT = "use RelativePath.from_native(...) or AbsolutePath.from_native(...) to convert them. "
_EXTERNAL_HINT = "If you are dealing with path-strings coming from external sources, "


def check_segment(segment: str) -> str:
    """
    Validate a single literal path segment.

    Args:
        segment: Candidate segment.

    Returns:
        The segment, unchanged.

    Raises:
        InvalidSegmentError: If the segment is empty, ``.``, ``..``
            or contains a ``/``.
    """
    if "/" in segment:
        raise InvalidSegmentError(
            segment,
            "[/] is not a valid character to appear in a path segment. "
            "If you want to parse an absolute or relative path that may have "
            "multiple segments, e.g. path-strings coming from external sources " + _CONVERT_HINT,
        )
    if segment == "":
        raise InvalidSegmentError(
            segment, "Empty path segments are not allowed. " + _EXTERNAL_HINT + _CONVERT_HINT
        )
    if segment == CURRENT:
        raise InvalidSegmentError(
            segment, "[.] is not allowed as a path segment. " + _EXTERNAL_HINT + _CONVERT_HINT
        )
    if segment == PARENT:
        raise InvalidSegmentError(
            segment,
            "[..] is not allowed as a path segment. "
            + _EXTERNAL_HINT
            + _CONVERT_HINT
            + "To go up one level, join with the `up` path instead, "
            "e.g. an external path foo/bar/../baz translates into rel / 'foo' / 'bar' / up / 'baz'.",
        )
    return segment


def chunk(native: PurePath) -> list[str]:
    """
    Split a native path into raw segment strings.

    The anchor of an absolute path is not a chunk. ``.`` and empty
    components are dropped; ``..`` is kept as a literal entry.
    """
    parts = native.parts
    if native.anchor:
        parts = parts[1:]
    return [part for part in parts if part not in (CURRENT, "")]


def fold_ups(chunks: Iterable[str], policy: FoldingPolicy = "partition") -> tuple[int, tuple[str, ...]]:
    """
    Fold raw chunks into an ``(ups, segments)`` pair.

    ``partition`` counts every ``..`` as an up and keeps the remaining
    chunks in order, without regard to where the ``..`` stood: both
    ``a/b/../c`` and ``../a/b/c`` give ``(1, ("a", "b", "c"))``.

    ``stack`` folds positionally: a ``..`` cancels the preceding
    segment, and only becomes an up when there is none left, so
    ``a/b/../c`` gives ``(0, ("a", "c"))``.
    """
    if policy == "partition":
        chunks = list(chunks)
        rest = tuple(c for c in chunks if c != PARENT)
        return len(chunks) - len(rest), rest

    if policy == "stack":
        ups = 0
        stack: list[str] = []
        for c in chunks:
            if c != PARENT:
                stack.append(c)
            elif stack:
                stack.pop()
            else:
                ups += 1
        return ups, tuple(stack)

    raise ValueError(f"Unknown folding policy: {policy!r}")


def fold_absolute(chunks: list[str]) -> tuple[str, ...]:
    """
    Normalize the chunks of an absolute path.

    Raises:
        AbsolutePathOutsideRootError: If more than half of the chunks
            are ``..``, or if any ``..`` would step above the root.
    """
    if chunks.count(PARENT) > len(chunks) // 2:
        raise AbsolutePathOutsideRootError()

    ups, segments = fold_ups(chunks, "stack")
    if ups:
        raise AbsolutePathOutsideRootError()
    return segments
