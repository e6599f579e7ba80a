"""segpath error types.

All custom exceptions inherit from SegPathError to allow
catching any segpath-specific error. SegPathError is a
ValueError: every failure here is a bad argument value.
"""

from typing import Any


class SegPathError(ValueError):
    """Base exception for all segpath errors."""

    pass


class InvalidSegmentError(SegPathError):
    """A literal path segment violates the segment grammar."""

    def __init__(self, segment: str, reason: str) -> None:
        super().__init__(f"[{segment}] is not a valid path segment. {reason}")
        self.segment = segment
        self.reason = reason


class AbsolutePathOutsideRootError(SegPathError):
    """An absolute path would have to ascend above its root."""

    def __init__(self) -> None:
        super().__init__(
            "The path created has enough ..s that it would start outside the root directory"
        )


class NoRelativePathError(SegPathError):
    """No relative path leads from base to path."""

    def __init__(self, path: Any, base: Any) -> None:
        super().__init__(f"Can't relativize relative paths {path} from {base}")
        self.path = path
        self.base = base


class PathKindError(SegPathError):
    """An absolute path was given where a relative one is required, or vice versa."""

    pass
