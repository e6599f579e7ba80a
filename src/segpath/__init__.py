"""Normalized absolute and relative path values.

Paths are immutable values built from validated segments. Nothing
here touches the filesystem except ``AbsolutePath.get_handle``.
"""

from loguru import logger

from segpath.errors import (
    AbsolutePathOutsideRootError,
    InvalidSegmentError,
    NoRelativePathError,
    PathKindError,
    SegPathError,
)
from segpath.models import AbsolutePath, FilePath, RelativePath, rel, up
from segpath.services import PathConverter, absolute_path, file_path
from segpath.utils.segments import check_segment

__version__ = "0.1.0"

# Library records stay silent until configure_logging() is called
logger.disable("segpath")

__all__ = [
    "AbsolutePath",
    "AbsolutePathOutsideRootError",
    "FilePath",
    "InvalidSegmentError",
    "NoRelativePathError",
    "PathConverter",
    "PathKindError",
    "RelativePath",
    "SegPathError",
    "__version__",
    "absolute_path",
    "check_segment",
    "file_path",
    "rel",
    "up",
]
