"""segpath utility modules."""

from segpath.utils.logging import configure_logging, get_logger
from segpath.utils.native import as_pure_path
from segpath.utils.segments import check_segment, chunk, fold_absolute, fold_ups

__all__ = [
    "as_pure_path",
    "check_segment",
    "chunk",
    "configure_logging",
    "fold_absolute",
    "fold_ups",
    "get_logger",
]
