"""Adapters from host path representations to PurePath."""

import os
from pathlib import PurePath
from typing import Any


def as_pure_path(native: Any) -> PurePath:
    """
    Convert a native path representation into a host-flavoured PurePath.

    Accepts strings, ``os.PathLike`` objects (pathlib paths and segpath
    values alike) and file-handle-like objects exposing a ``name``.

    Raises:
        TypeError: If the value has no path representation.
    """
    if isinstance(native, PurePath):
        return native
    if isinstance(native, (str, os.PathLike)):
        return PurePath(os.fspath(native))

    # Open file objects and similar handles carry their path in .name
    name = getattr(native, "name", None)
    if isinstance(name, (str, os.PathLike)):
        return PurePath(os.fspath(name))

    raise TypeError(f"Cannot convert {type(native).__name__} to a path")
