"""segpath services."""

from segpath.services.conversion import PathConverter, absolute_path, file_path

__all__ = ["PathConverter", "absolute_path", "file_path"]
