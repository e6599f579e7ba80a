"""Path conversion service.

Maps external path representations (strings, ``os.PathLike`` objects,
open file handles) onto the segpath value types.
"""

from typing import Any

from segpath.config.models import Config
from segpath.models import AbsolutePath, FilePath, RelativePath
from segpath.models.base import BasePath
from segpath.utils.logging import get_logger
from segpath.utils.native import as_pure_path

logger = get_logger(__name__)


class PathConverter:
    """Converts native paths to AbsolutePath / RelativePath values.

    Applies the configured policies:
    - ``folding.policy`` for the ``..`` entries of relative inputs
    - ``extension.policy`` for ``extension()``
    """

    def __init__(self, config: Config | None = None) -> None:
        """Initialize converter with configuration.

        Args:
            config: segpath configuration; defaults when omitted.
        """
        self.config = config or Config()

    def to_relative(self, native: Any) -> RelativePath:
        """Parse a relative native path."""
        return RelativePath.from_native(native, self.config.folding.policy)

    def to_absolute(self, native: Any, base: AbsolutePath | None = None) -> AbsolutePath:
        """Parse an absolute native path, or a relative one resolved against ``base``."""
        return AbsolutePath.from_native(native, base, self.config.folding.policy)

    def convert(self, native: Any) -> FilePath:
        """
        Convert a native path into whichever kind it denotes.

        Args:
            native: String, PathLike or file-handle-like object.

        Returns:
            AbsolutePath if the input is absolute, RelativePath otherwise.
        """
        if isinstance(native, (AbsolutePath, RelativePath)):
            return native

        result: FilePath
        if as_pure_path(native).is_absolute():
            result = self.to_absolute(native)
        else:
            result = self.to_relative(native)
        logger.trace("Converted {!r} to {!r}", native, result)
        return result

    def convert_with_base(self, native: Any, base: AbsolutePath) -> AbsolutePath:
        """
        Convert a native path to an absolute one.

        Relative inputs are joined onto ``base``; absolute inputs are
        returned as they are and ``base`` is ignored.
        """
        converted = self.convert(native)
        if isinstance(converted, RelativePath):
            resolved = base / converted
            logger.debug("Resolved {} against {}: {}", converted, base, resolved)
            return resolved
        return converted

    def extension(self, path: BasePath) -> str:
        """Extension of ``path`` under the configured policy."""
        return path.extension(self.config.extension.policy)


def file_path(native: Any) -> FilePath:
    """Convert a native path with the default policies.

    Unlike ``PathConverter()``, this never consults ``SEGPATH_`` settings.
    """
    if isinstance(native, (AbsolutePath, RelativePath)):
        return native
    if as_pure_path(native).is_absolute():
        return AbsolutePath.from_native(native)
    return RelativePath.from_native(native)


def absolute_path(native: Any, base: AbsolutePath | None = None) -> AbsolutePath:
    """Convert a native path to an absolute one with the default policies.

    Raises:
        PathKindError: If ``native`` is relative and no ``base`` is given.
    """
    return AbsolutePath.from_native(native, base)
