"""Path value types for segpath."""

from typing import Union

from segpath.models.absolute import AbsolutePath
from segpath.models.relative import RelativePath, rel, up

FilePath = Union[AbsolutePath, RelativePath]

__all__ = ["AbsolutePath", "FilePath", "RelativePath", "rel", "up"]
