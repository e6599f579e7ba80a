"""Pydantic configuration models for segpath."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

FoldingPolicy = Literal["partition", "stack"]
ExtensionPolicy = Literal["split", "hidden_aware"]


class FoldingConfig(BaseModel):
    """How ``..`` entries of a relative path are folded into its up count.

    ``partition`` counts every ``..`` as an up regardless of position.
    ``stack`` lets a ``..`` cancel the segment before it.
    """

    policy: FoldingPolicy = "partition"


class ExtensionConfig(BaseModel):
    """How the extension of the last segment is read.

    ``split`` returns the final piece after splitting on ``.``, so
    ``.gitignore`` has extension ``gitignore``. ``hidden_aware`` ignores
    leading dots, so ``.gitignore`` has no extension.
    """

    policy: ExtensionPolicy = "split"


class LoggingConfig(BaseModel):
    """Logging configuration for loguru."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    format: Literal["console", "json"] = "console"
    file: Path | None = None
    rotation: str = "10 MB"
    retention: str = "7 days"


class Config(BaseSettings):
    """Root configuration for segpath."""

    folding: FoldingConfig = Field(default_factory=FoldingConfig)
    extension: ExtensionConfig = Field(default_factory=ExtensionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "SEGPATH_",
        "env_nested_delimiter": "__",
    }
