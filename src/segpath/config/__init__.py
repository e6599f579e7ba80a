"""Configuration management for segpath."""

from segpath.config.loader import load_config
from segpath.config.models import Config, ExtensionConfig, FoldingConfig, LoggingConfig

__all__ = ["Config", "ExtensionConfig", "FoldingConfig", "LoggingConfig", "load_config"]
