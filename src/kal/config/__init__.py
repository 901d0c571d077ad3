"""Configuration loading, schema, and defaults."""

from kal.config.loader import ConfigLoadError, load_config
from kal.config.schema import (
    WILDCARD,
    JSONTagsConfig,
    KalConfig,
    Linters,
    LintersConfig,
    OptionalOrRequiredConfig,
    Selection,
)

__all__ = [
    "WILDCARD",
    "ConfigLoadError",
    "JSONTagsConfig",
    "KalConfig",
    "Linters",
    "LintersConfig",
    "OptionalOrRequiredConfig",
    "Selection",
    "load_config",
]
