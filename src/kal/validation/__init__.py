"""Configuration validation — field-attributed, exhaustively collected errors."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from kal.config.schema import KalConfig
from kal.validation.field import ConfigurationError, ErrorList, FieldError, Path
from kal.validation.linters import validate_linters
from kal.validation.linters_config import validate_linters_config

if TYPE_CHECKING:
    from kal.analysis.registry import Registry


def validate_config(
    config: KalConfig,
    registry: Optional["Registry"] = None,
    *,
    strict: bool = False,
) -> ErrorList:
    """Validate a whole KalConfig under the ``linters`` and ``lintersConfig`` paths."""
    errs = ErrorList()
    errs.extend(validate_linters(config.linters, Path("linters"), registry, strict=strict))
    errs.extend(validate_linters_config(config.linters_config, Path("lintersConfig")))
    return errs


__all__ = [
    "ConfigurationError",
    "ErrorList",
    "FieldError",
    "Path",
    "validate_config",
    "validate_linters",
    "validate_linters_config",
]
