"""Load configuration from .kal.toml / .kal.yaml and KAL_* env vars."""

from __future__ import annotations

import dataclasses
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import yaml

from kal.config.schema import (
    JSONTagsConfig,
    KalConfig,
    Linters,
    LintersConfig,
    OptionalOrRequiredConfig,
)

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = (".kal.toml", ".kal.yaml", ".kal.yml")

# config file key -> dataclass field name
_JSON_TAGS_KEYS = {"jsonTagRegex": "json_tag_regex"}
_OPTIONAL_OR_REQUIRED_KEYS = {
    "preferredOptionalMarker": "preferred_optional_marker",
    "preferredRequiredMarker": "preferred_required_marker",
}


class ConfigLoadError(Exception):
    """Raised when a config file is unreadable or structurally malformed."""


def find_config_file(root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigLoadError(f"Config file not found: {override}")
        return p
    for name in CONFIG_FILENAMES:
        candidate = root / name
        if candidate.is_file():
            return candidate
    return None


def _parse_file(path: Path) -> Dict[str, Any]:
    try:
        if path.suffix in (".yaml", ".yml"):
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        else:
            with open(path, "rb") as f:
                data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError, yaml.YAMLError) as exc:
        raise ConfigLoadError(f"Failed to parse {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigLoadError(f"Failed to parse {path}: top level must be a mapping")
    return data


def _section(data: Mapping[str, Any], key: str, where: str) -> Mapping[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigLoadError(f"{where}.{key} must be a mapping")
    return value


def _string_list(data: Mapping[str, Any], key: str, where: str) -> Tuple[str, ...]:
    value = data.get(key)
    if value is None:
        return ()
    if not isinstance(value, list):
        raise ConfigLoadError(f"{where}.{key} must be a list of linter names")
    for i, item in enumerate(value):
        if not isinstance(item, str):
            raise ConfigLoadError(f"{where}.{key}[{i}] must be a string, got {item!r}")
    return tuple(value)


def _build_section(data: Mapping[str, Any], cls: type, keys: Dict[str, str], where: str):
    """Build a frozen dataclass from a config mapping, ignoring unknown keys."""
    kwargs: Dict[str, str] = {}
    for file_key, field_name in keys.items():
        if file_key not in data or data[file_key] is None:
            continue
        value = data[file_key]
        if not isinstance(value, str):
            raise ConfigLoadError(f"{where}.{file_key} must be a string")
        kwargs[field_name] = value
    return cls(**kwargs)


def parse_config(raw: Mapping[str, Any]) -> KalConfig:
    """Turn an already-deserialized mapping into a KalConfig."""
    linters_raw = _section(raw, "linters", "config")
    linters = Linters(
        enable=_string_list(linters_raw, "enable", "linters"),
        disable=_string_list(linters_raw, "disable", "linters"),
    )

    cfg_raw = _section(raw, "lintersConfig", "config")
    linters_config = LintersConfig(
        json_tags=_build_section(
            _section(cfg_raw, "jsonTags", "lintersConfig"),
            JSONTagsConfig,
            _JSON_TAGS_KEYS,
            "lintersConfig.jsonTags",
        ),
        optional_or_required=_build_section(
            _section(cfg_raw, "optionalOrRequired", "lintersConfig"),
            OptionalOrRequiredConfig,
            _OPTIONAL_OR_REQUIRED_KEYS,
            "lintersConfig.optionalOrRequired",
        ),
    )
    return KalConfig(linters=linters, linters_config=linters_config)


def _split_env(value: str) -> Tuple[str, ...]:
    return tuple(n.strip() for n in value.split(",") if n.strip())


def _merge_env_overrides(cfg: KalConfig) -> KalConfig:
    """Apply KAL_ENABLE / KAL_DISABLE environment variable overrides."""
    linters = cfg.linters.extend(
        enable=_split_env(os.environ.get("KAL_ENABLE", "")),
        disable=_split_env(os.environ.get("KAL_DISABLE", "")),
    )
    return dataclasses.replace(cfg, linters=linters)


def load_config(root: Path, config_override: Optional[str] = None) -> KalConfig:
    """Load and return a KalConfig. Validation is left to the caller."""
    config_path = find_config_file(root, config_override)

    if config_path is None:
        logger.debug("No config file found under %s, using defaults", root)
        cfg = KalConfig()
    else:
        logger.debug("Loading config from %s", config_path)
        cfg = parse_config(_parse_file(config_path))

    return _merge_env_overrides(cfg)
