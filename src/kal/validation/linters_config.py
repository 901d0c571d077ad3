"""Structural validation of per-linter configuration sections."""

from __future__ import annotations

import re
from typing import Sequence

from kal.config.schema import JSONTagsConfig, LintersConfig, OptionalOrRequiredConfig
from kal.validation.field import ErrorList, Path, invalid

OPTIONAL_MARKERS = ("optional", "kubebuilder:validation:Optional")
REQUIRED_MARKERS = ("required", "kubebuilder:validation:Required")


def _one_of(allowed: Sequence[str]) -> str:
    quoted = ", ".join(f'"{v}"' for v in allowed)
    return f"invalid value, must be one of {quoted} or omitted"


def validate_linters_config(config: LintersConfig, path: Path) -> ErrorList:
    """Validate every linter section; never stops at the first problem."""
    errs = ErrorList()
    errs.extend(validate_json_tags_config(config.json_tags, path.child("jsonTags")))
    errs.extend(
        validate_optional_or_required_config(
            config.optional_or_required, path.child("optionalOrRequired")
        )
    )
    return errs


def validate_json_tags_config(config: JSONTagsConfig, path: Path) -> ErrorList:
    errs = ErrorList()

    if config.json_tag_regex:
        try:
            re.compile(config.json_tag_regex)
        except re.error as exc:
            errs.append(
                invalid(
                    path.child("jsonTagRegex"),
                    config.json_tag_regex,
                    f"invalid regex: {exc}",
                )
            )

    return errs


def validate_optional_or_required_config(
    config: OptionalOrRequiredConfig, path: Path
) -> ErrorList:
    errs = ErrorList()

    optional = config.preferred_optional_marker
    if optional and optional not in OPTIONAL_MARKERS:
        errs.append(
            invalid(path.child("preferredOptionalMarker"), optional, _one_of(OPTIONAL_MARKERS))
        )

    required = config.preferred_required_marker
    if required and required not in REQUIRED_MARKERS:
        errs.append(
            invalid(path.child("preferredRequiredMarker"), required, _one_of(REQUIRED_MARKERS))
        )

    return errs
