"""optionalorrequired — every field is marked optional or required, once."""

from __future__ import annotations

from typing import List, Optional

from kal.analysis.models import Analyzer, Finding, StructField, StructType
from kal.analysis.registry import AnalyzerInitializer, SimpleInitializer
from kal.config.schema import LintersConfig, OptionalOrRequiredConfig

NAME = "optionalorrequired"

OPTIONAL_MARKER = "optional"
REQUIRED_MARKER = "required"
KUBEBUILDER_OPTIONAL_MARKER = "kubebuilder:validation:Optional"
KUBEBUILDER_REQUIRED_MARKER = "kubebuilder:validation:Required"


class OptionalOrRequiredAnalyzer(Analyzer):
    name = NAME
    doc = "Checks that all struct fields are marked either with the optional or required markers."

    def __init__(self, config: OptionalOrRequiredConfig) -> None:
        self.preferred_optional = config.preferred_optional_marker or OPTIONAL_MARKER
        self.preferred_required = config.preferred_required_marker or REQUIRED_MARKER
        self.secondary_optional = _other(
            self.preferred_optional, OPTIONAL_MARKER, KUBEBUILDER_OPTIONAL_MARKER
        )
        self.secondary_required = _other(
            self.preferred_required, REQUIRED_MARKER, KUBEBUILDER_REQUIRED_MARKER
        )

    def check_field(self, struct: StructType, f: StructField) -> List[Finding]:
        tag = f.tag
        if tag.ignored or tag.inline:
            return []

        has_preferred_optional = f.has_marker(self.preferred_optional)
        has_secondary_optional = f.has_marker(self.secondary_optional)
        has_preferred_required = f.has_marker(self.preferred_required)
        has_secondary_required = f.has_marker(self.secondary_required)

        has_optional = has_preferred_optional or has_secondary_optional
        has_required = has_preferred_required or has_secondary_required

        if has_optional and has_required:
            return [
                self.report(
                    struct, f, f"field {f.name} must not be marked as both optional and required"
                )
            ]
        if not has_optional and not has_required:
            return [
                self.report(struct, f, f"field {f.name} must be marked as optional or required")
            ]

        findings: List[Finding] = []
        if has_secondary_optional:
            findings.append(
                self._prefer(
                    struct, f, self.preferred_optional, self.secondary_optional, has_preferred_optional
                )
            )
        if has_secondary_required:
            findings.append(
                self._prefer(
                    struct, f, self.preferred_required, self.secondary_required, has_preferred_required
                )
            )
        return findings

    def _prefer(
        self,
        struct: StructType,
        f: StructField,
        preferred: str,
        secondary: str,
        has_preferred: bool,
    ) -> Finding:
        # Both present: the fix drops the secondary marker; otherwise it swaps it.
        fix: Optional[str] = None if has_preferred else preferred
        return self.report(
            struct, f, f"field {f.name} should use marker {preferred} instead of {secondary}", fix
        )


def _other(preferred: str, a: str, b: str) -> str:
    return b if preferred == a else a


def _new(config: LintersConfig) -> Analyzer:
    return OptionalOrRequiredAnalyzer(config.optional_or_required)


def initializer() -> AnalyzerInitializer:
    return SimpleInitializer(NAME, _new, default_enabled=True)
