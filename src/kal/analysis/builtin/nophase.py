"""nophase — phase fields are deprecated in favour of conditions."""

from __future__ import annotations

from typing import List

from kal.analysis.models import Analyzer, Finding, StructField, StructType
from kal.analysis.registry import AnalyzerInitializer, SimpleInitializer

NAME = "nophase"


def _is_phase(name: str) -> bool:
    return name.endswith("Phase") or name.endswith("phase")


class NoPhaseAnalyzer(Analyzer):
    name = NAME
    doc = "phase fields are deprecated and conditions should be preferred, avoid phase like enum fields"

    def check_field(self, struct: StructType, f: StructField) -> List[Finding]:
        tag = f.tag
        if tag.ignored:
            return []
        if _is_phase(f.name) or _is_phase(tag.name):
            return [
                self.report(
                    struct,
                    f,
                    f"field {f.name}: phase fields are deprecated and conditions should be "
                    "preferred, avoid phase like enum fields",
                )
            ]
        return []


def initializer() -> AnalyzerInitializer:
    return SimpleInitializer(NAME, lambda _: NoPhaseAnalyzer(), default_enabled=True)
