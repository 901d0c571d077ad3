"""commentstart — field godoc must start with the field's serialized name."""

from __future__ import annotations

from typing import List

from kal.analysis.models import Analyzer, Finding, StructField, StructType
from kal.analysis.registry import AnalyzerInitializer, SimpleInitializer

NAME = "commentstart"


class CommentStartAnalyzer(Analyzer):
    name = NAME
    doc = "Checks that all struct fields in an API have a godoc, and that the godoc starts with the serialised field name"

    def check_field(self, struct: StructType, f: StructField) -> List[Finding]:
        tag = f.tag
        if tag.missing or tag.ignored or tag.inline or not tag.name:
            return []

        doc = f.doc.strip()
        if not doc:
            return [self.report(struct, f, f"field {f.name} is missing godoc comment")]

        if not doc.startswith(tag.name + " "):
            fix = None
            if doc.startswith(f.name + " "):
                fix = tag.name + doc[len(f.name):]
            return [
                self.report(
                    struct,
                    f,
                    f"godoc for field {f.name} should start with '{tag.name} ...'",
                    fix,
                )
            ]
        return []


def initializer() -> AnalyzerInitializer:
    return SimpleInitializer(NAME, lambda _: CommentStartAnalyzer(), default_enabled=True)
