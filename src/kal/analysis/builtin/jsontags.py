"""jsontags — every field carries a json tag whose name matches a pattern."""

from __future__ import annotations

import re
from typing import List

from kal.analysis.models import Analyzer, Finding, StructField, StructType
from kal.analysis.registry import AnalyzerInitializer, SimpleInitializer
from kal.config.schema import JSONTagsConfig, LintersConfig

NAME = "jsontags"

# camelCase starting with a lower case letter ("fooBar", not "FooBar" or "foo_bar")
DEFAULT_TAG_REGEX = r"^[a-z][a-z0-9]*(?:[A-Z][a-z0-9]*)*$"


class JSONTagsAnalyzer(Analyzer):
    name = NAME
    doc = "Check that all struct fields in an API are tagged with json tags"

    def __init__(self, config: JSONTagsConfig) -> None:
        self.pattern = config.json_tag_regex or DEFAULT_TAG_REGEX
        self._regex = re.compile(self.pattern)

    def check_field(self, struct: StructType, f: StructField) -> List[Finding]:
        tag = f.tag
        if tag.missing:
            return [self.report(struct, f, f"field {f.name} is missing json tag")]
        if tag.ignored or tag.inline:
            return []
        if not tag.name:
            return [self.report(struct, f, f"field {f.name} has empty json tag")]
        if not self._regex.search(tag.name):
            return [
                self.report(
                    struct,
                    f,
                    f'field {f.name} json tag does not match pattern "{self.pattern}": {tag.name}',
                )
            ]
        return []


def _new(config: LintersConfig) -> Analyzer:
    return JSONTagsAnalyzer(config.json_tags)


def initializer() -> AnalyzerInitializer:
    return SimpleInitializer(NAME, _new, default_enabled=True)
