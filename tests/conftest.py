"""Shared test fixtures — fake initializers, registries, parsed structs."""

from __future__ import annotations

from typing import List

import pytest

from kal.analysis.models import Analyzer, Finding, StructField, StructType
from kal.analysis.registry import Registry, SimpleInitializer
from kal.config.schema import LintersConfig


class RecordingAnalyzer(Analyzer):
    """Analyzer that reports nothing but remembers the config it was built with."""

    def __init__(self, name: str, config: LintersConfig) -> None:
        self.name = name
        self.config = config

    def check_field(self, struct: StructType, f: StructField) -> List[Finding]:
        return []


def make_initializer(name: str, default_enabled: bool) -> SimpleInitializer:
    return SimpleInitializer(
        name, lambda cfg: RecordingAnalyzer(name, cfg), default_enabled=default_enabled
    )


@pytest.fixture
def abc_registry() -> Registry:
    """A=on, B=off, C=on, registered in that order."""
    return Registry(
        [
            make_initializer("A", True),
            make_initializer("B", False),
            make_initializer("C", True),
        ]
    )


@pytest.fixture
def sample_structs() -> List[StructType]:
    return [
        StructType(
            name="WidgetSpec",
            fields=(
                StructField(
                    name="Replicas",
                    json_tag="replicas,omitempty",
                    doc="replicas is the number of widgets.",
                    markers=("optional",),
                ),
                StructField(
                    name="Image",
                    json_tag="image",
                    doc="image is the container image.",
                    markers=("required",),
                ),
            ),
        )
    ]
