"""Analyzer engine — models, registry, built-in analyzers."""

from kal.analysis.models import Analyzer, Finding, StructField, StructType
from kal.analysis.registry import (
    AnalyzerInitializer,
    RegistrationError,
    Registry,
    SimpleInitializer,
    new_registry,
)

__all__ = [
    "Analyzer",
    "AnalyzerInitializer",
    "Finding",
    "RegistrationError",
    "Registry",
    "SimpleInitializer",
    "StructField",
    "StructType",
    "new_registry",
]
