"""Built-in analyzers — registered in this order."""

from typing import List

from kal.analysis.builtin import commentstart, jsontags, nophase, optionalorrequired
from kal.analysis.registry import AnalyzerInitializer

ALL_BUILTIN_INITIALIZERS: List[AnalyzerInitializer] = [
    commentstart.initializer(),
    jsontags.initializer(),
    optionalorrequired.initializer(),
    nophase.initializer(),
]

__all__ = ["ALL_BUILTIN_INITIALIZERS"]
