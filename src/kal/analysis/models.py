"""Analyzer contract and the parsed-source model analyzers run over.

Parsing Go source is done elsewhere; analyzers only see :class:`StructType`
values whose fields carry the raw ``json`` tag, the doc comment text and the
``// +marker`` lines found above them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple


@dataclass(frozen=True)
class JSONTag:
    """Parsed ``json:"..."`` struct tag."""

    name: str = ""
    inline: bool = False
    ignored: bool = False
    missing: bool = False
    raw: str = ""


def parse_json_tag(raw: Optional[str]) -> JSONTag:
    """Parse the value of a json struct tag (``"name,omitempty"``)."""
    if raw is None:
        return JSONTag(missing=True)
    if raw == "-":
        return JSONTag(ignored=True, raw=raw)

    name, _, opts = raw.partition(",")
    options = [o.strip() for o in opts.split(",")] if opts else []
    return JSONTag(name=name, inline="inline" in options, raw=raw)


@dataclass(frozen=True)
class StructField:
    name: str
    json_tag: Optional[str] = None  # raw tag value, None when absent
    doc: str = ""
    markers: Tuple[str, ...] = ()

    @property
    def tag(self) -> JSONTag:
        return parse_json_tag(self.json_tag)

    def has_marker(self, marker: str) -> bool:
        return marker in self.markers


@dataclass(frozen=True)
class StructType:
    name: str
    fields: Tuple[StructField, ...] = ()


@dataclass(frozen=True)
class Finding:
    """A single problem reported by an analyzer."""

    analyzer: str
    struct: str
    field: str
    message: str
    suggested_fix: Optional[str] = None


class Analyzer(ABC):
    """An instantiated inspection unit, produced by an initializer's factory.

    Subclasses set ``name`` and ``doc`` and implement :meth:`check_field`.
    """

    name: str
    doc: str = ""

    def run(self, structs: Iterable[StructType]) -> List[Finding]:
        findings: List[Finding] = []
        for struct in structs:
            for f in struct.fields:
                findings.extend(self.check_field(struct, f))
        return findings

    @abstractmethod
    def check_field(self, struct: StructType, f: StructField) -> List[Finding]:
        ...

    def report(
        self, struct: StructType, f: StructField, message: str, fix: Optional[str] = None
    ) -> Finding:
        return Finding(
            analyzer=self.name,
            struct=struct.name,
            field=f.name,
            message=message,
            suggested_fix=fix,
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"

