"""Field paths and field-attributed validation errors.

A :class:`Path` points at one field of the configuration schema, e.g.
``lintersConfig.optionalOrRequired.preferredOptionalMarker`` or
``linters.disable[2]``. Validators collect :class:`FieldError` items into an
:class:`ErrorList`; the list is only collapsed into a single exception at the
rendering boundary via :meth:`ErrorList.to_aggregate`.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, List, Optional, Sequence, Tuple


class Path:
    """Immutable, ordered list of field path segments."""

    __slots__ = ("_segments",)

    def __init__(self, *names: str) -> None:
        self._segments: Tuple[str, ...] = tuple(names)

    def child(self, name: str, *more: str) -> "Path":
        return Path(*self._segments, name, *more)

    def index(self, i: int) -> "Path":
        if not self._segments:
            return Path(f"[{i}]")
        return Path(*self._segments[:-1], f"{self._segments[-1]}[{i}]")

    @property
    def segments(self) -> Tuple[str, ...]:
        return self._segments

    def __str__(self) -> str:
        return ".".join(self._segments)

    def __repr__(self) -> str:
        return f"Path({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Path) and other._segments == self._segments

    def __hash__(self) -> int:
        return hash(self._segments)


class ErrorType(str, Enum):
    INVALID = "Invalid value"
    FORBIDDEN = "Forbidden"
    NOT_SUPPORTED = "Unsupported value"
    DUPLICATE = "Duplicate value"


_OMIT = object()


def _format_value(value: Any) -> str:
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    return repr(value)


@dataclass(frozen=True)
class FieldError:
    type: ErrorType
    field: str
    bad_value: Any = _OMIT
    detail: str = ""

    def error(self) -> str:
        """Render as ``<field>: <type>: "<value>": <detail>``."""
        parts = [f"{self.field}: {self.type.value}"]
        if self.bad_value is not _OMIT:
            parts.append(_format_value(self.bad_value))
        if self.detail:
            parts.append(self.detail)
        return ": ".join(parts)

    def __str__(self) -> str:
        return self.error()


def invalid(path: Path, value: Any, detail: str) -> FieldError:
    return FieldError(ErrorType.INVALID, str(path), value, detail)


def forbidden(path: Path, detail: str) -> FieldError:
    return FieldError(ErrorType.FORBIDDEN, str(path), detail=detail)


def duplicate(path: Path, value: Any) -> FieldError:
    return FieldError(ErrorType.DUPLICATE, str(path), value)


def not_supported(path: Path, value: Any, valid_values: Sequence[str]) -> FieldError:
    quoted = ", ".join(_format_value(v) for v in valid_values)
    return FieldError(
        ErrorType.NOT_SUPPORTED, str(path), value, f"supported values: {quoted}"
    )


class ConfigurationError(Exception):
    """Aggregate of one or more field errors. Fatal to the run."""

    def __init__(self, errors: Iterable[FieldError]) -> None:
        self.errors: List[FieldError] = list(errors)
        super().__init__(self._message())

    def _message(self) -> str:
        if len(self.errors) == 1:
            return self.errors[0].error()
        return "[" + ", ".join(e.error() for e in self.errors) + "]"


class ErrorList(list):
    """Ordered collection of field errors."""

    def to_aggregate(self) -> Optional[ConfigurationError]:
        """Collapse into a single exception, or ``None`` when empty."""
        if not self:
            return None
        return ConfigurationError(self)
