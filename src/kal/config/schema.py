"""Configuration schema — frozen dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Tuple

WILDCARD = "*"


@dataclass(frozen=True)
class Selection:
    """An enable or disable selection: either every linter, or a set of names.

    Build one with ``Selection.all()``, ``Selection.of(...)`` or
    ``Selection.parse(...)``. A wildcard selection never carries names.
    """

    names: FrozenSet[str] = frozenset()
    wildcard: bool = False

    def __post_init__(self) -> None:
        if self.wildcard and self.names:
            raise ValueError("a wildcard selection cannot also list linter names")

    @classmethod
    def all(cls) -> "Selection":
        return cls(wildcard=True)

    @classmethod
    def of(cls, *names: str) -> "Selection":
        return cls(names=frozenset(names))

    @classmethod
    def parse(cls, values: Iterable[str]) -> "Selection":
        """Map a raw config list to a selection.

        Only a list holding exactly the wildcard selects everything. A ``*``
        mixed in with other names is kept as an ordinary (unknown) name.
        """
        names = frozenset(values)
        if names == {WILDCARD}:
            return cls.all()
        return cls(names=names)

    def has(self, name: str) -> bool:
        """True if *name* is selected explicitly (wildcards never match here)."""
        return not self.wildcard and name in self.names

    def __bool__(self) -> bool:
        return self.wildcard or bool(self.names)


@dataclass(frozen=True)
class Linters:
    """Global enable / disable lists, as written in the config file."""

    enable: Tuple[str, ...] = ()
    disable: Tuple[str, ...] = ()

    @property
    def enabled(self) -> Selection:
        return Selection.parse(self.enable)

    @property
    def disabled(self) -> Selection:
        return Selection.parse(self.disable)

    def extend(
        self, enable: Iterable[str] = (), disable: Iterable[str] = ()
    ) -> "Linters":
        """Return a copy with extra names added to each list.

        A list that is exactly the wildcard, on either side, stays the
        wildcard instead of being concatenated into a mixed list.
        """
        return Linters(
            enable=_merge_names(self.enable, tuple(enable)),
            disable=_merge_names(self.disable, tuple(disable)),
        )


def _merge_names(base: Tuple[str, ...], extra: Tuple[str, ...]) -> Tuple[str, ...]:
    if not extra:
        return base
    if set(base) == {WILDCARD} or set(extra) == {WILDCARD}:
        return (WILDCARD,)
    return base + extra


@dataclass(frozen=True)
class JSONTagsConfig:
    json_tag_regex: str = ""  # empty = built-in camelCase pattern


@dataclass(frozen=True)
class OptionalOrRequiredConfig:
    preferred_optional_marker: str = ""  # optional | kubebuilder:validation:Optional
    preferred_required_marker: str = ""  # required | kubebuilder:validation:Required


@dataclass(frozen=True)
class LintersConfig:
    """Per-linter settings. Each linter reads only its own section."""

    json_tags: JSONTagsConfig = field(default_factory=JSONTagsConfig)
    optional_or_required: OptionalOrRequiredConfig = field(
        default_factory=OptionalOrRequiredConfig
    )


@dataclass(frozen=True)
class KalConfig:
    linters: Linters = field(default_factory=Linters)
    linters_config: LintersConfig = field(default_factory=LintersConfig)
