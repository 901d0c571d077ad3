"""Analyzer registry — ordered initializers plus enable/disable resolution.

A :class:`Registry` is built once, up front, from a fixed list of
initializers and is read-only afterwards, so its queries can be shared
between threads without locking. Callers construct it explicitly
(``new_registry()`` for the built-ins) and pass it to whatever needs it.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional, Tuple

from kal.analysis.models import Analyzer
from kal.config.schema import Linters, LintersConfig, Selection

logger = logging.getLogger(__name__)


class RegistrationError(Exception):
    """Raised when initializers are wired up incorrectly (duplicate or empty name)."""


class AnalyzerInitializer(ABC):
    """Registration record for one analyzer: identity, default policy, constructor."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the analyzer this initializer builds."""

    @property
    @abstractmethod
    def default_enabled(self) -> bool:
        """Whether the analyzer runs when nothing enables or disables it."""

    @abstractmethod
    def init(self, config: LintersConfig) -> Analyzer:
        """Build a new analyzer.

        It is passed the complete LintersConfig and is expected to read only
        its own section.
        """


class SimpleInitializer(AnalyzerInitializer):
    """Initializer backed by a plain factory callable."""

    def __init__(
        self,
        name: str,
        factory: Callable[[LintersConfig], Analyzer],
        *,
        default_enabled: bool = True,
    ) -> None:
        self._name = name
        self._factory = factory
        self._default_enabled = default_enabled

    @property
    def name(self) -> str:
        return self._name

    @property
    def default_enabled(self) -> bool:
        return self._default_enabled

    def init(self, config: LintersConfig) -> Analyzer:
        return self._factory(config)

    def __repr__(self) -> str:
        return f"SimpleInitializer({self._name!r}, default_enabled={self._default_enabled})"


class Registry:
    """Fixed, ordered set of analyzer initializers."""

    def __init__(self, initializers: Iterable[AnalyzerInitializer]) -> None:
        self._initializers: Tuple[AnalyzerInitializer, ...] = tuple(initializers)
        self._by_name: Dict[str, AnalyzerInitializer] = {}

        for initializer in self._initializers:
            name = initializer.name
            if not name:
                raise RegistrationError(f"initializer {initializer!r} has an empty name")
            if name in self._by_name:
                raise RegistrationError(f"duplicate analyzer name: {name}")
            self._by_name[name] = initializer

    # ---- queries ----

    @property
    def initializers(self) -> Tuple[AnalyzerInitializer, ...]:
        return self._initializers

    def names(self) -> List[str]:
        """Analyzer names in registration order."""
        return [i.name for i in self._initializers]

    def get(self, name: str) -> Optional[AnalyzerInitializer]:
        return self._by_name.get(name)

    def all_linters(self) -> FrozenSet[str]:
        """Names of every registered linter."""
        return frozenset(self._by_name)

    def default_linters(self) -> FrozenSet[str]:
        """Names of the linters that are enabled by default."""
        return frozenset(i.name for i in self._initializers if i.default_enabled)

    # ---- resolution ----

    def is_enabled(self, initializer: AnalyzerInitializer, linters: Linters) -> bool:
        """Apply the override policy to a single initializer.

        An explicit disable beats everything, including ``enable: ["*"]``.
        Otherwise the linter runs when everything is enabled, when it is
        named in ``enable``, or when it is on by default and ``disable`` is
        not the wildcard.
        """
        return _included(initializer, linters.enabled, linters.disabled)

    def initialize_linters(
        self, linters: Linters, config: LintersConfig
    ) -> List[Analyzer]:
        """Return newly built analyzers for the selected linters, in registration order.

        Unknown names in *linters* are ignored. *config* is assumed to have
        passed validation already; a factory failing on it propagates.
        """
        analyzers: List[Analyzer] = []
        enabled = linters.enabled
        disabled = linters.disabled

        for initializer in self._initializers:
            if not _included(initializer, enabled, disabled):
                logger.debug("Skipping linter %s", initializer.name)
                continue
            analyzers.append(initializer.init(config))

        logger.debug(
            "Initialized %d linter(s): %s",
            len(analyzers),
            ", ".join(a.name for a in analyzers),
        )
        return analyzers


def _included(
    initializer: AnalyzerInitializer, enabled: Selection, disabled: Selection
) -> bool:
    name = initializer.name
    if disabled.has(name):
        return False
    return (
        enabled.wildcard
        or enabled.has(name)
        or (not disabled.wildcard and initializer.default_enabled)
    )


def new_registry() -> Registry:
    """Create a registry holding every built-in analyzer."""
    from kal.analysis.builtin import ALL_BUILTIN_INITIALIZERS

    return Registry(ALL_BUILTIN_INITIALIZERS)
