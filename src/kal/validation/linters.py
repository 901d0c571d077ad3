"""Validation of the global enable / disable linter lists."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence, Set

from kal.config.schema import WILDCARD, Linters
from kal.validation.field import ErrorList, Path, duplicate, forbidden, invalid, not_supported

if TYPE_CHECKING:
    from kal.analysis.registry import Registry


def _validate_list(
    values: Sequence[str],
    path: Path,
    known: Optional[Sequence[str]],
) -> ErrorList:
    errs = ErrorList()

    if WILDCARD in values and set(values) - {WILDCARD}:
        errs.append(
            invalid(
                path,
                list(values),
                f'must not contain "{WILDCARD}" alongside other linter names',
            )
        )

    seen: Set[str] = set()
    for i, name in enumerate(values):
        if name in seen:
            errs.append(duplicate(path.index(i), name))
        seen.add(name)

        if known is not None and name != WILDCARD and name not in known:
            errs.append(not_supported(path.index(i), name, known))

    return errs


def validate_linters(
    linters: Linters,
    path: Path,
    registry: Optional["Registry"] = None,
    *,
    strict: bool = False,
) -> ErrorList:
    """Validate the enable / disable lists.

    Mixing the wildcard with names and repeating a name are always reported.
    With ``strict=True`` a name that is both enabled and disabled is rejected,
    and, when *registry* is given, so are names it does not know. Without
    ``strict`` those requests resolve silently (disable wins, unknown names
    are ignored).
    """
    known: Optional[Sequence[str]] = None
    if strict and registry is not None:
        known = sorted(registry.all_linters())

    errs = ErrorList()
    errs.extend(_validate_list(linters.enable, path.child("enable"), known))
    errs.extend(_validate_list(linters.disable, path.child("disable"), known))

    if strict:
        enabled = set(linters.enable) - {WILDCARD}
        for i, name in enumerate(linters.disable):
            if name in enabled:
                errs.append(
                    forbidden(
                        path.child("disable").index(i),
                        f"linter {name} cannot be both enabled and disabled",
                    )
                )

    return errs
