"""Tidiers for statistical result objects.

This package turns result objects into standardized tables:

- tidy: one row per tuning parameter value (lambda sweep)
- augment: one row per tested record
- glance: a single summary row

A tidier is selected by the type of the result object. ``QValueResult`` and
plain mappings map to ``QValueTidier``; other result variants register their
own ``ResultTidier`` subclass with ``register_tidier``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fdrtidy.core.results import QValueResult, get_field
from fdrtidy.tidiers.base import ResultTidier
from fdrtidy.tidiers.finish import OutputFlavor, TidyTable, finish, resolve_flavor
from fdrtidy.tidiers.qvalue import QValueTidier

__all__ = [
    "OutputFlavor",
    "QValueTidier",
    "ResultTidier",
    "TidyTable",
    "augment",
    "finish",
    "get_tidier",
    "glance",
    "register_tidier",
    "resolve_flavor",
    "tidy",
]

_TIDIERS: dict[type, type[ResultTidier]] = {}


def register_tidier(result_type: type, tidier_cls: type[ResultTidier]) -> None:
    """Register the tidier class used for a result type.

    Args:
        result_type: Result class (subclasses match too)
        tidier_cls: ResultTidier subclass to instantiate

    """
    _TIDIERS[result_type] = tidier_cls


def get_tidier(result: Any, flavor: OutputFlavor | str | None = None) -> ResultTidier:
    """Get a tidier instance for a result object.

    Exact type matches are preferred over base-class matches. Unregistered
    objects that expose ``pvalues`` are treated as q-value results.

    Args:
        result: Result object
        flavor: Output container; defaults to the configured flavor

    Returns:
        Tidier instance

    Raises:
        TypeError: If no tidier handles the result type

    """
    for cls in type(result).__mro__:
        if cls in _TIDIERS:
            return _TIDIERS[cls](flavor)

    for result_type, tidier_cls in _TIDIERS.items():
        if isinstance(result, result_type):
            return tidier_cls(flavor)

    if get_field(result, "pvalues", required=False) is not None:
        return QValueTidier(flavor)

    raise TypeError(f"No tidier registered for {type(result).__name__}")


def tidy(result: Any, flavor: OutputFlavor | str | None = None) -> TidyTable:
    """Tidy a result object into a per-parameter table."""
    return get_tidier(result, flavor).tidy(result)


def augment(
    result: Any,
    data: Any = None,
    flavor: OutputFlavor | str | None = None,
    **columns: Any,
) -> TidyTable:
    """Augment original data with per-record values from a result object."""
    return get_tidier(result, flavor).augment(result, data, **columns)


def glance(result: Any, flavor: OutputFlavor | str | None = None) -> TidyTable:
    """Summarize a result object in a single row."""
    return get_tidier(result, flavor).glance(result)


register_tidier(QValueResult, QValueTidier)
register_tidier(Mapping, QValueTidier)
