"""Base tidier class.

A tidier turns one kind of statistical result object into three tables:
``tidy`` (per-parameter estimates), ``augment`` (per-record values) and
``glance`` (a single summary row). Each result variant gets its own tidier
implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from fdrtidy.tidiers.finish import OutputFlavor, TidyTable, finish, resolve_flavor

__all__ = ["ResultTidier"]


class ResultTidier(ABC):
    """Abstract base class for result tidiers.

    Subclasses build a DataFrame and hand it to ``self._finish`` so every
    table leaves the tidier in the same container type.
    """

    def __init__(self, flavor: OutputFlavor | str | None = None) -> None:
        """Initialize the tidier.

        Args:
            flavor: Output container; defaults to the configured flavor

        """
        self.flavor = resolve_flavor(flavor)

    @abstractmethod
    def tidy(self, result: Any) -> TidyTable:
        """Summarize the estimation procedure, one row per parameter value."""

    @abstractmethod
    def augment(self, result: Any, data: Any = None, **columns: Any) -> TidyTable:
        """Return per-record values, optionally joined onto the original data."""

    @abstractmethod
    def glance(self, result: Any) -> TidyTable:
        """Return a single-row summary of the result."""

    def _finish(self, df: Any) -> TidyTable:
        return finish(df, self.flavor)
