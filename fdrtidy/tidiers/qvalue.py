"""Tidier for q-value results.

``tidy`` shows how the pi0 estimate depends on the tuning parameter lambda,
``augment`` returns the p-values alongside the computed q-values and local
false discovery rates, and ``glance`` returns the chosen pi0 and the lambda
that produced it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import numpy as np
import pandas as pd

from fdrtidy.core.results import get_field
from fdrtidy.tidiers.base import ResultTidier
from fdrtidy.tidiers.finish import TidyTable

logger = logging.getLogger(__name__)

__all__ = ["QValueTidier"]

# (field, smoothed flag) in output order
_PI0_ESTIMATES = (("pi0_lambda", False), ("pi0_smooth", True))


def _column(values: Any, n_rows: int) -> np.ndarray:
    """Copy a column into a fresh array, broadcasting scalars to n_rows."""
    if np.ndim(values) == 0:
        return np.repeat(values, n_rows)
    return np.array(values)


def _build_frame(columns: Iterable[tuple[str, Any]], n_rows: int) -> pd.DataFrame:
    """Build a table column by column.

    Columns are aligned by position. A column shorter than the others is
    padded with missing values. Duplicate names are kept.
    """
    series = [pd.Series(_column(values, n_rows), name=name) for name, values in columns]
    if not series:
        return pd.DataFrame(index=pd.RangeIndex(n_rows))
    return pd.concat(series, axis=1)


class QValueTidier(ResultTidier):
    """Tidier for results of q-value estimation.

    Accepts ``QValueResult`` instances or any object exposing the same fields
    by attribute or key (see ``fdrtidy.core.results``).

    Example:
        tidier = QValueTidier(flavor="frame")
        sweep = tidier.tidy(result)
        records = tidier.augment(result, data=genes_df)
        summary = tidier.glance(result)

    """

    def tidy(self, result: Any) -> TidyTable:
        """Build the lambda sweep table.

        One row per (lambda, estimate) pair with columns ``lambda``, ``pi0``
        and ``smoothed``. Raw estimates come first, then smoothed estimates
        when the smoother was used. Without smoothing every row has
        ``smoothed=False``.

        Args:
            result: Q-value result object

        Returns:
            Finished table

        """
        lambdas = get_field(result, "lambda")
        n_rows = len(lambdas)

        frames = []
        for name, smoothed in _PI0_ESTIMATES:
            estimates = get_field(result, name, required=False)
            if estimates is None:
                continue
            # One flag per row of the longer sequence
            flags = np.repeat(smoothed, max(n_rows, len(estimates)))
            frames.append(
                _build_frame(
                    [("lambda", lambdas), ("pi0", estimates), ("smoothed", flags)], n_rows
                )
            )

        if frames:
            df = pd.concat(frames, ignore_index=True)
        else:
            df = pd.DataFrame(
                {
                    "lambda": pd.Series(dtype=float),
                    "pi0": pd.Series(dtype=float),
                    "smoothed": pd.Series(dtype=bool),
                }
            )
        return self._finish(df)

    def augment(self, result: Any, data: Any = None, **columns: Any) -> TidyTable:
        """Build the per-record table.

        Columns are ``p.value``, ``q.value`` and ``lfdr`` followed by any
        extra ``columns``. When ``data`` is given its columns are placed first,
        matched to records by row position. Where column names collide the
        leftmost column wins, so original data takes precedence over computed
        values.

        Row counts are not checked against each other. Short columns are padded
        with missing values.

        Args:
            result: Q-value result object
            data: Original data, anything ``pandas.DataFrame`` accepts
            **columns: Extra columns, scalars are broadcast to every row

        Returns:
            Finished table

        """
        pvalues = get_field(result, "pvalues")
        n_rows = len(pvalues)
        df = _build_frame(
            [
                ("p.value", pvalues),
                ("q.value", get_field(result, "qvalues")),
                ("lfdr", get_field(result, "lfdr")),
                *columns.items(),
            ],
            n_rows,
        )

        if data is not None:
            original = pd.DataFrame(data).reset_index(drop=True)
            if len(original) != n_rows:
                logger.warning(
                    "Original data has %d rows but result has %d p-values; "
                    "rows are matched by position",
                    len(original),
                    n_rows,
                )
            df = pd.concat([original, df], axis=1)

        df = df.loc[:, ~df.columns.duplicated()]
        return self._finish(df)

    def glance(self, result: Any) -> TidyTable:
        """Build the single-row summary table.

        Columns are ``pi0`` and ``lambda``. The chosen lambda is recovered by
        finding the first smoothed estimate (or raw estimate, without
        smoothing) exactly equal to ``pi0``. When pi0 was capped at 1 there
        may be no match, in which case ``lambda`` is NaN.

        Args:
            result: Q-value result object

        Returns:
            Finished table

        """
        pi0 = get_field(result, "pi0")
        lambdas = np.asarray(get_field(result, "lambda"), dtype=float)

        estimates = get_field(result, "pi0_smooth", required=False)
        if estimates is None:
            estimates = get_field(result, "pi0_lambda", required=False)

        chosen_lambda = np.nan
        if estimates is not None:
            matches = np.flatnonzero(np.asarray(estimates, dtype=float) == pi0)
            if len(matches) > 0 and matches[0] < len(lambdas):
                chosen_lambda = float(lambdas[matches[0]])

        if np.isnan(chosen_lambda):
            logger.debug("No pi0 estimate equals pi0=%r; lambda is undefined", pi0)

        df = pd.DataFrame({"pi0": [float(pi0)], "lambda": [chosen_lambda]})
        return self._finish(df)
