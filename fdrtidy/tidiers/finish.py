"""Finishing step shared by all tidiers.

Every tidier ends by dropping row labels and converting the table to the
requested output container.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

import numpy as np
import pandas as pd

from fdrtidy.config import config

__all__ = ["OutputFlavor", "TidyTable", "finish", "resolve_flavor"]

TidyTable = pd.DataFrame | list[dict[str, Any]] | dict[str, np.ndarray]


class OutputFlavor(str, Enum):
    """Container type returned by tidiers."""

    FRAME = "frame"
    RECORDS = "records"
    COLUMNS = "columns"


def resolve_flavor(flavor: OutputFlavor | str | None) -> OutputFlavor:
    """Resolve a flavor argument, falling back to the configured default.

    Raises:
        ValueError: If the flavor name is unknown

    """
    if flavor is None:
        flavor = config.output_flavor
    try:
        return OutputFlavor(flavor)
    except ValueError:
        valid = ", ".join(f.value for f in OutputFlavor)
        raise ValueError(f"Unknown output flavor '{flavor}' (expected one of: {valid})")


def finish(df: pd.DataFrame, flavor: OutputFlavor | str) -> TidyTable:
    """Strip row labels and convert a table to the given flavor.

    Args:
        df: Table built by a tidier
        flavor: Output container

    Returns:
        DataFrame with a RangeIndex, list of row dicts, or dict of column arrays

    """
    flavor = OutputFlavor(flavor)
    df = df.reset_index(drop=True)

    if flavor is OutputFlavor.RECORDS:
        return df.to_dict(orient="records")
    if flavor is OutputFlavor.COLUMNS:
        return {str(col): df[col].to_numpy(copy=True) for col in df.columns}
    return df
