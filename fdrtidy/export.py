"""Rendering of finished tables as text.

Accepts a table in any output flavor and renders it as CSV, JSON, Markdown
or LaTeX.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import numpy as np
import pandas as pd

from fdrtidy.config import config
from fdrtidy.tidiers.finish import TidyTable

__all__ = ["FORMATS", "as_frame", "render", "to_csv", "to_json", "to_latex", "to_markdown"]

FORMATS = ("csv", "json", "markdown", "latex")

_LATEX_SPECIAL = {
    "&": r"\&",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
}


def as_frame(table: TidyTable) -> pd.DataFrame:
    """Convert a table of any flavor back to a DataFrame.

    Raises:
        TypeError: If the table is not a DataFrame, list of rows or column mapping

    """
    if isinstance(table, pd.DataFrame):
        return table
    if isinstance(table, list):
        return pd.DataFrame.from_records(table)
    if isinstance(table, Mapping):
        return pd.DataFrame(dict(table))
    raise TypeError(f"Cannot render {type(table).__name__} as a table")


def _format_cell(value: Any, missing: str) -> str:
    if isinstance(value, (bool, np.bool_)):
        return "TRUE" if value else "FALSE"
    if pd.isna(value):
        return missing
    if isinstance(value, (float, np.floating)):
        return f"{value:.{config.precision}f}"
    return str(value)


def _latex_align(series: pd.Series) -> str:
    if pd.api.types.is_bool_dtype(series):
        return "l"
    return "r" if pd.api.types.is_numeric_dtype(series) else "l"


def _latex_escape(text: str) -> str:
    return "".join(_LATEX_SPECIAL.get(ch, ch) for ch in text)


def to_csv(table: TidyTable) -> str:
    """Render a table as CSV, writing missing values as NA."""
    return as_frame(table).to_csv(index=False, na_rep="NA")


def to_json(table: TidyTable) -> str:
    """Render a table as a JSON array of row objects (NaN becomes null)."""
    return as_frame(table).to_json(orient="records")


def to_markdown(table: TidyTable, title: str | None = None) -> str:
    """Render a table as a Markdown pipe table.

    Args:
        table: Finished table
        title: Optional heading placed above the table

    Returns:
        Markdown text

    """
    df = as_frame(table)
    columns = [str(col) for col in df.columns]

    md_lines = []
    if title:
        md_lines.extend([f"# {title}", ""])
    md_lines.append("| " + " | ".join(columns) + " |")
    md_lines.append("|" + "|".join("-" * (len(col) + 2) for col in columns) + "|")

    for row in df.itertuples(index=False, name=None):
        cells = [_format_cell(value, "NA") for value in row]
        md_lines.append("| " + " | ".join(cells) + " |")

    return "\n".join(md_lines)


def to_latex(table: TidyTable, caption: str | None = None, label: str | None = None) -> str:
    """Render a table as a LaTeX booktabs table.

    Args:
        table: Finished table
        caption: Optional table caption
        label: Optional reference label

    Returns:
        LaTeX source

    """
    df = as_frame(table)
    align = "".join(_latex_align(df[col]) for col in df.columns)

    latex_lines = [r"\begin{table}[htbp]", r"\centering"]
    if caption:
        latex_lines.append(rf"\caption{{{_latex_escape(caption)}}}")
    if label:
        latex_lines.append(rf"\label{{{label}}}")
    latex_lines.extend(
        [
            rf"\begin{{tabular}}{{{align}}}",
            r"\toprule",
            " & ".join(_latex_escape(str(col)) for col in df.columns) + r" \\",
            r"\midrule",
        ]
    )

    for row in df.itertuples(index=False, name=None):
        cells = [_latex_escape(_format_cell(value, "--")) for value in row]
        latex_lines.append(" & ".join(cells) + r" \\")

    latex_lines.extend([r"\bottomrule", r"\end{tabular}", r"\end{table}"])
    return "\n".join(latex_lines)


def render(table: TidyTable, fmt: str) -> str:
    """Render a table in the named format.

    Raises:
        ValueError: If the format is unknown

    """
    if fmt == "csv":
        return to_csv(table)
    if fmt == "json":
        return to_json(table)
    if fmt == "markdown":
        return to_markdown(table)
    if fmt == "latex":
        return to_latex(table)
    raise ValueError(f"Unknown format '{fmt}' (expected one of: {', '.join(FORMATS)})")
