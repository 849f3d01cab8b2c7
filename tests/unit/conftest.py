"""Shared fixtures for fdrtidy tests."""

import pandas as pd
import pytest

from fdrtidy.core.results import QValueResult


@pytest.fixture
def bootstrap_result() -> QValueResult:
    """Result estimated without smoothing (pi0_smooth absent)."""
    return QValueResult(
        pvalues=(0.01, 0.5, 0.8),
        qvalues=(0.03, 0.6, 0.8),
        lfdr=(0.02, 0.55, 0.79),
        lambda_=(0.1, 0.2, 0.3),
        pi0_lambda=(0.9, 0.8, 0.95),
        pi0=0.8,
    )


@pytest.fixture
def smoother_result() -> QValueResult:
    """Result estimated with the smoother (pi0_smooth present)."""
    return QValueResult(
        pvalues=(0.01, 0.5, 0.8),
        qvalues=(0.03, 0.6, 0.8),
        lfdr=(0.02, 0.55, 0.79),
        lambda_=(0.1, 0.2, 0.3),
        pi0_lambda=(0.9, 0.95, 0.8),
        pi0_smooth=(0.85, 0.8, 0.9),
        pi0=0.8,
    )


@pytest.fixture
def result_dict() -> dict:
    """Result as a plain mapping using the R-style dotted field names."""
    return {
        "pvalues": [0.01, 0.5, 0.8],
        "qvalues": [0.03, 0.6, 0.8],
        "lfdr": [0.02, 0.55, 0.79],
        "lambda": [0.1, 0.2, 0.3],
        "pi0.lambda": [0.9, 0.8, 0.95],
        "pi0": 0.8,
    }


@pytest.fixture
def genes_df() -> pd.DataFrame:
    """Original data, one row per p-value, with a non-default index."""
    return pd.DataFrame(
        {"gene": ["BRCA1", "TP53", "EGFR"], "log_fc": [2.1, -0.3, 0.05]},
        index=[10, 11, 12],
    )
