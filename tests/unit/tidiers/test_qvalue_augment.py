"""Tests for the per-record table (QValueTidier.augment)."""

import logging

import numpy as np
import pandas as pd
import pytest

from fdrtidy.core.results import MissingFieldError
from fdrtidy.tidiers.qvalue import QValueTidier


@pytest.fixture
def tidier() -> QValueTidier:
    return QValueTidier(flavor="frame")


class TestAugmentWithoutData:
    """Tests for augment() without original data."""

    def test_end_to_end(self, tidier, bootstrap_result) -> None:
        """Values pass through unchanged and in order."""
        df = tidier.augment(bootstrap_result)

        assert len(df) == 3
        assert list(df.columns) == ["p.value", "q.value", "lfdr"]
        assert df["p.value"].tolist() == [0.01, 0.5, 0.8]
        assert df["q.value"].tolist() == [0.03, 0.6, 0.8]
        assert df["lfdr"].tolist() == [0.02, 0.55, 0.79]

    def test_accepts_mapping(self, tidier, result_dict) -> None:
        df = tidier.augment(result_dict)
        assert df["p.value"].tolist() == [0.01, 0.5, 0.8]

    def test_extra_vector_column(self, tidier, bootstrap_result) -> None:
        df = tidier.augment(bootstrap_result, significant=[True, False, False])

        assert list(df.columns) == ["p.value", "q.value", "lfdr", "significant"]
        assert df["significant"].tolist() == [True, False, False]

    def test_extra_scalar_column_broadcast(self, tidier, bootstrap_result) -> None:
        df = tidier.augment(bootstrap_result, method="bootstrap")
        assert df["method"].tolist() == ["bootstrap"] * 3

    def test_extra_column_cannot_replace_computed(self, tidier, bootstrap_result) -> None:
        """A same-named extra column loses to the computed one."""
        df = tidier.augment(bootstrap_result, **{"lfdr": [1.0, 1.0, 1.0]})

        assert list(df.columns) == ["p.value", "q.value", "lfdr"]
        assert df["lfdr"].tolist() == [0.02, 0.55, 0.79]

    def test_range_index(self, tidier, bootstrap_result) -> None:
        df = tidier.augment(bootstrap_result)
        assert isinstance(df.index, pd.RangeIndex)

    def test_missing_qvalues_raises(self, tidier) -> None:
        with pytest.raises(MissingFieldError, match="qvalues"):
            tidier.augment({"pvalues": [0.1], "lfdr": [0.1]})

    def test_mismatched_lengths_are_padded(self, tidier) -> None:
        """Inconsistent lengths give padded output rather than an error."""
        df = tidier.augment({"pvalues": [0.1, 0.2, 0.3], "qvalues": [0.1, 0.2], "lfdr": [0.1]})

        assert len(df) == 3
        assert np.isnan(df["q.value"].iloc[2])
        assert df["lfdr"].isna().sum() == 2


class TestAugmentWithData:
    """Tests for augment() with original data."""

    def test_data_columns_come_first(self, tidier, bootstrap_result, genes_df) -> None:
        df = tidier.augment(bootstrap_result, data=genes_df)

        assert list(df.columns) == ["gene", "log_fc", "p.value", "q.value", "lfdr"]
        assert len(df) == 3

    def test_aligned_by_position(self, tidier, bootstrap_result, genes_df) -> None:
        """The original index is discarded; rows match by position."""
        df = tidier.augment(bootstrap_result, data=genes_df)

        assert df.index.tolist() == [0, 1, 2]
        assert df["gene"].tolist() == ["BRCA1", "TP53", "EGFR"]
        assert df["p.value"].tolist() == [0.01, 0.5, 0.8]

    def test_data_column_takes_precedence(self, tidier, bootstrap_result) -> None:
        """A data column named p.value wins over the computed p-values."""
        data = pd.DataFrame({"p.value": [0.2, 0.3, 0.4], "id": [1, 2, 3]})
        df = tidier.augment(bootstrap_result, data=data)

        assert list(df.columns) == ["p.value", "id", "q.value", "lfdr"]
        assert df["p.value"].tolist() == [0.2, 0.3, 0.4]

    def test_data_as_mapping(self, tidier, bootstrap_result) -> None:
        df = tidier.augment(bootstrap_result, data={"id": ["a", "b", "c"]})
        assert df.columns[0] == "id"

    def test_does_not_mutate_data(self, tidier, bootstrap_result, genes_df) -> None:
        before = genes_df.copy()
        tidier.augment(bootstrap_result, data=genes_df)
        pd.testing.assert_frame_equal(genes_df, before)

    def test_row_mismatch_logs_warning(
        self, tidier, bootstrap_result, caplog: pytest.LogCaptureFixture
    ) -> None:
        data = pd.DataFrame({"id": [1, 2]})

        with caplog.at_level(logging.WARNING, logger="fdrtidy.tidiers.qvalue"):
            df = tidier.augment(bootstrap_result, data=data)

        assert len(df) == 3
        assert df["id"].isna().sum() == 1
        assert any("2 rows" in r.message for r in caplog.records)

    def test_idempotent(self, tidier, bootstrap_result, genes_df) -> None:
        pd.testing.assert_frame_equal(
            tidier.augment(bootstrap_result, data=genes_df),
            tidier.augment(bootstrap_result, data=genes_df),
        )
