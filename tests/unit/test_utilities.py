"""Unit tests for summary, palette, sparse and frame helpers."""

import re

import pytest
import numpy as np
import pandas as pd
import scipy.sparse as sp

from labelsync.core.identifiers import UnknownAnnotationColumnError
from labelsync.core.utilities import (
    SUMMARY_COLUMNS,
    backup_categoricals,
    convert_to_hyphen,
    discrete_color_palette,
    distinct_colors,
    ggplot_colors,
    restore_categoricals,
    summarize_adata,
    to_sparse_matrix,
)

HEX = re.compile(r"^#[0-9a-f]{6}$")


class TestSummarizeAdata:
    """Tests for per-sample summary tables."""

    def test_single_sample(self, mock_adata):
        """Test all cells pooled without a sample key."""
        table = summarize_adata(mock_adata)
        assert list(table.columns) == SUMMARY_COLUMNS
        assert table["Sample"].tolist() == ["Sample"]
        assert table["Number of Cells"].tolist() == [mock_adata.n_obs]

    def test_per_sample(self, mock_adata):
        """Test one row per sample with integer metrics."""
        table = summarize_adata(mock_adata, sample_key="sample_id")
        assert table["Sample"].tolist() == ["sample_0", "sample_1", "sample_2"]
        assert table["Number of Cells"].sum() == mock_adata.n_obs
        for col in SUMMARY_COLUMNS[1:]:
            assert pd.api.types.is_integer_dtype(table[col])

    def test_counts_values(self):
        """Test metrics on a hand-built matrix."""
        import anndata as ad

        X = np.array([[1, 0, 3], [0, 0, 2], [5, 5, 0]], dtype=np.float32)
        obs = pd.DataFrame({"s": ["a", "a", "b"]}, index=["c0", "c1", "c2"])
        adata = ad.AnnData(X=X, obs=obs)
        table = summarize_adata(adata, sample_key="s")
        row_a = table[table["Sample"] == "a"].iloc[0]
        assert row_a["Number of Cells"] == 2
        assert row_a["Mean counts per cell"] == 3
        assert row_a["Median features detected per cell"] == 2
        row_b = table[table["Sample"] == "b"].iloc[0]
        assert row_b["Mean counts per cell"] == 10

    def test_sparse_layer(self, mock_adata):
        """Test sparse layers give the same table as dense X."""
        mock_adata.layers["sparse"] = sp.csr_matrix(mock_adata.X)
        dense = summarize_adata(mock_adata, sample_key="sample_id")
        sparse = summarize_adata(mock_adata, layer="sparse", sample_key="sample_id")
        pd.testing.assert_frame_equal(dense, sparse)

    def test_unknown_sample_key(self, mock_adata):
        """Test missing obs column."""
        with pytest.raises(UnknownAnnotationColumnError):
            summarize_adata(mock_adata, sample_key="donor")

    def test_unknown_layer(self, mock_adata):
        """Test missing layer."""
        with pytest.raises(KeyError):
            summarize_adata(mock_adata, layer="spliced")


class TestPalettes:
    """Tests for discrete color palettes."""

    def test_distinct_colors(self):
        """Test requested number of hex codes."""
        colors = distinct_colors(10)
        assert len(colors) == 10
        assert all(HEX.match(c) for c in colors)
        assert len(set(colors[:8])) == 8

    def test_distinct_colors_unknown_hue(self):
        """Test unknown color names are rejected."""
        with pytest.raises(ValueError):
            distinct_colors(3, hues=["red", "not_a_color"])

    def test_ggplot_colors(self):
        """Test evenly spaced hues are distinct and stable."""
        colors = ggplot_colors(5)
        assert len(set(colors)) == 5
        assert colors == ggplot_colors(5)

    def test_random_palette_seeded(self):
        """Test random palette is reproducible and sorted."""
        first = discrete_color_palette(6, palette="random", seed=7)
        second = discrete_color_palette(6, palette="random", seed=7)
        assert first == second
        assert first == sorted(first)
        assert all(HEX.match(c) for c in first)

    def test_celda_passes_kwargs(self):
        """Test celda palette forwards hues."""
        colors = discrete_color_palette(2, palette="celda", hues=["blue"])
        assert len(colors) == 2

    def test_zero_colors(self):
        """Test n=0 gives an empty palette."""
        for name in ("random", "ggplot", "celda"):
            assert discrete_color_palette(0, palette=name) == []

    def test_unknown_palette(self):
        """Test unknown palette names."""
        with pytest.raises(ValueError):
            discrete_color_palette(3, palette="viridis")


class TestToSparseMatrix:
    """Tests for chunked sparse conversion."""

    def test_dense_array(self):
        """Test values survive chunking."""
        rng = np.random.default_rng(0)
        dense = rng.poisson(0.5, size=(5, 7)).astype(float)
        result = to_sparse_matrix(dense, chunk_size=3)
        assert sp.issparse(result)
        assert result.shape == (5, 7)
        np.testing.assert_array_equal(result.toarray(), dense)

    def test_dataframe_keeps_names(self, labeled_matrix):
        """Test row and column names are preserved."""
        result = to_sparse_matrix(labeled_matrix, chunk_size=2)
        assert list(result.index) == list(labeled_matrix.index)
        assert list(result.columns) == list(labeled_matrix.columns)
        np.testing.assert_array_equal(
            result.sparse.to_dense().to_numpy(), labeled_matrix.to_numpy()
        )

    @pytest.mark.parametrize("fmt", ["coo", "csr", "csc"])
    def test_sparse_input(self, fmt):
        """Test sparse inputs of any format are converted."""
        dense = np.array([[0.0, 1.0, 0.0], [2.0, 0.0, 3.0]])
        result = to_sparse_matrix(sp.coo_matrix(dense).asformat(fmt), chunk_size=2)
        assert result.format == "csc"
        np.testing.assert_array_equal(result.toarray(), dense)

    def test_invalid_chunk_size(self):
        """Test non-positive chunk size."""
        with pytest.raises(ValueError):
            to_sparse_matrix(np.zeros((2, 2)), chunk_size=0)


class TestFrameHelpers:
    """Tests for categorical backup/restore and hyphen conversion."""

    def test_backup_and_restore(self, mock_adata):
        """Test categorical columns round trip through strings."""
        obs = mock_adata.obs
        backup = backup_categoricals(obs)
        assert set(backup.categorical) == {"sample_id", "cell_type"}
        assert backup.df["sample_id"].dtype == object
        assert set(backup.dtypes) == set(obs.columns)

        restored = restore_categoricals(backup)
        assert isinstance(restored["sample_id"].dtype, pd.CategoricalDtype)
        assert restored["sample_id"].tolist() == obs["sample_id"].tolist()
        assert restored["barcode"].tolist() == obs["barcode"].tolist()

    def test_input_not_modified(self, mock_adata):
        """Test backup works on a copy."""
        backup_categoricals(mock_adata.obs)
        assert isinstance(mock_adata.obs["sample_id"].dtype, pd.CategoricalDtype)

    def test_convert_to_hyphen(self):
        """Test underscore replacement."""
        assert convert_to_hyphen(["HLA_A", "CD3E"]) == ["HLA-A", "CD3E"]
        assert convert_to_hyphen("MT_CO1") == "MT-CO1"
