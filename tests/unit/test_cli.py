"""Unit tests for the command-line interface."""

import json

import pytest
import pandas as pd
from click.testing import CliRunner

from labelsync.cli import cli
from tests.fixtures import make_adata


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def matrix_csv(tmp_path, labeled_matrix):
    """Genes x cells CSV with duplicated gene names."""
    path = tmp_path / "matrix.csv"
    labeled_matrix.to_csv(path)
    return path


@pytest.fixture
def gene_h5ad(tmp_path):
    """Small AnnData written to disk."""
    adata = make_adata(
        ["ENSG1", "ENSG2", "ENSG3"],
        var={"symbol": ["CD3E", "CD3D", "MS4A1"]},
    )
    path = tmp_path / "genes.h5ad"
    adata.write_h5ad(path)
    return path


class TestDedupCommand:
    """Tests for `labelsync dedup`."""

    def test_csv_rows(self, runner, matrix_csv, tmp_path):
        """Test duplicated row names are suffixed in the output."""
        out = tmp_path / "unique.csv"
        result = runner.invoke(cli, ["dedup", "-i", str(matrix_csv), "-o", str(out)])
        assert result.exit_code == 0, result.output
        df = pd.read_csv(out, index_col=0)
        assert list(df.index) == ["g1-1", "g2", "g1-2", "g3"]

    def test_config_separator(self, runner, matrix_csv, tmp_path, sample_config):
        """Test the configured separator is used."""
        out = tmp_path / "unique.csv"
        result = runner.invoke(
            cli, ["-c", str(sample_config), "dedup", "-i", str(matrix_csv), "-o", str(out)]
        )
        assert result.exit_code == 0, result.output
        assert list(pd.read_csv(out, index_col=0).index)[0] == "g1_1"


class TestSetNamesCommand:
    """Tests for `labelsync set-names`."""

    def test_names_file(self, runner, matrix_csv, tmp_path):
        """Test names read from a text file."""
        names = tmp_path / "names.txt"
        names.write_text("A\nB\nA\nC\n")
        out = tmp_path / "named.csv"
        result = runner.invoke(cli, [
            "set-names", "-i", str(matrix_csv), "-o", str(out),
            "--names-file", str(names), "--no-dedup",
        ])
        assert result.exit_code == 0, result.output
        assert list(pd.read_csv(out, index_col=0).index) == ["A", "B", "A", "C"]

    def test_column_on_matrix_fails(self, runner, matrix_csv, tmp_path):
        """Test column names are rejected for matrices."""
        result = runner.invoke(cli, [
            "set-names", "-i", str(matrix_csv), "-o", str(tmp_path / "x.csv"),
            "--column", "symbol",
        ])
        assert result.exit_code == 1
        assert "AnnData" in result.output

    def test_requires_one_source(self, runner, matrix_csv, tmp_path):
        """Test --column and --names-file are mutually exclusive."""
        result = runner.invoke(cli, [
            "set-names", "-i", str(matrix_csv), "-o", str(tmp_path / "x.csv"),
        ])
        assert result.exit_code == 2

    def test_column_on_h5ad(self, runner, gene_h5ad, tmp_path):
        """Test var column installed as feature names."""
        import anndata as ad

        out = tmp_path / "named.h5ad"
        result = runner.invoke(cli, [
            "set-names", "-i", str(gene_h5ad), "-o", str(out), "--column", "symbol",
        ])
        assert result.exit_code == 0, result.output
        assert list(ad.read_h5ad(out).var_names) == ["CD3E", "CD3D", "MS4A1"]


class TestResolveCommand:
    """Tests for `labelsync resolve`."""

    def test_report(self, runner, gene_h5ad, tmp_path):
        """Test JSON report contents."""
        report = tmp_path / "report.json"
        result = runner.invoke(cli, [
            "resolve", "-i", str(gene_h5ad), "--axis", "gene", "--by", "symbol",
            "--id", "CD3", "--partial", "--all-matches", "--report", str(report),
        ])
        assert result.exit_code == 0, result.output
        data = json.loads(report.read_text().strip())
        assert data["indices"] == [0, 1]
        assert data["labels"] == ["CD3E", "CD3D"]

    def test_subset_and_diagnostics(self, runner, gene_h5ad, tmp_path):
        """Test matched subset is written and misses are reported."""
        import anndata as ad

        out = tmp_path / "subset.h5ad"
        result = runner.invoke(cli, [
            "resolve", "-i", str(gene_h5ad), "--axis", "row",
            "--id", "ENSG3", "--id", "ENSG9", "--subset-out", str(out),
        ])
        assert result.exit_code == 0, result.output
        assert "ENSG9" in result.output
        assert list(ad.read_h5ad(out).var_names) == ["ENSG3"]

    def test_unknown_column(self, runner, gene_h5ad):
        """Test errors become a non-zero exit."""
        result = runner.invoke(cli, [
            "resolve", "-i", str(gene_h5ad), "--axis", "row", "--by", "nope", "--id", "x",
        ])
        assert result.exit_code == 1
        assert "nope" in result.output


class TestPaletteCommand:
    """Tests for `labelsync palette`."""

    def test_ggplot(self, runner):
        """Test one color per line."""
        result = runner.invoke(cli, ["palette", "-n", "4", "--palette", "ggplot"])
        assert result.exit_code == 0, result.output
        lines = result.output.strip().splitlines()
        assert len(lines) == 4
        assert all(line.startswith("#") for line in lines)


class TestSummarizeCommand:
    """Tests for `labelsync summarize`."""

    def test_to_csv(self, runner, tmp_path, mock_adata):
        """Test summary written as CSV."""
        path = tmp_path / "mock.h5ad"
        mock_adata.write_h5ad(path)
        out = tmp_path / "summary.csv"
        result = runner.invoke(cli, [
            "summarize", "-i", str(path), "-o", str(out), "--sample-key", "sample_id",
        ])
        assert result.exit_code == 0, result.output
        table = pd.read_csv(out)
        assert table["Number of Cells"].sum() == mock_adata.n_obs
