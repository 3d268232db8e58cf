"""Pytest configuration and shared fixtures for LabelSync tests."""

import sys
from pathlib import Path

import pytest

# Add package to path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from tests.fixtures import (
    create_labeled_matrix,
    create_mock_adata,
    make_adata,
)


# ============================================================================
# AnnData Fixtures
# ============================================================================


@pytest.fixture
def mock_adata():
    """AnnData with 60 cells, 12 genes and duplicated gene symbols."""
    return create_mock_adata()


@pytest.fixture
def gene_adata():
    """Three genes with symbols and two annotated cells."""
    return make_adata(
        ["g1", "g2", "g3"],
        obs_names=["c1", "c2"],
        var={"symbol": ["CD3E", "CD3D", "MS4A1"]},
        obs={"barcode": ["AAAC", "TTTG"]},
    )


@pytest.fixture
def partial_adata():
    """Reference names where one pattern hits several features."""
    return make_adata(["abc", "abcd", "xyz"])


@pytest.fixture
def duplicated_adata():
    """Duplicated feature and cell names."""
    return make_adata(
        ["a", "b", "a", "c", "a"],
        obs_names=["x", "x", "y"],
        var={"symbol": ["A", "B", "A", "C", "A"]},
    )


# ============================================================================
# Matrix Fixtures
# ============================================================================


@pytest.fixture
def labeled_matrix():
    """Genes x cells DataFrame with duplicated row names."""
    return create_labeled_matrix(
        row_names=["g1", "g2", "g1", "g3"],
        col_names=["c1", "c2", "c3"],
    )


@pytest.fixture
def unlabeled_matrix():
    """Genes x cells DataFrame without row names."""
    return create_labeled_matrix()


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def sample_config(tmp_path) -> Path:
    """Create sample LabelSync configuration file."""
    import yaml

    config = {
        "labelsync": {
            "identifiers": {
                "dedup_sep": "_",
                "partial_backend": "substring",
                "first_match": False,
            },
            "palette": {
                "palette": "celda",
                "hues": ["red", "blue"],
                "saturation_range": [0.5, 1.0],
            },
            "summary": {"sample_key": "sample_id"},
            "genesets": {
                "hallmark": {
                    "HALLMARK_T_CELL": ["GENE0", "GENE1"],
                    "HALLMARK_EMPTY": [],
                },
            },
        },
    }

    path = tmp_path / "labelsync.yaml"
    with open(path, "w") as f:
        yaml.dump(config, f, sort_keys=False)

    return path
