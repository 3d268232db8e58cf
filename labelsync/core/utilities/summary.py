"""Per-sample summary table of an expression matrix."""

import logging
from typing import Any, Optional

import numpy as np
import pandas as pd
from scipy import sparse

from ..identifiers.errors import UnknownAnnotationColumnError

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = [
    "Sample",
    "Number of Cells",
    "Mean counts per cell",
    "Median counts per cell",
    "Mean features detected per cell",
    "Median features detected per cell",
]


def _row_sums(matrix: Any) -> np.ndarray:
    if sparse.issparse(matrix):
        return np.asarray(matrix.sum(axis=1)).ravel()
    return np.asarray(matrix).sum(axis=1)


def summarize_adata(
    adata: Any,
    layer: Optional[str] = None,
    sample_key: Optional[str] = None,
) -> pd.DataFrame:
    """Create a table of summary metrics per sample.

    Parameters
    ----------
    adata : AnnData
        Input object (cells x features).
    layer : str, optional
        Layer to summarize. If None, ``adata.X`` is used.
    sample_key : str, optional
        Column in ``adata.obs`` denoting which sample each cell belongs to.
        If None, all cells are assumed to come from the same sample.

    Returns
    -------
    pd.DataFrame
        One row per sample with cell counts and mean/median counts and
        detected features per cell, rounded to integers.
    """
    if layer is None:
        matrix = adata.X
    else:
        if layer not in adata.layers:
            raise KeyError(
                f"Layer '{layer}' not found. Available: {list(adata.layers.keys())}"
            )
        matrix = adata.layers[layer]

    if sample_key is None:
        samples = np.repeat("Sample", adata.n_obs)
    else:
        if sample_key not in adata.obs.columns:
            raise UnknownAnnotationColumnError(
                f"'{sample_key}' was not found in the obs of 'adata'."
            )
        samples = adata.obs[sample_key].astype(str).to_numpy()

    per_cell = pd.DataFrame({
        "sample": samples,
        "counts": _row_sums(matrix),
        "detected": _row_sums(matrix > 0),
    })
    grouped = per_cell.groupby("sample", sort=True)
    sizes = grouped.size()

    table = pd.DataFrame({
        "Sample": sizes.index.tolist(),
        "Number of Cells": sizes.to_numpy(),
        "Mean counts per cell": grouped["counts"].mean().to_numpy(),
        "Median counts per cell": grouped["counts"].median().to_numpy(),
        "Mean features detected per cell": grouped["detected"].mean().to_numpy(),
        "Median features detected per cell": grouped["detected"].median().to_numpy(),
    })
    for col in SUMMARY_COLUMNS[1:]:
        table[col] = np.round(table[col].astype(float)).astype(int)

    logger.info("Summarized %d cells across %d samples", adata.n_obs, len(table))
    return table[SUMMARY_COLUMNS]
