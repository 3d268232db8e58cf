"""Chunked conversion of dense expression matrices to sparse format."""

from typing import Any, Union

import numpy as np
import pandas as pd
import scipy.sparse as sp


def to_sparse_matrix(
    x: Union[np.ndarray, pd.DataFrame, sp.spmatrix],
    chunk_size: int = 3000,
) -> Union[sp.csc_matrix, pd.DataFrame]:
    """Convert a matrix to CSC format, ``chunk_size`` columns at a time.

    Parameters
    ----------
    x : np.ndarray, pd.DataFrame or sparse matrix
        Input matrix (features x cells).
    chunk_size : int
        Number of columns converted per chunk.

    Returns
    -------
    sp.csc_matrix or pd.DataFrame
        Sparse matrix. DataFrame input returns a sparse-backed DataFrame
        with the original index and columns.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    if isinstance(x, pd.DataFrame):
        values: Any = x.to_numpy()
    elif sp.issparse(x):
        values = sp.csc_matrix(x)
    else:
        values = x
    n_rows, n_cols = values.shape

    chunks = []
    for start in range(0, n_cols, chunk_size):
        end = min(start + chunk_size, n_cols)
        chunks.append(sp.csc_matrix(values[:, start:end]))
    if chunks:
        matrix = sp.hstack(chunks, format="csc")
    else:
        matrix = sp.csc_matrix((n_rows, n_cols), dtype=values.dtype)

    if isinstance(x, pd.DataFrame):
        return pd.DataFrame.sparse.from_spmatrix(matrix, index=x.index, columns=x.columns)
    return matrix
