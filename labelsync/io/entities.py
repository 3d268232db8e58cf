"""Reading and writing entities (AnnData and plain matrices)."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Union

import pandas as pd

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

H5AD_SUFFIXES = (".h5ad",)
TABLE_SUFFIXES = (".csv", ".tsv", ".txt")


def read_entity(path: PathLike) -> Any:
    """Load an AnnData (``.h5ad``) or a labeled matrix (``.csv``/``.tsv``).

    Tables are read with the first column as row labels.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input not found: {path}")

    suffix = path.suffix.lower()
    if suffix in H5AD_SUFFIXES:
        import anndata as ad

        entity = ad.read_h5ad(path)
    elif suffix in TABLE_SUFFIXES:
        sep = "," if suffix == ".csv" else "\t"
        entity = pd.read_csv(path, sep=sep, index_col=0)
        entity.index = entity.index.astype(str)
        entity.columns = entity.columns.astype(str)
    else:
        raise ValueError(
            f"Unsupported input format '{suffix}'. "
            f"Use one of {list(H5AD_SUFFIXES + TABLE_SUFFIXES)}"
        )
    logger.info("Loaded %s with shape %s", path.name, entity.shape)
    return entity


def write_entity(entity: Any, path: PathLike) -> Path:
    """Write an entity, creating the parent directory."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(entity, pd.DataFrame):
        sep = "\t" if path.suffix.lower() in (".tsv", ".txt") else ","
        entity.to_csv(path, sep=sep)
    else:
        entity.write_h5ad(path)
    logger.info("Wrote %s", path)
    return path


def write_dataframe(df: pd.DataFrame, path: PathLike, *, index: bool = False) -> Path:
    """Write DataFrame to CSV ensuring the parent directory exists."""
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_path, index=index)
    return output_path
