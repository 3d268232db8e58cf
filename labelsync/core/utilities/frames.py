"""Helpers for annotation data frames.

Provides:
- CategoricalBackup: Snapshot of which columns were categorical
- backup_categoricals / restore_categoricals: Round trip through strings
- convert_to_hyphen: Underscore to hyphen conversion of labels
"""

from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Union

import pandas as pd


@dataclass
class CategoricalBackup:
    """Data frame with categorical columns converted to strings.

    Attributes
    ----------
    df : pd.DataFrame
        Copy of the input with categorical columns as plain strings
    dtypes : Dict[str, str]
        Original dtype name of every column
    categorical : List[str]
        Columns that were categorical
    """

    df: pd.DataFrame
    dtypes: Dict[str, str] = field(default_factory=dict)
    categorical: List[str] = field(default_factory=list)


def convert_categoricals_to_str(df: pd.DataFrame) -> pd.DataFrame:
    """Return a copy of ``df`` with categorical columns as object strings."""
    out = df.copy()
    for col in out.columns:
        if isinstance(out[col].dtype, pd.CategoricalDtype):
            out[col] = out[col].astype(str).astype(object)
    return out


def backup_categoricals(df: pd.DataFrame) -> CategoricalBackup:
    """Record column types and convert categorical columns to strings."""
    return CategoricalBackup(
        df=convert_categoricals_to_str(df),
        dtypes={str(col): str(df[col].dtype) for col in df.columns},
        categorical=[
            str(col) for col in df.columns
            if isinstance(df[col].dtype, pd.CategoricalDtype)
        ],
    )


def restore_categoricals(backup: CategoricalBackup) -> pd.DataFrame:
    """Convert the recorded categorical columns back to categoricals.

    Categories are recomputed from the current values, so edits made
    while the columns were strings are kept.
    """
    out = backup.df.copy()
    for col in backup.categorical:
        if col in out.columns:
            out[col] = out[col].astype("category")
    return out


def convert_to_hyphen(values: Union[str, Sequence[str]]) -> Union[str, List[str]]:
    """Replace underscores with hyphens (feature names for Seurat-style tools)."""
    if isinstance(values, str):
        return values.replace("_", "-")
    return [str(v).replace("_", "-") for v in values]
