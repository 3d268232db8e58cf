"""Read/write access to identifier vectors and annotation tables.

Provides:
- LabelStore: Abstract accessor contract used by resolution and installation
- AnnDataLabelStore: Table-like entity (AnnData with ``var``/``obs`` tables)
- FrameLabelStore: Bare matrix-like entity (pandas DataFrame)
- get_label_store / is_table_like_entity: Variant selection
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence

import pandas as pd

from .axis import Axis
from .errors import NotATableLikeEntityError


class LabelStore(ABC):
    """Abstract accessor for an entity's identifiers and annotations.

    Subclasses wrap one entity instance. ``is_table_like`` tells whether the
    entity carries per-axis annotation tables; bare entities only support
    direct identifier replacement.
    """

    is_table_like: bool = False

    @property
    def entity(self) -> Any:
        """The wrapped entity (the store itself for standalone stores)."""
        return self

    @abstractmethod
    def axis_extent(self, axis: Axis) -> int:
        """Number of labels on ``axis``."""
        pass

    @abstractmethod
    def get_axis_labels(self, axis: Axis) -> Optional[List[str]]:
        """Live identifiers on ``axis``, or None when unset."""
        pass

    @abstractmethod
    def set_axis_labels(self, axis: Axis, labels: Sequence[str]) -> None:
        """Replace the live identifiers on ``axis``."""
        pass

    def annotation_columns(self, axis: Axis) -> List[str]:
        """Names of the annotation columns on ``axis``."""
        return []

    def get_annotation_column(self, axis: Axis, name: str) -> Optional[List[Any]]:
        """Values of annotation column ``name``, or None when absent."""
        return None

    def set_annotation_column(
        self, axis: Axis, name: str, labels: Sequence[Any]
    ) -> None:
        """Write annotation column ``name`` on ``axis``."""
        raise NotATableLikeEntityError(
            f"{type(self.entity).__name__} has no annotation table for "
            f"axis '{axis.value}'"
        )


class AnnDataLabelStore(LabelStore):
    """Label store over an AnnData object.

    The row axis is the feature axis (``var_names``/``var``) and the column
    axis is the cell axis (``obs_names``/``obs``).

    Parameters
    ----------
    adata : AnnData
        Wrapped object. Mutations are applied in place.
    """

    is_table_like = True

    def __init__(self, adata: Any):
        self._adata = adata

    @property
    def entity(self) -> Any:
        return self._adata

    def _table(self, axis: Axis) -> pd.DataFrame:
        return self._adata.var if axis is Axis.ROW else self._adata.obs

    def axis_extent(self, axis: Axis) -> int:
        return self._adata.n_vars if axis is Axis.ROW else self._adata.n_obs

    def get_axis_labels(self, axis: Axis) -> Optional[List[str]]:
        return list(self._table(axis).index)

    def set_axis_labels(self, axis: Axis, labels: Sequence[str]) -> None:
        index = pd.Index(list(labels), dtype=object)
        if axis is Axis.ROW:
            self._adata.var_names = index
        else:
            self._adata.obs_names = index

    def annotation_columns(self, axis: Axis) -> List[str]:
        return [str(c) for c in self._table(axis).columns]

    def get_annotation_column(self, axis: Axis, name: str) -> Optional[List[Any]]:
        table = self._table(axis)
        if name not in table.columns:
            return None
        return table[name].tolist()

    def set_annotation_column(
        self, axis: Axis, name: str, labels: Sequence[Any]
    ) -> None:
        self._table(axis)[name] = list(labels)


class FrameLabelStore(LabelStore):
    """Label store over a DataFrame used as a plain matrix.

    Row labels are ``df.index`` and column labels are ``df.columns``. A
    default ``RangeIndex`` counts as unset identifiers.

    Parameters
    ----------
    frame : pd.DataFrame
        Wrapped frame. Mutations are applied in place.
    """

    is_table_like = False

    def __init__(self, frame: pd.DataFrame):
        self._frame = frame

    @property
    def entity(self) -> pd.DataFrame:
        return self._frame

    def _index(self, axis: Axis) -> pd.Index:
        return self._frame.index if axis is Axis.ROW else self._frame.columns

    def axis_extent(self, axis: Axis) -> int:
        return self._frame.shape[0] if axis is Axis.ROW else self._frame.shape[1]

    def get_axis_labels(self, axis: Axis) -> Optional[List[str]]:
        index = self._index(axis)
        if isinstance(index, pd.RangeIndex):
            return None
        return list(index)

    def set_axis_labels(self, axis: Axis, labels: Sequence[str]) -> None:
        index = pd.Index(list(labels), dtype=object)
        if axis is Axis.ROW:
            self._frame.index = index
        else:
            self._frame.columns = index


def get_label_store(entity: Any) -> LabelStore:
    """Select the label store variant for ``entity``.

    Parameters
    ----------
    entity : AnnData, pd.DataFrame or LabelStore
        Object whose identifiers are accessed. An existing store is
        returned unchanged.

    Returns
    -------
    LabelStore
        Table-like store for AnnData, bare store for DataFrames.

    Raises
    ------
    NotATableLikeEntityError
        If the object exposes neither contract.
    """
    if isinstance(entity, LabelStore):
        return entity

    import anndata as ad

    if isinstance(entity, ad.AnnData):
        return AnnDataLabelStore(entity)
    if isinstance(entity, pd.DataFrame):
        return FrameLabelStore(entity)
    raise NotATableLikeEntityError(
        f"Expected an AnnData object or a DataFrame, got {type(entity).__name__}"
    )


def is_table_like_entity(entity: Any) -> bool:
    """Return True if ``entity`` carries per-axis annotation tables."""
    try:
        store = get_label_store(entity)
    except NotATableLikeEntityError:
        return False
    return store.is_table_like
