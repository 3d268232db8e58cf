"""Installation of new feature/cell names on an entity."""

import logging
from typing import Any, Sequence, Union

from .axis import Axis, parse_axis
from .dedup import check_string_labels, deduplicate_in_place
from .errors import LengthMismatchError, TypeMismatchError, UnknownAnnotationColumnError
from .store import get_label_store

logger = logging.getLogger(__name__)


def set_labels(
    entity: Any,
    axis: Union[str, Axis],
    new_labels: Union[str, Sequence[str]],
    dedup: bool = True,
    sep: str = "-",
) -> Any:
    """Set the names of one axis from a label vector or an annotation column.

    Parameters
    ----------
    entity : AnnData or pd.DataFrame
        Entity to update in place.
    axis : str or Axis
        Feature (``"row"``) or cell (``"col"``) axis.
    new_labels : str or Sequence[str]
        Full-length label sequence, or (AnnData only) the name of a column
        in ``var``/``obs`` whose values become the names.
    dedup : bool
        Suffix duplicated names with ``-1, -2, ...`` after installing.
    sep : str
        Separator used for deduplication suffixes.

    Returns
    -------
    AnnData or pd.DataFrame
        The same entity object with updated names.

    Raises
    ------
    UnknownAnnotationColumnError
        If a column name is given that does not exist.
    LengthMismatchError
        If the sequence length differs from the axis extent.
    TypeMismatchError
        If a column name is given for a DataFrame, or a label is not a string.
    """
    axis = parse_axis(axis)
    store = get_label_store(entity)

    if isinstance(new_labels, str):
        if not store.is_table_like:
            raise TypeMismatchError(
                f"A column name ('{new_labels}') can only be used with AnnData; "
                f"pass a full-length label sequence for {type(store.entity).__name__}"
            )
        candidate = store.get_annotation_column(axis, new_labels)
        if candidate is None:
            raise UnknownAnnotationColumnError(
                f"Single name specification '{new_labels}' not found in the "
                f"{axis.value} annotation. Available: {store.annotation_columns(axis)}"
            )
        source = new_labels
    else:
        candidate = list(new_labels)
        extent = store.axis_extent(axis)
        if len(candidate) != extent:
            raise LengthMismatchError(
                f"Length of new labels ({len(candidate)}) does not match the "
                f"{axis.value} extent ({extent})"
            )
        source = "sequence"

    check_string_labels(candidate, what=f"{axis.value} names")
    store.set_axis_labels(axis, candidate)
    logger.info("Set %d %s names from %s", len(candidate), axis.value, source)

    if dedup:
        deduplicate_in_place(store, axis, as_annotation=False, sep=sep)
    return store.entity


def set_row_names(entity: Any, row_names: Union[str, Sequence[str]], dedup: bool = True) -> Any:
    """Set feature names of ``entity``; see :func:`set_labels`."""
    return set_labels(entity, Axis.ROW, row_names, dedup=dedup)
