"""Deterministic deduplication of feature and cell names.

Every occurrence of a repeated label is suffixed with its 1-based rank,
including the first one: ``["a", "a", "b"] -> ["a-1", "a-2", "b"]``.
"""

import logging
from collections import Counter
from typing import Any, Dict, List, Sequence, Union

import numpy as np

from .axis import Axis, parse_axis
from .errors import MissingIdentifiersError, TypeMismatchError
from .store import get_label_store

logger = logging.getLogger(__name__)

ROW_UNIQUE_COLUMN = "rownames.uniq"
COL_UNIQUE_COLUMN = "colnames.uniq"


def check_string_labels(labels: Sequence[Any], what: str = "labels") -> None:
    """Raise TypeMismatchError unless every element is a string."""
    for i, label in enumerate(labels):
        if not isinstance(label, (str, np.str_)):
            raise TypeMismatchError(
                f"No character {what} found: element {i} is "
                f"{type(label).__name__} ({label!r})"
            )


def deduplicate(labels: Sequence[str], sep: str = "-") -> List[str]:
    """Suffix repeated labels with an occurrence counter.

    Parameters
    ----------
    labels : Sequence[str]
        Labels to deduplicate. Not modified.
    sep : str
        Separator between label and counter.

    Returns
    -------
    List[str]
        Labels of the same length. Suffixed names are not re-checked
        against labels that already looked like ``<value><sep><k>``.

    Raises
    ------
    TypeMismatchError
        If any element is not a string.
    """
    labels = list(labels)
    check_string_labels(labels)

    counts = Counter(labels)
    seen: Dict[str, int] = {}
    result = []
    for label in labels:
        if counts[label] > 1:
            seen[label] = seen.get(label, 0) + 1
            result.append(f"{label}{sep}{seen[label]}")
        else:
            result.append(str(label))
    return result


def deduplicated_labels(
    entity: Any, axis: Union[str, Axis] = "row", sep: str = "-"
) -> List[str]:
    """Return deduplicated identifiers of ``entity`` without modifying it."""
    axis = parse_axis(axis)
    store = get_label_store(entity)
    labels = store.get_axis_labels(axis)
    if labels is None:
        raise MissingIdentifiersError(
            f"No character {axis.default_names_token} found."
        )
    return deduplicate(labels, sep=sep)


def deduplicate_in_place(
    entity: Any,
    axis: Union[str, Axis] = "row",
    as_annotation: bool = False,
    sep: str = "-",
) -> Any:
    """Deduplicate the identifiers of an entity.

    Parameters
    ----------
    entity : AnnData or pd.DataFrame
        Entity to update in place.
    axis : str or Axis
        Feature (``"row"``) or cell (``"col"``) axis.
    as_annotation : bool
        For AnnData, write the unique names into annotation column
        ``"rownames.uniq"`` (or ``"colnames.uniq"``) instead of replacing
        the live identifiers. Ignored for bare entities.
    sep : str
        Separator between label and counter.

    Returns
    -------
    AnnData or pd.DataFrame
        The same entity object.
    """
    axis = parse_axis(axis)
    store = get_label_store(entity)
    unique = deduplicated_labels(store, axis, sep=sep)

    if as_annotation and store.is_table_like:
        column = ROW_UNIQUE_COLUMN if axis is Axis.ROW else COL_UNIQUE_COLUMN
        store.set_annotation_column(axis, column, unique)
        logger.debug("Wrote deduplicated %s names to '%s'", axis.value, column)
    else:
        original = store.get_axis_labels(axis)
        n_changed = sum(old != new for old, new in zip(original, unique))
        store.set_axis_labels(axis, unique)
        if n_changed:
            logger.info("Renamed %d duplicated %s names", n_changed, axis.value)
    return store.entity
