"""Index resolution of feature/cell identifiers.

Maps a query list of identifiers to positional indices along one axis of
an AnnData object. The reference labels are either the live names
(``var_names``/``obs_names``), a named annotation column, or an explicit
sequence of axis length.

Four match modes are supported:

================  =====================================================
exact + first     first occurrence of each query item
exact + all       every position whose label is in the query set
partial + first   first reference label matched by the pattern
partial + all     every reference label matched by the pattern
================  =====================================================

Unmatched or redundantly matched queries never abort resolution; they are
reported as diagnostics (``ResolutionWarning``) alongside the result.
"""

import logging
import re
import warnings
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Literal, Optional, Sequence, Union

import pandas as pd

from .axis import Axis, parse_axis
from .errors import (
    LengthMismatchError,
    MissingIdentifiersError,
    NoMatchWarning,
    NotATableLikeEntityError,
    ResolutionWarning,
    UnknownAnnotationColumnError,
)
from .store import LabelStore, get_label_store

logger = logging.getLogger(__name__)

Matcher = Callable[[str, str], bool]


def regex_matcher(pattern: str, candidate: str) -> bool:
    """Return True if regular expression ``pattern`` is found in ``candidate``."""
    return re.search(pattern, candidate) is not None


def substring_matcher(pattern: str, candidate: str) -> bool:
    """Return True if ``pattern`` occurs literally in ``candidate``."""
    return pattern in candidate


MATCHERS: Dict[str, Matcher] = {
    "regex": regex_matcher,
    "substring": substring_matcher,
}


def get_matcher(name: str) -> Matcher:
    """Look up a partial-match backend by name (``regex`` or ``substring``)."""
    if name not in MATCHERS:
        raise ValueError(
            f"Unknown partial match backend: '{name}'. Available: {list(MATCHERS)}"
        )
    return MATCHERS[name]


@dataclass
class Diagnostic:
    """Advisory message produced while resolving identifiers.

    Attributes
    ----------
    kind : str
        ``no_match`` (nothing matched), ``not_found`` (some query items
        unmatched) or ``duplicate_targets``
    severity : str
        ``critical`` for ``no_match``, ``warning`` otherwise
    message : str
        Human-readable message
    items : List[str]
        Query items or reference labels the message is about
    """

    kind: Literal["no_match", "not_found", "duplicate_targets"]
    severity: Literal["critical", "warning"]
    message: str
    items: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "kind": self.kind,
            "severity": self.severity,
            "message": self.message,
            "items": list(self.items),
        }


@dataclass
class ResolutionResult:
    """Result of resolving identifiers along an axis.

    Attributes
    ----------
    indices : List[int]
        Unique 0-based positions into the reference labels
    not_found : List[str]
        Query items without any match, in query order
    duplicate_targets : List[str]
        In exact+all mode, query items repeated among the matched ones;
        in the other modes, reference labels selected by more than one
        query item
    diagnostics : List[Diagnostic]
        Advisory messages emitted for this call
    axis : Axis
        Axis that was searched
    reference_name : str
        Annotation column searched, or ``rownames``/``colnames``
    exact_match : bool
        Whether exact matching was used
    first_match : bool
        Whether only the first hit per query item was kept
    """

    indices: List[int] = field(default_factory=list)
    not_found: List[str] = field(default_factory=list)
    duplicate_targets: List[str] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)
    axis: Axis = Axis.ROW
    reference_name: str = "rownames"
    exact_match: bool = True
    first_match: bool = True
    reference: List[Any] = field(default_factory=list, repr=False)

    @property
    def labels(self) -> List[Any]:
        """Reference labels at the resolved positions."""
        return [self.reference[i] for i in self.indices]

    @property
    def n_matched(self) -> int:
        return len(self.indices)

    @property
    def all_missing(self) -> bool:
        """True if the query was non-empty and nothing matched."""
        return any(d.kind == "no_match" for d in self.diagnostics)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "axis": self.axis.value,
            "reference_name": self.reference_name,
            "exact_match": self.exact_match,
            "first_match": self.first_match,
            "indices": list(self.indices),
            "labels": [str(label) for label in self.labels],
            "not_found": list(self.not_found),
            "duplicate_targets": [str(t) for t in self.duplicate_targets],
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }


def _unique(values: Iterable[Any]) -> List[Any]:
    seen = set()
    out = []
    for value in values:
        if value not in seen:
            seen.add(value)
            out.append(value)
    return out


def _repeated(values: Sequence[Any]) -> List[Any]:
    """Values occurring more than once, ordered by their second occurrence."""
    seen = set()
    repeated = []
    for value in values:
        if value in seen:
            repeated.append(value)
        else:
            seen.add(value)
    return _unique(repeated)


def _is_missing(value: Any) -> bool:
    return value is None or (not isinstance(value, str) and bool(pd.isna(value)))


def _select_reference(
    store: LabelStore, axis: Axis, by: Optional[Union[str, Sequence[Any]]]
) -> tuple:
    """Return (reference_name, reference_labels) for the search."""
    if isinstance(by, str) and by == axis.default_names_token:
        by = None

    if by is None:
        labels = store.get_axis_labels(axis)
        if labels is None:
            raise MissingIdentifiersError(
                f"No default {axis.value} names found. Please set `by`."
            )
        return axis.default_names_token, labels

    if isinstance(by, str):
        column = store.get_annotation_column(axis, by)
        if column is None:
            raise UnknownAnnotationColumnError(
                f"'{by}' annotation not found for axis '{axis.value}'. "
                f"Available: {store.annotation_columns(axis)}"
            )
        return by, column

    labels = list(by)
    extent = store.axis_extent(axis)
    if len(labels) != extent:
        raise LengthMismatchError(
            f"Length of `by` ({len(labels)}) does not match the "
            f"{axis.value} extent ({extent})"
        )
    return "by", labels


def _match_exact_first(ids: List[str], reference: List[Any]) -> tuple:
    first_pos: Dict[Any, int] = {}
    for i, label in enumerate(reference):
        if not _is_missing(label):
            first_pos.setdefault(str(label), i)

    hits = []
    not_found = []
    for query in ids:
        pos = first_pos.get(str(query))
        if pos is None:
            not_found.append(query)
        else:
            hits.append(pos)
    duplicated = [reference[i] for i in _repeated(hits)]
    return hits, not_found, duplicated


def _match_exact_all(ids: List[str], reference: List[Any]) -> tuple:
    query_set = {str(query) for query in ids}
    reference_set = {str(label) for label in reference if not _is_missing(label)}

    hits = [
        i for i, label in enumerate(reference)
        if not _is_missing(label) and str(label) in query_set
    ]
    not_found = [query for query in ids if str(query) not in reference_set]
    # Redundant query entries, not reference labels.
    duplicated = _repeated([query for query in ids if str(query) in reference_set])
    return hits, not_found, duplicated


def _match_partial(
    ids: List[str], reference: List[Any], first_match: bool, matcher: Matcher
) -> tuple:
    candidates = [
        (i, str(label)) for i, label in enumerate(reference) if not _is_missing(label)
    ]
    hits = []
    not_found = []
    for query in ids:
        found = [i for i, label in candidates if matcher(str(query), label)]
        if not found:
            not_found.append(query)
        elif first_match:
            hits.append(found[0])
        else:
            hits.extend(found)
    duplicated = [reference[i] for i in _repeated(hits)]
    return hits, not_found, duplicated


def _format_items(items: Sequence[Any]) -> str:
    return "'" + "', '".join(str(item) for item in items) + "'"


def _build_diagnostics(
    n_queries: int,
    not_found: List[str],
    duplicated: List[Any],
    reference_name: str,
    exact_match: bool,
) -> List[Diagnostic]:
    diagnostics = []
    if n_queries > 0 and len(not_found) == n_queries:
        if exact_match:
            hint = "Check the spelling or try setting `exact_match` to False."
        else:
            hint = (
                "Check the spelling and make sure `by` is set to the "
                "appropriate annotation."
            )
        diagnostics.append(Diagnostic(
            kind="no_match",
            severity="critical",
            message=(
                f"None of the provided features had matching items in "
                f"'{reference_name}'. {hint}"
            ),
            items=list(not_found),
        ))
    elif not_found:
        diagnostics.append(Diagnostic(
            kind="not_found",
            severity="warning",
            message=(
                "The following IDs were not present in specified annotation: \n"
                + _format_items(not_found)
            ),
            items=list(not_found),
        ))

    if duplicated:
        diagnostics.append(Diagnostic(
            kind="duplicate_targets",
            severity="warning",
            message=(
                f"Each of the following entries from '{reference_name}' was "
                f"matched by multiple queries in 'ids': \n"
                + _format_items(duplicated)
            ),
            items=[str(d) for d in duplicated],
        ))
    return diagnostics


def resolve_index(
    entity: Any,
    ids: Union[str, Sequence[str]],
    axis: Union[str, Axis],
    by: Optional[Union[str, Sequence[Any]]] = None,
    exact_match: bool = True,
    first_match: bool = True,
    matcher: Optional[Matcher] = None,
    emit_warnings: bool = True,
) -> ResolutionResult:
    """Retrieve feature or cell indices by identifiers.

    Parameters
    ----------
    entity : AnnData or LabelStore
        Table-like entity to search. Not modified.
    ids : str or Sequence[str]
        Identifiers to look up. May contain duplicates or be empty.
    axis : str or Axis
        ``"row"``, ``"feature"`` or ``"gene"`` for features; ``"col"`` or
        ``"cell"`` for cells.
    by : str or Sequence, optional
        Annotation column to search in, or a full-length label sequence.
        None (or ``"rownames"``/``"colnames"``) searches the live names.
    exact_match : bool
        Equality matching if True, pattern matching if False.
    first_match : bool
        Keep only the first hit per query item if True.
    matcher : callable, optional
        ``matcher(pattern, candidate) -> bool`` for partial matching.
        Defaults to regular expression search.
    emit_warnings : bool
        Issue diagnostics through ``warnings.warn`` and log them at WARNING.
        If False they are logged at DEBUG only and left on the result for
        the caller to report.

    Returns
    -------
    ResolutionResult
        Unique indices plus not-found and duplicate-target diagnostics.

    Raises
    ------
    NotATableLikeEntityError
        If ``entity`` has no annotation tables.
    InvalidAxisError
        If ``axis`` is not recognized.
    UnknownAnnotationColumnError
        If ``by`` names a missing annotation column.
    MissingIdentifiersError
        If the live names are absent and ``by`` is not given.
    LengthMismatchError
        If ``by`` is a sequence of the wrong length.
    """
    store = get_label_store(entity)
    if not store.is_table_like:
        raise NotATableLikeEntityError(
            f"`entity` should be an AnnData object, got {type(store.entity).__name__}"
        )
    axis = parse_axis(axis)
    reference_name, reference = _select_reference(store, axis, by)

    if isinstance(ids, str):
        ids = [ids]
    ids = list(ids)

    if exact_match and first_match:
        hits, not_found, duplicated = _match_exact_first(ids, reference)
    elif exact_match:
        hits, not_found, duplicated = _match_exact_all(ids, reference)
    else:
        hits, not_found, duplicated = _match_partial(
            ids, reference, first_match, matcher or regex_matcher
        )

    diagnostics = _build_diagnostics(
        len(ids), not_found, duplicated, reference_name, exact_match
    )
    for diagnostic in diagnostics:
        logger.log(logging.WARNING if emit_warnings else logging.DEBUG, diagnostic.message)
        if emit_warnings:
            category = NoMatchWarning if diagnostic.kind == "no_match" else ResolutionWarning
            warnings.warn(diagnostic.message, category, stacklevel=2)

    result = ResolutionResult(
        indices=_unique(hits),
        not_found=not_found,
        duplicate_targets=duplicated,
        diagnostics=diagnostics,
        axis=axis,
        reference_name=reference_name,
        exact_match=exact_match,
        first_match=first_match,
        reference=list(reference),
    )
    logger.debug(
        "Resolved %d/%d %s identifiers against '%s'",
        len(ids) - len(not_found), len(ids), axis.value, reference_name,
    )
    return result
