"""Identifier resolution, deduplication and installation.

Components
----------
- store: Access to names and annotation tables (AnnData or DataFrame)
- dedup: ``-1, -2, ...`` suffixing of duplicated names
- resolver: Identifier-to-index lookup with exact/partial matching
- installer: Setting names from a vector or an annotation column
- genesets: Explicit handle for imported gene set collections

Example Usage
-------------
>>> from labelsync.core.identifiers import (
...     deduplicate, resolve_index, set_labels,
... )
>>> deduplicate(["a", "a", "b"])
['a-1', 'a-2', 'b']
>>> adata = set_labels(adata, "row", "feature_name")
>>> result = resolve_index(adata, ["CD3E", "CD4"], axis="gene")
>>> result.indices
[10, 42]
"""

__version__ = "1.0.0"

from .axis import (
    Axis,
    COL_ALIASES,
    ROW_ALIASES,
    parse_axis,
)

from .errors import (
    InvalidAxisError,
    LabelSyncError,
    LengthMismatchError,
    MissingIdentifiersError,
    NoMatchWarning,
    NotATableLikeEntityError,
    ResolutionWarning,
    TypeMismatchError,
    UnknownAnnotationColumnError,
)

from .store import (
    AnnDataLabelStore,
    FrameLabelStore,
    LabelStore,
    get_label_store,
    is_table_like_entity,
)

from .dedup import (
    COL_UNIQUE_COLUMN,
    ROW_UNIQUE_COLUMN,
    deduplicate,
    deduplicate_in_place,
    deduplicated_labels,
)

from .resolver import (
    Diagnostic,
    MATCHERS,
    ResolutionResult,
    get_matcher,
    regex_matcher,
    resolve_index,
    substring_matcher,
)

from .installer import (
    set_labels,
    set_row_names,
)

from .genesets import (
    GeneSetCollections,
    resolve_geneset,
)

from .config import IdentifierConfig

__all__ = [
    # Version
    "__version__",
    # Axis
    "Axis",
    "ROW_ALIASES",
    "COL_ALIASES",
    "parse_axis",
    # Errors
    "LabelSyncError",
    "InvalidAxisError",
    "UnknownAnnotationColumnError",
    "MissingIdentifiersError",
    "LengthMismatchError",
    "TypeMismatchError",
    "NotATableLikeEntityError",
    "ResolutionWarning",
    "NoMatchWarning",
    # Store
    "LabelStore",
    "AnnDataLabelStore",
    "FrameLabelStore",
    "get_label_store",
    "is_table_like_entity",
    # Deduplication
    "ROW_UNIQUE_COLUMN",
    "COL_UNIQUE_COLUMN",
    "deduplicate",
    "deduplicate_in_place",
    "deduplicated_labels",
    # Resolution
    "Diagnostic",
    "ResolutionResult",
    "MATCHERS",
    "get_matcher",
    "regex_matcher",
    "substring_matcher",
    "resolve_index",
    # Installation
    "set_labels",
    "set_row_names",
    # Gene sets
    "GeneSetCollections",
    "resolve_geneset",
    # Config
    "IdentifierConfig",
]
