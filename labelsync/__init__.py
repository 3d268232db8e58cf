"""LabelSync: identifier resolution and deduplication for single-cell data.

This package provides tools for:
- Resolving gene or cell identifiers to positional indices (exact or
  partial matching, first hit or all hits)
- Deterministic deduplication of repeated feature/cell names
- Installing an annotation column as the authoritative identifiers
- Small collaborators: assay summaries, discrete palettes, sparse conversion

Entities are AnnData objects (feature axis = ``var``, cell axis = ``obs``)
or plain pandas DataFrames used as matrices.

Example usage:
    >>> from labelsync.core.identifiers import resolve_index, set_labels
    >>>
    >>> # Use gene symbols as feature names
    >>> adata = set_labels(adata, "row", "feature_name")
    >>>
    >>> # Find features by partial match
    >>> result = resolve_index(adata, ["CD3", "MS4A1"], axis="gene",
    ...                        exact_match=False)
    >>> adata[:, result.indices]
"""

__version__ = "0.1.0"
