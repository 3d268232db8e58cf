"""Explicit handle for imported gene set collections.

Collections are held by a ``GeneSetCollections`` object passed to whatever
needs them instead of living in a process-wide registry. A collection maps
gene set names to member feature identifiers; members can be resolved
against an AnnData object with :func:`resolve_geneset`.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .resolver import ResolutionResult, resolve_index

GeneSetCollection = Dict[str, List[str]]


@dataclass
class GeneSetCollections:
    """Named gene set collections.

    Attributes
    ----------
    collections : Dict[str, GeneSetCollection]
        Map of collection name to ``{gene_set_name: [feature ids]}``
    """

    collections: Dict[str, GeneSetCollection] = field(default_factory=dict)

    def add(self, name: str, gene_sets: Mapping[str, Sequence[str]]) -> None:
        """Import (or replace) a collection."""
        self.collections[name] = {k: list(v) for k, v in gene_sets.items()}

    def names(self) -> List[str]:
        """Names of imported collections."""
        return list(self.collections)

    def get(self, name: str) -> GeneSetCollection:
        """Return collection ``name``.

        Raises
        ------
        KeyError
            If no collection was imported or ``name`` is unknown.
        """
        if not self.collections:
            raise KeyError("No gene set collections have been imported.")
        if name not in self.collections:
            raise KeyError(
                f"'{name}' is not in the list of imported gene set collections: "
                f"{','.join(self.collections)}"
            )
        return self.collections[name]

    def geneset_names(self, name: str) -> List[str]:
        """Gene set names available in collection ``name``."""
        return list(self.get(name))

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "GeneSetCollections":
        """Build from a nested mapping (e.g. a YAML document)."""
        handle = cls()
        for name, gene_sets in (data or {}).items():
            handle.add(name, gene_sets)
        return handle


def resolve_geneset(
    adata: Any,
    collections: GeneSetCollections,
    collection: str,
    gene_set: str,
    by: Optional[str] = None,
    **kwargs: Any,
) -> ResolutionResult:
    """Resolve the members of one gene set to feature indices of ``adata``.

    Extra keyword arguments are passed to :func:`resolve_index`.
    """
    sets = collections.get(collection)
    if gene_set not in sets:
        raise KeyError(
            f"Gene set '{gene_set}' not found in collection '{collection}'"
        )
    return resolve_index(adata, sets[gene_set], axis="row", by=by, **kwargs)
