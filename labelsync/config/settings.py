"""Master configuration for LabelSync.

All parameters can be loaded from a YAML file, optionally nested under a
top-level ``labelsync:`` section.

Example
-------
>>> from labelsync.config import LabelSyncConfig
>>> config = LabelSyncConfig.from_yaml("labelsync.yaml")
>>> config.identifiers.partial_backend
'regex'
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from ..core.identifiers.config import IdentifierConfig
from ..core.identifiers.genesets import GeneSetCollections
from ..core.utilities.config import PaletteConfig, SummaryConfig


@dataclass
class LabelSyncConfig:
    """Master configuration.

    Attributes
    ----------
    identifiers : IdentifierConfig
        Resolution and deduplication settings
    palette : PaletteConfig
        Color palette settings
    summary : SummaryConfig
        Summary table settings
    genesets : Dict[str, Dict[str, list]]
        Gene set collections to import, ``{collection: {set: [ids]}}``
    """

    identifiers: IdentifierConfig = field(default_factory=IdentifierConfig)
    palette: PaletteConfig = field(default_factory=PaletteConfig)
    summary: SummaryConfig = field(default_factory=SummaryConfig)
    genesets: Dict[str, Dict[str, list]] = field(default_factory=dict)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "LabelSyncConfig":
        """Load configuration from YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        if "labelsync" in data:
            data = data["labelsync"]

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LabelSyncConfig":
        """Build from a plain dictionary."""
        palette = dict(data.get("palette", {}))
        for key in ("saturation_range", "value_range"):
            if key in palette:
                palette[key] = tuple(palette[key])
        return cls(
            identifiers=IdentifierConfig(**data.get("identifiers", {})),
            palette=PaletteConfig(**palette),
            summary=SummaryConfig(**data.get("summary", {})),
            genesets=dict(data.get("genesets", {})),
        )

    @classmethod
    def default(cls) -> "LabelSyncConfig":
        """Create default configuration."""
        return cls()

    def geneset_collections(self) -> GeneSetCollections:
        """Explicit handle over the configured gene set collections."""
        return GeneSetCollections.from_dict(self.genesets)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "identifiers": self.identifiers.to_dict(),
            "palette": {
                "palette": self.palette.palette,
                "seed": self.palette.seed,
                "hues": list(self.palette.hues),
                "saturation_range": list(self.palette.saturation_range),
                "value_range": list(self.palette.value_range),
            },
            "summary": {
                "layer": self.summary.layer,
                "sample_key": self.summary.sample_key,
            },
            "genesets": self.genesets,
        }
