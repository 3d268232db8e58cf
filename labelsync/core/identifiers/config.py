"""Configuration for identifier resolution and deduplication."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

from .resolver import Matcher, get_matcher


@dataclass
class IdentifierConfig:
    """Configuration for identifier handling.

    Attributes
    ----------
    dedup_sep : str
        Separator between a duplicated name and its occurrence counter
    dedup_on_install : bool
        Deduplicate names right after installing new ones
    exact_match : bool
        Default matching mode for index resolution
    first_match : bool
        Default hit selection for index resolution
    partial_backend : str
        Partial-match backend: ``regex`` or ``substring``
    emit_warnings : bool
        Issue resolution diagnostics through ``warnings.warn``
    """

    dedup_sep: str = "-"
    dedup_on_install: bool = True
    exact_match: bool = True
    first_match: bool = True
    partial_backend: str = "regex"
    emit_warnings: bool = True

    def __post_init__(self) -> None:
        get_matcher(self.partial_backend)

    @property
    def matcher(self) -> Matcher:
        """Partial-match function selected by ``partial_backend``."""
        return get_matcher(self.partial_backend)

    def resolve_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for :func:`resolve_index`."""
        return {
            "exact_match": self.exact_match,
            "first_match": self.first_match,
            "matcher": self.matcher,
            "emit_warnings": self.emit_warnings,
        }

    @classmethod
    def from_yaml(cls, path: Path) -> "IdentifierConfig":
        """Load configuration from YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        if "identifiers" in data:
            data = data["identifiers"]
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "dedup_sep": self.dedup_sep,
            "dedup_on_install": self.dedup_on_install,
            "exact_match": self.exact_match,
            "first_match": self.first_match,
            "partial_backend": self.partial_backend,
            "emit_warnings": self.emit_warnings,
        }
