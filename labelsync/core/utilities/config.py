"""Configuration classes for the utility collaborators."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .palette import DEFAULT_HUES


@dataclass
class PaletteConfig:
    """Configuration for discrete color palettes.

    Attributes
    ----------
    palette : str
        Generator: ``random``, ``ggplot`` or ``celda``
    seed : int
        Seed for the ``random`` generator
    hues : List[str]
        Base hues for the ``celda`` generator
    saturation_range : Tuple[float, float]
        Saturation bounds for the ``celda`` generator
    value_range : Tuple[float, float]
        Value bounds for the ``celda`` generator
    """

    palette: str = "random"
    seed: int = 12345
    hues: List[str] = field(default_factory=lambda: list(DEFAULT_HUES))
    saturation_range: Tuple[float, float] = (0.7, 1.0)
    value_range: Tuple[float, float] = (0.7, 1.0)

    def celda_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for :func:`distinct_colors`."""
        return {
            "hues": list(self.hues),
            "saturation_range": tuple(self.saturation_range),
            "value_range": tuple(self.value_range),
        }


@dataclass
class SummaryConfig:
    """Configuration for per-sample summary tables.

    Attributes
    ----------
    layer : str, optional
        Layer to summarize (None for ``X``)
    sample_key : str, optional
        Column in ``obs`` holding sample identifiers
    """

    layer: Optional[str] = None
    sample_key: Optional[str] = None
