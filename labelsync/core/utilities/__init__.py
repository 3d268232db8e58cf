"""Utility collaborators used alongside identifier handling.

- summary: Per-sample counts table
- palette: Discrete color palettes
- matrix: Chunked sparse conversion
- frames: Categorical backup/restore and label text helpers
"""

from .config import PaletteConfig, SummaryConfig
from .frames import (
    CategoricalBackup,
    backup_categoricals,
    convert_categoricals_to_str,
    convert_to_hyphen,
    restore_categoricals,
)
from .matrix import to_sparse_matrix
from .palette import (
    DEFAULT_HUES,
    PALETTES,
    discrete_color_palette,
    distinct_colors,
    ggplot_colors,
    hcl_to_hex,
    random_colors,
)
from .summary import SUMMARY_COLUMNS, summarize_adata

__all__ = [
    # Config
    "PaletteConfig",
    "SummaryConfig",
    # Frames
    "CategoricalBackup",
    "backup_categoricals",
    "convert_categoricals_to_str",
    "convert_to_hyphen",
    "restore_categoricals",
    # Matrix
    "to_sparse_matrix",
    # Palette
    "DEFAULT_HUES",
    "PALETTES",
    "discrete_color_palette",
    "distinct_colors",
    "ggplot_colors",
    "hcl_to_hex",
    "random_colors",
    # Summary
    "SUMMARY_COLUMNS",
    "summarize_adata",
]
