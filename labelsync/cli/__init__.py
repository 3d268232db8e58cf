"""Command-line interface for LabelSync.

Example Usage
-------------
    # From command line:
    labelsync --help
    labelsync dedup --input data.h5ad --out unique.h5ad
    labelsync resolve --input data.h5ad --axis gene --id CD3E --id CD4
    labelsync palette -n 12 --palette celda
"""

from .main import cli, main

__all__ = [
    "cli",
    "main",
]
