"""Test fixtures for LabelSync.

Provides mock data generators and test utilities.
"""

from .mock_adata import (
    create_labeled_matrix,
    create_mock_adata,
    make_adata,
)

__all__ = [
    "create_labeled_matrix",
    "create_mock_adata",
    "make_adata",
]
