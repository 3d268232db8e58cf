"""Centralized configuration for LabelSync.

Example
-------
>>> from labelsync.config import LabelSyncConfig
>>> config = LabelSyncConfig.from_yaml("labelsync.yaml")
>>> config.identifiers.dedup_sep
'-'
>>> collections = config.geneset_collections()
>>> collections.geneset_names("hallmark")
['HALLMARK_APOPTOSIS', 'HALLMARK_HYPOXIA']
"""

from .settings import LabelSyncConfig

__all__ = [
    "LabelSyncConfig",
]
