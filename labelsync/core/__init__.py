"""Core computational modules for LabelSync.

This package contains:
- identifiers: Index resolution, deduplication and label installation
- utilities: Assay summaries, color palettes, sparse conversion and
  data frame helpers used alongside identifier handling
"""
