"""Test suite for LabelSync.

Test organization:
- fixtures/: Mock AnnData and matrix generators
- unit/: Unit tests for individual modules and the CLI

Run tests with:
    pytest tests/
    pytest tests/unit/test_resolver.py -v
"""
