"""Test suite for enumizer.

- unit/: Unit tests covering normalization, emission, generated aliases,
  the CLI and the ambient logging/config stack
"""
