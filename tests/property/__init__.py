# tests/property/__init__.py
"""Property-based tests for goembed.

Property-based testing validates invariants that must hold for ALL inputs,
not just the specific examples we think of.

Test categories:
- core/: Identifier sanitisation shape and determinism
- engine/: Literal round-trip, chunking and digest coverage
"""
