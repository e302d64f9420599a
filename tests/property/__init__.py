# tests/property/__init__.py
"""Property-based tests for the hardener.

Property-based testing validates invariants that must hold for ALL object
graphs, not just the shapes we think of: cycles, shared children, deep
chains and arbitrary prototype wiring.

Test categories:
- core/: harden() closure, atomicity, idempotence and override semantics
"""
