"""
Pure unit tests for recordkit.

Testing strategy:
1. Pure unit tests only - no external dependencies, settings files live in temp dirs
2. Boundary values first - unit rollovers, missing keys, empty inputs
3. Property-based tests for the invariants that must hold for all inputs
"""
