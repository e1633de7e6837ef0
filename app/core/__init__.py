"""Core Layer — pure domain logic, no IO, no async, no web framework.

Invariants:
    - No module in core/ imports from api/, schemas/ or infrastructure/
    - Only TodoStore holds state; every other core function is pure

Design Decisions:
    - Functional core separated from imperative shell (routes are thin)
"""
