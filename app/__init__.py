"""Todo API Package — in-memory task list service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
