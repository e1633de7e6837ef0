"""Infrastructure Layer — logging and request middleware.

Invariants:
    - Infrastructure never contains todo business logic
"""
