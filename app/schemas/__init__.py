"""Pydantic Schemas — request validation for API endpoints.

Invariants:
    - Schemas check JSON shape at the system boundary; todo rules live in core/
"""
