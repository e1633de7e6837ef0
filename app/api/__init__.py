"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON objects carrying a `success` boolean

Design Decisions:
    - Thin routes delegate to TodoStore (functional core, imperative shell)
"""
