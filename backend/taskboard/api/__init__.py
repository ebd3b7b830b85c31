"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Errors leave as the uniform JSON envelope from core/errors.py

Design Decisions:
    - Thin routes delegate to services (ADR: functional core, imperative shell)
"""
