"""Core Layer — pure domain logic: recurrence, note ordering, task lifecycle.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic: "now" and timezone are parameters

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
