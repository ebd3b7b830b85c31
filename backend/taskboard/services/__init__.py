"""Services Layer — request-scoped handlers over the pure core.

Invariants:
    - Handlers own locking and transaction boundaries; core owns the decisions
    - Every multi-step write runs inside unit_of_work (all-or-nothing)

Design Decisions:
    - One handler class per aggregate (tasks, notes) for locality
"""
