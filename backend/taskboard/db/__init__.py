"""Database Declarations — declarative Base shared by models/ and alembic/.

Invariants:
    - No engine or session is created at import time

Design Decisions:
    - Engine/session lifecycle lives in infrastructure/database.py; this package only
      owns table metadata
"""
