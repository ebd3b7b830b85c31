"""Infrastructure Layer — database access, stores, clock, locks, logging.

Invariants:
    - Infrastructure never calls into services/ or api/
    - All SQLAlchemy errors surface as PersistenceError

Design Decisions:
    - Stores implement the core/repository_protocols contracts; handlers type their
      store against the protocol and default to the SQL implementation
"""
