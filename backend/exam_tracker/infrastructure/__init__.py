"""Infrastructure Layer — database access, credential checks, session storage, logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - SQLAlchemy exceptions never escape: they are mapped to DatabaseError
"""
