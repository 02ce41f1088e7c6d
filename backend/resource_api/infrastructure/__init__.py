"""Infrastructure Layer — storage connection and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/
    - Storage failures surface as DatabaseError (core/errors.py)
"""
