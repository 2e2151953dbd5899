"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure implements contracts declared in core/repository_protocols.py
    - All SQLAlchemy exceptions mapped to DatabaseError before leaving this layer
"""
