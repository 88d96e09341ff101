"""Infrastructure Layer — database, cache, sign-in and logging adapters.

Invariants:
    - Infrastructure implements the Protocols in core/repository_protocols.py
    - Store exceptions are mapped to DatabaseError before leaving this layer

Design Decisions:
    - Thin adapters over SQLAlchemy and the standard logging module
"""
