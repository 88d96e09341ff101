"""Database Infrastructure — SQLAlchemy declarative Base shared by ORM models.

Invariants:
    - Single async engine per process (initialized via init_db)
    - All sessions are async (AsyncSession)

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for tests
"""
