"""Database Infrastructure — declarative Base shared by models and Alembic.

Invariants:
    - Single async engine per process (initialized via infrastructure.database.init_db)
    - All sessions are async (AsyncSession)

Design Decisions:
    - aiosqlite for local runs and tests, asyncpg for PostgreSQL deployments
"""
