"""Async Session Factory: one place that decides how sessions are configured.

Invariants:
    - Every session factory uses expire_on_commit=False
    - Used by DatabaseSessionManager and by test fixtures alike

Design Decisions:
    - Separate from infrastructure/database.py: test fixtures and scripts bind
      their own engine but must get identically configured sessions
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker


def create_session_factory(
    engine: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    """Create an async session factory bound to the given engine."""
    return async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
