"""Concrete SQLAlchemy repository implementation.

Exports SqlModelRepository and the get_repository() factory for wiring at the
application boundary (dependency injection).
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from .base import ModelT, SqlModelRepository


def get_repository(session: AsyncSession, model: type[ModelT]) -> SqlModelRepository[ModelT]:
    """Construct a repository for model bound to the given session.

    Intended for use inside a request-scoped dependency:

        async def handler(session: AsyncSession = Depends(get_session)) -> ...:
            notes = get_repository(session, Note)
            note = await notes.get(note_id)
    """
    return SqlModelRepository(session, model=model)


__all__ = [
    "SqlModelRepository",
    "get_repository",
]
