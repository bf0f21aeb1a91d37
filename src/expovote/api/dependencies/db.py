"""Database session dependencies."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.expovote.core.db import get_session


async def get_db_session() -> AsyncGenerator[AsyncSession]:
    """Get a database session for the current request.

    Route handlers receive the session (and everything built on it) through
    this dependency, so tests can point the whole app at another engine with
    ``app.dependency_overrides[get_db_session]``.
    """
    async with get_session() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]
