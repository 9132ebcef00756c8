from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from db.engine import async_session_maker


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency. Выдаёт сессию БД; незакоммиченное откатывается при закрытии."""
    async with async_session_maker() as session:
        yield session
