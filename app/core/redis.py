import logging
from typing import AsyncGenerator

import redis.asyncio as redis

from config import settings

logger = logging.getLogger(__name__)


class RedisClient:
    """Асинхронный клиент Redis для блокировок расписания"""

    def __init__(self, url: str):
        self.url = url
        self._pool: redis.ConnectionPool | None = None
        self._client: redis.Redis | None = None

    async def connect(self) -> None:
        """Создать пул соединений и проверить доступность сервера"""
        self._pool = redis.ConnectionPool.from_url(self.url, decode_responses=True)
        self._client = redis.Redis(connection_pool=self._pool)
        await self._client.ping()
        logger.info("Redis connected: %s", self.url)

    async def disconnect(self) -> None:
        if self._client:
            await self._client.aclose()
        if self._pool:
            await self._pool.disconnect()
        self._client = None
        self._pool = None

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    @property
    def client(self) -> redis.Redis:
        if not self._client:
            raise RuntimeError("Redis not connected. Call connect() first.")
        return self._client


# Глобальный экземпляр
redis_client = RedisClient(settings.redis_url)


async def get_redis() -> AsyncGenerator[redis.Redis | None, None]:
    """Dependency: клиент Redis или None, если блокировки отключены"""
    yield redis_client.client if settings.scheduling_lock_enabled else None
