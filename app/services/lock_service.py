"""
Сериализация изменений расписания по специалисту.

Проверка пересечений и запись выполняются под блокировкой Redis
lock:specialist:{id}, поэтому два параллельных запроса не могут
одновременно занять пересекающиеся слоты одного специалиста.
Без Redis используются блокировки asyncio внутри процесса.
"""
import asyncio
import logging
import weakref
from contextlib import AsyncExitStack, asynccontextmanager
from typing import AsyncIterator

import redis.asyncio as redis
from redis.exceptions import LockError

from app.core.errors import SchedulingBusy

logger = logging.getLogger(__name__)

# Блокировки внутри процесса: отдельный набор на каждый event loop
_local_locks: "weakref.WeakKeyDictionary[asyncio.AbstractEventLoop, dict[int, asyncio.Lock]]" = (
    weakref.WeakKeyDictionary()
)


def _local_lock(specialist_id: int) -> asyncio.Lock:
    locks = _local_locks.setdefault(asyncio.get_running_loop(), {})
    return locks.setdefault(specialist_id, asyncio.Lock())


class SpecialistLockService:
    """
    Блокировки расписания специалистов.

    Без клиента Redis блокировки берутся только внутри процесса,
    этого достаточно при одном воркере.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None,
        timeout: float = 10.0,
        blocking_timeout: float = 5.0,
    ):
        self.redis = redis_client
        self.timeout = timeout
        self.blocking_timeout = blocking_timeout

    def _make_key(self, specialist_id: int) -> str:
        return f"lock:specialist:{specialist_id}"

    @asynccontextmanager
    async def hold(self, *specialist_ids: int | None) -> AsyncIterator[None]:
        """
        Удерживать блокировки указанных специалистов.

        Блокировки берутся по возрастанию id, чтобы запросы, затрагивающие
        нескольких специалистов, не ждали друг друга по кругу.
        """
        ids = sorted({sid for sid in specialist_ids if sid is not None})
        async with AsyncExitStack() as stack:
            for specialist_id in ids:
                if self.redis is None:
                    await stack.enter_async_context(_local_lock(specialist_id))
                    continue
                lock = self.redis.lock(
                    self._make_key(specialist_id),
                    timeout=self.timeout,
                    blocking_timeout=self.blocking_timeout,
                )
                logger.debug("Waiting for schedule lock of specialist %s", specialist_id)
                if not await lock.acquire():
                    raise SchedulingBusy(specialist_id)
                stack.push_async_callback(self._release, lock, specialist_id)
            yield

    async def _release(self, lock, specialist_id: int) -> None:
        try:
            await lock.release()
        except LockError:
            # Истёк timeout: ключ уже удалён или занят другим запросом
            logger.warning("Schedule lock of specialist %s expired before release", specialist_id)
