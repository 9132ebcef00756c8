"""
FastAPI-зависимости ядра планирования.

В тестах подменяются через app.dependency_overrides.
"""
from typing import Annotated

import redis.asyncio as redis
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from config import settings
from db.session import get_db
from app.core.redis import get_redis
from app.services.lock_service import SpecialistLockService
from app.services.scheduling_config import SchedulingConfig
from app.services.scheduling_service import SchedulingService


def get_scheduling_config() -> SchedulingConfig:
    """Параметры планирования из окружения"""
    return SchedulingConfig.from_settings(settings)


def get_lock_service(
    redis_client: Annotated[redis.Redis | None, Depends(get_redis)],
) -> SpecialistLockService:
    return SpecialistLockService(
        redis_client,
        timeout=settings.scheduling_lock_timeout,
        blocking_timeout=settings.scheduling_lock_blocking_timeout,
    )


def get_scheduling_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    config: Annotated[SchedulingConfig, Depends(get_scheduling_config)],
    locks: Annotated[SpecialistLockService, Depends(get_lock_service)],
) -> SchedulingService:
    return SchedulingService(db, config, locks)


DbSession = Annotated[AsyncSession, Depends(get_db)]
Config = Annotated[SchedulingConfig, Depends(get_scheduling_config)]
Scheduler = Annotated[SchedulingService, Depends(get_scheduling_service)]
