"""
Общие фикстуры тестов.

БД — SQLite в памяти (aiosqlite) с включёнными внешними ключами,
чтобы каскады ON DELETE работали как в PostgreSQL.
Блокировки Redis в тестах отключены.
"""
import os

os.environ.setdefault("ENV", "test")
os.environ.setdefault("SCHEDULING_LOCK_ENABLED", "false")

from datetime import time

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from db.engine import Base
from db.models import Skill, Specialist
from db.session import get_db
from app.api.deps import get_lock_service, get_scheduling_config
from app.services.lock_service import SpecialistLockService
from app.services.scheduling_config import SchedulingConfig
from app.services.scheduling_service import SchedulingService


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
def config():
    """Собеседование 1 ч 30 мин, порог навыков 80%"""
    return SchedulingConfig(duration_hours=1, duration_minutes=30, min_skill_match_percentage=80)


@pytest.fixture
def scheduler(db, config):
    return SchedulingService(db, config)


@pytest.fixture
def make_skill(db):
    async def _make(name: str) -> Skill:
        skill = Skill(name=name)
        db.add(skill)
        await db.commit()
        return skill
    return _make


@pytest.fixture
def make_specialist(db):
    async def _make(
        full_name: str = "Иванова Анна",
        start: time = time(9, 0),
        end: time = time(17, 0),
        skills: list[Skill] | None = None,
    ) -> Specialist:
        specialist = Specialist(
            full_name=full_name,
            available_start=start,
            available_end=end,
            skills=skills or [],
        )
        db.add(specialist)
        await db.commit()
        return specialist
    return _make


@pytest.fixture
async def client(session_maker, config):
    from app.main import app

    async def override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_scheduling_config] = lambda: config
    app.dependency_overrides[get_lock_service] = lambda: SpecialistLockService(None)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
