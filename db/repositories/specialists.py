from datetime import time
from typing import Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete

from db.models import Skill, Specialist


class SpecialistRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> Sequence[Specialist]:
        res = await self.db.execute(select(Specialist).order_by(Specialist.full_name, Specialist.id))
        return res.scalars().all()

    async def get_by_id(self, specialist_id: int) -> Optional[Specialist]:
        res = await self.db.execute(select(Specialist).where(Specialist.id == specialist_id))
        return res.scalars().first()

    async def create(
        self,
        full_name: str,
        available_start: time,
        available_end: time,
        skills: list[Skill],
    ) -> Specialist:
        specialist = Specialist(
            full_name=full_name,
            available_start=available_start,
            available_end=available_end,
            skills=skills,
        )
        self.db.add(specialist)
        await self.db.flush()
        await self.db.refresh(specialist)
        return specialist

    async def update(self, specialist: Specialist, **kwargs) -> Specialist:
        for k, v in kwargs.items():
            setattr(specialist, k, v)
        await self.db.flush()
        return specialist

    async def delete(self, specialist_id: int) -> bool:
        """Удалить специалиста; его собеседования остаются без специалиста (SET NULL)"""
        res = await self.db.execute(delete(Specialist).where(Specialist.id == specialist_id))
        return res.rowcount > 0
