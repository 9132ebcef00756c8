from typing import Iterable, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete

from db.models import Skill


class SkillRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> Sequence[Skill]:
        res = await self.db.execute(select(Skill).order_by(Skill.name))
        return res.scalars().all()

    async def get_by_id(self, skill_id: int) -> Optional[Skill]:
        res = await self.db.execute(select(Skill).where(Skill.id == skill_id))
        return res.scalars().first()

    async def get_by_name(self, name: str) -> Optional[Skill]:
        res = await self.db.execute(select(Skill).where(Skill.name == name))
        return res.scalars().first()

    async def get_many(self, skill_ids: Iterable[int]) -> list[Skill]:
        ids = set(skill_ids)
        if not ids:
            return []
        res = await self.db.execute(select(Skill).where(Skill.id.in_(sorted(ids))).order_by(Skill.name))
        return list(res.scalars().all())

    async def create(self, name: str) -> Skill:
        skill = Skill(name=name)
        self.db.add(skill)
        await self.db.flush()
        await self.db.refresh(skill)
        return skill

    async def delete(self, skill_id: int) -> bool:
        """Удалить навык; связи со специалистами и собеседованиями удаляет БД (CASCADE)"""
        res = await self.db.execute(delete(Skill).where(Skill.id == skill_id))
        return res.rowcount > 0
