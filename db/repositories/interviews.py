from datetime import time
from typing import Iterable, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete

from db.models import Interview, Skill


class InterviewRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> Sequence[Interview]:
        res = await self.db.execute(select(Interview).order_by(Interview.interview_time, Interview.id))
        return res.scalars().unique().all()

    async def get_by_id(self, interview_id: int) -> Optional[Interview]:
        res = await self.db.execute(
            select(Interview)
            .where(Interview.id == interview_id)
            .execution_options(populate_existing=True)
        )
        return res.scalars().first()

    async def get_specialist_id(self, interview_id: int) -> tuple[bool, Optional[int]]:
        """(найдено ли собеседование, id его текущего специалиста)"""
        res = await self.db.execute(
            select(Interview.specialist_id).where(Interview.id == interview_id)
        )
        row = res.first()
        return (row is not None, row.specialist_id if row is not None else None)

    async def list_by_specialist(self, specialist_id: int) -> Sequence[Interview]:
        res = await self.db.execute(
            select(Interview)
            .where(Interview.specialist_id == specialist_id)
            .order_by(Interview.interview_time, Interview.id)
        )
        return res.scalars().unique().all()

    async def create(
        self,
        candidate_name: str,
        interview_time: time,
        specialist_id: int,
        skills: list[Skill],
    ) -> Interview:
        interview = Interview(
            candidate_name=candidate_name,
            interview_time=interview_time,
            specialist_id=specialist_id,
            skills=skills,
        )
        self.db.add(interview)
        await self.db.flush()
        await self.db.refresh(interview)
        return interview

    async def delete(self, interview_id: int) -> bool:
        res = await self.db.execute(delete(Interview).where(Interview.id == interview_id))
        return res.rowcount > 0

    async def delete_many(self, interview_ids: Iterable[int], specialist_id: Optional[int] = None) -> int:
        """Удалить собеседования; с specialist_id только у этого специалиста"""
        ids = list(interview_ids)
        if not ids:
            return 0
        stmt = delete(Interview).where(Interview.id.in_(ids))
        if specialist_id is not None:
            stmt = stmt.where(Interview.specialist_id == specialist_id)
        res = await self.db.execute(stmt)
        return res.rowcount
