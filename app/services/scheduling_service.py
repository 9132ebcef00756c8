"""
Планирование собеседований: создание, перенос и пересчёт расписания
при изменении рабочего времени специалиста.

Порядок проверок (первая нарушенная прерывает запрос):
специалист существует → рабочее время → навыки → пересечения → запись.
Все проверки и запись выполняются в одной транзакции; при любой ошибке
транзакция откатывается целиком.
"""
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from datetime import time
from typing import AsyncIterator, Iterable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import (
    InterviewNotFound,
    SchedulingBusy,
    SchedulingError,
    SchedulingInternalError,
    SpecialistNotFound,
    ValidationError,
)
from app.services.availability import check_availability
from app.services.collisions import check_collisions, find_out_of_hours
from app.services.lock_service import SpecialistLockService
from app.services.scheduling_config import SchedulingConfig
from app.services.skill_match import check_skill_match
from db.models import Interview, Skill, Specialist
from db.repositories.interviews import InterviewRepository
from db.repositories.skills import SkillRepository
from db.repositories.specialists import SpecialistRepository

logger = logging.getLogger(__name__)


@dataclass
class SpecialistUpdateResult:
    """Результат изменения специалиста вместе с побочными эффектами"""
    specialist: Specialist
    cancelled_interview_ids: list[int] = field(default_factory=list)


class SchedulingService:
    """Транзакционная точка входа для изменений расписания"""

    def __init__(
        self,
        db: AsyncSession,
        config: SchedulingConfig,
        locks: SpecialistLockService | None = None,
    ):
        self.db = db
        self.config = config
        self.locks = locks or SpecialistLockService(None)
        self.skills = SkillRepository(db)
        self.specialists = SpecialistRepository(db)
        self.interviews = InterviewRepository(db)

    @asynccontextmanager
    async def _transaction(self, action: str) -> AsyncIterator[None]:
        """Зафиксировать изменения или откатить их при любой ошибке"""
        try:
            yield
            await self.db.commit()
        except SchedulingError:
            await self.db.rollback()
            raise
        except SQLAlchemyError:
            await self.db.rollback()
            logger.exception("Ошибка БД: %s", action)
            raise SchedulingInternalError(f"Не удалось выполнить операцию: {action}")

    async def _get_specialist(self, specialist_id: int, detail: str = "Специалист не найден") -> Specialist:
        specialist = await self.specialists.get_by_id(specialist_id)
        if not specialist:
            raise SpecialistNotFound(specialist_id, detail)
        return specialist

    async def _resolve_skills(self, skill_ids: Iterable[int]) -> list[Skill]:
        ids = set(skill_ids)
        skills = await self.skills.get_many(ids)
        missing = ids - {s.id for s in skills}
        if missing:
            raise ValidationError(
                "Указаны несуществующие навыки",
                skill_ids=sorted(missing),
            )
        return skills

    @staticmethod
    def _check_naive(value: time | None, field_name: str) -> None:
        # Время суток хранится без часового пояса
        if value is not None and value.tzinfo is not None:
            raise ValidationError("Время указывается без часового пояса", field=field_name)

    @classmethod
    def _check_window(cls, available_start: time | None, available_end: time | None) -> None:
        if available_start is None or available_end is None:
            raise ValidationError("Доступное время специалиста обязательно для заполнения")
        cls._check_naive(available_start, "available_start")
        cls._check_naive(available_end, "available_end")
        if available_start >= available_end:
            raise ValidationError(
                "Начало рабочего времени должно быть раньше окончания"
            )

    async def _check_slot(
        self,
        specialist: Specialist,
        start: time,
        required_skill_ids: Iterable[int],
        exclude_id: int | None = None,
    ) -> None:
        end = self.config.interview_end(start)
        check_availability(start, end, specialist.available_start, specialist.available_end)
        check_skill_match(
            required_skill_ids,
            [s.id for s in specialist.skills],
            self.config.min_skill_match_percentage,
        )
        existing = await self.interviews.list_by_specialist(specialist.id)
        check_collisions(start, end, existing, self.config, exclude_id=exclude_id)

    # === Собеседования ===

    async def create_interview(
        self,
        candidate_name: str | None,
        start_time: time | None,
        specialist_id: int | None,
        skill_ids: Iterable[int] = (),
    ) -> Interview:
        """Назначить новое собеседование специалисту"""
        candidate_name = (candidate_name or "").strip()
        if not candidate_name or start_time is None or specialist_id is None:
            raise ValidationError(
                "Поля ФИО соискателя, время собеседования и специалист обязательны для заполнения"
            )
        self._check_naive(start_time, "interview_time")

        async with self.locks.hold(specialist_id):
            async with self._transaction("создание собеседования"):
                specialist = await self._get_specialist(specialist_id)
                skills = await self._resolve_skills(skill_ids)
                await self._check_slot(specialist, start_time, [s.id for s in skills])
                interview = await self.interviews.create(
                    candidate_name=candidate_name,
                    interview_time=start_time,
                    specialist_id=specialist.id,
                    skills=skills,
                )

        logger.info(
            "Interview %s created: specialist=%s time=%s",
            interview.id, specialist_id, start_time.isoformat(),
        )
        return interview

    async def transfer_interview(
        self,
        interview_id: int,
        new_specialist_id: int | None,
        new_start_time: time | None = None,
    ) -> Interview:
        """
        Перенести собеседование к другому специалисту и/или на другое время.

        Без new_start_time время остаётся прежним. Само переносимое
        собеседование в проверке пересечений не участвует. Блокируются
        и текущий, и новый специалист.
        """
        if new_specialist_id is None:
            raise ValidationError("Необходим ID нового специалиста")
        self._check_naive(new_start_time, "new_time")

        async with self._transaction("перенос собеседования"):
            found, current_specialist_id = await self.interviews.get_specialist_id(interview_id)
            if not found:
                raise InterviewNotFound(interview_id)

        async with self.locks.hold(current_specialist_id, new_specialist_id):
            async with self._transaction("перенос собеседования"):
                interview = await self.interviews.get_by_id(interview_id)
                if not interview:
                    raise InterviewNotFound(interview_id)
                if interview.specialist_id != current_specialist_id:
                    # Перенесено другим запросом, пока ждали блокировку
                    raise SchedulingBusy(interview.specialist_id)
                specialist = await self._get_specialist(new_specialist_id, "Новый специалист не найден")
                start = new_start_time if new_start_time is not None else interview.interview_time
                await self._check_slot(
                    specialist,
                    start,
                    [s.id for s in interview.skills],
                    exclude_id=interview.id,
                )
                interview.specialist = specialist
                interview.interview_time = start
                await self.db.flush()

        logger.info(
            "Interview %s transferred: specialist=%s time=%s",
            interview_id, new_specialist_id, start.isoformat(),
        )
        return interview

    # === Специалисты ===

    async def _cancel_out_of_hours(self, specialist: Specialist) -> list[int]:
        existing = await self.interviews.list_by_specialist(specialist.id)
        cancelled = sorted(
            i.id for i in find_out_of_hours(
                existing, specialist.available_start, specialist.available_end, self.config
            )
        )
        await self.interviews.delete_many(cancelled, specialist_id=specialist.id)
        return cancelled

    async def create_specialist(
        self,
        full_name: str | None,
        available_start: time | None,
        available_end: time | None,
        skill_ids: Iterable[int] = (),
    ) -> Specialist:
        full_name = (full_name or "").strip()
        if not full_name:
            raise ValidationError("Поля ФИО и доступное время обязательны для заполнения")
        self._check_window(available_start, available_end)

        async with self._transaction("создание специалиста"):
            skills = await self._resolve_skills(skill_ids)
            specialist = await self.specialists.create(
                full_name=full_name,
                available_start=available_start,
                available_end=available_end,
                skills=skills,
            )

        logger.info("Specialist %s created", specialist.id)
        return specialist

    async def update_specialist(
        self,
        specialist_id: int,
        full_name: str | None,
        available_start: time | None,
        available_end: time | None,
        skill_ids: Iterable[int] = (),
    ) -> SpecialistUpdateResult:
        """
        Изменить специалиста. Собеседования, которые больше не помещаются
        в новое рабочее время, отменяются в той же транзакции и
        возвращаются в cancelled_interview_ids.
        """
        full_name = (full_name or "").strip()
        if not full_name:
            raise ValidationError("Поля ФИО и доступное время обязательны для заполнения")
        self._check_window(available_start, available_end)

        async with self.locks.hold(specialist_id):
            async with self._transaction("изменение специалиста"):
                specialist = await self._get_specialist(specialist_id)
                skills = await self._resolve_skills(skill_ids)
                await self.specialists.update(
                    specialist,
                    full_name=full_name,
                    available_start=available_start,
                    available_end=available_end,
                    skills=skills,
                )
                cancelled = await self._cancel_out_of_hours(specialist)

        if cancelled:
            logger.info("Specialist %s updated, cancelled interviews: %s", specialist_id, cancelled)
        return SpecialistUpdateResult(specialist=specialist, cancelled_interview_ids=cancelled)

    async def on_specialist_hours_changed(
        self,
        specialist_id: int,
        new_start: time | None,
        new_end: time | None,
    ) -> list[int]:
        """Сменить рабочее время специалиста; вернуть id отменённых собеседований"""
        self._check_window(new_start, new_end)

        async with self.locks.hold(specialist_id):
            async with self._transaction("изменение рабочего времени специалиста"):
                specialist = await self._get_specialist(specialist_id)
                await self.specialists.update(
                    specialist,
                    available_start=new_start,
                    available_end=new_end,
                )
                cancelled = await self._cancel_out_of_hours(specialist)

        logger.info(
            "Specialist %s hours changed to %s-%s, cancelled interviews: %s",
            specialist_id, new_start.isoformat(), new_end.isoformat(), cancelled,
        )
        return cancelled
