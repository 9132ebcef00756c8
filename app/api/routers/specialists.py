"""
API для управления специалистами.

Эндпоинты:
- GET /specialists — список специалистов с навыками
- GET /specialists/{specialist_id} — карточка специалиста с собеседованиями
- POST /specialists — создать специалиста
- PUT /specialists/{specialist_id} — изменить специалиста
  (собеседования вне нового рабочего времени отменяются автоматически)
- DELETE /specialists/{specialist_id} — удалить специалиста
"""
import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from db.session import get_db
from db.models import Specialist
from db.repositories.interviews import InterviewRepository
from db.repositories.specialists import SpecialistRepository
from app.api.deps import Config, Scheduler
from app.core.errors import SpecialistNotFound
from app.api.schemas.skills import SkillResponse
from app.api.schemas.specialists import (
    SpecialistCreate, SpecialistUpdate, SpecialistResponse,
    SpecialistDetailResponse, SpecialistInterviewItem, SpecialistUpdateResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/specialists")


def specialist_to_response(specialist: Specialist) -> SpecialistResponse:
    """Конвертировать специалиста в ответ API"""
    return SpecialistResponse(
        id=specialist.id,
        full_name=specialist.full_name,
        available_start=specialist.available_start,
        available_end=specialist.available_end,
        skills=[SkillResponse.model_validate(s) for s in specialist.skills],
        skills_names=[s.name for s in specialist.skills],
    )


@router.get("", response_model=list[SpecialistResponse])
async def get_specialists(db: AsyncSession = Depends(get_db)):
    specialists = await SpecialistRepository(db).list_all()
    return [specialist_to_response(s) for s in specialists]


@router.get("/{specialist_id}", response_model=SpecialistDetailResponse)
async def get_specialist(
    specialist_id: int,
    config: Config,
    db: AsyncSession = Depends(get_db),
):
    """Карточка специалиста: навыки и назначенные собеседования"""
    specialist = await SpecialistRepository(db).get_by_id(specialist_id)
    if not specialist:
        raise SpecialistNotFound(specialist_id)

    interviews = await InterviewRepository(db).list_by_specialist(specialist_id)
    return SpecialistDetailResponse(
        **specialist_to_response(specialist).model_dump(),
        interviews=[
            SpecialistInterviewItem(
                id=i.id,
                candidate_name=i.candidate_name,
                interview_time=i.interview_time,
                interview_end=config.interview_end(i.interview_time),
            )
            for i in interviews
        ],
    )


@router.post("", response_model=SpecialistResponse, status_code=status.HTTP_201_CREATED)
async def create_specialist(data: SpecialistCreate, scheduler: Scheduler):
    specialist = await scheduler.create_specialist(
        full_name=data.full_name,
        available_start=data.available_start,
        available_end=data.available_end,
        skill_ids=data.skill_ids,
    )
    return specialist_to_response(specialist)


@router.put("/{specialist_id}", response_model=SpecialistUpdateResponse)
async def update_specialist(
    specialist_id: int,
    data: SpecialistUpdate,
    scheduler: Scheduler,
):
    """
    Изменить ФИО, рабочее время и навыки специалиста.

    Внимание: собеседования, которые не помещаются в новое рабочее время,
    отменяются без подтверждения. Их id возвращаются в cancelled_interview_ids.
    """
    result = await scheduler.update_specialist(
        specialist_id,
        full_name=data.full_name,
        available_start=data.available_start,
        available_end=data.available_end,
        skill_ids=data.skill_ids,
    )
    return SpecialistUpdateResponse(
        message="Специалист успешно изменен",
        specialist=specialist_to_response(result.specialist),
        cancelled_interview_ids=result.cancelled_interview_ids,
    )


@router.delete("/{specialist_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_specialist(specialist_id: int, db: AsyncSession = Depends(get_db)):
    """
    Удалить специалиста.

    Его собеседования не удаляются, а остаются без специалиста —
    их можно перенести к другому.
    """
    if not await SpecialistRepository(db).delete(specialist_id):
        raise SpecialistNotFound(specialist_id)
    await db.commit()
    logger.info(f"Специалист удалён: id={specialist_id}")
