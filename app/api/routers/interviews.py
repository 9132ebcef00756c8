"""
API для назначения собеседований.

Эндпоинты:
- GET /time — длительность собеседования и порог совпадения навыков
- GET /interviews — список собеседований
- POST /interviews — назначить собеседование
- PUT /interviews/{interview_id}/transfer — перенести собеседование
- DELETE /interviews/{interview_id} — отменить собеседование
"""
import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from db.session import get_db
from db.models import Interview
from db.repositories.interviews import InterviewRepository
from app.api.deps import Config, Scheduler
from app.core.errors import InterviewNotFound
from app.services.scheduling_config import SchedulingConfig
from app.api.schemas.skills import SkillResponse
from app.api.schemas.interviews import (
    InterviewCreate, InterviewTransfer, InterviewResponse, SchedulingConfigResponse
)

logger = logging.getLogger(__name__)

router = APIRouter()


def interview_to_response(interview: Interview, config: SchedulingConfig) -> InterviewResponse:
    """Конвертировать собеседование в ответ API"""
    return InterviewResponse(
        id=interview.id,
        candidate_name=interview.candidate_name,
        interview_time=interview.interview_time,
        interview_end=config.interview_end(interview.interview_time),
        specialist_id=interview.specialist_id,
        specialist_name=interview.specialist.full_name if interview.specialist else None,
        skills=[SkillResponse.model_validate(s) for s in interview.skills],
        skills_names=[s.name for s in interview.skills],
    )


@router.get("/time", response_model=SchedulingConfigResponse)
async def get_interview_duration(config: Config):
    """Общая длительность собеседования и минимальный процент совпадения навыков"""
    return SchedulingConfigResponse(
        hours=config.duration_hours,
        minutes=config.duration_minutes,
        min_skill_match_percentage=config.min_skill_match_percentage,
    )


@router.get("/interviews", response_model=list[InterviewResponse])
async def get_interviews(config: Config, db: AsyncSession = Depends(get_db)):
    interviews = await InterviewRepository(db).list_all()
    return [interview_to_response(i, config) for i in interviews]


@router.post("/interviews", response_model=InterviewResponse, status_code=status.HTTP_201_CREATED)
async def create_interview(data: InterviewCreate, scheduler: Scheduler):
    """
    Назначить собеседование.

    Проверяется рабочее время специалиста, совпадение навыков
    и пересечение с другими его собеседованиями.
    """
    interview = await scheduler.create_interview(
        candidate_name=data.candidate_name,
        start_time=data.interview_time,
        specialist_id=data.specialist_id,
        skill_ids=data.skill_ids,
    )
    return interview_to_response(interview, scheduler.config)


@router.put("/interviews/{interview_id}/transfer", response_model=InterviewResponse)
async def transfer_interview(interview_id: int, data: InterviewTransfer, scheduler: Scheduler):
    """Перенести собеседование к другому специалисту и/или на другое время"""
    interview = await scheduler.transfer_interview(
        interview_id,
        new_specialist_id=data.new_specialist_id,
        new_start_time=data.new_time,
    )
    return interview_to_response(interview, scheduler.config)


@router.delete("/interviews/{interview_id}", status_code=status.HTTP_204_NO_CONTENT)
async def cancel_interview(interview_id: int, db: AsyncSession = Depends(get_db)):
    """Отменить собеседование"""
    if not await InterviewRepository(db).delete(interview_id):
        raise InterviewNotFound(interview_id)
    await db.commit()
    logger.info(f"Собеседование отменено: id={interview_id}")
