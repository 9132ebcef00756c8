"""
Схемы для управления специалистами (интервьюерами).
"""
from datetime import time
from typing import Optional

from pydantic import BaseModel, Field

from app.api.schemas.skills import SkillResponse


# === Создание/обновление специалиста ===

class SpecialistCreate(BaseModel):
    """Создание специалиста. Рабочее время — в пределах одних суток"""
    full_name: Optional[str] = Field(default=None, max_length=200, description="ФИО специалиста")
    available_start: Optional[time] = Field(default=None, description="Начало рабочего времени")
    available_end: Optional[time] = Field(default=None, description="Окончание рабочего времени")
    skill_ids: list[int] = Field(default_factory=list, description="ID навыков специалиста")


class SpecialistUpdate(SpecialistCreate):
    """Полная замена данных специалиста"""


# === Ответы API ===

class SpecialistInterviewItem(BaseModel):
    """Собеседование в карточке специалиста"""
    id: int
    candidate_name: str
    interview_time: time
    interview_end: time


class SpecialistResponse(BaseModel):
    id: int
    full_name: str
    available_start: time
    available_end: time
    skills: list[SkillResponse] = Field(default_factory=list)
    skills_names: list[str] = Field(default_factory=list)


class SpecialistDetailResponse(SpecialistResponse):
    interviews: list[SpecialistInterviewItem] = Field(default_factory=list)


class SpecialistUpdateResponse(BaseModel):
    """Результат изменения специалиста с автоматически отменёнными собеседованиями"""
    message: str
    specialist: SpecialistResponse
    cancelled_interview_ids: list[int] = Field(
        default_factory=list,
        description="Собеседования, не попавшие в новое рабочее время и отменённые"
    )
