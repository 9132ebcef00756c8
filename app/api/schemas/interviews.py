"""
Схемы для назначения и переноса собеседований.
"""
from datetime import time
from typing import Optional

from pydantic import BaseModel, Field

from app.api.schemas.skills import SkillResponse


# === Создание/перенос собеседования ===

class InterviewCreate(BaseModel):
    """Назначение собеседования"""
    candidate_name: Optional[str] = Field(default=None, max_length=200, description="ФИО соискателя")
    interview_time: Optional[time] = Field(default=None, description="Время начала собеседования")
    specialist_id: Optional[int] = Field(default=None, description="ID специалиста")
    skill_ids: list[int] = Field(default_factory=list, description="Требуемые навыки")


class InterviewTransfer(BaseModel):
    """Перенос собеседования к другому специалисту и/или на другое время"""
    new_specialist_id: Optional[int] = Field(default=None, description="ID нового специалиста")
    new_time: Optional[time] = Field(
        default=None,
        description="Новое время начала (null = оставить прежнее)"
    )


# === Ответы API ===

class InterviewResponse(BaseModel):
    """Информация о собеседовании"""
    id: int
    candidate_name: str
    interview_time: time
    interview_end: time = Field(description="Время окончания (начало + общая длительность)")
    specialist_id: Optional[int] = Field(description="null — специалист удалён")
    specialist_name: Optional[str] = None
    skills: list[SkillResponse] = Field(default_factory=list)
    skills_names: list[str] = Field(default_factory=list)


class SchedulingConfigResponse(BaseModel):
    """Общие параметры планирования (для предпросмотра времени окончания на клиенте)"""
    hours: int
    minutes: int
    min_skill_match_percentage: float
