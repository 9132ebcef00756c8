from datetime import time

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.services.time_ranges import add_duration


class SchedulingConfig(BaseModel):
    """
    Параметры планирования, передаваемые в SchedulingService явно.

    Длительность одна на все собеседования и не хранится в БД.
    """
    model_config = ConfigDict(frozen=True)

    duration_hours: int = Field(default=1, ge=0, le=23)
    duration_minutes: int = Field(default=30, ge=0, lt=60)
    min_skill_match_percentage: float = Field(default=80, ge=0, le=100)

    @model_validator(mode="after")
    def _check_duration(self) -> "SchedulingConfig":
        if self.duration_hours == 0 and self.duration_minutes == 0:
            raise ValueError("Длительность собеседования должна быть больше нуля")
        return self

    @classmethod
    def from_settings(cls, settings) -> "SchedulingConfig":
        return cls(
            duration_hours=settings.interview_duration_hours,
            duration_minutes=settings.interview_duration_minutes,
            min_skill_match_percentage=settings.min_skill_match_percentage,
        )

    def interview_end(self, start: time) -> time:
        """Время окончания собеседования, начинающегося в start"""
        return add_duration(start, self.duration_hours, self.duration_minutes)
