"""
Схемы для справочника навыков.
"""
from pydantic import BaseModel, ConfigDict, Field


class SkillCreate(BaseModel):
    """Создание навыка"""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=100, description="Название навыка")


class SkillResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
