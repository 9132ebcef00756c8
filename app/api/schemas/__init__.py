from app.api.schemas.skills import SkillCreate, SkillResponse
from app.api.schemas.specialists import (
    SpecialistCreate,
    SpecialistUpdate,
    SpecialistResponse,
    SpecialistDetailResponse,
    SpecialistInterviewItem,
    SpecialistUpdateResponse,
)
from app.api.schemas.interviews import (
    InterviewCreate,
    InterviewTransfer,
    InterviewResponse,
    SchedulingConfigResponse,
)

__all__ = [
    "SkillCreate",
    "SkillResponse",
    "SpecialistCreate",
    "SpecialistUpdate",
    "SpecialistResponse",
    "SpecialistDetailResponse",
    "SpecialistInterviewItem",
    "SpecialistUpdateResponse",
    "InterviewCreate",
    "InterviewTransfer",
    "InterviewResponse",
    "SchedulingConfigResponse",
]
