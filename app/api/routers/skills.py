"""
API справочника навыков.

Эндпоинты:
- GET /skills — список навыков
- POST /skills — создать навык
- DELETE /skills/{skill_id} — удалить навык (связи удаляются каскадно)
"""
import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from db.session import get_db
from db.repositories.skills import SkillRepository
from app.core.errors import SkillAlreadyExists, SkillNotFound
from app.api.schemas.skills import SkillCreate, SkillResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/skills")


@router.get("", response_model=list[SkillResponse])
async def get_skills(db: AsyncSession = Depends(get_db)):
    """Получить все навыки (по алфавиту)"""
    skills = await SkillRepository(db).list_all()
    return [SkillResponse.model_validate(s) for s in skills]


@router.post("", response_model=SkillResponse, status_code=status.HTTP_201_CREATED)
async def create_skill(data: SkillCreate, db: AsyncSession = Depends(get_db)):
    """Создать навык. Название уникально."""
    repo = SkillRepository(db)
    if await repo.get_by_name(data.name):
        raise SkillAlreadyExists(data.name)

    try:
        skill = await repo.create(data.name)
        await db.commit()
    except IntegrityError:
        # Параллельный запрос успел создать навык с тем же названием
        await db.rollback()
        raise SkillAlreadyExists(data.name)

    logger.info(f"Навык создан: id={skill.id} name={skill.name}")
    return SkillResponse.model_validate(skill)


@router.delete("/{skill_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_skill(skill_id: int, db: AsyncSession = Depends(get_db)):
    """
    Удалить навык.

    Навык пропадает у всех специалистов и собеседований.
    """
    if not await SkillRepository(db).delete(skill_id):
        raise SkillNotFound(skill_id)
    await db.commit()
    logger.info(f"Навык удалён: id={skill_id}")
