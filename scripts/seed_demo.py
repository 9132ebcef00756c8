"""
Скрипт для заполнения БД демонстрационными навыками и специалистами.
Запуск: python -m scripts.seed_demo
"""
import asyncio
import sys
from datetime import time
sys.path.insert(0, '.')

from sqlalchemy import select
from db.engine import async_session_maker
from db.models import Skill, Specialist


DEFAULT_SKILLS = [
    "Python",
    "SQL",
    "JavaScript",
    "Docker",
    "Английский язык",
    "Коммуникация",
]

# ФИО, начало и конец рабочего времени, навыки
DEFAULT_SPECIALISTS = [
    ("Иванова Анна Сергеевна", time(9, 0), time(17, 0), ["Python", "SQL", "Docker"]),
    ("Петров Дмитрий Олегович", time(10, 0), time(19, 0), ["JavaScript", "Английский язык"]),
    ("Смирнова Елена Викторовна", time(12, 0), time(20, 0), ["Коммуникация", "Английский язык", "SQL"]),
]


async def seed_demo():
    async with async_session_maker() as db:
        result = await db.execute(select(Skill))
        skills = {s.name: s for s in result.scalars().all()}

        for name in DEFAULT_SKILLS:
            if name in skills:
                continue
            skill = Skill(name=name)
            db.add(skill)
            skills[name] = skill
            print(f"   ✅ Навык: {name}")
        await db.flush()

        result = await db.execute(select(Specialist.full_name))
        existing = set(result.scalars().all())

        for full_name, start, end, skill_names in DEFAULT_SPECIALISTS:
            if full_name in existing:
                print(f"   ⚠️ {full_name} уже есть, пропускаем")
                continue
            db.add(Specialist(
                full_name=full_name,
                available_start=start,
                available_end=end,
                skills=[skills[n] for n in skill_names],
            ))
            print(f"   ✅ Специалист: {full_name} ({start:%H:%M}-{end:%H:%M})")

        await db.commit()
        print("\n✅ Готово!")


if __name__ == "__main__":
    print("🚀 Добавление демонстрационных данных...")
    asyncio.run(seed_demo())
