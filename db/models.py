from datetime import datetime, time

from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Table,
    Time,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db.engine import Base


# Связи многие-ко-многим с навыками. Строки удаляются вместе с навыком/владельцем (ON DELETE CASCADE)
specialist_skills = Table(
    "specialist_skills",
    Base.metadata,
    Column("specialist_id", ForeignKey("specialists.id", ondelete="CASCADE"), primary_key=True),
    Column("skill_id", ForeignKey("skills.id", ondelete="CASCADE"), primary_key=True),
)

interview_skills = Table(
    "interview_skills",
    Base.metadata,
    Column("interview_id", ForeignKey("interviews.id", ondelete="CASCADE"), primary_key=True),
    Column("skill_id", ForeignKey("skills.id", ondelete="CASCADE"), primary_key=True),
)


class Skill(Base):
    """Навык — тег для подбора специалиста под соискателя"""
    __tablename__ = "skills"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())


class Specialist(Base):
    """
    Специалист (интервьюер).

    Рабочее время — полуоткрытый интервал [available_start, available_end)
    в пределах одних суток, без перехода через полночь.
    """
    __tablename__ = "specialists"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    full_name: Mapped[str] = mapped_column(String(200))
    available_start: Mapped[time] = mapped_column(Time)
    available_end: Mapped[time] = mapped_column(Time)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    skills = relationship(
        "Skill",
        secondary=specialist_skills,
        lazy="selectin",
        passive_deletes=True,
        order_by="Skill.name",
    )


class Interview(Base):
    """
    Собеседование с соискателем.

    Длительность не хранится: она общая для процесса (см. SchedulingConfig).
    specialist_id становится NULL при удалении специалиста.
    """
    __tablename__ = "interviews"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    candidate_name: Mapped[str] = mapped_column(String(200))
    interview_time: Mapped[time] = mapped_column(Time)
    specialist_id: Mapped[int | None] = mapped_column(
        ForeignKey("specialists.id", ondelete="SET NULL"), nullable=True, index=True
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    specialist = relationship("Specialist", lazy="joined")
    skills = relationship(
        "Skill",
        secondary=interview_skills,
        lazy="selectin",
        passive_deletes=True,
        order_by="Skill.name",
    )
