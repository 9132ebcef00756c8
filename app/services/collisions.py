"""
Поиск пересечений собеседований одного специалиста.

Функции работают с уже загруженными собеседованиями (любые объекты
с атрибутами id и interview_time) и в БД не ходят.
"""
from datetime import time
from typing import Iterable, Protocol

from app.core.errors import SlotCollision
from app.services.scheduling_config import SchedulingConfig
from app.services.time_ranges import contains, overlaps


class ScheduledInterview(Protocol):
    id: int
    interview_time: time


def find_collisions(
    start: time,
    end: time,
    existing: Iterable[ScheduledInterview],
    config: SchedulingConfig,
    exclude_id: int | None = None,
) -> list[ScheduledInterview]:
    """
    Собеседования из existing, пересекающиеся с [start, end).

    exclude_id — переносимое собеседование, с самим собой не сравнивается.
    """
    collisions = []
    for interview in existing:
        if exclude_id is not None and interview.id == exclude_id:
            continue
        other_start = interview.interview_time
        if overlaps(start, end, other_start, config.interview_end(other_start)):
            collisions.append(interview)
    return collisions


def check_collisions(
    start: time,
    end: time,
    existing: Iterable[ScheduledInterview],
    config: SchedulingConfig,
    exclude_id: int | None = None,
) -> None:
    collisions = find_collisions(start, end, existing, config, exclude_id=exclude_id)
    if collisions:
        raise SlotCollision(sorted(i.id for i in collisions))


def find_out_of_hours(
    interviews: Iterable[ScheduledInterview],
    available_start: time,
    available_end: time,
    config: SchedulingConfig,
) -> list[ScheduledInterview]:
    """Собеседования, которые больше не помещаются в рабочее окно специалиста"""
    return [
        interview
        for interview in interviews
        if not contains(
            available_start,
            available_end,
            interview.interview_time,
            config.interview_end(interview.interview_time),
        )
    ]
