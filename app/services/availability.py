from datetime import time

from app.core.errors import OutOfHours
from app.services.time_ranges import contains


def check_availability(
    start: time,
    end: time,
    available_start: time,
    available_end: time,
) -> None:
    """
    Убедиться, что собеседование [start, end) целиком лежит в рабочем
    времени специалиста. Иначе OutOfHours с окном специалиста.
    """
    if not contains(available_start, available_end, start, end):
        raise OutOfHours(available_start, available_end)
