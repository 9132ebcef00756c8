"""
Арифметика интервалов времени суток.

Все интервалы полуоткрытые: [start, end). Собеседования «встык»
(конец одного == начало другого) не пересекаются.
"""
from datetime import time

SECONDS_PER_DAY = 24 * 60 * 60


def add_duration(value: time, hours: int = 0, minutes: int = 0) -> time:
    """
    Сдвинуть время суток вперёд на hours:minutes.

    Переход через полночь не считается ошибкой — время просто
    оборачивается по модулю 24 часов (23:00 + 1:30 = 00:30).
    """
    total = value.hour * 3600 + value.minute * 60 + value.second
    total = (total + hours * 3600 + minutes * 60) % SECONDS_PER_DAY
    return time(hour=total // 3600, minute=total % 3600 // 60, second=total % 60)


def overlaps(start_a: time, end_a: time, start_b: time, end_b: time) -> bool:
    """Пересекаются ли интервалы [start_a, end_a) и [start_b, end_b)"""
    return start_a < end_b and start_b < end_a


def contains(outer_start: time, outer_end: time, inner_start: time, inner_end: time) -> bool:
    """Лежит ли [inner_start, inner_end) целиком внутри [outer_start, outer_end)"""
    if crosses_midnight(inner_start, inner_end):
        return False
    return inner_start >= outer_start and inner_end <= outer_end


def crosses_midnight(start: time, end: time) -> bool:
    # end обернулся через 00:00 при сложении
    return end < start
