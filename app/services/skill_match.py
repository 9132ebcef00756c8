"""
Оценка совпадения навыков специалиста с навыками, требуемыми на собеседовании.
"""
from dataclasses import dataclass
from typing import Iterable

from app.core.errors import SkillMismatch


@dataclass(frozen=True)
class SkillMatch:
    required: int
    matched: int
    percent: float  # без округления, используется для сравнения
    threshold: float

    @property
    def passed(self) -> bool:
        return self.percent >= self.threshold

    @property
    def display_percent(self) -> float:
        return round(self.percent, 1)


def evaluate_skill_match(
    required: Iterable[int],
    possessed: Iterable[int],
    threshold: float,
) -> SkillMatch:
    """
    Доля требуемых навыков, которыми владеет специалист.

    Если навыки не требуются, совпадение считается полным (100%).
    """
    required_ids = set(required)
    if not required_ids:
        return SkillMatch(required=0, matched=0, percent=100.0, threshold=threshold)

    matched = len(required_ids & set(possessed))
    return SkillMatch(
        required=len(required_ids),
        matched=matched,
        percent=100 * matched / len(required_ids),
        threshold=threshold,
    )


def passes(required: Iterable[int], possessed: Iterable[int], threshold: float) -> bool:
    return evaluate_skill_match(required, possessed, threshold).passed


def check_skill_match(required: Iterable[int], possessed: Iterable[int], threshold: float) -> SkillMatch:
    """Проверить совпадение навыков; SkillMismatch если ниже порога"""
    match = evaluate_skill_match(required, possessed, threshold)
    if not match.passed:
        raise SkillMismatch(match.percent, threshold)
    return match
