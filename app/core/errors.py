"""
Ошибки планирования собеседований и их HTTP-представление.

Каждая ошибка несёт различимый вид (kind) и человекочитаемое описание.
Ядро запросы не повторяет: вызывающая сторона исправляет данные и отправляет заново.
"""
import logging
from datetime import time
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class SchedulingError(Exception):
    """Базовая ошибка ядра планирования"""
    kind = "SchedulingError"
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str, **extra: Any):
        super().__init__(detail)
        self.detail = detail
        self.extra = extra

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "detail": self.detail, **self.extra}


class ValidationError(SchedulingError):
    kind = "ValidationError"
    status_code = 422


class SpecialistNotFound(SchedulingError):
    kind = "SpecialistNotFound"
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, specialist_id: int, detail: str = "Специалист не найден"):
        super().__init__(detail, specialist_id=specialist_id)


class InterviewNotFound(SchedulingError):
    kind = "InterviewNotFound"
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, interview_id: int):
        super().__init__("Собеседование не найдено", interview_id=interview_id)


class SkillNotFound(SchedulingError):
    kind = "SkillNotFound"
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, skill_id: int):
        super().__init__("Навык не найден", skill_id=skill_id)


class SkillAlreadyExists(SchedulingError):
    kind = "SkillAlreadyExists"
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, name: str):
        super().__init__("Навык уже существует", name=name)


class OutOfHours(SchedulingError):
    """Собеседование не укладывается в рабочее время специалиста"""
    kind = "OutOfHours"
    status_code = 422

    def __init__(self, available_start: time, available_end: time, detail: str | None = None):
        start = available_start.strftime("%H:%M")
        end = available_end.strftime("%H:%M")
        super().__init__(
            detail or (
                "Специалист недоступен в это время. "
                f"Собеседование должно начинаться и заканчиваться с {start} по {end}"
            ),
            available_start=start,
            available_end=end,
        )
        self.available_start = available_start
        self.available_end = available_end


class SkillMismatch(SchedulingError):
    kind = "SkillMismatch"
    status_code = 422

    def __init__(self, percent: float, threshold: float):
        super().__init__(
            f"Совпадение навыков только {percent:.1f}%. Необходимо как минимум {threshold:g}%",
            percent=round(percent, 1),
            threshold=threshold,
        )
        self.percent = percent
        self.threshold = threshold


class SlotCollision(SchedulingError):
    kind = "SlotCollision"
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, conflicting_ids: list[int]):
        super().__init__(
            "Пересечение по времени с существующими собеседованиями",
            conflicting_interview_ids=conflicting_ids,
        )
        self.conflicting_ids = conflicting_ids


class SchedulingInternalError(SchedulingError):
    """Непредвиденный сбой хранилища. Транзакция уже откатана."""
    kind = "InternalError"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class SchedulingBusy(SchedulingError):
    """Не удалось дождаться блокировки расписания специалиста"""
    kind = "SchedulingBusy"
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    def __init__(self, specialist_id: int | None):
        super().__init__(
            "Расписание специалиста сейчас изменяется, повторите запрос позже",
            specialist_id=specialist_id,
        )


def register_exception_handlers(app: FastAPI) -> None:
    """Преобразование ошибок планирования в JSON-ответы"""

    @app.exception_handler(SchedulingError)
    async def scheduling_error_handler(request: Request, exc: SchedulingError):
        if exc.status_code >= 500:
            logger.error(f"[{exc.kind}] {exc.detail} | Path={request.url.path}")
        else:
            logger.info(f"[{exc.kind}] {exc.detail} | Path={request.url.path}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.info(f"[ValidationError] Path={request.url.path} | {exc.errors()}")
        return JSONResponse(
            status_code=422,
            content={
                "kind": ValidationError.kind,
                "detail": "Некорректные данные запроса",
                "errors": jsonable_encoder(exc.errors()),
            },
        )
