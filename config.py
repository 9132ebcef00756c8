from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Literal


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Игнорировать лишние переменные из .env
        case_sensitive=False,
        populate_by_name=True  # Разрешить использовать и alias, и имя поля
    )

    env: Literal["prod", "dev", "test"] = Field(default="dev", alias="ENV")
    debug: bool = Field(default=True, alias="DEBUG")

    # PostgreSQL (можно задать напрямую через DB_URL или через отдельные переменные)
    db_url: str | None = Field(default=None, alias="DB_URL")
    postgres_host: str = Field(default="localhost", alias="POSTGRES_HOST")
    postgres_port: int = Field(default=5432, alias="POSTGRES_PORT")
    postgres_user: str = Field(default="hr_system", alias="POSTGRES_USER")
    postgres_password: str = Field(default="", alias="POSTGRES_PASSWORD")
    postgres_db: str = Field(default="hr_system", alias="POSTGRES_DB")

    # Redis (блокировки расписания по специалисту)
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0

    # Параметры собеседований (общие для всего процесса)
    interview_duration_hours: int = Field(default=1, ge=0, alias="INTERVIEW_DURATION_HOURS")
    interview_duration_minutes: int = Field(default=30, ge=0, lt=60, alias="INTERVIEW_DURATION_MINUTES")
    min_skill_match_percentage: float = Field(default=80, ge=0, le=100, alias="MIN_SKILL_MATCH_PERCENTAGE")

    scheduling_lock_enabled: bool = Field(default=True, alias="SCHEDULING_LOCK_ENABLED")
    scheduling_lock_timeout: float = Field(default=10.0, gt=0, alias="SCHEDULING_LOCK_TIMEOUT")
    scheduling_lock_blocking_timeout: float = Field(default=5.0, gt=0, alias="SCHEDULING_LOCK_BLOCKING_TIMEOUT")

    # Список origin через запятую; пусто = все (только в dev)
    cors_origins: str = Field(default="", alias="CORS_ORIGINS")

    @property
    def database_url(self) -> str:
        """Возвращает URL для подключения к БД"""
        if self.db_url:
            return self.db_url
        return f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"

    @property
    def redis_url(self) -> str:
        return f"redis://{self.redis_host}:{self.redis_port}/{self.redis_db}"

    @property
    def is_dev(self) -> bool:
        return self.env == "dev"

    @property
    def allowed_origins(self) -> list[str]:
        """Разрешённые origin для CORS"""
        if not self.cors_origins:
            return ["*"] if self.is_dev else []
        return [x.strip() for x in self.cors_origins.split(",") if x.strip()]


settings = Settings()
