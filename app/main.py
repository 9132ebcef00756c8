from contextlib import asynccontextmanager
from pathlib import Path
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse

from app.core.errors import register_exception_handlers
from app.core.redis import redis_client
from app.api.routers import interviews, skills, specialists
from config import settings

# Логирование
logging.basicConfig(
    level=logging.INFO if not settings.debug else logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle: подключение/отключение Redis для блокировок расписания"""
    logger.info(f"Starting app in {settings.env} mode...")
    logger.info(
        "Interview duration %sh %smin, min skill match %s%%",
        settings.interview_duration_hours,
        settings.interview_duration_minutes,
        settings.min_skill_match_percentage,
    )
    if settings.scheduling_lock_enabled:
        await redis_client.connect()
    else:
        logger.warning("Redis scheduling locks disabled: in-process locks only, run a single worker")
    yield
    await redis_client.disconnect()
    logger.info("Shutdown complete")


app = FastAPI(
    title="HR Interview Scheduler",
    description="API для управления специалистами, навыками и собеседованиями",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/api/docs" if settings.is_dev else None,  # Swagger только в dev
    redoc_url="/api/redoc" if settings.is_dev else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Роутеры
app.include_router(skills.router, prefix="/api", tags=["Skills"])
app.include_router(specialists.router, prefix="/api", tags=["Specialists"])
app.include_router(interviews.router, prefix="/api", tags=["Interviews"])

# Раздача админ-страницы
# В dev: напрямую из FastAPI
# В prod: обычно через nginx, но оставим fallback
frontend_path = Path(__file__).parent.parent / "client"
if frontend_path.exists():
    app.mount("/static", StaticFiles(directory=frontend_path), name="static")

    @app.get("/")
    async def serve_frontend():
        """Главная страница — админка HR"""
        return FileResponse(frontend_path / "index.html")


@app.get("/healthz")
async def health():
    """Health check для мониторинга"""
    return {"status": "ok", "env": settings.env, "locks": redis_client.is_connected}
