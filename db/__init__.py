from .engine import engine, async_session_maker, Base
from .session import get_db
from .models import Skill, Specialist, Interview

__all__ = ["engine", "async_session_maker", "Base", "get_db", "Skill", "Specialist", "Interview"]
