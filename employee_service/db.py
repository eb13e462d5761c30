from shared.database import Base, get_engine, get_session

from .config import EMPLOYEE_DB

engine = get_engine(EMPLOYEE_DB)
SessionLocal = get_session(engine)

__all__ = ["Base", "engine", "SessionLocal"]
