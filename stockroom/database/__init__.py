from stockroom.database.base import Base
from stockroom.database.engine import build_engine, engine, init_db
from stockroom.database.session import SessionLocal, make_session_factory, session_scope

__all__ = [
    "Base",
    "SessionLocal",
    "build_engine",
    "engine",
    "init_db",
    "make_session_factory",
    "session_scope",
]
