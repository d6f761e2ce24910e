from .models import Base, gen_uuid_str
from .db import (
    SessionLocal,
    current_session,
    engine,
    get_db,
    session_scope,
    create_tables,
    get_database_url,
)

__all__ = [
    "Base",
    "gen_uuid_str",
    "SessionLocal",
    "current_session",
    "engine",
    "get_db",
    "session_scope",
    "create_tables",
    "get_database_url",
]
