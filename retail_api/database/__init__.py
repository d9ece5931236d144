from retail_api.database.base import Base
from retail_api.database.engine import build_engine, init_schema, ping
from retail_api.database.session import build_session_factory, get_db

__all__ = ["Base", "build_engine", "build_session_factory", "get_db", "init_schema", "ping"]
