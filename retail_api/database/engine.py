import logging
import sqlite3

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine, URL, make_url
from sqlalchemy.pool import StaticPool

from retail_api.database.base import Base

logger = logging.getLogger(__name__)

_SQLITE_BUSY_TIMEOUT_SECONDS = 30
_SQLITE_BUSY_TIMEOUT_MS = _SQLITE_BUSY_TIMEOUT_SECONDS * 1000


def _unicode_lower(value):
    # SQLite's built-in lower() only folds ASCII letters.
    return value.lower() if isinstance(value, str) else value


def _is_sqlite_memory(db_url: URL) -> bool:
    if db_url.database in (None, "", ":memory:"):
        return True
    return db_url.query.get("mode") == "memory"


def build_engine(database_url: str) -> Engine:
    """Create an engine for ``database_url``.

    SQLite connections get foreign-key enforcement switched on, since the
    store is what rejects dangling references and restricted deletes. File
    databases also run in WAL mode with a busy timeout so that concurrent
    writers wait for each other. In-memory databases share one connection
    through ``StaticPool``. ``lower()`` is replaced by a Unicode-aware
    version so case-insensitive search covers accented letters.
    """
    db_url = make_url(database_url)
    is_sqlite = db_url.get_backend_name() == "sqlite"
    is_sqlite_memory = is_sqlite and _is_sqlite_memory(db_url)

    connect_args = {}
    engine_kwargs: dict[str, object] = dict(pool_pre_ping=True)
    if is_sqlite:
        connect_args = {"check_same_thread": False, "timeout": _SQLITE_BUSY_TIMEOUT_SECONDS}
        if is_sqlite_memory:
            engine_kwargs.update(poolclass=StaticPool)

    engine = create_engine(database_url, connect_args=connect_args, **engine_kwargs)

    if is_sqlite:
        @event.listens_for(engine, "connect")
        def _set_sqlite_pragmas(dbapi_connection, _connection_record):
            cursor = dbapi_connection.cursor()
            try:
                cursor.execute("PRAGMA foreign_keys=ON")
                cursor.execute(f"PRAGMA busy_timeout={_SQLITE_BUSY_TIMEOUT_MS}")
                dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)
                if not is_sqlite_memory:
                    try:
                        cursor.execute("PRAGMA journal_mode=WAL")
                        cursor.execute("PRAGMA synchronous=NORMAL")
                    except sqlite3.DatabaseError:
                        logger.warning("Could not enable WAL mode for %s", db_url.database)
            finally:
                cursor.close()

    return engine


def init_schema(engine: Engine) -> None:
    """Create the eight tables if they do not exist yet."""
    from retail_api.models import import_all_models

    import_all_models()
    Base.metadata.create_all(bind=engine)
    logger.info("Schema ready on %s", engine.url.render_as_string(hide_password=True))


def ping(engine: Engine) -> bool:
    with engine.connect() as conn:
        return conn.execute(text("SELECT 1")).scalar() == 1


__all__ = ["build_engine", "init_schema", "ping"]
