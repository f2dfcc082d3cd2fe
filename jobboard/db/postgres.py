import re
from contextlib import contextmanager
from typing import Any, Dict, List, Mapping, Sequence, Tuple, Union

from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jobboard.core.config import get_settings
from jobboard.core.logging import get_logger

logger = get_logger(__name__)
settings = get_settings()

# $1, $2, ... style placeholders produced by the SQL builders
_POSITIONAL_PARAM = re.compile(r"\$(\d+)")


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        # One shared in-process connection, usable from the request threads
        return {"connect_args": {"check_same_thread": False}, "poolclass": StaticPool}
    # pool_size=5: maintain 5 connections ready
    # max_overflow=10: allow 10 extra connections under load
    return {"pool_size": 5, "max_overflow": 10}


engine = create_engine(
    settings.postgres_url,
    echo=settings.debug,  # Log SQL queries in debug mode
    **_engine_options(settings.postgres_url)
)

if engine.dialect.name == "sqlite":
    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@contextmanager
def get_db_session():
    """
    Context manager for database sessions.
    Usage:
        with get_db_session() as db:
            db.execute(text("SELECT * FROM jobs"))
    """
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def check_db_connection() -> bool:
    """
    Test if the database is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        with get_db_session() as db:
            result = db.execute(text("SELECT 1 as test"))
            row = result.fetchone()
            return row[0] == 1
    except Exception as e:
        logger.warning("Database connection failed: %s", e)
        return False


def bind_positional(sql: str, values: Sequence[Any]) -> Tuple[str, Dict[str, Any]]:
    """
    Rewrite $n placeholders into SQLAlchemy named binds.

    bind_positional('"title"=$1 WHERE id = $2', ["x", 7])
        -> ('"title"=:p1 WHERE id = :p2', {"p1": "x", "p2": 7})
    """
    params = {}
    for match in _POSITIONAL_PARAM.finditer(sql):
        position = int(match.group(1))
        if position < 1 or position > len(values):
            raise ValueError(f"Placeholder ${position} has no bound value")
        params[f"p{position}"] = values[position - 1]
    return _POSITIONAL_PARAM.sub(r":p\1", sql), params


def execute_raw_sql(sql: str, params: Union[Mapping[str, Any], Sequence[Any], None] = None) -> List[dict]:
    """
    Execute raw SQL and return results as list of dicts.

    params is either a dict of :named binds or a list of values for $n placeholders.
    Statements without a result set (no RETURNING) give an empty list.
    """
    if params is not None and not isinstance(params, Mapping):
        sql, params = bind_positional(sql, params)

    with get_db_session() as db:
        result = db.execute(text(sql), params or {})
        if not result.returns_rows:
            return []
        # Convert rows to dicts
        columns = result.keys()
        return [dict(zip(columns, row)) for row in result.fetchall()]
