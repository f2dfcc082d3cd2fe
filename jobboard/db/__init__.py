"""
Database module - SQLAlchemy engine and raw SQL helpers.
"""
from jobboard.db.postgres import check_db_connection, execute_raw_sql, get_db_session

__all__ = [
    "check_db_connection",
    "execute_raw_sql",
    "get_db_session",
]
