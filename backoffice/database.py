# backoffice/database.py
import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine, make_url
from sqlmodel import SQLModel, create_engine, Session

from backoffice.core.config import get_settings

logger = logging.getLogger(__name__)


def with_ssl(database_url: str) -> str:
    """
    Add sslmode=require to Postgres URLs that don't choose a mode.

    Other drivers (SQLite in tests) are returned untouched.
    """
    url = make_url(database_url)
    if not url.drivername.startswith("postgres") or "sslmode" in url.query:
        return database_url
    return url.update_query_dict({"sslmode": "require"}).render_as_string(hide_password=False)


def build_engine(database_url: str) -> Engine:
    """
    Engine for the Supabase pooler.

    Session mode caps the number of clients ("MaxClientsInSessionMode"),
    so the pool holds a single connection and never overflows.
    """
    return create_engine(
        with_ssl(database_url),
        echo=False,
        pool_pre_ping=True,
        pool_size=1,
        max_overflow=0,
    )


engine = build_engine(get_settings().DATABASE_URL)


def create_db_and_tables() -> None:
    """
    Check the connection, then create missing tables (startup only).
    """
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    SQLModel.metadata.create_all(engine)
    logger.info(f"Tables verified: {len(SQLModel.metadata.tables)}")


def get_session():
    """FastAPI dependency: one Session per request."""
    with Session(engine) as session:
        yield session
