import logging
import time
from typing import Optional

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine, Session

from film_library.config import Settings
import film_library.models  # noqa: F401  registers the tables on SQLModel.metadata

logger = logging.getLogger(__name__)


def new_engine(settings: Settings) -> Engine:
    url = settings.database_url
    connect_args = {}
    engine_args = {}
    if url.startswith("postgresql"):
        connect_args["connect_timeout"] = 10
    elif url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        if url in ("sqlite://", "sqlite:///:memory:"):
            # every session must see the same in-memory database
            engine_args["poolclass"] = StaticPool

    engine = create_engine(
        url,
        pool_pre_ping=True,
        connect_args=connect_args,
        echo=settings.db_echo,
        **engine_args,
    )
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_tables(engine: Engine) -> None:
    SQLModel.metadata.create_all(engine)


def wait_for_db(engine: Engine, max_retries: int = 10, retry_delay: int = 3) -> None:
    for attempt in range(1, max_retries + 1):
        try:
            logger.info(f"Attempt {attempt}/{max_retries}: Connecting to DB...")
            with Session(engine) as session:
                session.execute(text("SELECT 1"))
            logger.info(f"Connected to {engine.dialect.name} database")
            create_tables(engine)
            logger.info("Database tables are ready")
            return
        except Exception as e:
            logger.error(f"Connection failed: {type(e).__name__}: {str(e)}")
            if attempt == max_retries:
                raise RuntimeError(f"Failed to connect to DB after {max_retries} attempts") from e
            time.sleep(retry_delay)


def get_session(request: Request):
    with Session(request.app.state.engine) as session:
        yield session


def violated_constraint(exc: IntegrityError) -> str:
    """Name of the constraint behind an integrity error.

    PostgreSQL reports it through the driver diagnostics; other backends only
    mention it in the message, so the message is returned instead.
    """
    diag = getattr(exc.orig, "diag", None)
    name: Optional[str] = getattr(diag, "constraint_name", None)
    return name or str(exc.orig)
