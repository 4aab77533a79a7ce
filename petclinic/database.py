"""
Database configuration and connection management.

Engine and session factories are built from the application settings.
Repositories never commit; `unit_of_work` is the transaction boundary.
"""

import time
from contextlib import contextmanager
from typing import Callable, Generator, Iterator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import settings
from .logging_config import get_logger
from .models import Base
from .seed import populate_sample_data

logger = get_logger(__name__)


def sanitize_url(db_url: str) -> str:
    """Strip credentials from a database URL for logging."""
    if "@" in db_url:
        scheme, _, rest = db_url.partition("://")
        return f"{scheme}://***@{rest.split('@', 1)[1]}"
    return db_url


def get_engine_kwargs(db_url: str) -> dict:
    """
    Get database-specific engine arguments.

    Args:
        db_url: Database connection URL

    Returns:
        Keyword arguments for create_engine
    """
    kwargs: dict = {"echo": settings.DB_ECHO}
    if db_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in db_url or db_url in ("sqlite://", "sqlite:///"):
            kwargs["poolclass"] = StaticPool
        return kwargs

    kwargs.update(
        pool_pre_ping=settings.DB_POOL_PRE_PING,
        pool_recycle=settings.DB_POOL_RECYCLE,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
    )
    return kwargs


def enable_sqlite_savepoints(sqlite_engine: Engine) -> None:
    """
    Let SQLAlchemy emit BEGIN itself on a pysqlite engine.

    pysqlite only opens a transaction before DML, so a SAVEPOINT issued first
    would become the outermost transaction and its RELEASE would commit.
    """

    @event.listens_for(sqlite_engine, "connect")
    def do_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(sqlite_engine, "begin")
    def do_begin(conn):
        conn.exec_driver_sql("BEGIN")


def create_db_engine(db_url: Optional[str] = None) -> Engine:
    """
    Create an engine for the given URL (defaults to settings.DATABASE_URL).
    """
    db_url = db_url or settings.DATABASE_URL
    logger.info("Using database", url=sanitize_url(db_url))
    db_engine = create_engine(db_url, **get_engine_kwargs(db_url))
    if db_engine.dialect.name == "sqlite":
        enable_sqlite_savepoints(db_engine)
    return db_engine


@event.listens_for(Engine, "before_cursor_execute")
def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
    """Track query start time."""
    conn.info.setdefault("query_start_time", []).append(time.perf_counter())


@event.listens_for(Engine, "after_cursor_execute")
def after_cursor_execute(conn, cursor, statement, parameters, context, executemany):
    """Log slow queries."""
    started = conn.info.get("query_start_time")
    if not started:
        return
    total_time_ms = (time.perf_counter() - started.pop()) * 1000

    if total_time_ms > settings.QUERY_LOG_THRESHOLD_MS:
        logger.warning(
            "Slow query detected",
            query_time_ms=round(total_time_ms, 2),
            statement=statement[:200],
        )


engine = create_db_engine()

SessionLocal = sessionmaker(autoflush=False, bind=engine)


def init_db(
    bind: Optional[Engine] = None,
    seed: Optional[bool] = None,
    drop: bool = False,
) -> None:
    """
    Create all tables and optionally load the sample data.

    Args:
        bind: Engine to use (defaults to the configured engine)
        seed: Load sample data; defaults to settings.SEED_SAMPLE_DATA
        drop: Drop existing tables first
    """
    bind = bind or engine
    seed = settings.SEED_SAMPLE_DATA if seed is None else seed

    if drop:
        logger.warning("Dropping all tables")
        Base.metadata.drop_all(bind=bind)

    logger.info("Initializing database tables")
    Base.metadata.create_all(bind=bind, checkfirst=True)

    if seed:
        session = Session(bind=bind, autoflush=False)
        try:
            populate_sample_data(session)
            session.commit()
        except Exception:
            session.rollback()
            logger.error("Failed to load sample data", exc_info=True)
            raise
        finally:
            session.close()

    logger.info("Database initialized", seeded=seed)


def get_db() -> Generator[Session, None, None]:
    """
    Get a database session.

    Yields:
        SQLAlchemy database session, closed afterwards
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def unit_of_work(
    session_factory: Optional[Callable[[], Session]] = None,
) -> Iterator[Session]:
    """
    Run a group of repository operations as one transaction.

    Commits when the block completes, rolls everything back when it raises.

    Example:
        with unit_of_work() as db:
            owners = SqlAlchemyOwnerRepository(db)
            owners.save(owner)
    """
    session = (session_factory or SessionLocal)()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        logger.warning("Unit of work rolled back", exc_info=True)
        raise
    finally:
        session.close()
