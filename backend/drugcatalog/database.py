import logging

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import ArgumentError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from sqlalchemy.pool import StaticPool

from drugcatalog.config import Settings
from drugcatalog.exceptions import ConfigurationError, DatabaseConnectionError

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


def create_db_engine(settings: Settings) -> Engine:
    """Build the pooled engine described by ``settings``.

    The engine does not open a connection until first use.
    """
    if not settings.database_url:
        raise ConfigurationError(
            "DATABASE_URL environment variable is not defined. "
            "Please set it to the catalog database connection string."
        )

    try:
        url = make_url(settings.database_url)
    except ArgumentError as e:
        raise ConfigurationError(f"Invalid DATABASE_URL: {e}") from e

    if url.get_backend_name() == "sqlite":
        logger.warning("Using SQLite database %s, not intended for production", url.database or ":memory:")
        kwargs = {"connect_args": {"check_same_thread": False}}
        if not url.database or url.database == ":memory:":
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=False, **kwargs)

    if url.drivername == "postgresql":
        # psycopg2 is the installed driver; newer SQLAlchemy defaults to psycopg 3
        url = url.set(drivername="postgresql+psycopg2")
    elif url.get_backend_name() != "postgresql":
        logger.warning("Database backend %s is not PostgreSQL", url.get_backend_name())

    return create_engine(
        url,
        echo=False,
        pool_pre_ping=True,
        pool_size=settings.pool_size,
        max_overflow=0,
        pool_timeout=settings.pool_timeout,
        pool_recycle=settings.pool_recycle,
        connect_args={"connect_timeout": settings.pool_timeout},
    )


def verify_connection(engine: Engine) -> None:
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error("Database connection error: %s", e)
        raise DatabaseConnectionError("Failed to connect to database") from e
    logger.info("Connected to %s database", engine.dialect.name)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
