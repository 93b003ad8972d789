"""
Database connection and session management
SQLAlchemy engine built from explicit settings
"""
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from contextlib import contextmanager
from typing import Iterator

from config.settings import Settings
from .logging import get_logger

logger = get_logger(__name__)

# Base class for all models
Base = declarative_base()


def create_db_engine(settings: Settings) -> Engine:
    """
    Create an engine for the configured database

    Args:
        settings: application settings (host, port, credentials, TLS flag)

    Returns:
        Engine: SQLAlchemy engine; call dispose() when the script ends
    """
    return create_engine(
        settings.database_url,
        echo=settings.DB_ECHO,
        connect_args=settings.connect_args,
        pool_pre_ping=True,
    )


def make_session_factory(engine: Engine) -> sessionmaker:
    """Session factory bound to an engine"""
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        bind=engine
    )


@contextmanager
def get_db_context(engine: Engine) -> Iterator[Session]:
    """
    Session as a context manager; commits on success, rolls back on error

    Example:
        ```python
        with get_db_context(engine) as db:
            template = db.get(Template, 42)
        ```
    """
    db = make_session_factory(engine)()
    try:
        yield db
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Database transaction error: {e}")
        raise
    finally:
        db.close()


def init_db(engine: Engine):
    """Create the tables known to the models (test and scratch databases only)"""
    from src.models import template  # noqa: F401

    Base.metadata.create_all(bind=engine)


def check_db_connection(engine: Engine) -> bool:
    """
    Check database connectivity

    Returns:
        bool: True when a trivial query succeeds
    """
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("Database connection OK")
        return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False
