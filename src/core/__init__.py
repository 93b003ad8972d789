"""
Core package
"""
from .logging import setup_logging, get_logger
from .database import create_db_engine, get_db_context, init_db, check_db_connection, Base

__all__ = [
    "setup_logging",
    "get_logger",
    "create_db_engine",
    "get_db_context",
    "init_db",
    "check_db_connection",
    "Base",
]
