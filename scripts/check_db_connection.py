#!/usr/bin/env python3
"""
Check that the configured database is reachable
"""

import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv
load_dotenv()

from loguru import logger

from config.settings import get_settings
from src.core import setup_logging, create_db_engine, check_db_connection


def main():
    engine = None

    try:
        settings = get_settings()
        setup_logging(settings)
        engine = create_db_engine(settings)

        logger.info(f"Database: {settings.describe_database()} (ssl: {settings.DB_SSL})")
        if not check_db_connection(engine):
            logger.error("Database connection failed. Check the DB_* environment variables.")
            return 1
        return 0

    except Exception as e:
        logger.exception(f"Error: {e}")
        return 1

    finally:
        if engine is not None:
            engine.dispose()


if __name__ == "__main__":
    sys.exit(main())
