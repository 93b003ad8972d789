#!/usr/bin/env python3
"""
Fix the saved_prompts id sequence so it is ahead of the existing rows
"""

import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv
load_dotenv()

import argparse
from loguru import logger

from config.settings import get_settings
from src.core import setup_logging, create_db_engine, get_db_context
from src.services.sequence_service import repair_sequence


def main():
    parser = argparse.ArgumentParser(description="Reset an id sequence to MAX(id) + 1 when it lags")
    parser.add_argument('--table', default='saved_prompts', help='Table name (default: saved_prompts)')
    parser.add_argument('--sequence', default=None, help='Sequence name (default: <table>_id_seq)')
    args = parser.parse_args()

    engine = None

    try:
        settings = get_settings()
        setup_logging(settings)
        engine = create_db_engine(settings)
        sequence = args.sequence or f"{args.table}_id_seq"

        logger.info(f"Checking {sequence}...\n")
        with get_db_context(engine) as db:
            result = repair_sequence(db, args.table, sequence)

        if result.repaired:
            logger.success(f"✓ Sequence fixed: next id is {result.target}")
        else:
            logger.success("✓ Sequence is already in sync (or ahead of data)")
        return 0

    except Exception as e:
        logger.exception(f"Error fixing sequence: {e}")
        return 1

    finally:
        if engine is not None:
            engine.dispose()


if __name__ == "__main__":
    sys.exit(main())
