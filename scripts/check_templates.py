#!/usr/bin/env python3
"""
Check templates for missing number placeholders and hardcoded counts
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
from src.analyzers.consistency_checker import load_hardcoded_rules
from src.reporters.consistency_report import audit_templates, log_grouped_report, log_summary
from src.services.template_service import find_templates_by_category, search_templates


def main():
    parser = argparse.ArgumentParser(
        description="Check that every number input field has a placeholder in its prompt"
    )
    parser.add_argument(
        '--category',
        default=None,
        help='Template category (default: Social Media)'
    )
    parser.add_argument(
        '--name-like',
        default=None,
        help='Check templates whose name contains this text instead of a category'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Also list every placeholder and unreferenced input field'
    )
    args = parser.parse_args()

    engine = None

    try:
        settings = get_settings()
        setup_logging(settings)
        engine = create_db_engine(settings)
        category = args.category or settings.SOCIAL_MEDIA_CATEGORY

        with get_db_context(engine) as db:
            if args.name_like:
                templates = search_templates(db, args.name_like)
                scope = f"name containing '{args.name_like}'"
            else:
                templates = find_templates_by_category(db, category)
                scope = f"category '{category}'"

        if not templates:
            logger.info(f"No templates found for {scope}.")
            return 0

        logger.info(f"Found {len(templates)} template(s) for {scope}")
        results = audit_templates(
            templates,
            rules=load_hardcoded_rules(settings.HARDCODED_RULES_PATH),
            strategy=settings.PLACEHOLDER_MATCH_STRATEGY,
        )
        log_grouped_report(results, verbose=args.verbose)
        summary = log_summary(results)

        if not summary.all_correct:
            logger.warning(f"\n⚠️  {summary.issues} template(s) need to be fixed!")
        return 0

    except Exception as e:
        logger.exception(f"Error checking templates: {e}")
        return 1

    finally:
        if engine is not None:
            engine.dispose()


if __name__ == "__main__":
    sys.exit(main())
