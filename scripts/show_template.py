#!/usr/bin/env python3
"""
Show one template by name: prompt text, input fields and checker verdict
"""

import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv
load_dotenv()

import argparse
import json
from loguru import logger

from config.settings import get_settings
from src.core import setup_logging, create_db_engine, get_db_context
from src.analyzers.consistency_checker import check_template, load_hardcoded_rules
from src.services.template_service import find_templates_by_name, search_templates


def show(template, rules, strategy):
    logger.info(f"\n=== {template.name} (ID: {template.id}) ===")
    logger.info(f"Category: {template.category} / {template.subcategory}")
    logger.info(f"\nPrompt Template:\n{template.prompt_template}")
    logger.info(f"\nInputs:\n{json.dumps(template.inputs, indent=2, ensure_ascii=False)}")

    report = check_template(template.prompt_template, template.inputs, rules=rules, strategy=strategy)

    for check in report.number_fields:
        if check.has_placeholder:
            logger.info(f"✓ Uses {{{{{check.name}}}}} placeholder")
        else:
            logger.warning(f"✗ Number field '{check.name}' ({check.label}) has no placeholder")

    for finding in report.hardcoded_findings:
        logger.warning(f"✗ Hardcoded number: {finding.number} in \"{finding.text}\" [{finding.rule}]")

    if not report.number_fields:
        logger.info("⚠️  No number input fields; check the prompt manually")


def main():
    parser = argparse.ArgumentParser(description="Show a template and its placeholder check")
    parser.add_argument('name', help='Exact template name, e.g. "Instagram Hashtag Generator"')
    args = parser.parse_args()

    engine = None

    try:
        settings = get_settings()
        setup_logging(settings)
        engine = create_db_engine(settings)

        with get_db_context(engine) as db:
            templates = find_templates_by_name(db, args.name)
            if not templates:
                logger.info(f"No template named '{args.name}'. Similar names:")
                for term in args.name.split():
                    for similar in search_templates(db, term, limit=10):
                        logger.info(f"  - {similar.name} (ID: {similar.id})")
                return 0

        rules = load_hardcoded_rules(settings.HARDCODED_RULES_PATH)
        logger.info(f"Found {len(templates)} template(s) named '{args.name}'")
        for template in templates:
            show(template, rules, settings.PLACEHOLDER_MATCH_STRATEGY)
        return 0

    except Exception as e:
        logger.exception(f"Error reading template: {e}")
        return 1

    finally:
        if engine is not None:
            engine.dispose()


if __name__ == "__main__":
    sys.exit(main())
