#!/usr/bin/env python3
"""
Fix YouTube Title & Descriptions templates to use the {{call_to_action}} placeholder
"""

import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv
load_dotenv()

from loguru import logger

from config.settings import get_settings
from src.core import setup_logging, create_db_engine, get_db_context
from src.fixers.placeholder_fixer import replace_phrase
from src.services.template_service import find_templates_by_name, update_template

TEMPLATE_NAME = "YouTube Title & Descriptions"
PLACEHOLDER = "{{call_to_action}}"

HARDCODED_PHRASES = [
    r"ask the viewer to click the subscribe button",
    r"ask the viewer click the subscribe button",
]


def main():
    engine = None

    try:
        settings = get_settings()
        setup_logging(settings)
        engine = create_db_engine(settings)

        with get_db_context(engine) as db:
            templates = find_templates_by_name(db, TEMPLATE_NAME)
            if not templates:
                logger.info(f"No {TEMPLATE_NAME} templates found.")
                return 0

            logger.info(f"Found {len(templates)} template(s) to fix.\n")

            for template in sorted(templates, key=lambda t: t.id):
                if PLACEHOLDER in template.prompt_template:
                    logger.info(f"Template ID {template.id} already has {PLACEHOLDER} placeholder.")
                    continue

                updated_prompt = replace_phrase(
                    template.prompt_template, HARDCODED_PHRASES, f"ask the viewer {PLACEHOLDER}"
                )
                if updated_prompt == template.prompt_template:
                    logger.warning(f"⚠ Template ID {template.id} - No changes made. Pattern not found.")
                    continue

                update_template(db, template.id, prompt_template=updated_prompt)
                logger.success(f"✓ Fixed template ID {template.id}")
                logger.info('  Changed: "ask the viewer to click the subscribe button"')
                logger.info(f'  To: "ask the viewer {PLACEHOLDER}"')

        logger.success("\n✅ All templates fixed!")
        return 0

    except Exception as e:
        logger.exception(f"Error: {e}")
        return 1

    finally:
        if engine is not None:
            engine.dispose()


if __name__ == "__main__":
    sys.exit(main())
