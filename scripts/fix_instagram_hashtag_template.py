#!/usr/bin/env python3
"""
Fix the Instagram Hashtag Generator templates
One-off: replaces the prompt and input fields with a version that uses {{total}}
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
from src.models.template import InputField
from src.services.template_service import find_templates_by_name, update_template

TEMPLATE_NAME = "Instagram Hashtag Generator"

NEW_PROMPT_TEMPLATE = (
    "Please ignore all previous instructions. Please respond only in the english language. "
    "You are an Instagram influencer with a large fan following. You have a Creative tone of voice. "
    "You have a Argumentative writing style. Do not self reference. Do not explain what you are doing. "
    "Please generate {{total}} high performing Instagram hashtags for the following text: \"{{instagram_post}}\"."
)

NEW_INPUTS = [
    InputField(name="instagram_post", type="textarea", label="Instagram Post",
               placeholder="Enter Instagram post text", required=True),
    InputField(name="total", type="number", label="Total", placeholder="10", required=True, default="10"),
]


def main():
    engine = None

    try:
        settings = get_settings()
        setup_logging(settings)
        engine = create_db_engine(settings)
        logger.info(f"Fixing {TEMPLATE_NAME} template...\n")

        with get_db_context(engine) as db:
            templates = find_templates_by_name(db, TEMPLATE_NAME)
            if not templates:
                logger.error(f"❌ {TEMPLATE_NAME} template not found!")
                return 1

            logger.info(f"Found {len(templates)} template(s) to update:\n")

            for template in templates:
                if "{{total}}" in template.prompt_template:
                    logger.info(f"  Template ID {template.id} already uses {{{{total}}}} - updating for consistency")
                else:
                    logger.info(f"  Template ID {template.id} has hardcoded number - fixing to use {{{{total}}}}")

                update_template(db, template.id, prompt_template=NEW_PROMPT_TEMPLATE, inputs=NEW_INPUTS)
                logger.success(f"✓ Template ID {template.id} updated successfully")

        logger.info("=" * 40)
        logger.success(f"✓ All {TEMPLATE_NAME} templates updated!")
        logger.info("=" * 40)
        logger.info('   - {{instagram_post}} for "Instagram Post"')
        logger.info('   - {{total}} for "Total" (default: 10)')
        return 0

    except Exception as e:
        logger.exception(f"❌ Error: {e}")
        return 1

    finally:
        if engine is not None:
            engine.dispose()


if __name__ == "__main__":
    sys.exit(main())
