#!/usr/bin/env python3
"""
Fix the TikTok Script Writer templates
One-off: the video length becomes a {{length}} text field instead of "less than 90 seconds"
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

TEMPLATE_NAME = "TikTok Script Writer"

HARDCODED_PHRASE = "less than 90 seconds"

NEW_PROMPT_TEMPLATE = (
    "Please ignore all previous instructions. Please respond only in the english language. "
    "You are a TikTok marketer and influencer. You have a Creative tone of voice. "
    "You have a Argumentative writing style. Do not self reference. Do not explain what you are doing. "
    "Please write me a TikTok video script for the topic \"{{topic}}\". The target audience is "
    "\"{{audience}}\". The length of the video should be {{length}} long. The script needs to have a catchy "
    "title, follow the best practice of TikTok videos, and get as much traction from the target audience "
    "as possible."
)

NEW_INPUTS = [
    InputField(name="topic", type="text", label="Topic", placeholder="Enter topic", required=True),
    InputField(name="audience", type="text", label="Audience", placeholder="Enter target audience", required=True),
    InputField(name="length", type="text", label="Length", placeholder="90 seconds",
               required=True, default="90 seconds"),
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
                prompt = template.prompt_template
                if "{{length}}" in prompt and HARDCODED_PHRASE not in prompt:
                    logger.info(f"  Template ID {template.id} already uses {{{{length}}}} - updating for consistency")
                else:
                    logger.info(f"  Template ID {template.id} has hardcoded \"90 seconds\" - fixing to use {{{{length}}}}")

                update_template(db, template.id, prompt_template=NEW_PROMPT_TEMPLATE, inputs=NEW_INPUTS)
                logger.success(f"✓ Template ID {template.id} updated successfully")

        logger.info("=" * 40)
        logger.success(f"✓ All {TEMPLATE_NAME} templates updated!")
        logger.info("=" * 40)
        logger.info('   - {{topic}} for "Topic"')
        logger.info('   - {{audience}} for "Audience"')
        logger.info('   - {{length}} for "Length" (default: "90 seconds")')
        return 0

    except Exception as e:
        logger.exception(f"❌ Error: {e}")
        return 1

    finally:
        if engine is not None:
            engine.dispose()


if __name__ == "__main__":
    sys.exit(main())
