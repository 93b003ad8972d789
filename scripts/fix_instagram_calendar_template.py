#!/usr/bin/env python3
"""
Fix the Instagram Post Calendar templates
One-off: replaces the hardcoded "3 months" and "3 Instagram posts" with
{{total_months}} and {{articles_per_week}}
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
from src.analyzers.consistency_checker import extract_placeholders
from src.models.template import InputField
from src.services.template_service import find_templates_by_name, update_template

TEMPLATE_NAME = "Instagram Post Calendar"

HARDCODED_PHRASES = ("3 months", "3 Instagram posts")

NEW_PROMPT_TEMPLATE = (
    "Please ignore all previous instructions. Please respond only in the english language. "
    "You are an Instagrammer with a large fan following. You have a Creative tone of voice. "
    "You have a Argumentative writing style. Please create an Instagram Calendar for {{total_months}} months "
    "based on your interests \"{{topic}}\". There should be {{articles_per_week}} Instagram posts scheduled "
    "each week of the month. Every Instagram post should have a catchy description. Include emojis and the "
    "Instagram hashtags in the description. Try to use unique emojis in the description. The description "
    "should have a hook and entice the readers. The table should have actual dates in the future. Each month "
    "should have its own table. The table columns should be: Date, Post Idea, description, caption without "
    "hashtags, hashtags. Please organize each Instagram post in the table so that it looks like a calendar. "
    "Do not self reference. Do not explain what you are doing. Reply back only with the table."
)

NEW_INPUTS = [
    InputField(name="topic", type="text", label="Topic", placeholder="Enter topic", required=True),
    InputField(name="articles_per_week", type="number", label="Articles per week", placeholder="3",
               required=True, default="3"),
    InputField(name="total_months", type="number", label="Total months", placeholder="3",
               required=True, default="3"),
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
                placeholders = extract_placeholders(template.prompt_template)
                hardcoded = [p for p in HARDCODED_PHRASES if p in template.prompt_template]
                missing = [n for n in ("total_months", "articles_per_week") if n not in placeholders]

                if not hardcoded and not missing:
                    logger.info(f"  Template ID {template.id} already uses correct placeholders - updating for consistency")
                else:
                    logger.info(f"  Template ID {template.id} has hardcoded values - fixing to use placeholders")
                    for phrase in hardcoded:
                        logger.info(f"    Found hardcoded \"{phrase}\"")
                    for name in missing:
                        logger.info(f"    Missing {{{{{name}}}}} placeholder")

                update_template(db, template.id, prompt_template=NEW_PROMPT_TEMPLATE, inputs=NEW_INPUTS)
                logger.success(f"✓ Template ID {template.id} updated successfully")

        logger.info("=" * 40)
        logger.success(f"✓ All {TEMPLATE_NAME} templates updated!")
        logger.info("=" * 40)
        logger.info('   - {{topic}} for "Topic"')
        logger.info('   - {{total_months}} for "Total months" (default: 3)')
        logger.info('   - {{articles_per_week}} for "Articles per week" (default: 3)')
        return 0

    except Exception as e:
        logger.exception(f"❌ Error: {e}")
        return 1

    finally:
        if engine is not None:
            engine.dispose()


if __name__ == "__main__":
    sys.exit(main())
