#!/usr/bin/env python3
"""
Fix the Convert Article to Twitter Thread (Paste URL) templates
One-off: the {{input_1.content}} token becomes {{webpage_url}}
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
from src.fixers.placeholder_fixer import rename_placeholder, replace_phrase
from src.models.template import InputField
from src.services.template_service import find_templates_by_name, update_template

TEMPLATE_NAME = "Convert Article to Twitter Thread (Paste URL)"

OLD_PLACEHOLDER = "input_1.content"
NEW_PLACEHOLDER = "webpage_url"

URL_PHRASE_PATTERNS = [r'Please turn the following article into a Twitter thread:\s*"\{\{webpage_url\}\}"']
URL_PHRASE = 'Please turn the following article into a Twitter thread from the URL: "{{webpage_url}}"'

NEW_PROMPT_TEMPLATE = (
    "Please ignore all previous instructions. Please respond only in the english language. "
    "You are a professional copywriter and would like to convert your article into an engaging Twitter thread. "
    "You have a Creative tone of voice. You have a Argumentative writing style. Do not self reference. "
    "Do not explain what you are doing. Add emojis to the thread when appropriate. The character count for "
    "each thread should be between 270 to 280 characters. Please turn the following article into a Twitter "
    "thread from the URL: \"{{webpage_url}}\"."
)

NEW_INPUTS = [
    InputField(name="webpage_url", type="text", label="Webpage URL", placeholder="Enter URL", required=True),
]


def rewrite_prompt(prompt: str) -> str:
    """
    Rename the URL token and say it is a URL

    Falls back to the full replacement prompt when the stored text still has
    no {{webpage_url}} after the rename.
    """
    updated = rename_placeholder(prompt, OLD_PLACEHOLDER, NEW_PLACEHOLDER)
    if "from the URL" not in updated:
        updated = replace_phrase(updated, URL_PHRASE_PATTERNS, URL_PHRASE)
    if NEW_PLACEHOLDER not in extract_placeholders(updated):
        return NEW_PROMPT_TEMPLATE
    return updated


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
                if OLD_PLACEHOLDER in placeholders:
                    logger.info(f"  Template ID {template.id} uses {{{{{OLD_PLACEHOLDER}}}}} - fixing to use {{{{{NEW_PLACEHOLDER}}}}}")
                elif NEW_PLACEHOLDER in placeholders:
                    logger.info(f"  Template ID {template.id} already uses {{{{{NEW_PLACEHOLDER}}}}} - updating for consistency")

                update_template(
                    db,
                    template.id,
                    prompt_template=rewrite_prompt(template.prompt_template),
                    inputs=NEW_INPUTS,
                )
                logger.success(f"✓ Template ID {template.id} updated successfully")

        logger.info("=" * 40)
        logger.success(f"✓ All {TEMPLATE_NAME} templates updated!")
        logger.info("=" * 40)
        logger.info('   - {{webpage_url}} for "Webpage URL"')
        return 0

    except Exception as e:
        logger.exception(f"❌ Error: {e}")
        return 1

    finally:
        if engine is not None:
            engine.dispose()


if __name__ == "__main__":
    sys.exit(main())
