#!/usr/bin/env python3
"""
Fix the YouTube Ads Generator templates
One-off: headline and description lengths become {{headlines_length}} and
{{description_length}}. The Paste URL variant also takes {{youtube_video_url}}.
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
from src.services.template_service import search_templates, update_template

TEMPLATE_PREFIX = "YouTube Ads Generator"

HARDCODED_LENGTHS = ("90 to 100 characters", "30 to 35 characters")

_PROMPT_HEAD = (
    "Please ignore all previous instructions. Please respond only in the english language. "
    "You are a copywriter with expertise in YouTube {ads} creation. You have a Creative tone of voice. "
    "You have a Argumentative writing style. Do not self reference. Do not explain what you are doing. "
    "Generate {{{{total_headlines}}}} compelling YouTube headlines and {{{{total_headlines}}}} compelling "
    "descriptions for a video. The headlines should be between {{{{headlines_length}}}} long. The descriptions "
    "should be between {{{{description_length}}}} long. Do not use single quotes, double quotes or any other "
    "enclosing characters. "
)

PROMPT_PASTE_DESCRIPTION = _PROMPT_HEAD.format(ads="Ads") + "The video is about \"{{video_description}}\"."

PROMPT_PASTE_URL = _PROMPT_HEAD.format(ads="Ad") + "The video is from the URL: \"{{youtube_video_url}}\"."

_COMMON_INPUTS = [
    InputField(name="total_headlines", type="number", label="Total Headlines", placeholder="10",
               required=True, default="10"),
    InputField(name="headlines_length", type="text", label="Headlines Length", placeholder="90 to 100 characters",
               required=True, default="90 to 100 characters"),
    InputField(name="description_length", type="text", label="Description Length", placeholder="30 to 35 characters",
               required=True, default="30 to 35 characters"),
]

INPUTS_PASTE_DESCRIPTION = _COMMON_INPUTS + [
    InputField(name="video_description", type="textarea", label="Video Description",
               placeholder="Enter video description", required=True),
]

INPUTS_PASTE_URL = _COMMON_INPUTS + [
    InputField(name="youtube_video_url", type="text", label="YouTube Video URL",
               placeholder="Enter YouTube URL", required=True),
]


def select_variant(template_name):
    """Prompt and inputs for a template, by its Paste URL / Paste Description variant"""
    if "Paste URL" in template_name:
        return PROMPT_PASTE_URL, INPUTS_PASTE_URL
    return PROMPT_PASTE_DESCRIPTION, INPUTS_PASTE_DESCRIPTION


def main():
    engine = None

    try:
        settings = get_settings()
        setup_logging(settings)
        engine = create_db_engine(settings)
        logger.info(f"Fixing {TEMPLATE_PREFIX} templates...\n")

        with get_db_context(engine) as db:
            templates = [t for t in search_templates(db, TEMPLATE_PREFIX) if t.name.startswith(TEMPLATE_PREFIX)]
            templates.sort(key=lambda t: t.name)
            if not templates:
                logger.error(f"❌ {TEMPLATE_PREFIX} templates not found!")
                return 1

            logger.info(f"Found {len(templates)} template(s) to update:\n")

            for template in templates:
                logger.info(f"Updating {template.name} (ID: {template.id})...")
                new_prompt, new_inputs = select_variant(template.name)

                placeholders = extract_placeholders(template.prompt_template)
                hardcoded = [p for p in HARDCODED_LENGTHS if p in template.prompt_template]
                expected = [inp.name for inp in new_inputs if inp.name != "total_headlines"]
                missing = [name for name in expected if name not in placeholders]
                if not hardcoded and not missing:
                    logger.info(f"  Template ID {template.id} already uses placeholders - updating for consistency")
                else:
                    logger.info(f"  Template ID {template.id} has hardcoded lengths - fixing to use placeholders")
                    for phrase in hardcoded:
                        logger.info(f"    Found hardcoded \"{phrase}\"")
                    for name in missing:
                        logger.info(f"    Missing {{{{{name}}}}} placeholder")

                update_template(db, template.id, prompt_template=new_prompt, inputs=new_inputs)
                logger.success(f"✓ Template ID {template.id} updated successfully")

        logger.info("=" * 40)
        logger.success(f"✓ All {TEMPLATE_PREFIX} templates updated!")
        logger.info("=" * 40)
        logger.info('   - {{total_headlines}} for "Total Headlines"')
        logger.info('   - {{headlines_length}} for "Headlines Length" (default: "90 to 100 characters")')
        logger.info('   - {{description_length}} for "Description Length" (default: "30 to 35 characters")')
        logger.info('   - Paste URL templates also use: {{youtube_video_url}}')
        return 0

    except Exception as e:
        logger.exception(f"❌ Error: {e}")
        return 1

    finally:
        if engine is not None:
            engine.dispose()


if __name__ == "__main__":
    sys.exit(main())
