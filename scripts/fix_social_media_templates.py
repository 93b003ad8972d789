#!/usr/bin/env python3
"""
Fix all social media templates (or those matching --name-like)
Replaces hardcoded counts with the placeholders of their input fields
"""

import argparse
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
from src.fixers.placeholder_fixer import (
    apply_placeholder_fixes,
    fields_needing_placeholders,
    load_placeholder_fixes,
)
from src.services.template_service import find_templates_by_category, search_templates, update_template


def main():
    parser = argparse.ArgumentParser(
        description="Replace hardcoded counts with the placeholders of their input fields"
    )
    parser.add_argument(
        '--name-like',
        default=None,
        help='Fix templates whose name contains this text instead of the social media category'
    )
    args = parser.parse_args()

    engine = None

    try:
        settings = get_settings()
        setup_logging(settings)
        engine = create_db_engine(settings)

        if args.name_like:
            scope = f"templates with name containing '{args.name_like}'"
        else:
            scope = "social media templates"
        logger.info(f"Fixing all {scope}...\n")
        fixes = load_placeholder_fixes(settings.PLACEHOLDER_FIXES_PATH)

        with get_db_context(engine) as db:
            if args.name_like:
                templates = sorted(search_templates(db, args.name_like), key=lambda t: t.name)
            else:
                templates = find_templates_by_category(db, settings.SOCIAL_MEDIA_CATEGORY)

        if not templates:
            logger.error(f"❌ No {scope} found!")
            return 1

        logger.info(f"Found {len(templates)} template(s)\n")

        fixed_count = 0
        skipped_count = 0
        failed_count = 0

        for template in templates:
            tracked = fields_needing_placeholders(template.inputs)
            result = apply_placeholder_fixes(template.name, template.prompt_template, template.inputs, fixes)

            if not result.changed:
                placeholders = extract_placeholders(template.prompt_template)
                if not all(inp.name in placeholders for inp in tracked):
                    logger.warning(f"⚠️  {template.name} (ID: {template.id}) - Needs manual fix")
                elif tracked:
                    logger.info(f"✓ {template.name} (ID: {template.id}) - Already correct")
                skipped_count += 1
                continue

            logger.info(f"\nUpdating {template.name} (ID: {template.id})...")
            try:
                with get_db_context(engine) as db:
                    updated = update_template(db, template.id, prompt_template=result.prompt)
            except Exception as e:
                logger.error(f"✗ Failed to update {template.name} (ID: {template.id}): {e}")
                failed_count += 1
                continue

            if updated is None:
                logger.error(f"✗ Failed to update {template.name} (ID: {template.id})")
                failed_count += 1
                continue

            logger.success("✓ Updated successfully")
            used = [f"{{{{{inp.name}}}}}" for inp in tracked if f"{{{{{inp.name}}}}}" in result.prompt]
            if used:
                logger.info(f"  Now using: {', '.join(used)}")
            fixed_count += 1

        logger.info(f"\n{'=' * 80}")
        logger.info("SUMMARY")
        logger.info(f"{'=' * 80}\n")
        logger.info(f"✓ Fixed: {fixed_count} template(s)")
        logger.info(f"✓ Skipped: {skipped_count} template(s)")
        if failed_count:
            logger.warning(f"✗ Failed: {failed_count} template(s)")
        logger.info(f"✓ Total processed: {len(templates)} template(s)\n")
        return 0

    except Exception as e:
        logger.exception(f"❌ Error: {e}")
        return 1

    finally:
        if engine is not None:
            engine.dispose()


if __name__ == "__main__":
    sys.exit(main())
