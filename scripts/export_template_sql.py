#!/usr/bin/env python3
"""
Generate a SQL file of UPDATE statements for templates with a given name
The file is meant to be reviewed and run by hand against another database.
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
from src.exporters.sql_exporter import build_update_sql, write_sql_file
from src.services.template_service import find_templates_by_name


def main():
    parser = argparse.ArgumentParser(description="Export template prompts as SQL UPDATE statements")
    parser.add_argument(
        '--name',
        default="YouTube Title & Descriptions",
        help='Template name (default: YouTube Title & Descriptions)'
    )
    parser.add_argument(
        '--with-inputs',
        action='store_true',
        help='Also write the inputs column'
    )
    parser.add_argument(
        '--output',
        default=None,
        help='Output file (default: data/exports/fix-<name>.sql)'
    )
    args = parser.parse_args()

    engine = None

    try:
        settings = get_settings()
        setup_logging(settings)
        engine = create_db_engine(settings)

        slug = "-".join("".join(c if c.isalnum() else " " for c in args.name.lower()).split())
        output = Path(args.output) if args.output else settings.EXPORTS_DIR / f"fix-{slug}.sql"
        columns = ("prompt_template", "inputs") if args.with_inputs else ("prompt_template",)

        with get_db_context(engine) as db:
            templates = sorted(find_templates_by_name(db, args.name), key=lambda t: t.id)

        if not templates:
            logger.info(f"No templates named '{args.name}'.")
            return 0

        content = build_update_sql(
            templates,
            title=f"Update {args.name} templates ({', '.join(columns)})",
            columns=columns,
        )
        write_sql_file(output, content)
        logger.success(f"✅ SQL file generated: {output} ({len(templates)} statement(s))")
        return 0

    except Exception as e:
        logger.exception(f"Error: {e}")
        return 1

    finally:
        if engine is not None:
            engine.dispose()


if __name__ == "__main__":
    sys.exit(main())
