"""
SQL export
Writes literal UPDATE statements for templates, to be run by hand later.
"""
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Sequence, Union

from loguru import logger

from src.models.template import Template

SUPPORTED_COLUMNS = ("prompt_template", "inputs")


def escape_sql_literal(value: str) -> str:
    """Escape a string for a single-quoted SQL literal"""
    return value.replace("'", "''")


def _comment_text(value) -> str:
    """Flatten a value onto one line so it cannot end a -- comment early"""
    return " ".join(str(value or "").splitlines())


def _column_literal(template: Template, column: str) -> str:
    if column == "inputs":
        payload = json.dumps(template.inputs or [], ensure_ascii=False)
        return f"'{escape_sql_literal(payload)}'::jsonb"
    return f"'{escape_sql_literal(getattr(template, column) or '')}'"


def build_update_sql(
    templates: Iterable[Template],
    title: str,
    columns: Sequence[str] = ("prompt_template",),
    generated_at: datetime = None,
) -> str:
    """
    Build the SQL file body

    Args:
        templates: rows to export
        title: first header comment line
        columns: columns written in each SET clause
        generated_at: timestamp for the header (defaults to now, UTC)

    Returns:
        SQL text with one commented UPDATE per template
    """
    unknown = [c for c in columns if c not in SUPPORTED_COLUMNS]
    if unknown:
        raise ValueError(f"Unsupported columns: {', '.join(unknown)}")

    generated_at = generated_at or datetime.now(timezone.utc)
    lines = [f"-- {_comment_text(title)}", f"-- Generated: {generated_at.isoformat()}", ""]

    for template in templates:
        assignments = ", ".join(f"{c} = {_column_literal(template, c)}" for c in columns)
        lines.append(f"-- Template ID {template.id}: {_comment_text(template.name)}")
        lines.append(f"UPDATE templates SET {assignments} WHERE id = {int(template.id)};")
        lines.append("")

    return "\n".join(lines)


def write_sql_file(path: Union[str, Path], content: str) -> Path:
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8")
    logger.info(f"SQL file written: {output}")
    return output
