"""
Tests for SQL UPDATE file generation.
"""
from datetime import datetime, timezone

import pytest

from src.exporters.sql_exporter import build_update_sql, escape_sql_literal, write_sql_file
from src.models.template import Template

GENERATED_AT = datetime(2026, 1, 1, tzinfo=timezone.utc)


def make_template(id, prompt, inputs=None, name="YouTube Title & Descriptions"):
    return Template(id=id, name=name, prompt_template=prompt, inputs=inputs or [])


@pytest.mark.unit
class TestSqlExporter:

    def test_escape_doubles_single_quotes(self):
        assert escape_sql_literal("Don't 'quote'") == "Don''t ''quote''"
        assert escape_sql_literal("plain") == "plain"

    def test_build_update_sql(self):
        templates = [
            make_template(7, "Don't forget {{call_to_action}}"),
            make_template(9, "Second"),
        ]
        sql = build_update_sql(templates, title="Fix CTA", generated_at=GENERATED_AT)
        lines = sql.splitlines()

        assert lines[0] == "-- Fix CTA"
        assert lines[1] == "-- Generated: 2026-01-01T00:00:00+00:00"
        assert "-- Template ID 7: YouTube Title & Descriptions" in lines
        assert "UPDATE templates SET prompt_template = 'Don''t forget {{call_to_action}}' WHERE id = 7;" in lines
        assert "UPDATE templates SET prompt_template = 'Second' WHERE id = 9;" in lines

    def test_inputs_column_as_jsonb(self):
        template = make_template(3, "P", inputs=[{"name": "it's", "type": "text"}])
        sql = build_update_sql([template], title="T", columns=("prompt_template", "inputs"),
                               generated_at=GENERATED_AT)

        assert ("UPDATE templates SET prompt_template = 'P', "
                "inputs = '[{\"name\": \"it''s\", \"type\": \"text\"}]'::jsonb WHERE id = 3;") in sql

    def test_unsupported_column(self):
        with pytest.raises(ValueError):
            build_update_sql([], title="T", columns=("name",))

    def test_empty_export_has_header_only(self):
        sql = build_update_sql([], title="Nothing", generated_at=GENERATED_AT)
        assert "UPDATE" not in sql
        assert sql.startswith("-- Nothing\n")

    def test_line_breaks_in_name_stay_inside_comment(self):
        template = make_template(5, "P", name="Bad\nUPDATE templates SET prompt_template = 'x';\r\nName")
        sql = build_update_sql([template], title="T", generated_at=GENERATED_AT)
        lines = sql.splitlines()

        assert "-- Template ID 5: Bad UPDATE templates SET prompt_template = 'x'; Name" in lines
        assert [line for line in lines if line.startswith("UPDATE")] == [
            "UPDATE templates SET prompt_template = 'P' WHERE id = 5;"
        ]

    def test_write_sql_file_creates_directories(self, tmp_path):
        output = tmp_path / "exports" / "nested" / "fix.sql"
        written = write_sql_file(output, "-- test\n")

        assert written == output
        assert output.read_text(encoding="utf-8") == "-- test\n"
