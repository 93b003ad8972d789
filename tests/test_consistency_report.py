"""
Tests for audit aggregation and report output.
"""
import pytest

from src.models.template import Template
from src.reporters.consistency_report import (
    audit_templates,
    group_by_subcategory,
    log_grouped_report,
    log_summary,
    summarize,
)


@pytest.fixture
def templates(sample_templates):
    return [Template(**data) for data in sample_templates]


@pytest.mark.unit
class TestConsistencyReport:

    def test_audit_and_summary(self, templates):
        results = audit_templates(templates)
        summary = summarize(results)

        assert [r.template_id for r in results] == [11, 12, 13]
        assert not results[0].report.is_correct
        assert results[1].report.is_correct
        assert (summary.correct, summary.issues, summary.total) == (2, 1, 3)
        assert not summary.all_correct

    def test_group_by_subcategory_sorted(self, templates):
        templates[2].subcategory = None
        groups = group_by_subcategory(audit_templates(templates))

        assert list(groups) == ["Facebook", "Instagram", "Unknown"]

    def test_log_output_mentions_missing_placeholder(self, templates, log_messages):
        results = audit_templates(templates)
        log_grouped_report(results, verbose=True)
        summary = log_summary(results)

        output = "\n".join(log_messages)
        assert summary.issues == 1
        assert "Missing placeholders: total_posts" in output
        assert "Facebook Post Ideas (ID: 11)" in output
        assert "{{instagram_post}}" in output
        assert "Total: 3 template(s)" in output

    def test_all_correct_summary(self, templates, log_messages):
        summary = log_summary(audit_templates(templates[1:]))

        assert summary.all_correct
        assert any("All templates are correctly configured" in m for m in log_messages)
