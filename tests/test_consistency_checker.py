"""
Tests for the template consistency checker.
"""
import pytest

from src.analyzers.consistency_checker import (
    HardcodedRule,
    MatchStrategy,
    check_template,
    extract_placeholders,
    find_hardcoded_numbers,
    load_hardcoded_rules,
    DEFAULT_HARDCODED_RULES,
)
from src.models.template import InputField

TOTAL_POSTS = {"name": "total_posts", "type": "number", "label": "Total Posts", "default": "5"}
TOPIC = {"name": "topic", "type": "text", "label": "Topic"}


@pytest.mark.unit
class TestExtractPlaceholders:

    def test_extracts_names_without_braces(self):
        assert extract_placeholders("Write about {{topic}} in {{tone}}") == ["topic", "tone"]

    def test_trims_and_deduplicates_preserving_case(self):
        text = "{{ Topic }} then {{total}} and {{Topic}} again {{total}}"
        assert extract_placeholders(text) == ["Topic", "total"]

    def test_extraction_is_idempotent(self):
        names = extract_placeholders("A {{a}} B {{b_c}} C {{a}} D {{ d }}")
        rebuilt = " ".join("{{" + name + "}}" for name in names)
        assert extract_placeholders(rebuilt) == names
        assert all("{" not in n and "}" not in n for n in names)

    def test_extra_braces_are_not_part_of_the_name(self):
        assert extract_placeholders("{{{total}}}") == ["total"]
        assert extract_placeholders("Generate {{{total}} hashtags") == ["total"]

    def test_no_tokens(self):
        assert extract_placeholders("Generate 5 ideas") == []
        assert extract_placeholders("single {brace}") == []

    def test_non_string_input(self):
        assert extract_placeholders(None) == []
        assert extract_placeholders(42) == []


@pytest.mark.unit
class TestCheckTemplate:

    def test_placeholder_present_passes(self):
        report = check_template("Generate {{total_posts}} ideas about {{topic}}", [TOPIC, TOTAL_POSTS])

        assert report.placeholders == ["total_posts", "topic"]
        assert report.is_correct
        assert report.missing_placeholders == []
        assert report.hardcoded_findings == []
        assert not report.has_issues

    def test_exact_placeholder_only(self):
        report = check_template("{{total_posts}}", [TOTAL_POSTS])

        assert report.is_correct
        assert report.number_fields[0].has_placeholder

    def test_no_tokens_reports_every_number_field_missing(self):
        inputs = [TOTAL_POSTS, {"name": "total_months", "type": "number", "label": "Months"}]
        report = check_template("Plain text without tokens", inputs)

        assert report.placeholders == []
        assert [c.name for c in report.missing_placeholders] == ["total_posts", "total_months"]
        assert not report.is_correct

    def test_hardcoded_number_with_missing_placeholder(self):
        report = check_template("Write 5 LinkedIn posts about {{topic}}", [TOPIC, TOTAL_POSTS])

        assert [c.name for c in report.missing_placeholders] == ["total_posts"]
        assert report.likely_hardcoded
        assert any(f.number == "5" for f in report.hardcoded_findings)
        assert report.has_issues

    def test_bare_number_fallback(self):
        report = check_template("Give me 5 of them about {{topic}}", [TOPIC, TOTAL_POSTS])

        assert [f.rule for f in report.hardcoded_findings] == ["bare_number"]
        assert report.hardcoded_findings[0].number == "5"

    def test_bare_number_not_reported_when_placeholders_complete(self):
        report = check_template("Top 5 tips, {{total_posts}} posts", [TOTAL_POSTS], rules=[])

        assert report.hardcoded_findings == []

    def test_rule_findings_without_number_inputs_are_not_issues(self):
        report = check_template("Use 10 hashtags for {{topic}}", [TOPIC])

        assert report.likely_hardcoded
        assert report.is_correct
        assert not report.has_issues

    def test_instagram_hashtag_count(self):
        text = "Please generate 10 high performing Instagram hashtags for: {{instagram_post}}"
        report = check_template(text, [{"name": "instagram_post", "type": "textarea"},
                                       {"name": "total", "type": "number", "default": "10"}])

        rules = {f.rule for f in report.hardcoded_findings}
        assert "hashtag_count" in rules
        assert [c.name for c in report.missing_placeholders] == ["total"]

    def test_accepts_input_field_objects_and_json(self):
        fields = [InputField(name="total_posts", type="number", label="Total Posts")]
        assert check_template("{{total_posts}}", fields).is_correct
        assert check_template("{{total_posts}}", '[{"name": "total_posts", "type": "number"}]').is_correct

    @pytest.mark.parametrize("inputs", [None, "", "not json", {"name": "x"}, [1, "two", {"type": "number"}]])
    def test_malformed_inputs_degrade_to_no_number_inputs(self, inputs):
        report = check_template("Generate {{total}} things", inputs)

        assert report.number_fields == []
        assert report.is_correct
        assert report.placeholder_matches == {"total": False}

    def test_non_string_prompt(self):
        report = check_template(None, [TOTAL_POSTS])

        assert report.placeholders == []
        assert not report.is_correct


@pytest.mark.unit
class TestMatchStrategy:

    def test_substring_matches_prefix_names(self):
        report = check_template("Generate {{total_posts}}", [{"name": "total", "type": "text"}])
        assert report.field_matches == {"total": True}

    def test_exact_rejects_prefix_names(self):
        report = check_template("Generate {{total_posts}}", [{"name": "total", "type": "text"}],
                                strategy=MatchStrategy.EXACT)
        assert report.field_matches == {"total": False}
        assert report.unmatched_fields == ["total"]

    def test_strategy_from_string(self):
        report = check_template("{{total_posts}}", [{"name": "total"}], strategy="exact")
        assert report.field_matches == {"total": False}

    def test_placeholder_matches_are_exact(self):
        report = check_template("{{total_posts}} {{extra}}", [{"name": "total"}, {"name": "total_posts"}])
        assert report.placeholder_matches == {"total_posts": True, "extra": False}
        assert report.orphan_placeholders == ["extra"]

    def test_number_check_is_exact_regardless_of_strategy(self):
        report = check_template("{{total_posts}}", [{"name": "total", "type": "number"}])
        assert report.field_matches == {"total": True}
        assert not report.is_correct


@pytest.mark.unit
class TestHardcodedRules:

    def test_default_rules_loaded(self):
        names = {rule.name for rule in DEFAULT_HARDCODED_RULES}
        assert {"count_noun", "hashtag_count", "pinterest_description", "tiktok_video_ideas"} <= names

    @pytest.mark.parametrize("text,rule", [
        ("Write 3 Pinterest description lines", "pinterest_description"),
        ("generate 10 TikTok video ideas", "tiktok_video_ideas"),
        ("a calendar for 3 months", "calendar_months"),
        ("5 Facebook posts scheduled each week", "weekly_frequency"),
        ("Write 12 articles", "count_noun"),
    ])
    def test_default_rule_phrasings(self, text, rule):
        findings = find_hardcoded_numbers(text, DEFAULT_HARDCODED_RULES)
        assert rule in {f.rule for f in findings}

    def test_custom_rule_list(self):
        rules = [HardcodedRule(name="reels", pattern=r"\b\d+\s+reels?\b")]
        report = check_template("Plan 4 Reels for {{topic}}", [TOPIC], rules=rules)

        assert [(f.rule, f.text, f.number) for f in report.hardcoded_findings] == [("reels", "4 Reels", "4")]

    def test_load_rules_from_yaml(self, tmp_path):
        rules_file = tmp_path / "rules.yaml"
        rules_file.write_text(
            "- name: carousel\n"
            "  pattern: '\\b\\d+\\s+slides\\b'\n"
            "  description: carousel slide count\n",
            encoding="utf-8",
        )
        rules = load_hardcoded_rules(rules_file)

        assert len(rules) == 1
        assert rules[0].name == "carousel"
        assert find_hardcoded_numbers("Make 8 slides", rules)[0].number == "8"
