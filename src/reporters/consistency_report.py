"""
Consistency report output
Human-readable audit of template placeholders, written through loguru.
"""
from collections import OrderedDict
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

from loguru import logger

from src.analyzers.consistency_checker import (
    ConsistencyReport,
    HardcodedRule,
    MatchStrategy,
    check_template,
)
from src.models.template import Template

SEPARATOR = "=" * 80


@dataclass
class TemplateResult:
    template_id: int
    name: str
    subcategory: Optional[str]
    report: ConsistencyReport


@dataclass
class AuditSummary:
    correct: int
    issues: int
    total: int

    @property
    def all_correct(self) -> bool:
        return self.issues == 0


def audit_templates(
    templates: Iterable[Template],
    rules: Optional[Sequence[HardcodedRule]] = None,
    strategy: MatchStrategy = MatchStrategy.SUBSTRING,
) -> List[TemplateResult]:
    """Run the checker over template rows"""
    return [
        TemplateResult(
            template_id=t.id,
            name=t.name,
            subcategory=t.subcategory,
            report=check_template(t.prompt_template, t.inputs, rules=rules, strategy=strategy),
        )
        for t in templates
    ]


def summarize(results: Sequence[TemplateResult]) -> AuditSummary:
    """Tally by the number-field check (templates without number inputs count as correct)"""
    correct = sum(1 for r in results if r.report.is_correct)
    return AuditSummary(correct=correct, issues=len(results) - correct, total=len(results))


def group_by_subcategory(results: Iterable[TemplateResult]) -> Dict[str, List[TemplateResult]]:
    groups: Dict[str, List[TemplateResult]] = {}
    for result in results:
        groups.setdefault(result.subcategory or "Unknown", []).append(result)
    return OrderedDict(sorted(groups.items()))


def _shorten(items: List[str], limit: int = 3) -> str:
    text = ", ".join(items[:limit])
    return text + ("..." if len(items) > limit else "")


def log_template_report(result: TemplateResult, index: int, verbose: bool = False):
    """Per-template block: number inputs, missing placeholders, hardcoded counts"""
    report = result.report
    icon = "✗" if report.missing_placeholders else "✓"
    logger.info(f"\n{icon} {index}. {result.name} (ID: {result.template_id})")

    if verbose:
        logger.info("   Placeholders in prompt:")
        if report.placeholders:
            for name in report.placeholders:
                marker = "" if report.placeholder_matches[name] else "  (no input field)"
                logger.info(f"     - {{{{{name}}}}}{marker}")
        else:
            logger.info("     (none found)")
        unmatched = report.unmatched_fields
        if unmatched:
            logger.info(f"   Input fields not referenced: {', '.join(unmatched)}")

    if report.number_fields:
        logger.info("   Number inputs:")
        for check in report.number_fields:
            status = "✓" if check.has_placeholder else "✗ MISSING"
            logger.info(f"     {status} {check.name} ({check.label}) - Default: {check.default or 'none'}")
    else:
        logger.info("   (No number inputs)")

    if report.missing_placeholders:
        names = [c.name for c in report.missing_placeholders]
        logger.warning(f"   ❌ Missing placeholders: {', '.join(names)}")

    if report.likely_hardcoded and report.has_number_inputs:
        snippets = [f'"{f.text}"' for f in report.hardcoded_findings]
        logger.warning(f"   ⚠️  Hardcoded numbers: {_shorten(snippets)}")


def log_grouped_report(results: Sequence[TemplateResult], verbose: bool = False):
    for subcategory, group in group_by_subcategory(results).items():
        logger.info(f"\n{SEPARATOR}")
        logger.info(f"{subcategory.upper()} ({len(group)} templates)")
        logger.info(SEPARATOR)
        for index, result in enumerate(group, 1):
            log_template_report(result, index, verbose=verbose)


def log_summary(results: Sequence[TemplateResult]) -> AuditSummary:
    """Summary block; returns the tally"""
    summary = summarize(results)
    flagged = [r for r in results if r.report.has_issues]

    logger.info(f"\n{SEPARATOR}")
    logger.info("SUMMARY")
    logger.info(SEPARATOR)

    if not flagged:
        logger.success("✅ All templates are correctly configured!")
        logger.info("   All number input fields have corresponding placeholders in prompts.")
    else:
        logger.warning(f"❌ Found {len(flagged)} template(s) with issues:")
        for subcategory, group in group_by_subcategory(flagged).items():
            logger.info(f"{subcategory}:")
            for index, result in enumerate(group, 1):
                logger.info(f"  {index}. {result.name} (ID: {result.template_id})")
                missing = result.report.missing_placeholders
                if missing:
                    logger.info(f"     Missing: {', '.join(f'{c.name} ({c.label})' for c in missing)}")
                if result.report.hardcoded_findings:
                    logger.info(f"     Hardcoded numbers: {_shorten([f.text for f in result.report.hardcoded_findings])}")

    logger.info(f"\n✓ Correct: {summary.correct} template(s)")
    logger.info(f"✗ Issues: {summary.issues} template(s)")
    logger.info(f"  Total: {summary.total} template(s)")
    return summary
