"""
Template consistency checker

Compares a template's prompt text with its declared input fields:
1. which {{placeholder}} tokens the text uses
2. which input fields are referenced by a placeholder (exact or substring match)
3. whether every number field has its own placeholder
4. whether the text still carries counts that look hand-typed

Pure functions only; callers decide what to do with the report.
"""
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

import yaml

from src.models.template import InputField, parse_inputs

PLACEHOLDER_PATTERN = re.compile(r"\{\{([^{}]+)\}\}")
STANDALONE_NUMBER_PATTERN = re.compile(r"(?<![\w{])\d+(?![\w}])")

DEFAULT_RULES_PATH = Path(__file__).resolve().parent.parent.parent / "config" / "hardcoded_rules.yaml"


class MatchStrategy(str, Enum):
    """How an input field name is matched against placeholder names"""
    EXACT = "exact"
    SUBSTRING = "substring"

    def matches(self, field_name: str, placeholder: str) -> bool:
        if self is MatchStrategy.EXACT:
            return field_name == placeholder
        return field_name in placeholder


@dataclass(frozen=True)
class HardcodedRule:
    """Regex for one phrasing that historically hid a hardcoded count"""
    name: str
    pattern: str
    description: str = ""

    def __post_init__(self):
        object.__setattr__(self, "_regex", re.compile(self.pattern, re.IGNORECASE))

    def finditer(self, text: str):
        return self._regex.finditer(text)


@dataclass
class HardcodedFinding:
    rule: str
    text: str
    number: Optional[str] = None


@dataclass
class NumberFieldCheck:
    name: str
    label: str
    default: Optional[str]
    has_placeholder: bool


@dataclass
class ConsistencyReport:
    """Classification of one template; no corrections applied"""
    placeholders: List[str]
    field_matches: Dict[str, bool]
    placeholder_matches: Dict[str, bool]
    number_fields: List[NumberFieldCheck]
    hardcoded_findings: List[HardcodedFinding] = field(default_factory=list)

    @property
    def has_number_inputs(self) -> bool:
        return bool(self.number_fields)

    @property
    def missing_placeholders(self) -> List[NumberFieldCheck]:
        return [check for check in self.number_fields if not check.has_placeholder]

    @property
    def unmatched_fields(self) -> List[str]:
        return [name for name, matched in self.field_matches.items() if not matched]

    @property
    def orphan_placeholders(self) -> List[str]:
        return [name for name, matched in self.placeholder_matches.items() if not matched]

    @property
    def likely_hardcoded(self) -> bool:
        return bool(self.hardcoded_findings)

    @property
    def is_correct(self) -> bool:
        return not self.missing_placeholders

    @property
    def has_issues(self) -> bool:
        return bool(self.missing_placeholders) or (self.likely_hardcoded and self.has_number_inputs)


def extract_placeholders(text: Any) -> List[str]:
    """
    Placeholder names used in a prompt text

    Names are trimmed, case is preserved, duplicates are dropped and the
    first-occurrence order is kept.
    """
    if not isinstance(text, str) or not text:
        return []
    names = []
    for match in PLACEHOLDER_PATTERN.finditer(text):
        name = match.group(1).strip()
        if name and name not in names:
            names.append(name)
    return names


def load_hardcoded_rules(path: Union[str, Path, None] = None) -> List[HardcodedRule]:
    """
    Load hardcoded-number rules from a YAML list of {name, pattern, description}

    Args:
        path: rule file (defaults to config/hardcoded_rules.yaml)

    Returns:
        rules in file order
    """
    rules_path = Path(path) if path else DEFAULT_RULES_PATH
    with open(rules_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or []

    rules = []
    for entry in data:
        rules.append(HardcodedRule(
            name=entry["name"],
            pattern=entry["pattern"],
            description=entry.get("description", ""),
        ))
    return rules


DEFAULT_HARDCODED_RULES: List[HardcodedRule] = load_hardcoded_rules()


def find_hardcoded_numbers(text: str, rules: Iterable[HardcodedRule]) -> List[HardcodedFinding]:
    """Every rule match in the text, in rule order"""
    findings = []
    if not isinstance(text, str):
        return findings
    for rule in rules:
        for match in rule.finditer(text):
            number = re.search(r"\d+", match.group(0))
            findings.append(HardcodedFinding(
                rule=rule.name,
                text=match.group(0).strip(),
                number=number.group(0) if number else None,
            ))
    return findings


def check_template(
    prompt_text: Any,
    inputs: Any,
    rules: Optional[Sequence[HardcodedRule]] = None,
    strategy: Union[MatchStrategy, str] = MatchStrategy.SUBSTRING,
) -> ConsistencyReport:
    """
    Check a prompt text against its declared input fields

    Args:
        prompt_text: template text with {{placeholder}} tokens
        inputs: input field descriptors (list of dicts / InputField, JSON string or None)
        rules: hardcoded-number rules (defaults to DEFAULT_HARDCODED_RULES)
        strategy: field-to-placeholder matching policy for field_matches

    Returns:
        ConsistencyReport
    """
    strategy = MatchStrategy(strategy)
    rules = DEFAULT_HARDCODED_RULES if rules is None else rules
    text = prompt_text if isinstance(prompt_text, str) else ""
    fields: List[InputField] = parse_inputs(inputs)

    placeholders = extract_placeholders(text)
    field_names = [f.name for f in fields]

    field_matches = {
        f.name: any(strategy.matches(f.name, p) for p in placeholders)
        for f in fields
    }
    placeholder_matches = {p: p in field_names for p in placeholders}

    number_fields = [
        NumberFieldCheck(
            name=f.name,
            label=f.label,
            default=f.default,
            has_placeholder=f.name in placeholders,
        )
        for f in fields if f.is_number
    ]

    findings = find_hardcoded_numbers(text, rules)

    # A number field without its placeholder plus a stray integer that no rule explains
    if not findings and any(not check.has_placeholder for check in number_fields):
        bare = STANDALONE_NUMBER_PATTERN.search(PLACEHOLDER_PATTERN.sub(" ", text))
        if bare:
            findings.append(HardcodedFinding(rule="bare_number", text=bare.group(0), number=bare.group(0)))

    return ConsistencyReport(
        placeholders=placeholders,
        field_matches=field_matches,
        placeholder_matches=placeholder_matches,
        number_fields=number_fields,
        hardcoded_findings=findings,
    )
