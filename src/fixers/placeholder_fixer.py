"""
Placeholder fixer
Rewrites hardcoded counts in prompt text into {{placeholder}} tokens.
Used by the fix scripts; the consistency checker itself never edits text.
"""
import re
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, List, Optional, Sequence, Union

import yaml
from loguru import logger

from src.models.template import InputField, parse_inputs

DEFAULT_FIXES_PATH = Path(__file__).resolve().parent.parent.parent / "config" / "placeholder_fixes.yaml"

COUNT_NOUNS = (
    "posts?|ideas?|hashtags?|tags?|titles?|descriptions?|keywords?"
    "|months?|weeks?|threads?|videos?|headlines?|articles?"
    "|characters?|words?|comments?"
)


@dataclass(frozen=True)
class PlaceholderFix:
    """
    Replace the number captured by group 1 of `pattern` with {{field}}

    When `replacement` is set the whole match is replaced by that literal text
    instead, for phrases that need more than one placeholder.
    """
    template_name: str
    field: str
    pattern: str
    replacement: Optional[str] = None

    def __post_init__(self):
        regex = re.compile(self.pattern, re.IGNORECASE)
        if self.replacement is None and regex.groups < 1:
            raise ValueError(f"Fix pattern for '{self.template_name}' needs a capture group: {self.pattern}")
        object.__setattr__(self, "_regex", regex)

    def applies_to(self, template_name: str) -> bool:
        return self.template_name in (template_name or "")

    def apply(self, text: str) -> str:
        if self.replacement is not None:
            return self._regex.sub(lambda _m: self.replacement, text)

        token = "{{" + self.field + "}}"

        def _replace(match):
            whole = match.group(0)
            start = match.start(1) - match.start(0)
            end = match.end(1) - match.start(0)
            return whole[:start] + token + whole[end:]

        return self._regex.sub(_replace, text)


@dataclass
class FixResult:
    prompt: str
    applied: List[str] = field(default_factory=list)
    changed: bool = False


def load_placeholder_fixes(path: Union[str, Path, None] = None) -> List[PlaceholderFix]:
    """Load fixes from a YAML list of {template, field, pattern[, replacement]}"""
    fixes_path = Path(path) if path else DEFAULT_FIXES_PATH
    with open(fixes_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or []
    return [
        PlaceholderFix(
            template_name=entry["template"],
            field=entry["field"],
            pattern=entry["pattern"],
            replacement=entry.get("replacement"),
        )
        for entry in data
    ]


def fields_needing_placeholders(inputs: Any) -> List[InputField]:
    """
    Input fields a fixed prompt must reference: every number field, plus
    text fields carrying a default (a free-form `length` is exempt)
    """
    return [
        inp for inp in parse_inputs(inputs)
        if inp.is_number or (inp.type == "text" and inp.default and inp.name != "length")
    ]


def implied_count_noun(field_name: str) -> Optional[str]:
    """
    Count noun a field name stands for, as a COUNT_NOUNS alternative

    'total_months' -> 'months?', 'posts_per_week' -> 'posts?'. The part after
    '_per_' is the period, not the thing counted.
    """
    counted = field_name.lower().split("_per_", 1)[0]
    nouns = COUNT_NOUNS.split("|")
    for part in reversed(counted.split("_")):
        for noun in nouns:
            if re.fullmatch(noun, part):
                return noun
    return None


def replace_default_values(prompt: str, inputs: Any) -> FixResult:
    """
    Fallback for fields still missing their placeholder:
    '<default> <count noun>' becomes '{{name}} <count noun>'

    Applies to number fields and to text fields whose default is a plain
    integer. When several such fields share a default, each one only takes
    the count noun its name implies; a field without one is left for a
    manual fix.
    """
    result = FixResult(prompt=prompt)
    candidates = [
        inp for inp in parse_inputs(inputs)
        if inp.default and (inp.is_number or inp.default.isdigit())
    ]
    shared = Counter(inp.default for inp in candidates)

    for inp in candidates:
        token = "{{" + inp.name + "}}"
        if token in result.prompt:
            continue
        nouns = COUNT_NOUNS
        if shared[inp.default] > 1:
            nouns = implied_count_noun(inp.name)
            if nouns is None:
                logger.warning(
                    f"{inp.name}: default {inp.default} is shared with another field, needs manual fix"
                )
                continue
        pattern = re.compile(
            rf"\b{re.escape(inp.default)}\b(\s+(?:{nouns}))\b",
            re.IGNORECASE,
        )
        updated, count = pattern.subn(lambda m: token + m.group(1), result.prompt)
        if count:
            result.prompt = updated
            result.applied.append(f"default:{inp.name}")
    result.changed = result.prompt != prompt
    return result


def apply_placeholder_fixes(
    template_name: str,
    prompt: str,
    inputs: Any,
    fixes: Optional[Sequence[PlaceholderFix]] = None,
) -> FixResult:
    """
    Apply name-specific fixes, then the default-value fallback

    Args:
        template_name: template name; fixes apply when their name is a substring of it
        prompt: current prompt text
        inputs: input field descriptors
        fixes: fix rules (defaults to config/placeholder_fixes.yaml)

    Returns:
        FixResult with the rewritten prompt and the rules that fired
    """
    fixes = load_placeholder_fixes() if fixes is None else fixes
    updated = prompt
    applied = []

    for fix in fixes:
        if not fix.applies_to(template_name):
            continue
        rewritten = fix.apply(updated)
        if rewritten != updated:
            logger.debug(f"{template_name}: '{fix.pattern}' -> {{{{{fix.field}}}}}")
            updated = rewritten
            applied.append(fix.field)

    fallback = replace_default_values(updated, inputs)
    applied.extend(fallback.applied)

    return FixResult(prompt=fallback.prompt, applied=applied, changed=fallback.prompt != prompt)


def replace_phrase(prompt: str, patterns: Iterable[str], replacement: str) -> str:
    """Replace each phrase pattern (case-insensitive) with a literal replacement"""
    updated = prompt
    for pattern in patterns:
        updated = re.sub(pattern, lambda _m: replacement, updated, flags=re.IGNORECASE)
    return updated


def rename_placeholder(prompt: str, old: str, new: str) -> str:
    """Rename every {{old}} token (inner whitespace allowed) to {{new}}"""
    pattern = re.compile(r"\{\{\s*" + re.escape(old) + r"\s*\}\}")
    return pattern.sub(lambda _m: "{{" + new + "}}", prompt)
