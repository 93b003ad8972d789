"""
Analyzers package
"""
from .consistency_checker import (
    MatchStrategy,
    HardcodedRule,
    HardcodedFinding,
    NumberFieldCheck,
    ConsistencyReport,
    extract_placeholders,
    find_hardcoded_numbers,
    load_hardcoded_rules,
    check_template,
)

__all__ = [
    "MatchStrategy",
    "HardcodedRule",
    "HardcodedFinding",
    "NumberFieldCheck",
    "ConsistencyReport",
    "extract_placeholders",
    "find_hardcoded_numbers",
    "load_hardcoded_rules",
    "check_template",
]
