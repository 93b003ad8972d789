"""
Fixers package
"""
from .placeholder_fixer import (
    PlaceholderFix,
    FixResult,
    load_placeholder_fixes,
    apply_placeholder_fixes,
    replace_default_values,
    replace_phrase,
)

__all__ = [
    "PlaceholderFix",
    "FixResult",
    "load_placeholder_fixes",
    "apply_placeholder_fixes",
    "replace_default_values",
    "replace_phrase",
]
