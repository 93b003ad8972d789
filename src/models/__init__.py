"""
Models package
"""
from .template import Template, SavedPrompt, InputField, parse_inputs

__all__ = [
    "Template",
    "SavedPrompt",
    "InputField",
    "parse_inputs",
]
