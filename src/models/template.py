"""
Template models
Prompt templates owned by the prompt generator app, and the saved_prompts table
"""
import json
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import Column, Integer, String, Text, DateTime, JSON
from sqlalchemy.dialects.postgresql import JSONB
from src.core.database import Base


class Template(Base):
    """Prompt template with placeholder tokens and typed input fields"""
    __tablename__ = "templates"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False, index=True)
    category = Column(String(100), nullable=True, index=True)
    subcategory = Column(String(100), nullable=True)
    prompt_template = Column(Text, nullable=False)
    inputs = Column(JSON().with_variant(JSONB(), "postgresql"), nullable=False, default=list)
    updated_at = Column(DateTime(timezone=True), nullable=True)

    def __repr__(self):
        return f"<Template(id={self.id}, name='{self.name}')>"

    @property
    def input_fields(self) -> List["InputField"]:
        return parse_inputs(self.inputs)


class SavedPrompt(Base):
    """Saved prompts; only the id sequence matters to the cleanup scripts"""
    __tablename__ = "saved_prompts"

    id = Column(Integer, primary_key=True)
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow)


@dataclass
class InputField:
    """One value a user supplies to fill a template placeholder"""
    name: str
    type: str = "text"  # text, textarea, number, select, ...
    label: str = ""
    placeholder: str = ""
    required: bool = False
    default: Optional[str] = None

    @property
    def is_number(self) -> bool:
        return self.type == "number"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Optional["InputField"]:
        """Build from the stored JSON object; None when it has no usable name"""
        if not isinstance(data, dict):
            return None
        name = data.get("name")
        if not isinstance(name, str) or not name:
            return None
        default = data.get("default")
        return cls(
            name=name,
            type=str(data.get("type") or "text"),
            label=str(data.get("label") or ""),
            placeholder=str(data.get("placeholder") or ""),
            required=bool(data.get("required", False)),
            default=None if default in (None, "") else str(default),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "name": self.name,
            "type": self.type,
            "label": self.label,
            "placeholder": self.placeholder,
            "required": self.required,
        }
        if self.default is not None:
            data["default"] = self.default
        return data


def parse_inputs(raw: Any) -> List[InputField]:
    """
    Normalize a stored inputs value to InputField objects

    Accepts a list of dicts / InputField objects, a JSON string or None.
    Malformed entries are skipped rather than raising.
    """
    if raw is None:
        return []
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except ValueError:
            return []
    if not isinstance(raw, (list, tuple)):
        return []

    fields = []
    for item in raw:
        if isinstance(item, InputField):
            fields.append(item)
            continue
        field = InputField.from_dict(item)
        if field is not None:
            fields.append(field)
    return fields
