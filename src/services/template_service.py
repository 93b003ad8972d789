"""
Template queries and updates
All statements are parameterized; the caller owns the session.
"""
from datetime import datetime, timezone
from typing import Any, Iterable, List, Optional

from sqlalchemy import select, and_
from sqlalchemy.orm import Session
from loguru import logger

from src.models.template import Template, InputField


def get_template(session: Session, template_id: int) -> Optional[Template]:
    return session.get(Template, template_id)


def find_templates_by_name(session: Session, name: str) -> List[Template]:
    """Templates with exactly this name, newest id first"""
    query = select(Template).where(Template.name == name).order_by(Template.id.desc())
    return list(session.execute(query).scalars().all())


def search_templates(session: Session, *terms: str, limit: Optional[int] = None) -> List[Template]:
    """Templates whose name contains every term (case-insensitive)"""
    conditions = [Template.name.ilike(f"%{term}%") for term in terms]
    query = select(Template).order_by(Template.id.desc())
    if conditions:
        query = query.where(and_(*conditions))
    if limit:
        query = query.limit(limit)
    return list(session.execute(query).scalars().all())


def find_templates_by_category(session: Session, category: str) -> List[Template]:
    """Templates in a category ordered by subcategory, name, id desc"""
    query = (
        select(Template)
        .where(Template.category == category)
        .order_by(Template.subcategory, Template.name, Template.id.desc())
    )
    return list(session.execute(query).scalars().all())


def find_templates_by_ids(session: Session, ids: Iterable[int]) -> List[Template]:
    ids = list(ids)
    if not ids:
        return []
    query = select(Template).where(Template.id.in_(ids)).order_by(Template.id)
    return list(session.execute(query).scalars().all())


def _serialize_inputs(inputs: Iterable[Any]) -> List[dict]:
    return [inp.to_dict() if isinstance(inp, InputField) else dict(inp) for inp in inputs]


def update_template(
    session: Session,
    template_id: int,
    prompt_template: Optional[str] = None,
    inputs: Optional[Iterable[Any]] = None,
) -> Optional[Template]:
    """
    Overwrite the prompt text and/or input list of an existing template

    Args:
        session: open session (committed by the caller's context)
        template_id: row to update
        prompt_template: new prompt text, unchanged when None
        inputs: new input fields (dicts or InputField), unchanged when None

    Returns:
        the updated Template, or None when the id does not exist
    """
    template = session.get(Template, template_id)
    if template is None:
        logger.warning(f"Template ID {template_id} not found")
        return None

    if prompt_template is not None:
        template.prompt_template = prompt_template
    if inputs is not None:
        template.inputs = _serialize_inputs(inputs)
    template.updated_at = datetime.now(timezone.utc)

    session.flush()
    return template
