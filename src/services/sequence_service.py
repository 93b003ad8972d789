"""
Identifier sequence repair
Brings a PostgreSQL sequence back in line with MAX(id) of its table.
"""
import re
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import text
from sqlalchemy.orm import Session
from loguru import logger

IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@dataclass
class SequenceStatus:
    table: str
    sequence: str
    max_id: int
    last_value: int
    is_called: bool

    @property
    def next_value(self) -> int:
        """Value the next nextval() call will return"""
        return self.last_value + 1 if self.is_called else self.last_value


@dataclass
class SequenceRepair:
    before: SequenceStatus
    target: Optional[int]
    after: Optional[SequenceStatus] = None

    @property
    def repaired(self) -> bool:
        return self.target is not None


def plan_sequence_repair(max_id: int, last_value: int, is_called: bool = True) -> Optional[int]:
    """
    Next value the sequence must hand out, or None when it is already ahead

    >>> plan_sequence_repair(42, 40)
    43
    >>> plan_sequence_repair(10, 40) is None
    True
    """
    max_id = max_id or 0
    next_value = last_value + 1 if is_called else last_value
    if next_value <= max_id:
        return max_id + 1
    return None


def _check_identifier(name: str) -> str:
    if not IDENTIFIER_PATTERN.match(name or ""):
        raise ValueError(f"Invalid SQL identifier: {name!r}")
    return name


def get_sequence_status(session: Session, table: str, sequence: str) -> SequenceStatus:
    """Read last_value/is_called of the sequence and MAX(id) of the table"""
    table = _check_identifier(table)
    sequence = _check_identifier(sequence)

    seq_row = session.execute(text(f"SELECT last_value, is_called FROM {sequence}")).one()
    max_id = session.execute(text(f"SELECT COALESCE(MAX(id), 0) AS max_id FROM {table}")).scalar()

    return SequenceStatus(
        table=table,
        sequence=sequence,
        max_id=int(max_id or 0),
        last_value=int(seq_row.last_value),
        is_called=bool(seq_row.is_called),
    )


def repair_sequence(session: Session, table: str, sequence: str) -> SequenceRepair:
    """
    Reset the sequence to MAX(id) + 1 when it lags behind the data

    Returns:
        SequenceRepair with the status before and (if changed) after
    """
    before = get_sequence_status(session, table, sequence)
    logger.info(f"{before.sequence}: last_value={before.last_value} (is_called={before.is_called})")
    logger.info(f"MAX(id) in {before.table}: {before.max_id}")

    target = plan_sequence_repair(before.max_id, before.last_value, before.is_called)
    if target is None:
        logger.info(f"Sequence already in sync, next id will be {before.next_value}")
        return SequenceRepair(before=before, target=None)

    logger.warning(f"Sequence out of sync: next id would be {before.next_value}, should be {target}")
    session.execute(
        text("SELECT setval(CAST(:sequence AS regclass), :value, false)"),
        {"sequence": before.sequence, "value": target},
    )
    after = get_sequence_status(session, table, sequence)
    logger.success(f"Sequence reset, next id will be {after.next_value}")
    return SequenceRepair(before=before, target=target, after=after)
