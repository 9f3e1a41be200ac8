# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Translate a sparse FilterCondition into the WHERE conditions to apply."""
from typing import List, Optional

from sqlalchemy.sql.elements import ColumnElement

from app.models.domain import FilterCondition
from app.models.tables import Member, Team


def has_text(value: Optional[str]) -> bool:
    return value is not None and value.strip() != ""


def build_predicates(condition: FilterCondition) -> List[ColumnElement[bool]]:
    """Return only the active predicates; the caller ANDs them together.

    Blank strings count as absent. Age bounds apply whenever set, zero included.
    No placeholder clause is produced for an absent field, so an empty
    condition yields an empty list and an unrestricted scan.
    """
    conditions: List[ColumnElement[bool]] = []
    if has_text(condition.username):
        conditions.append(Member.username == condition.username)
    if has_text(condition.team_name):
        conditions.append(Team.name == condition.team_name)
    if condition.age_min is not None:
        conditions.append(Member.age >= condition.age_min)
    if condition.age_max is not None:
        conditions.append(Member.age <= condition.age_max)
    return conditions
