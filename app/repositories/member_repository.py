# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Data-access layer for members joined with their teams."""
from typing import List, Optional, Sequence

from sqlalchemy import func, select, text
from sqlalchemy.engine import Engine
from sqlalchemy.sql import Select
from sqlalchemy.sql.elements import ColumnElement

from app.core.logging import get_logger
from app.models.domain import MemberTeamRow
from app.models.tables import Member, Team

logger = get_logger(__name__)

MEMBER_TEAM_COLS = (
    Member.member_id,
    Member.username,
    Member.age,
    Team.team_id,
    Team.name,
)


def _row_to_member_team(row) -> MemberTeamRow:
    return MemberTeamRow(
        member_id=row[0],
        username=row[1],
        age=row[2],
        team_id=row[3],
        team_name=row[4],
    )


def _joined(stmt: Select, conditions: Sequence[ColumnElement[bool]]) -> Select:
    stmt = stmt.select_from(Member).outerjoin(Team, Member.team_id == Team.team_id)
    if conditions:
        stmt = stmt.where(*conditions)
    return stmt


class MemberRepository:
    def __init__(self, engine: Engine):
        self._engine = engine

    # ── Search ─────────────────────────────────────────────────────────

    def fetch_member_teams(self, conditions: Sequence[ColumnElement[bool]],
                           offset: Optional[int] = None,
                           limit: Optional[int] = None) -> List[MemberTeamRow]:
        stmt = _joined(select(*MEMBER_TEAM_COLS), conditions).order_by(Member.member_id)
        if offset:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).fetchall()
        return [_row_to_member_team(r) for r in rows]

    def count_member_teams(self, conditions: Sequence[ColumnElement[bool]]) -> int:
        stmt = _joined(select(func.count(Member.member_id)), conditions)
        with self._engine.connect() as conn:
            return conn.execute(stmt).scalar() or 0

    # ── Lookups ────────────────────────────────────────────────────────

    def get_member(self, member_id: int) -> Optional[MemberTeamRow]:
        rows = self.fetch_member_teams([Member.member_id == member_id], limit=1)
        return rows[0] if rows else None

    def find_by_username(self, username: str) -> List[MemberTeamRow]:
        return self.fetch_member_teams([Member.username == username])

    # ── Health ─────────────────────────────────────────────────────────

    def verify_connection(self):
        with self._engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def dispose(self):
        self._engine.dispose()
