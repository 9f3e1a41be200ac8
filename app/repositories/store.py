# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Storage port consumed by the search service."""
from typing import List, Optional, Protocol, Sequence

from sqlalchemy.sql.elements import ColumnElement

from app.models.domain import MemberTeamRow


class MemberQueryStore(Protocol):
    """Runs member-left-join-team queries under a conjunction of conditions.

    An empty ``conditions`` sequence means no WHERE clause at all.
    """

    def fetch_member_teams(self, conditions: Sequence[ColumnElement[bool]],
                           offset: Optional[int] = None,
                           limit: Optional[int] = None) -> List[MemberTeamRow]:
        ...

    def count_member_teams(self, conditions: Sequence[ColumnElement[bool]]) -> int:
        ...

    def get_member(self, member_id: int) -> Optional[MemberTeamRow]:
        ...

    def find_by_username(self, username: str) -> List[MemberTeamRow]:
        ...
