# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models — pure data structures, NO FastAPI dependency.
"""

import math
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class FilterCondition(BaseModel):
    """Sparse search criteria. Every field is optional; all-empty matches everything."""
    model_config = ConfigDict(frozen=True)

    username: Optional[str] = None
    team_name: Optional[str] = None
    age_min: Optional[int] = None
    age_max: Optional[int] = None


class PageRequest(BaseModel):
    """Offset/limit window. Bounds are checked by the search service."""
    model_config = ConfigDict(frozen=True)

    offset: int = 0
    limit: int = 20


class MemberTeamRow(BaseModel):
    """One member joined with its (optional) team."""
    model_config = ConfigDict(frozen=True)

    member_id: int
    username: str
    age: int
    team_id: Optional[int] = None
    team_name: Optional[str] = None


class PageResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    content: List[MemberTeamRow]
    total_count: int
    page_offset: int
    page_limit: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_limit) if self.page_limit else 0

    @property
    def has_next(self) -> bool:
        return self.page_offset + len(self.content) < self.total_count

    @property
    def is_first(self) -> bool:
        return self.page_offset == 0

    @property
    def is_last(self) -> bool:
        return not self.has_next
