# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Pydantic request/response schemas."""
from typing import List, Optional
from pydantic import BaseModel, Field


class MemberTeamOut(BaseModel):
    member_id: int
    username: str
    age: int
    team_id: Optional[int] = None
    team_name: Optional[str] = None


class PaginatedMembers(BaseModel):
    content: List[MemberTeamOut]
    total: int = Field(..., ge=0)
    offset: int
    limit: int
    total_pages: int
    has_next: bool


class ErrorResponse(BaseModel):
    error: str
    detail: Optional[str] = None
