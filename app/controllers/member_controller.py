# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: member search, paged listing, and lookups."""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.core.config import settings
from app.models.domain import FilterCondition, PageRequest
from app.schemas import MemberTeamOut, PaginatedMembers
from app.services.member_search_service import MemberSearchService
from app.core.dependencies import get_member_search_service

router = APIRouter(prefix="/api/v1", tags=["Members"])


def filter_condition(
    username: Optional[str] = None,
    team_name: Optional[str] = None,
    age_min: Optional[int] = None,
    age_max: Optional[int] = None,
) -> FilterCondition:
    return FilterCondition(
        username=username, team_name=team_name, age_min=age_min, age_max=age_max,
    )


@router.get("/members", response_model=PaginatedMembers)
def list_members(
    condition: FilterCondition = Depends(filter_condition),
    offset: int = Query(default=0, ge=0),
    limit: int = Query(default=settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    service: MemberSearchService = Depends(get_member_search_service),
):
    page = service.search_page(condition, PageRequest(offset=offset, limit=limit))
    return PaginatedMembers(
        content=[MemberTeamOut(**row.model_dump()) for row in page.content],
        total=page.total_count, offset=page.page_offset, limit=page.page_limit,
        total_pages=page.total_pages, has_next=page.has_next,
    )


@router.get("/members/search", response_model=List[MemberTeamOut])
def search_members(
    condition: FilterCondition = Depends(filter_condition),
    service: MemberSearchService = Depends(get_member_search_service),
):
    return [MemberTeamOut(**row.model_dump()) for row in service.search(condition)]


@router.get("/members/by-username/{username}", response_model=List[MemberTeamOut])
def find_members_by_username(username: str,
                             service: MemberSearchService = Depends(get_member_search_service)):
    return [MemberTeamOut(**row.model_dump()) for row in service.find_by_username(username)]


@router.get("/members/{member_id}", response_model=MemberTeamOut)
def get_member(member_id: int,
               service: MemberSearchService = Depends(get_member_search_service)):
    row = service.get_member(member_id)
    if not row:
        raise HTTPException(status_code=404, detail="Member not found")
    return MemberTeamOut(**row.model_dump())
