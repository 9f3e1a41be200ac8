# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""FastAPI dependency injection wiring."""
from app.core.database import engine
from app.repositories.member_repository import MemberRepository
from app.services.member_search_service import MemberSearchService

_repo = MemberRepository(engine)
_service = MemberSearchService(_repo)


def get_member_repo() -> MemberRepository:
    return _repo


def get_member_search_service() -> MemberSearchService:
    return _service
