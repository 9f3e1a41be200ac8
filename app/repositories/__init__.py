# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Repository package — re-exports MemberRepository and its storage port."""
from app.repositories.member_repository import MemberRepository
from app.repositories.store import MemberQueryStore

__all__ = ["MemberRepository", "MemberQueryStore"]
