# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Member search: dynamic filters, paging, and total-count resolution."""
from typing import Callable, List, Optional, TypeVar

from app.core.exceptions import InvalidPageRequest, QueryExecutionFailure
from app.core.logging import get_logger
from app.metrics import SEARCH_FAILURES, SEARCH_LATENCY, SEARCHES_TOTAL, TOTAL_COUNT_RESOLUTIONS
from app.models.domain import FilterCondition, MemberTeamRow, PageRequest, PageResult
from app.repositories.store import MemberQueryStore
from app.services.predicates import build_predicates

logger = get_logger(__name__)

T = TypeVar("T")

CONTENT_STEP = "content"
COUNT_STEP = "count"


class MemberSearchService:
    def __init__(self, store: MemberQueryStore):
        self._store = store

    def search(self, condition: FilterCondition) -> List[MemberTeamRow]:
        """All matching rows, ordered by member id. No paging, no count."""
        SEARCHES_TOTAL.labels(operation="search").inc()
        conditions = build_predicates(condition)
        with SEARCH_LATENCY.labels(operation="search").time():
            rows = self._run(CONTENT_STEP, lambda: self._store.fetch_member_teams(conditions))
        logger.debug("search filters=%d rows=%d", len(conditions), len(rows))
        return rows

    def search_page(self, condition: FilterCondition, page: PageRequest) -> PageResult:
        """One page of matches plus the total number of matches.

        The count query is skipped when the first page comes back short,
        because then the page itself holds every match.
        """
        if page.offset < 0 or page.limit < 1:
            raise InvalidPageRequest(page.offset, page.limit)

        SEARCHES_TOTAL.labels(operation="search_page").inc()
        conditions = build_predicates(condition)
        with SEARCH_LATENCY.labels(operation="search_page").time():
            content = self._run(
                CONTENT_STEP,
                lambda: self._store.fetch_member_teams(
                    conditions, offset=page.offset, limit=page.limit
                ),
            )
            total = self._total_from_content(page, content)
            if total is None:
                TOTAL_COUNT_RESOLUTIONS.labels(strategy="count_query").inc()
                logger.debug("total strategy=count_query offset=%d limit=%d rows=%d",
                             page.offset, page.limit, len(content))
                total = self._run(COUNT_STEP, lambda: self._store.count_member_teams(conditions))
            else:
                TOTAL_COUNT_RESOLUTIONS.labels(strategy="content_size").inc()
                logger.debug("total strategy=content_size total=%d", total)

        logger.debug("search_page filters=%d offset=%d limit=%d rows=%d total=%d",
                     len(conditions), page.offset, page.limit, len(content), total)
        return PageResult(
            content=content,
            total_count=total,
            page_offset=page.offset,
            page_limit=page.limit,
        )

    def get_member(self, member_id: int) -> Optional[MemberTeamRow]:
        return self._run(CONTENT_STEP, lambda: self._store.get_member(member_id))

    def find_by_username(self, username: str) -> List[MemberTeamRow]:
        return self._run(CONTENT_STEP, lambda: self._store.find_by_username(username))

    # ── Private ────────────────────────────────────────────────────────

    @staticmethod
    def _total_from_content(page: PageRequest, content: List[MemberTeamRow]) -> Optional[int]:
        if page.offset == 0 and len(content) < page.limit:
            return page.offset + len(content)
        return None

    @staticmethod
    def _run(step: str, query: Callable[[], T]) -> T:
        try:
            return query()
        except Exception as exc:
            SEARCH_FAILURES.labels(step=step).inc()
            logger.error("%s query failed: %s", step, exc, exc_info=True)
            raise QueryExecutionFailure(step, exc) from exc
