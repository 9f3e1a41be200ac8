# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Error taxonomy for member searches."""


class MemberSearchError(Exception):
    """Base class for every error raised by the search core."""


class InvalidPageRequest(MemberSearchError, ValueError):
    """Page request with a negative offset or a limit below one."""

    def __init__(self, offset: int, limit: int):
        self.offset = offset
        self.limit = limit
        problems = []
        if offset < 0:
            problems.append(f"offset must be >= 0 (got {offset})")
        if limit < 1:
            problems.append(f"limit must be >= 1 (got {limit})")
        super().__init__("; ".join(problems) or "invalid page request")


class QueryExecutionFailure(MemberSearchError):
    """A storage query failed. ``step`` names the query: 'content' or 'count'.

    The original exception is chained as ``__cause__``.
    """

    def __init__(self, step: str, cause: BaseException):
        self.step = step
        self.cause = cause
        super().__init__(f"{step} query failed: {cause}")
