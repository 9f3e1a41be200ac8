# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Prometheus metrics for the member-search service."""
from prometheus_client import Counter, Histogram

SEARCHES_TOTAL = Counter(
    "member_searches_total", "Total member searches", ["operation"]
)
TOTAL_COUNT_RESOLUTIONS = Counter(
    "member_search_total_count_resolutions_total",
    "How page totals were resolved",
    ["strategy"],
)
SEARCH_FAILURES = Counter(
    "member_search_failures_total", "Failed storage queries", ["step"]
)
SEARCH_LATENCY = Histogram(
    "member_search_duration_seconds",
    "Member search latency (seconds)",
    ["operation"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5],
)
REQUEST_COUNT = Counter(
    "http_requests_total", "Total HTTP requests", ["method", "endpoint", "status"]
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds", "HTTP request latency", ["method", "endpoint"]
)
HTTP_ERRORS = Counter(
    "http_errors_total", "Total HTTP errors", ["method", "endpoint", "status"]
)
