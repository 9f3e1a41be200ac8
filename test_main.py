"""
Member Search Service — HTTP Tests
===================================
Run:  pytest test_main.py -v --cov=main --cov=app --cov-report=term-missing
"""
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from app.core.config import settings
from app.core.dependencies import get_member_search_service
from app.core.exceptions import InvalidPageRequest
from app.services.member_search_service import MemberSearchService
from main import app

client = TestClient(app)


@pytest.fixture(autouse=True)
def clear_overrides():
    yield
    app.dependency_overrides.clear()


def _failing_service(**side_effects):
    store = MagicMock()
    for method, exc in side_effects.items():
        getattr(store, method).side_effect = exc
    return MemberSearchService(store)


# ═══════════════════════════════════════════════════════════════════════════
# HEALTH & METRICS
# ═══════════════════════════════════════════════════════════════════════════
class TestHealth:
    def test_health_ok(self):
        r = client.get("/health")
        assert r.status_code == 200
        assert r.json() == {
            "status": "ok", "service": settings.SERVICE_NAME, "version": settings.SERVICE_VERSION,
        }

    def test_readiness_ok(self, db):
        r = client.get("/health/ready")
        assert r.status_code == 200
        assert r.json()["database"] == "connected"

    def test_readiness_fails_when_db_down(self):
        repo = MagicMock()
        repo.verify_connection.side_effect = Exception("boom")
        with patch("app.controllers.system_controller.get_member_repo", return_value=repo):
            r = client.get("/health/ready")
        assert r.status_code == 503

    def test_metrics_endpoint(self):
        r = client.get("/metrics")
        assert r.status_code == 200
        assert "member_searches_total" in r.text

    def test_request_id_propagated(self):
        r = client.get("/health", headers={"X-Request-ID": "my-req-42"})
        assert r.headers["X-Request-ID"] == "my-req-42"

    def test_request_id_generated(self):
        assert client.get("/health").headers["X-Request-ID"]


# ═══════════════════════════════════════════════════════════════════════════
# GET /api/v1/members  — FILTER + PAGINATION
# ═══════════════════════════════════════════════════════════════════════════
class TestListMembers:
    def test_default_page(self, seeded):
        r = client.get("/api/v1/members")
        assert r.status_code == 200
        d = r.json()
        assert d["total"] == 4
        assert d["offset"] == 0
        assert d["limit"] == settings.DEFAULT_PAGE_SIZE
        assert [m["username"] for m in d["content"]] == ["alice", "bob", "carl", "dana"]
        assert d["has_next"] is False
        assert d["total_pages"] == 1

    def test_first_page_of_two(self, seeded):
        d = client.get("/api/v1/members", params={"offset": 0, "limit": 2}).json()
        assert [m["username"] for m in d["content"]] == ["alice", "bob"]
        assert d["total"] == 4
        assert d["has_next"] is True
        assert d["total_pages"] == 2

    def test_last_partial_page(self, seeded):
        d = client.get("/api/v1/members", params={"offset": 3, "limit": 2}).json()
        assert [m["username"] for m in d["content"]] == ["dana"]
        assert d["total"] == 4

    def test_offset_past_end(self, seeded):
        d = client.get("/api/v1/members", params={"offset": 10, "limit": 2}).json()
        assert d["content"] == []
        assert d["total"] == 4

    def test_with_filters(self, seeded):
        d = client.get("/api/v1/members", params={
            "team_name": "teamY", "age_min": 35, "age_max": 40,
        }).json()
        assert d["total"] == 1
        assert d["content"][0] == {
            "member_id": 4, "username": "dana", "age": 40, "team_id": 2, "team_name": "teamY",
        }

    def test_blank_username_ignored(self, seeded):
        d = client.get("/api/v1/members", params={"username": "   "}).json()
        assert d["total"] == 4

    @pytest.mark.parametrize("params", [
        {"limit": 0},
        {"offset": -1},
        {"limit": settings.MAX_PAGE_SIZE + 1},
        {"age_min": "old"},
    ])
    def test_invalid_params_422(self, params):
        assert client.get("/api/v1/members", params=params).status_code == 422

    def test_content_failure_503(self):
        cause = OperationalError("SELECT", {}, Exception("connection refused"))
        app.dependency_overrides[get_member_search_service] = \
            lambda: _failing_service(fetch_member_teams=cause)
        r = client.get("/api/v1/members")
        assert r.status_code == 503
        assert r.json()["error"] == "query_execution_failure"
        assert r.json()["detail"].startswith("content query failed")

    def test_count_failure_503(self):
        store = MagicMock()
        store.fetch_member_teams.return_value = []
        store.count_member_teams.side_effect = OperationalError("SELECT count", {}, Exception("timeout"))
        app.dependency_overrides[get_member_search_service] = lambda: MemberSearchService(store)
        r = client.get("/api/v1/members", params={"offset": 5})
        assert r.status_code == 503
        assert r.json()["detail"].startswith("count query failed")


# ═══════════════════════════════════════════════════════════════════════════
# GET /api/v1/members/search  — UNPAGED SEARCH
# ═══════════════════════════════════════════════════════════════════════════
class TestSearchMembers:
    def test_team_filter(self, seeded):
        r = client.get("/api/v1/members/search", params={"team_name": "teamX"})
        assert r.status_code == 200
        assert [m["username"] for m in r.json()] == ["alice", "bob"]

    def test_no_match(self, seeded):
        r = client.get("/api/v1/members/search", params={"age_min": 50})
        assert r.status_code == 200
        assert r.json() == []

    def test_teamless_member_has_null_team(self, seeded_with_teamless):
        r = client.get("/api/v1/members/search", params={"username": "erin"})
        assert r.json() == [{
            "member_id": 5, "username": "erin", "age": 25, "team_id": None, "team_name": None,
        }]


# ═══════════════════════════════════════════════════════════════════════════
# LOOKUPS
# ═══════════════════════════════════════════════════════════════════════════
class TestLookups:
    def test_get_member(self, seeded):
        r = client.get("/api/v1/members/1")
        assert r.status_code == 200
        assert r.json()["username"] == "alice"
        assert r.json()["team_name"] == "teamX"

    def test_get_member_not_found(self, seeded):
        assert client.get("/api/v1/members/999").status_code == 404

    def test_get_member_invalid_id(self):
        assert client.get("/api/v1/members/not-a-number").status_code == 422

    def test_find_by_username(self, seeded):
        r = client.get("/api/v1/members/by-username/bob")
        assert r.status_code == 200
        assert [m["member_id"] for m in r.json()] == [2]

    def test_find_by_username_none(self, seeded):
        assert client.get("/api/v1/members/by-username/zoe").json() == []


# ═══════════════════════════════════════════════════════════════════════════
# ERROR MAPPING
# ═══════════════════════════════════════════════════════════════════════════
class TestErrorMapping:
    def test_invalid_page_request_400(self):
        service = MagicMock()
        service.search_page.side_effect = InvalidPageRequest(0, 0)
        app.dependency_overrides[get_member_search_service] = lambda: service
        r = client.get("/api/v1/members")
        assert r.status_code == 400
        assert r.json()["error"] == "invalid_page_request"
        assert "limit must be >= 1" in r.json()["detail"]

    def test_query_failure_logged_once(self):
        app.dependency_overrides[get_member_search_service] = \
            lambda: _failing_service(fetch_member_teams=RuntimeError("down"))
        with patch("main.logger") as app_logger, \
                patch("app.services.member_search_service.logger") as service_logger:
            r = client.get("/api/v1/members/search")
        assert r.status_code == 503
        assert service_logger.error.call_count == 1
        app_logger.error.assert_not_called()
        app_logger.exception.assert_not_called()

    def test_error_schema_documented(self):
        spec = app.openapi()
        responses = spec["paths"]["/api/v1/members"]["get"]["responses"]
        for status in ("400", "500", "503"):
            ref = responses[status]["content"]["application/json"]["schema"]["$ref"]
            assert ref.endswith("/ErrorResponse")
