"""
Integration Tests for the Data Service Client

Exercises the REST dialect over httpx.MockTransport: query parameters,
headers, exact counts and error translation.
"""

import json

import httpx
import pytest

from campus_portal.api.data_service import DataServiceClient, build_params, parse_content_range
from campus_portal.core.errors import DataServiceError
from campus_portal.core.models.records import GrievanceStatus

BASE_URL = "http://data.test/rest/v1"


def make_client(handler, api_key="test-key") -> DataServiceClient:
    return DataServiceClient(BASE_URL, api_key=api_key, transport=httpx.MockTransport(handler))


class TestBuildParams:

    def test_filters_order_limit(self):
        params = build_params(
            [("status", "neq", "Resolved"), ("votes", "gte", 5)],
            order="created_at",
            ascending=False,
            limit=10,
        )

        assert params == [
            ("select", "*"),
            ("status", "neq.Resolved"),
            ("votes", "gte.5"),
            ("order", "created_at.desc"),
            ("limit", "10"),
        ]

    def test_value_formatting(self):
        params = build_params(
            [("is_flagged", "eq", True), ("status", "eq", GrievanceStatus.IN_PROGRESS)],
            columns=None,
        )
        assert params == [("is_flagged", "eq.true"), ("status", "eq.In Progress")]

    def test_unknown_operator(self):
        with pytest.raises(ValueError):
            build_params([("title", "like", "%fan%")])

    @pytest.mark.parametrize(
        "header,total",
        [("0-9/42", 42), ("*/0", 0), ("0-0/*", 0), (None, 0), ("", 0)],
    )
    def test_parse_content_range(self, header, total):
        assert parse_content_range(header) == total


class TestDataServiceClient:

    @pytest.mark.asyncio
    async def test_select(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["request"] = request
            return httpx.Response(200, json=[{"id": 1, "title": "Broken fan"}])

        client = make_client(handler)
        rows = await client.select("grievances", [("status", "eq", "Submitted")], order="created_at", ascending=False)

        request = seen["request"]
        assert rows == [{"id": 1, "title": "Broken fan"}]
        assert request.method == "GET"
        assert request.url.path == "/rest/v1/grievances"
        assert request.url.params.get("status") == "eq.Submitted"
        assert request.url.params.get("order") == "created_at.desc"
        assert request.headers["apikey"] == "test-key"
        assert request.headers["Authorization"] == "Bearer test-key"

    @pytest.mark.asyncio
    async def test_no_key_no_auth_headers(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["request"] = request
            return httpx.Response(200, json=[])

        await make_client(handler, api_key="").select("profiles")

        assert "apikey" not in seen["request"].headers
        assert "Authorization" not in seen["request"].headers

    @pytest.mark.asyncio
    async def test_select_one(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["limit"] = request.url.params.get("limit")
            return httpx.Response(200, json=[])

        row = await make_client(handler).select_one("profiles", [("role", "eq", "Admin")])

        assert row is None
        assert seen["limit"] == "1"

    @pytest.mark.asyncio
    async def test_count(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["request"] = request
            return httpx.Response(200, headers={"Content-Range": "0-11/12"})

        total = await make_client(handler).count("profiles", [("role", "eq", "Student")])

        assert total == 12
        assert seen["request"].method == "HEAD"
        assert seen["request"].headers["Prefer"] == "count=exact"

    @pytest.mark.asyncio
    async def test_insert(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["request"] = request
            body = json.loads(request.content)
            return httpx.Response(201, json=[{"id": 5, **body[0]}])

        created = await make_client(handler).insert("posts", [{"title": "Hello"}])

        assert created == [{"id": 5, "title": "Hello"}]
        assert seen["request"].method == "POST"
        assert seen["request"].headers["Prefer"] == "return=representation"

    @pytest.mark.asyncio
    async def test_update(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["request"] = request
            return httpx.Response(200, json=[{"id": 3, "status": "Resolved"}])

        rows = await make_client(handler).update("grievances", {"status": "Resolved"}, [("id", "eq", "3")])

        request = seen["request"]
        assert rows == [{"id": 3, "status": "Resolved"}]
        assert request.method == "PATCH"
        assert request.url.params.get("id") == "eq.3"
        assert "select" not in request.url.params
        assert json.loads(request.content) == {"status": "Resolved"}

    @pytest.mark.asyncio
    async def test_update_requires_filters(self):
        client = make_client(lambda request: httpx.Response(200, json=[]))
        with pytest.raises(ValueError):
            await client.update("grievances", {"status": "Resolved"}, [])

    @pytest.mark.asyncio
    async def test_delete(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["request"] = request
            return httpx.Response(204)

        await make_client(handler).delete("posts", [("id", "eq", "9")])

        assert seen["request"].method == "DELETE"
        assert seen["request"].url.params.get("id") == "eq.9"

    @pytest.mark.asyncio
    async def test_delete_requires_filters(self):
        client = make_client(lambda request: httpx.Response(204))
        with pytest.raises(ValueError):
            await client.delete("posts", [])

    @pytest.mark.asyncio
    async def test_error_status(self):
        client = make_client(lambda request: httpx.Response(400, text="invalid input syntax"))

        with pytest.raises(DataServiceError) as exc_info:
            await client.select("grievances")

        assert exc_info.value.status_code == 400
        assert exc_info.value.body == "invalid input syntax"

    @pytest.mark.asyncio
    async def test_unreachable(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(DataServiceError) as exc_info:
            await make_client(handler).select("grievances")

        assert exc_info.value.status_code is None
        assert "unreachable" in str(exc_info.value)
