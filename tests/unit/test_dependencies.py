"""Tests for the FastAPI page options dependency."""

import json
from typing import Annotated

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from pager import Pager
from pager.dependencies import page_options_dependency
from pager.errors import BadRequestError, register_exception_handlers
from pager.pagination import LimitConfig, ProcessedPageOptions, fetch_size


@pytest.fixture
def client(id_policy) -> TestClient:
    """App with one paginated endpoint; cursors travel as JSON arrays."""
    pager = Pager(
        policy=id_policy,
        limits=LimitConfig(
            default_limit=5,
            max_limit=10,
            min_limit=1,
            overflow="saturate",
            underflow="saturate"
        )
    )
    page_options = page_options_dependency(pager, json.loads)

    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/items")
    async def list_items(options: Annotated[ProcessedPageOptions, Depends(page_options)]) -> dict:
        return {
            "limit": options.limit,
            "after": options.after,
            "before": options.before,
            "fetch_size": fetch_size(options)
        }

    return TestClient(app)


class TestPageOptionsDependency:
    """Test page_options_dependency."""

    def test_no_parameters(self, client):
        """Test defaults apply without query parameters."""
        response = client.get("/items")

        assert response.status_code == 200
        assert response.json() == {"limit": 5, "after": None, "before": None, "fetch_size": 6}

    def test_after_cursor(self, client):
        """Test an after cursor is decoded and the limit clamped."""
        response = client.get("/items", params={"after": "[3]", "limit": 50})

        assert response.status_code == 200
        assert response.json() == {"limit": 10, "after": [3], "before": None, "fetch_size": 12}

    def test_before_cursor(self, client):
        """Test a before cursor is decoded and sizes the fetch."""
        response = client.get("/items", params={"before": "[8]", "limit": 2})

        assert response.status_code == 200
        assert response.json()["before"] == [8]
        assert response.json()["fetch_size"] == 4

    def test_undecodable_cursor(self, client):
        """Test an undecodable token is an invalid cursor."""
        response = client.get("/items", params={"after": "not-json"})

        assert response.status_code == 400
        assert response.headers["content-type"] == "application/problem+json"
        assert response.json()["cursor_key"] == "after"
        assert response.json()["detail"] == "Invalid after cursor"

    def test_cursor_failing_policy(self, client):
        """Test a decoded cursor refused by the policy is an invalid cursor."""
        response = client.get("/items", params={"before": '["x"]'})

        assert response.status_code == 400
        assert response.json()["cursor_key"] == "before"

    def test_both_cursors(self, client):
        """Test giving both cursors is a bad request."""
        response = client.get("/items", params={"after": "[1]", "before": "[2]"})

        assert response.status_code == 400
        assert "mutually exclusive" in response.json()["detail"]

    def test_non_integer_limit(self, client):
        """Test a non-integer limit fails request validation."""
        response = client.get("/items", params={"limit": "many"})

        assert response.status_code == 422
        assert response.json()["title"] == "Validation Error"

    def test_decoder_raising_bad_request(self, id_policy):
        """Test a decoder raising BadRequestError is reported as an invalid cursor."""
        def decode(token):
            raise BadRequestError(f"Invalid cursor format: {token}")

        app = FastAPI()
        register_exception_handlers(app)
        page_options = page_options_dependency(Pager(policy=id_policy), decode)

        @app.get("/items")
        async def list_items(options: Annotated[ProcessedPageOptions, Depends(page_options)]) -> dict:
            return {"limit": options.limit}

        response = TestClient(app).get("/items", params={"before": "abc"})

        assert response.status_code == 400
        assert response.json()["cursor_key"] == "before"
        assert response.json()["detail"] == "Invalid before cursor"
