"""Tests for error handling and Problem Details implementation."""

import json

import pytest
from fastapi import Request
from unittest.mock import Mock

from pager.errors.problem_details import (
    ProblemDetail,
    ProblemDetailException,
    BadRequestError,
    InvalidCursorError,
    create_problem_response
)


@pytest.fixture
def mock_request():
    """Create mock request."""
    request = Mock(spec=Request)
    request.url.path = "/items"
    return request


class TestProblemDetail:
    """Test ProblemDetail model."""

    def test_problem_detail_defaults(self):
        """Test ProblemDetail with default values."""
        problem = ProblemDetail(title="Test Error", status=400)

        assert problem.type == "about:blank"
        assert problem.detail is None
        assert problem.instance is None

    def test_problem_detail_extra_fields(self):
        """Test ProblemDetail allows extension fields."""
        problem = ProblemDetail(title="Test Error", status=400, cursor_key="after")
        assert problem.cursor_key == "after"


class TestProblemDetailException:
    """Test ProblemDetailException base class."""

    def test_message_falls_back_to_title(self):
        """Test the exception message falls back to the title."""
        exc = ProblemDetailException(status=409, title="Conflict")
        assert str(exc) == "Conflict"

    def test_instance_from_request(self, mock_request):
        """Test the instance defaults to the request path."""
        exc = BadRequestError("bad")
        problem = exc.to_problem_detail(mock_request)

        assert problem.instance == "/items"
        assert problem.status == 400
        assert problem.title == "Bad Request"

    def test_to_response(self):
        """Test the response carries problem JSON and extensions."""
        exc = BadRequestError("bad", error_code="E1")
        response = exc.to_response()
        body = json.loads(response.body)

        assert response.status_code == 400
        assert response.headers["Content-Type"] == "application/problem+json"
        assert body["detail"] == "bad"
        assert body["error_code"] == "E1"
        assert "instance" not in body


class TestInvalidCursorError:
    """Test InvalidCursorError."""

    @pytest.mark.parametrize("key", ["after", "before"])
    def test_names_the_cursor(self, key):
        """Test the error names the offending cursor."""
        exc = InvalidCursorError(key)

        assert exc.key == key
        assert exc.status == 400
        assert exc.detail == f"Invalid {key} cursor"
        assert str(exc) == f"Invalid {key} cursor"
        assert exc.extensions == {"cursor_key": key}

    def test_response_body(self, mock_request):
        """Test the full problem body of an invalid cursor."""
        response = InvalidCursorError("before").to_response(mock_request)
        body = json.loads(response.body)

        assert response.status_code == 400
        assert body == {
            "type": "about:blank",
            "title": "Bad Request",
            "status": 400,
            "detail": "Invalid before cursor",
            "instance": "/items",
            "cursor_key": "before"
        }


class TestCreateProblemResponse:
    """Test create_problem_response."""

    def test_with_extensions(self, mock_request):
        """Test extensions are included in the problem body."""
        response = create_problem_response(
            status=422,
            title="Validation Error",
            detail="limit: bad",
            request=mock_request,
            validation_errors=[{"loc": ["query", "limit"]}]
        )
        body = json.loads(response.body)

        assert response.status_code == 422
        assert body["instance"] == "/items"
        assert body["validation_errors"] == [{"loc": ["query", "limit"]}]
