"""Pytest configuration and shared fixtures for the pager tests."""

import logging
from typing import Any, Dict, List

import pytest

from pager.config import Settings
from pager.pagination import CursorPolicy


# Keep debug output from the pagination modules out of test runs
logging.getLogger("pager").setLevel(logging.WARNING)


def make_rows(*ids: int) -> List[Dict[str, Any]]:
    """Build records ordered by ``id``."""
    return [{"id": i, "name": f"record-{i}"} for i in ids]


@pytest.fixture
def test_settings() -> Settings:
    """Settings pinned to the library defaults, regardless of environment."""
    return Settings(
        default_limit=25,
        max_limit=100,
        min_limit=1,
        overflow="saturate",
        underflow="saturate",
        log_level="ERROR"
    )


@pytest.fixture
def id_policy() -> CursorPolicy:
    """Cursor policy for records ordered by an integer ``id``."""
    return CursorPolicy.from_keys(["id"], [lambda v: isinstance(v, int)])


@pytest.fixture
def rows():
    """Factory for ordered records."""
    return make_rows
