"""Pagination module for cursor-based pagination."""

from .cursor import (
    Cursor,
    CursorPolicy,
    generate_cursor,
    validate_cursor
)
from .limits import BoundaryMode, LimitConfig, resolve_limit
from .options import (
    Direction,
    PageOptions,
    ProcessedPageOptions,
    cast,
    cast_limit,
    fetch_size
)
from .page import Page, PageInfo
from .assembler import assemble_page

__all__ = [
    "Cursor",
    "CursorPolicy",
    "generate_cursor",
    "validate_cursor",
    "BoundaryMode",
    "LimitConfig",
    "resolve_limit",
    "Direction",
    "PageOptions",
    "ProcessedPageOptions",
    "cast",
    "cast_limit",
    "fetch_size",
    "Page",
    "PageInfo",
    "assemble_page"
]
