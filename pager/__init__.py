"""Cursor-based pagination over ordered result sets."""

from .config import Settings, get_settings, configure_logging
from .errors import InvalidCursorError
from .pager import Pager
from .pagination import (
    Cursor,
    CursorPolicy,
    generate_cursor,
    validate_cursor,
    BoundaryMode,
    LimitConfig,
    resolve_limit,
    Direction,
    PageOptions,
    ProcessedPageOptions,
    cast,
    cast_limit,
    fetch_size,
    Page,
    PageInfo,
    assemble_page
)

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "InvalidCursorError",
    "Pager",
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
