"""Assemble a page from an over-fetched, ordered list of records.

The caller fetches ``fetch_size(options)`` records. With a cursor, the fetch
may or may not have re-included the pivot record (the record the cursor
points at), depending on whether the query bounded it with ``>=``/``<=`` or
``>``/``<``. The assembler tells the two apart by checking whether the
boundary record's cursor equals the requested one.
"""

import logging
from typing import Any, Optional, Sequence

from .cursor import CursorPolicy
from .options import Direction, ProcessedPageOptions, fetch_size
from .page import Page, PageInfo


logger = logging.getLogger(__name__)


def assemble_page(
    edges: Sequence[Any],
    total_count: int,
    options: ProcessedPageOptions,
    policy: CursorPolicy
) -> Page:
    """Build a page from fetched records.

    Args:
        edges: Records in query order, never reversed, even for ``before``
        total_count: Size of the whole result set, counted by the caller
        options: Options returned by ``cast`` or ``cast_limit``
        policy: Cursor policy used to recognise the pivot record

    Returns:
        The trimmed page with its PageInfo

    Raises:
        ValueError: If more records were passed than ``fetch_size`` allows,
            or ``total_count`` is negative
    """
    edges = list(edges)
    if total_count < 0:
        raise ValueError(f"total_count must be non-negative, got {total_count}")
    if len(edges) > fetch_size(options):
        raise ValueError(
            f"Received {len(edges)} records, more than the fetch size of {fetch_size(options)}"
        )

    if not edges:
        return Page.empty(total_count)

    limit = options.limit
    direction = options.direction

    if direction is Direction.AFTER:
        if policy.generate(edges[0]) == options.after:
            logger.debug("After cursor pivot found at head of fetch, dropping it")
            return _page_after(True, edges[1:], total_count, limit, policy)
        return _page_after(None, edges[:limit + 1], total_count, limit, policy)

    if direction is Direction.BEFORE:
        if policy.generate(edges[-1]) == options.before:
            logger.debug("Before cursor pivot found at tail of fetch, dropping it")
            return _page_before(True, edges[:-1], total_count, limit, policy)
        return _page_before(None, edges[-(limit - 1):], total_count, limit, policy)

    return _page_after(False, edges, total_count, limit, policy)


def _page_after(
    has_previous: Optional[bool],
    edges: list,
    total_count: int,
    limit: int,
    policy: CursorPolicy
) -> Page:
    if len(edges) > limit:
        return _page(has_previous, True, edges[:limit], total_count, policy)
    return _page(has_previous, False, edges, total_count, policy)


def _page_before(
    has_next: Optional[bool],
    edges: list,
    total_count: int,
    limit: int,
    policy: CursorPolicy
) -> Page:
    if len(edges) > limit:
        return _page(True, has_next, edges[-limit:], total_count, policy)
    return _page(False, has_next, edges, total_count, policy)


def _page(
    has_previous: Optional[bool],
    has_next: Optional[bool],
    edges: list,
    total_count: int,
    policy: CursorPolicy
) -> Page:
    if not edges:
        return Page.empty(total_count)

    page_info = PageInfo(
        start_cursor=policy.generate(edges[0]),
        end_cursor=policy.generate(edges[-1]),
        has_previous_page=has_previous,
        has_next_page=has_next
    )
    return Page(page_info=page_info, total_count=total_count, edges=edges)
