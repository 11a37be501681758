"""FastAPI dependencies for paginated endpoints."""

import logging
from typing import Annotated, Any, Callable, Optional

from fastapi import Query

from .errors.problem_details import BadRequestError, InvalidCursorError
from .pager import Pager
from .pagination.options import PageOptions, ProcessedPageOptions


logger = logging.getLogger(__name__)

CursorDecoder = Callable[[str], Any]


def _decode(decode: CursorDecoder, key: str, token: Optional[str]) -> Any:
    if token is None:
        return None
    try:
        return decode(token)
    except (ValueError, TypeError, BadRequestError) as e:
        logger.debug(f"Failed to decode {key} cursor: {e}")
        raise InvalidCursorError(key) from e


def page_options_dependency(pager: Pager, decode: CursorDecoder):
    """Create a dependency that turns query parameters into page options.

    Cursor tokens travel as opaque strings; ``decode`` turns a token back into
    a cursor and should raise ``ValueError`` or ``BadRequestError`` for
    tokens it cannot read. Either is reported as an ``InvalidCursorError``.

    Args:
        pager: Pager whose policy and limits apply to the endpoint
        decode: Token to cursor decoder

    Returns:
        A dependency returning ProcessedPageOptions
    """
    async def _page_options(
        after: Annotated[Optional[str], Query(description="Return records after this cursor")] = None,
        before: Annotated[Optional[str], Query(description="Return records before this cursor")] = None,
        limit: Annotated[Optional[int], Query(description="Number of records per page")] = None
    ) -> ProcessedPageOptions:
        """Cast the pagination query parameters.

        Raises:
            BadRequestError: If both ``after`` and ``before`` are given
            InvalidCursorError: If a cursor cannot be decoded or is invalid
        """
        if after is not None and before is not None:
            raise BadRequestError("after and before cursors are mutually exclusive")

        options = PageOptions(
            after=_decode(decode, "after", after),
            before=_decode(decode, "before", before),
            limit=limit
        )
        return pager.cast(options)

    return _page_options
