"""Page and PageInfo value types."""

from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field


EdgeT = TypeVar("EdgeT")


class PageInfo(BaseModel):
    """Where a page sits relative to the whole result set.

    ``has_previous_page`` and ``has_next_page`` are ``None`` when the fetched
    rows cannot tell either way.
    """

    start_cursor: Optional[Any] = Field(default=None, description="Cursor of the first edge")
    end_cursor: Optional[Any] = Field(default=None, description="Cursor of the last edge")
    has_previous_page: Optional[bool] = Field(default=False, description="Whether records precede this page")
    has_next_page: Optional[bool] = Field(default=False, description="Whether records follow this page")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def empty(cls) -> "PageInfo":
        """PageInfo of a page without edges."""
        return cls(start_cursor=None, end_cursor=None, has_previous_page=False, has_next_page=False)


class Page(BaseModel, Generic[EdgeT]):
    """A page of results with its total count and pagination info."""

    page_info: PageInfo = Field(description="Pagination information")
    total_count: int = Field(ge=0, description="Number of records in the whole result set")
    edges: List[EdgeT] = Field(default_factory=list, description="Records on this page, in query order")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def empty(cls, total_count: int) -> "Page[EdgeT]":
        return cls(page_info=PageInfo.empty(), total_count=total_count, edges=[])
