"""The Pager: one object holding everything a paginated query needs.

Each record in a result set has a cursor, a tuple of the values it is
ordered by. Asking for records after or before a cursor walks the result set
a page at a time without offsets.

Example, paginating users by signup order with a serial primary key::

    pager = Pager(
        policy=CursorPolicy.from_keys(["id"], [lambda v: isinstance(v, int)]),
        limits=LimitConfig(default_limit=25, max_limit=100),
    )

    opts = pager.cast({"after": [41], "limit": 10})
    rows = fetch_users(after=opts.after, limit=pager.fetch_size(opts))
    page = pager.new_page(rows, count_users(), opts)

Cursors must be unique within a result set. Sorting by a non-unique column
such as a follower count needs a unique tiebreaker, such as the primary key,
as the last sort key.
"""

from typing import Any, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from .config import Settings
from .pagination.assembler import assemble_page
from .pagination.cursor import Cursor, CursorPolicy
from .pagination.limits import LimitConfig
from .pagination.options import (
    ProcessedPageOptions,
    RawPageOptions,
    cast,
    cast_limit,
    fetch_size
)
from .pagination.page import Page


class Pager(BaseModel):
    """Cursor policy and limit settings for one kind of paginated query."""

    policy: CursorPolicy = Field(description="Cursor generation and validation")
    limits: LimitConfig = Field(default_factory=LimitConfig, description="Call-time limit settings")
    app_settings: Optional[Settings] = Field(default=None, description="Overrides get_settings() fallbacks")

    model_config = ConfigDict(frozen=True)

    def cast(self, options: RawPageOptions) -> ProcessedPageOptions:
        """Validate cursors and resolve the limit. See ``pagination.cast``."""
        return cast(options, self.policy, self.limits, self.app_settings)

    def cast_limit(self, options: RawPageOptions) -> ProcessedPageOptions:
        """Resolve only the limit. See ``pagination.cast_limit``."""
        return cast_limit(options, self.limits, self.app_settings)

    def fetch_size(self, options: ProcessedPageOptions) -> int:
        """Number of records to fetch for these options."""
        return fetch_size(options)

    def new_page(
        self,
        edges: Sequence[Any],
        total_count: int,
        options: ProcessedPageOptions
    ) -> Page:
        """Assemble a page from fetched records."""
        return assemble_page(edges, total_count, options, self.policy)

    def generate_cursor(self, record: Any) -> Cursor:
        """Return the cursor of a record."""
        return self.policy.generate(record)

    def validate_cursor(self, cursor: Any) -> bool:
        """Return whether a caller-supplied cursor is acceptable."""
        return self.policy.validate(cursor)
