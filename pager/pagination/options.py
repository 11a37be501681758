"""Page request options: casting raw options and sizing the fetch."""

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..config import Settings
from ..errors.problem_details import InvalidCursorError
from .cursor import CursorPolicy, as_cursor
from .limits import LimitConfig, resolve_limit


logger = logging.getLogger(__name__)


class Direction(str, Enum):
    """Which side of the cursor a page lies on."""

    AFTER = "after"
    BEFORE = "before"
    NONE = "none"


def _single_cursor(after: Any, before: Any) -> None:
    if after is not None and before is not None:
        raise ValueError("after and before cursors are mutually exclusive")


class PageOptions(BaseModel):
    """Raw, untrusted page request options."""

    after: Optional[Any] = Field(default=None, description="Return records after this cursor")
    before: Optional[Any] = Field(default=None, description="Return records before this cursor")
    limit: Optional[int] = Field(default=None, description="Requested page size")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_single_cursor(self):
        _single_cursor(self.after, self.before)
        return self


class ProcessedPageOptions(BaseModel):
    """Page options after cursor validation and limit resolution."""

    limit: int = Field(ge=1, description="Effective page size")
    after: Optional[Any] = Field(default=None, description="Validated after cursor")
    before: Optional[Any] = Field(default=None, description="Validated before cursor")

    model_config = ConfigDict(frozen=True)

    @field_validator("after", "before", mode="before")
    @classmethod
    def normalize_cursor(cls, v):
        """Store list cursors as tuples so they compare equal to generated ones."""
        return as_cursor(v)

    @model_validator(mode="after")
    def check_single_cursor(self):
        _single_cursor(self.after, self.before)
        return self

    @property
    def direction(self) -> Direction:
        if self.after is not None:
            return Direction.AFTER
        if self.before is not None:
            return Direction.BEFORE
        return Direction.NONE

    @property
    def cursor(self) -> Optional[Any]:
        """The active cursor, if any."""
        return self.after if self.after is not None else self.before


RawPageOptions = Union[PageOptions, Mapping]


def _page_options(options: RawPageOptions) -> PageOptions:
    if isinstance(options, PageOptions):
        return options
    return PageOptions.model_validate(dict(options))


def cast(
    options: RawPageOptions,
    policy: CursorPolicy,
    config: Optional[LimitConfig] = None,
    app_settings: Optional[Settings] = None
) -> ProcessedPageOptions:
    """Cast page options where both the limit and the cursors are honoured.

    Args:
        options: Raw options with optional ``after``, ``before`` and ``limit``
        policy: Cursor policy used to validate the supplied cursor
        config: Call-time limit settings
        app_settings: Process-wide limit fallbacks

    Returns:
        Processed options carrying the effective limit and validated cursor

    Raises:
        InvalidCursorError: If the supplied cursor fails validation
        pydantic.ValidationError: If both ``after`` and ``before`` are given
    """
    opts = _page_options(options)

    for key in (Direction.AFTER.value, Direction.BEFORE.value):
        value = getattr(opts, key)
        if value is None:
            continue
        if not policy.validate(value):
            logger.debug(f"Rejected {key} cursor: {value!r}")
            raise InvalidCursorError(key)
        limit = resolve_limit(opts.limit, config, app_settings)
        return ProcessedPageOptions(limit=limit, **{key: value})

    return cast_limit(opts, config, app_settings)


def cast_limit(
    options: RawPageOptions,
    config: Optional[LimitConfig] = None,
    app_settings: Optional[Settings] = None
) -> ProcessedPageOptions:
    """Cast page options where only the limit is honoured.

    Cursors are ignored. Useful where only a size cap makes sense, such as
    batched queries spanning several parents.
    """
    opts = _page_options(options)
    return ProcessedPageOptions(limit=resolve_limit(opts.limit, config, app_settings))


def fetch_size(options: ProcessedPageOptions) -> int:
    """Number of records the caller should fetch for these options.

    One extra record reveals whether another page follows. With a cursor a
    second extra record covers fetches that re-include the pivot record.
    """
    if options.direction is Direction.NONE:
        return options.limit + 1
    return options.limit + 2
