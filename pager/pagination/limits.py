"""Page size resolution.

A requested limit is a hint: out-of-range values are clamped to the nearest
bound (``saturate``) or replaced by the default limit (``default``), never
rejected.
"""

import logging
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..config import Settings, get_settings


logger = logging.getLogger(__name__)


class BoundaryMode(str, Enum):
    """What to do with a limit outside ``[min_limit, max_limit]``."""

    SATURATE = "saturate"
    DEFAULT = "default"


class LimitConfig(BaseModel):
    """Call-time limit settings. Unset fields fall back to ``Settings``."""

    default_limit: Optional[int] = Field(default=None, ge=1, description="Page size when none is requested")
    max_limit: Optional[int] = Field(default=None, ge=1, description="Largest page size allowed")
    min_limit: Optional[int] = Field(default=None, ge=1, description="Smallest page size allowed")
    overflow: Optional[BoundaryMode] = Field(default=None, description="Policy above max_limit")
    underflow: Optional[BoundaryMode] = Field(default=None, description="Policy below min_limit")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_limit_range(self):
        """Reject an inverted range once both bounds are known."""
        if self.min_limit is not None and self.max_limit is not None and self.min_limit > self.max_limit:
            raise ValueError(
                f"min_limit ({self.min_limit}) cannot exceed max_limit ({self.max_limit})"
            )
        return self

    def resolved(self, app_settings: Optional[Settings] = None) -> "LimitConfig":
        """Return a copy with every unset field filled from settings.

        The merged copy is validated again, so a call-time bound that crosses
        a settings bound is rejected here.
        """
        app_settings = app_settings or get_settings()
        return LimitConfig(
            default_limit=_pick(self.default_limit, app_settings.default_limit),
            max_limit=_pick(self.max_limit, app_settings.max_limit),
            min_limit=_pick(self.min_limit, app_settings.min_limit),
            overflow=_pick(self.overflow, BoundaryMode(app_settings.overflow)),
            underflow=_pick(self.underflow, BoundaryMode(app_settings.underflow)),
        )


def _pick(value, fallback):
    return fallback if value is None else value


def resolve_limit(
    requested: Optional[int],
    config: Optional[LimitConfig] = None,
    app_settings: Optional[Settings] = None
) -> int:
    """Compute the effective page size.

    Args:
        requested: Limit asked for by the caller, or None for the default
        config: Call-time overrides
        app_settings: Process-wide fallbacks, ``get_settings()`` if omitted

    Returns:
        The page size to use
    """
    cfg = (config or LimitConfig()).resolved(app_settings)
    limit = cfg.default_limit if requested is None else requested

    if limit > cfg.max_limit and cfg.overflow is BoundaryMode.DEFAULT:
        logger.debug(f"Limit {limit} above {cfg.max_limit}, using default {cfg.default_limit}")
        return cfg.default_limit
    if limit > cfg.max_limit:
        logger.debug(f"Limit {limit} above {cfg.max_limit}, saturating")
        return cfg.max_limit
    if limit < cfg.min_limit and cfg.underflow is BoundaryMode.DEFAULT:
        logger.debug(f"Limit {limit} below {cfg.min_limit}, using default {cfg.default_limit}")
        return cfg.default_limit
    if limit < cfg.min_limit:
        logger.debug(f"Limit {limit} below {cfg.min_limit}, saturating")
        return cfg.min_limit
    return limit
