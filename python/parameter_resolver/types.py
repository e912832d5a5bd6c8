"""Pydantic models for parameter-resolver.

This module provides type-safe models for logging context and
configuration, using Pydantic v2 for validation and serialization.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class LogContext(BaseModel):
    """Context fields for structured logging.

    This model provides structured context for log messages emitted
    during resolution, enabling correlation and filtering.

    Example:
        >>> context = LogContext(
        ...     parameter="repo",
        ...     position=0,
        ...     source="strategy",
        ... )
        >>> log_debug("Resolved parameter", context)
    """

    correlation_id: str | None = Field(
        default=None,
        description="Correlation ID for request tracing.",
    )
    declaring_context: str | None = Field(
        default=None,
        description="Qualified name of the callable being resolved.",
    )
    parameter: str | None = Field(
        default=None,
        description="Parameter name.",
    )
    position: int | None = Field(
        default=None,
        description="Parameter position.",
    )
    source: str | None = Field(
        default=None,
        description="Resolution source (explicit, strategy, default, nullable).",
    )
    resolver: str | None = Field(
        default=None,
        description="Name of the strategy that supplied the value.",
    )


class ResolverConfig(BaseModel):
    """Configuration for the parameter resolver package.

    Only ambient behaviour is configurable; the resolution algorithm
    itself has no knobs.

    Example:
        >>> config = ResolverConfig(log_level="debug")
        >>> configure_logging(config)
    """

    log_level: str = Field(
        default="info",
        pattern="^(trace|debug|info|warn|error)$",
        description="Log level for the package logger (trace, debug, info, warn, error).",
    )
    log_format: str = Field(
        default=DEFAULT_LOG_FORMAT,
        description="Format string for the package log handler.",
    )

    model_config = {"extra": "forbid"}


__all__ = [
    "DEFAULT_LOG_FORMAT",
    "LogContext",
    "ResolverConfig",
]
