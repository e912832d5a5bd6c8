"""Configuration loading and logging setup.

Configuration is read from environment variables and validated with
:class:`~parameter_resolver.types.ResolverConfig`:

1. ``PARAMETER_RESOLVER_LOG_LEVEL`` - package log level
2. ``PARAMETER_RESOLVER_LOG_FORMAT`` - log record format string

Explicit overrides passed to :func:`load_config` take precedence over
the environment.

Example:
    >>> from parameter_resolver import configure_logging, load_config
    >>>
    >>> configure_logging(load_config({"log_level": "debug"}))
"""

from __future__ import annotations

import logging
import os
from typing import Any

from .logging import TRACE, get_logger
from .types import ResolverConfig

ENV_LOG_LEVEL = "PARAMETER_RESOLVER_LOG_LEVEL"
ENV_LOG_FORMAT = "PARAMETER_RESOLVER_LOG_FORMAT"

_LEVELS = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def load_config(overrides: dict[str, Any] | None = None) -> ResolverConfig:
    """Build a ResolverConfig from the environment and explicit overrides.

    Args:
        overrides: Optional values that win over environment variables.

    Returns:
        Validated ResolverConfig.

    Raises:
        pydantic.ValidationError: If a value is invalid (e.g. unknown log level).
    """
    data: dict[str, Any] = {}

    env_level = os.environ.get(ENV_LOG_LEVEL)
    if env_level:
        data["log_level"] = env_level.strip().lower()

    env_format = os.environ.get(ENV_LOG_FORMAT)
    if env_format:
        data["log_format"] = env_format

    if overrides:
        data.update(overrides)

    return ResolverConfig.model_validate(data)


def configure_logging(config: ResolverConfig | None = None) -> logging.Logger:
    """Apply a ResolverConfig to the package logger.

    Installs a single stream handler on the package logger; calling this
    again only updates the level and format.

    Args:
        config: Configuration to apply. Loaded from the environment if omitted.

    Returns:
        The configured package logger.
    """
    config = config or load_config()
    logger = get_logger()
    logger.setLevel(_LEVELS[config.log_level])

    handler = next(
        (h for h in logger.handlers if getattr(h, "_parameter_resolver", False)),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler()
        handler._parameter_resolver = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    handler.setFormatter(logging.Formatter(config.log_format))
    return logger


__all__ = [
    "ENV_LOG_FORMAT",
    "ENV_LOG_LEVEL",
    "configure_logging",
    "load_config",
]
