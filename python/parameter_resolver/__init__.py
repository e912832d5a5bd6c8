"""
Parameter Resolver

This package resolves the argument values needed to call a function or
constructor, combining explicitly supplied values with an ordered chain
of pluggable strategies, declared defaults and nullability.

Example:
    >>> from parameter_resolver import ParameterResolver, describe_callable
    >>>
    >>> def list_users(repo: UserRepo, limit: int = 10, logger: Logger | None = None):
    ...     ...
    >>>
    >>> resolver = ParameterResolver([RepoResolver(container)])
    >>> resolver.resolve(describe_callable(list_users), {"limit": 5})
    {'repo': <UserRepo>, 'limit': 5, 'logger': None}

    >>> # Resolve and call in one step
    >>> resolver.invoke(list_users, limit=5)

    >>> # Share one configured chain through a container
    >>> container.set(ResolverCollector, ResolverCollector([RepoResolver(container)]))
    >>> resolver = ParameterResolver.from_container(container)
"""

from __future__ import annotations

from parameter_resolver.collector import ResolverCollector
from parameter_resolver.config import configure_logging, load_config
from parameter_resolver.container import ServiceLocator
from parameter_resolver.descriptor import ParameterDescriptor
from parameter_resolver.exceptions import (
    InvalidCollectorError,
    InvalidResolvedValueError,
    InvalidResolverError,
    ParameterResolverError,
    UnresolvedParameterError,
)
from parameter_resolver.introspection import (
    describe_callable,
    describe_parameter,
    is_nullable_annotation,
)
from parameter_resolver.logging import (
    log_debug,
    log_error,
    log_info,
    log_trace,
    log_warn,
)
from parameter_resolver.matching_resolver import MatchingResolver
from parameter_resolver.resolver import ParameterResolver
from parameter_resolver.strategy import BaseResolver, ResolvedParameter
from parameter_resolver.types import LogContext, ResolverConfig

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Resolution
    "ParameterResolver",
    "ResolverCollector",
    "ResolvedParameter",
    # Strategies
    "BaseResolver",
    "MatchingResolver",
    # Descriptors
    "ParameterDescriptor",
    "describe_callable",
    "describe_parameter",
    "is_nullable_annotation",
    # Container integration
    "ServiceLocator",
    # Exceptions
    "ParameterResolverError",
    "UnresolvedParameterError",
    "InvalidResolverError",
    "InvalidCollectorError",
    "InvalidResolvedValueError",
    # Logging
    "log_error",
    "log_warn",
    "log_info",
    "log_debug",
    "log_trace",
    "LogContext",
    # Configuration
    "ResolverConfig",
    "load_config",
    "configure_logging",
]
