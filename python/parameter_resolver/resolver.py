"""Parameter Resolver - Precedence-Ordered Argument Resolution.

The ParameterResolver produces the argument values needed to call a
callable from its parameter descriptors.

Resolution Contract (per parameter, first match wins):
1. Explicit params: the parameter name is a key of ``params``, even if
   the stored value is None
2. Strategy chain: the first strategy returning a pair, in registration order
3. Declared default value
4. None, if the declared type is nullable
5. Otherwise raise UnresolvedParameterError

Batch operations resolve parameters in sequence order and fail fast:
the first unresolved parameter aborts the call with no partial result.

Usage:
    # Build from strategies
    resolver = ParameterResolver([ContainerResolver(container)])

    # Or share a collector
    resolver = ParameterResolver.from_collector(collector)
    resolver = ParameterResolver.from_container(container)

    # Resolve
    kwargs = resolver.resolve(describe_callable(func), {"id": 42})
    args = resolver.resolve_positioned(describe_callable(func), {"id": 42})

    # Or resolve and call in one step
    result = resolver.invoke(func, id=42)
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any

from .collector import ResolverCollector
from .exceptions import (
    InvalidCollectorError,
    InvalidResolvedValueError,
    UnresolvedParameterError,
)
from .introspection import describe_callable
from .logging import log_debug, log_trace, log_warn
from .strategy import BaseResolver, ResolvedParameter

if TYPE_CHECKING:
    from .container import ServiceLocator
    from .descriptor import ParameterDescriptor

_EMPTY: Mapping[str, Any] = {}


class ParameterResolver:
    """Resolves argument values for parameter descriptors.

    The resolver holds no mutable state of its own. It is safe to share
    between threads as long as its collector is no longer modified and
    its strategies are safe for concurrent use.

    Attributes:
        collector: The strategy chain consulted for parameters that were
            not supplied explicitly.
    """

    def __init__(
        self,
        resolvers: Iterable[BaseResolver] | ResolverCollector = (),
    ) -> None:
        """Initialize the resolver.

        Args:
            resolvers: Strategies in consultation order, or an existing
                collector which is used by reference.
        """
        if isinstance(resolvers, ResolverCollector):
            self._collector = resolvers
        else:
            self._collector = ResolverCollector(resolvers)

    @classmethod
    def from_collector(cls, collector: ResolverCollector) -> ParameterResolver:
        """Create a resolver sharing an existing collector.

        Args:
            collector: The configured strategy chain.

        Returns:
            ParameterResolver using ``collector``.

        Raises:
            InvalidCollectorError: If collector is not a ResolverCollector.
        """
        if not isinstance(collector, ResolverCollector):
            raise InvalidCollectorError(
                f"Expected a ResolverCollector, got {type(collector).__name__}"
            )
        return cls(collector)

    @classmethod
    def from_container(
        cls,
        container: ServiceLocator,
        key: Any = None,
    ) -> ParameterResolver:
        """Create a resolver using the collector stored in a container.

        Args:
            container: Object exposing ``get(key)``.
            key: Container identity of the collector. Defaults to the
                ResolverCollector class.

        Returns:
            ParameterResolver sharing the container's collector.

        Raises:
            InvalidCollectorError: If the container entry is not a ResolverCollector.
        """
        return cls.from_collector(ResolverCollector.from_container(container, key))

    @property
    def collector(self) -> ResolverCollector:
        """Get the strategy chain."""
        return self._collector

    def resolve(
        self,
        parameters: Iterable[ParameterDescriptor],
        params: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Resolve every parameter, keyed by name.

        Args:
            parameters: Descriptors in declaration order.
            params: Explicit values keyed by parameter name.

        Returns:
            Dict of parameter name to value.

        Raises:
            UnresolvedParameterError: For the first parameter no source can supply.
        """
        params = _EMPTY if params is None else params
        resolved: dict[str, Any] = {}
        for parameter in parameters:
            name, value = self.resolve_parameter(parameter, params)
            resolved[name] = value
        return resolved

    def resolve_positioned(
        self,
        parameters: Iterable[ParameterDescriptor],
        params: Mapping[str, Any] | None = None,
    ) -> dict[int, Any]:
        """Resolve every parameter, keyed by position.

        Args:
            parameters: Descriptors in declaration order.
            params: Explicit values keyed by parameter name.

        Returns:
            Dict of parameter position to value.

        Raises:
            UnresolvedParameterError: For the first parameter no source can supply.
        """
        params = _EMPTY if params is None else params
        resolved: dict[int, Any] = {}
        for parameter in parameters:
            resolved[parameter.position] = self.resolve_parameter(parameter, params).value
        return resolved

    def resolve_parameter(
        self,
        parameter: ParameterDescriptor,
        params: Mapping[str, Any] | None = None,
    ) -> ResolvedParameter:
        """Resolve a single parameter.

        Args:
            parameter: Descriptor of the parameter.
            params: Explicit values keyed by parameter name.

        Returns:
            The resolved (name, value) pair.

        Raises:
            UnresolvedParameterError: If no source can supply a value.
            InvalidResolvedValueError: If a strategy returns something other than a pair.
        """
        params = _EMPTY if params is None else params
        name = parameter.name

        # Key presence, not value, selects the explicit branch
        if name in params:
            self._log_resolved(parameter, "explicit")
            return ResolvedParameter(name, params[name])

        for resolver in self._collector:
            log_trace(
                "ParameterResolver: Consulting strategy",
                {"parameter": name, "resolver": resolver.name},
            )
            pair = resolver.resolve(parameter, params)
            if pair:
                resolved = _as_pair(pair, resolver)
                self._log_resolved(parameter, "strategy", resolver.name)
                return resolved

        if parameter.has_default:
            self._log_resolved(parameter, "default")
            return ResolvedParameter(name, parameter.default_value)

        if parameter.nullable:
            self._log_resolved(parameter, "nullable")
            return ResolvedParameter(name, None)

        error = UnresolvedParameterError.from_parameter(parameter)
        log_warn(
            f"ParameterResolver: {error}",
            {"parameter": name, "position": parameter.position},
        )
        raise error

    def invoke(
        self,
        func: Callable[..., Any],
        params: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> Any:
        """Resolve the arguments of a callable and call it.

        Positional-only parameters are passed positionally, all others by
        keyword. ``kwargs`` are merged over ``params``.

        Args:
            func: Function, method or class to call.
            params: Explicit values keyed by parameter name.
            **kwargs: Additional explicit values.

        Returns:
            Whatever ``func`` returns.

        Raises:
            UnresolvedParameterError: If a parameter cannot be resolved.
        """
        explicit = {**(params or {}), **kwargs}

        call_args: list[Any] = []
        call_kwargs: dict[str, Any] = {}
        for parameter in describe_callable(func):
            # The callable only accepts its own parameter names
            value = self.resolve_parameter(parameter, explicit).value
            if parameter.positional_only:
                call_args.append(value)
            else:
                call_kwargs[parameter.name] = value

        return func(*call_args, **call_kwargs)

    def _log_resolved(
        self,
        parameter: ParameterDescriptor,
        source: str,
        resolver_name: str | None = None,
    ) -> None:
        fields: dict[str, Any] = {"parameter": parameter.name, "source": source}
        if resolver_name is not None:
            fields["resolver"] = resolver_name
        log_debug("ParameterResolver: Resolved parameter", fields)

    def __repr__(self) -> str:
        return f"ParameterResolver({self._collector!r})"


def _as_pair(pair: Any, resolver: BaseResolver) -> ResolvedParameter:
    if isinstance(pair, (str, bytes)) or not isinstance(pair, Sequence) or len(pair) != 2:
        raise InvalidResolvedValueError(
            f"Strategy {resolver.name!r} returned {pair!r}; "
            "expected a (name, value) pair or None"
        )
    return ResolvedParameter(*pair)


__all__ = ["ParameterResolver"]
