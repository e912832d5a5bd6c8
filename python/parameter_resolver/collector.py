"""Resolver Collector - Ordered Strategy Registry.

The ResolverCollector holds the strategies a ParameterResolver consults
after explicit params and before declared defaults.

Ordering Contract:
1. Strategies are consulted in registration order
2. No priorities, no deduplication
3. Iteration is over an immutable snapshot, so it is stable and
   repeatable across any number of resolution calls

Usage:
    # Build a collector once during application wiring
    collector = ResolverCollector([ContainerResolver(container)])
    collector.add_resolver(RequestResolver(request))

    # Share it between resolvers
    resolver = ParameterResolver.from_collector(collector)

    # Or fetch the shared instance from a container
    collector = ResolverCollector.from_container(container)
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any

from .exceptions import InvalidCollectorError, InvalidResolverError
from .logging import log_debug
from .strategy import BaseResolver

if TYPE_CHECKING:
    from .container import ServiceLocator


class ResolverCollector:
    """Registration-ordered chain of parameter resolver strategies.

    The collector is built once and then shared; adding strategies after
    it is handed to concurrent resolvers is not supported.

    Attributes:
        resolver_names: Names of strategies in registration order.
    """

    def __init__(self, resolvers: Iterable[BaseResolver] = ()) -> None:
        """Initialize the collector.

        Args:
            resolvers: Strategies in the order they should be consulted.

        Raises:
            InvalidResolverError: If an entry is not a BaseResolver.
        """
        self._resolvers: tuple[BaseResolver, ...] = ()
        self._lock = threading.RLock()
        for resolver in resolvers:
            self.add_resolver(resolver)

    @classmethod
    def from_container(
        cls,
        container: ServiceLocator,
        key: Any = None,
    ) -> ResolverCollector:
        """Fetch the shared collector from a service locator.

        Args:
            container: Object exposing ``get(key)``.
            key: Container identity of the collector. Defaults to the
                ResolverCollector class itself.

        Returns:
            The collector stored in the container.

        Raises:
            InvalidCollectorError: If the entry is not a ResolverCollector.
        """
        if key is None:
            key = cls
        collector = container.get(key)

        if not isinstance(collector, ResolverCollector):
            label = key.__name__ if isinstance(key, type) else key
            raise InvalidCollectorError(
                f"Container entry {label!r} is not a ResolverCollector "
                f"(got {type(collector).__name__})"
            )

        log_debug(
            "ResolverCollector: Fetched shared collector from container",
            {"resolvers": len(collector)},
        )
        return collector

    def add_resolver(self, resolver: BaseResolver) -> ResolverCollector:
        """Append a strategy to the end of the chain.

        Args:
            resolver: Strategy to add.

        Returns:
            Self for method chaining.

        Raises:
            InvalidResolverError: If resolver is not a BaseResolver.
        """
        if not isinstance(resolver, BaseResolver):
            raise InvalidResolverError(
                f"Expected a BaseResolver instance, got {type(resolver).__name__}"
            )

        with self._lock:
            self._resolvers = (*self._resolvers, resolver)
        return self

    def get_resolver(self, name: str) -> BaseResolver | None:
        """Get the first strategy registered under a name.

        Args:
            name: Strategy name.

        Returns:
            Strategy or None if not found.
        """
        return next((r for r in self._resolvers if r.name == name), None)

    @property
    def resolver_names(self) -> list[str]:
        """Get names of strategies in registration order.

        Returns:
            List of strategy names.
        """
        return [r.name for r in self._resolvers]

    def chain_info(self) -> list[dict[str, Any]]:
        """Get chain info for debugging.

        Returns:
            List of strategy info dicts.
        """
        return [
            {"position": index, "name": resolver.name, "type": type(resolver).__name__}
            for index, resolver in enumerate(self._resolvers)
        ]

    def __iter__(self) -> Iterator[BaseResolver]:
        """Iterate strategies in registration order."""
        return iter(self._resolvers)

    def __len__(self) -> int:
        """Return number of strategies in the chain."""
        return len(self._resolvers)

    def __bool__(self) -> bool:
        # An empty collector is still a configured collector.
        return True

    def __repr__(self) -> str:
        return f"ResolverCollector({self.resolver_names!r})"


__all__ = ["ResolverCollector"]
