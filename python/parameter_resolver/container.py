"""Service locator protocol used to fetch a shared ResolverCollector.

Any dependency-injection container exposing ``get(key)`` satisfies the
protocol, including a plain ``dict``.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ServiceLocator(Protocol):
    """Fetch a value by a stable identity."""

    def get(self, key: Any) -> Any:
        """Return the entry registered under ``key``."""
        ...


__all__ = ["ServiceLocator"]
