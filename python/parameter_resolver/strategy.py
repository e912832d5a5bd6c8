"""Abstract base class for parameter resolver strategies.

This module defines the contract that all strategies must implement.
Strategies are consulted in registration order by the ParameterResolver
until one supplies a value for the parameter.

Resolution Contract:
1. name - Human-readable identifier for logging/debugging
2. resolve() - Return a (name, value) pair, or None for "no opinion"

Returning None is not an error; the next strategy is consulted. Raising
an exception is a genuine fault and aborts the resolution call.

Example Implementation:
    class SettingsResolver(BaseResolver):
        def __init__(self, settings: dict[str, Any]) -> None:
            self._settings = settings

        def resolve(self, parameter, params):
            if parameter.name not in self._settings:
                return None
            return ResolvedParameter(parameter.name, self._settings[parameter.name])
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, NamedTuple

if TYPE_CHECKING:
    from .descriptor import ParameterDescriptor


class ResolvedParameter(NamedTuple):
    """A resolved ``(name, value)`` pair for one parameter."""

    name: str
    value: Any


class BaseResolver(ABC):
    """Abstract base class for parameter resolver strategies.

    Defines the single method every strategy implements. Strategies shared
    across threads must be stateless or synchronize internally.
    """

    @property
    def name(self) -> str:
        """Human-readable name for this strategy (for logging/debugging).

        Returns:
            The strategy name, the class name by default.
        """
        return self.__class__.__name__

    @abstractmethod
    def resolve(
        self,
        parameter: ParameterDescriptor,
        params: Mapping[str, Any],
    ) -> ResolvedParameter | Sequence[Any] | None:
        """Try to supply a value for the parameter.

        Args:
            parameter: Descriptor of the parameter being resolved.
            params: The explicit params of the current resolution call.

        Returns:
            A (name, value) pair, or None if this strategy has no opinion.
        """
        ...


__all__ = [
    "BaseResolver",
    "ResolvedParameter",
]
