r"""Developer-friendly base class for custom strategies.

This module provides the MatchingResolver class, a more user-friendly
base class for strategies that target parameters by name, name pattern
or declared type.

Example:
    from parameter_resolver import MatchingResolver

    class RequestResolver(MatchingResolver):
        names = frozenset({"request"})

        def __init__(self, request):
            super().__init__()
            self._request = request

        def resolve_value(self, parameter, params):
            return self._request

    class HeaderResolver(MatchingResolver):
        pattern = r"^header_(?P<header>\w+)$"

        def resolve_value(self, parameter, params):
            match = self._match_pattern(parameter.name)
            return params["headers"].get(match.group("header"))
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar

from .strategy import BaseResolver, ResolvedParameter

if TYPE_CHECKING:
    from .descriptor import ParameterDescriptor


class MatchingResolver(BaseResolver):
    """Developer-friendly base class for custom strategies.

    Provides name, pattern and annotation matching. A parameter matches if
    any configured criterion matches; with no criteria nothing matches.
    Subclasses should override:
    - names, pattern or annotation: Matching criteria
    - resolve_value(): Actual resolution logic

    Class Attributes:
        names: Exact parameter names to match (optional).
        pattern: Regex pattern matched against the parameter name (optional).
        annotation: Declared type to match; subclasses also match (optional).
    """

    # Subclasses should override these
    names: ClassVar[frozenset[str]] = frozenset()
    pattern: ClassVar[str | None] = None
    annotation: ClassVar[type | None] = None

    def __init__(self) -> None:
        """Initialize the strategy."""
        self._compiled_pattern: re.Pattern[str] | None = None
        if self.pattern:
            self._compiled_pattern = re.compile(self.pattern)

    def matches(self, parameter: ParameterDescriptor) -> bool:
        """Check if this strategy targets the parameter.

        Args:
            parameter: Descriptor of the parameter being resolved.

        Returns:
            True if the name, pattern or annotation criterion matches.
        """
        if parameter.name in self.names:
            return True

        if self._compiled_pattern and self._compiled_pattern.match(parameter.name):
            return True

        if self.annotation is not None:
            declared = getattr(parameter, "annotation", None)
            return isinstance(declared, type) and issubclass(declared, self.annotation)

        return False

    def resolve(
        self,
        parameter: ParameterDescriptor,
        params: Mapping[str, Any],
    ) -> ResolvedParameter | None:
        """Resolve the parameter if it matches.

        Delegates to resolve_value() for subclass implementation.

        Args:
            parameter: Descriptor of the parameter being resolved.
            params: Explicit params of the current call.

        Returns:
            (name, value) pair, or None if the parameter does not match.
        """
        if not self.matches(parameter):
            return None
        return ResolvedParameter(parameter.name, self.resolve_value(parameter, params))

    def resolve_value(
        self,
        parameter: ParameterDescriptor,
        params: Mapping[str, Any],
    ) -> Any:
        """Override this in subclasses to produce the value.

        Args:
            parameter: Descriptor of a matching parameter.
            params: Explicit params of the current call.

        Returns:
            The value to inject.

        Raises:
            NotImplementedError: If not overridden.
        """
        raise NotImplementedError(
            f"{self.__class__.__name__}.resolve_value() must be implemented"
        )

    def _match_pattern(self, name: str) -> re.Match[str] | None:
        """Match a parameter name against the configured pattern.

        Convenience method for subclasses.

        Args:
            name: The parameter name to match.

        Returns:
            Match object or None.
        """
        if self._compiled_pattern:
            return self._compiled_pattern.match(name)
        return None


__all__ = ["MatchingResolver"]
