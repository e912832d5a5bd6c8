"""Custom exceptions for parameter-resolver.

This module provides a hierarchy of exceptions for error handling
during parameter resolution.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .descriptor import ParameterDescriptor


class ParameterResolverError(Exception):
    """Base exception for all parameter-resolver errors.

    All exceptions raised by parameter_resolver inherit from this class,
    making it easy to catch all resolution-related errors.

    Example:
        >>> try:
        ...     kwargs = resolver.resolve(parameters, {"id": 42})
        ... except ParameterResolverError as e:
        ...     print(f"Resolution error: {e}")
    """

    pass


class UnresolvedParameterError(ParameterResolverError):
    """Raised when no source could supply a value for a parameter.

    None of the explicit params, the resolver chain, the declared default
    or the nullability fallback applied. The error aborts the whole
    resolution call.

    Attributes:
        parameter_name: Name of the parameter that could not be resolved.
        position: 0-based position of the parameter.
        annotation: Declared type of the parameter, if known.
        declaring_context: Qualified name of the declaring callable, if known.

    Example:
        >>> try:
        ...     resolver.resolve_parameter(descriptor)
        ... except UnresolvedParameterError as e:
        ...     print(e.parameter_name, e.position)
    """

    def __init__(
        self,
        parameter_name: str,
        position: int,
        annotation: Any = None,
        declaring_context: str | None = None,
    ) -> None:
        self.parameter_name = parameter_name
        self.position = position
        self.annotation = annotation
        self.declaring_context = declaring_context
        super().__init__(self._build_message())

    def __reduce__(self) -> tuple[Any, ...]:
        return (
            self.__class__,
            (self.parameter_name, self.position, self.annotation, self.declaring_context),
        )

    @classmethod
    def from_parameter(cls, parameter: ParameterDescriptor) -> UnresolvedParameterError:
        """Create the error from a parameter descriptor.

        Optional descriptor attributes (annotation, declaring_context) are
        read with getattr so any descriptor-like object is accepted.

        Args:
            parameter: The descriptor that could not be resolved.

        Returns:
            UnresolvedParameterError describing the parameter.
        """
        return cls(
            parameter_name=parameter.name,
            position=parameter.position,
            annotation=getattr(parameter, "annotation", None),
            declaring_context=getattr(parameter, "declaring_context", None),
        )

    def _build_message(self) -> str:
        details = f"position {self.position}"
        if self.annotation is not None:
            details += f", type {format_annotation(self.annotation)}"

        message = f"Unable to resolve parameter '{self.parameter_name}' ({details})"
        if self.declaring_context:
            message += f" of {self.declaring_context}"
        return message


class InvalidResolverError(ParameterResolverError):
    """Raised when an object that is not a resolver is added to a collector.

    Example:
        >>> ResolverCollector([object()])
        Traceback (most recent call last):
        ...
        InvalidResolverError: Expected a BaseResolver instance, got object
    """

    pass


class InvalidResolvedValueError(ParameterResolverError):
    """Raised when a strategy returns something other than a (name, value) pair.

    None (or an empty sequence) means "no opinion"; any other value must be
    a two-item sequence.
    """

    pass


class InvalidCollectorError(ParameterResolverError):
    """Raised when a container returns something other than a ResolverCollector.

    Example:
        >>> container = {"collector": "not a collector"}
        >>> ParameterResolver.from_container(container, "collector")
        Traceback (most recent call last):
        ...
        InvalidCollectorError: Container entry 'collector' is not a ResolverCollector (got str)
    """

    pass


def format_annotation(annotation: Any) -> str:
    """Render a type annotation for error and log messages."""
    if isinstance(annotation, type):
        return annotation.__qualname__
    return str(annotation).replace("typing.", "")


__all__ = [
    "ParameterResolverError",
    "UnresolvedParameterError",
    "InvalidResolverError",
    "InvalidCollectorError",
    "InvalidResolvedValueError",
    "format_annotation",
]
