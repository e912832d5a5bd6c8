"""Parameter descriptor type for resolution.

This module defines the ParameterDescriptor dataclass, the read-only view
of one formal parameter that the resolver works on.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ParameterDescriptor:
    """Descriptor of one formal parameter of a callable.

    Only ``name``, ``position``, ``has_default``, ``default_value`` and
    ``nullable`` drive resolution. The remaining fields make errors
    actionable and let :meth:`ParameterResolver.invoke` place arguments.

    Attributes:
        name: Parameter name, unique within a parameter list.
        position: 0-based position, unique within a parameter list.
        has_default: Whether a default value is declared.
        default_value: The declared default (meaningful only if has_default).
        nullable: Whether the declared type accepts None.
        annotation: Declared type, or None when unknown.
        declaring_context: Qualified name of the declaring callable.
        positional_only: Whether the parameter must be passed positionally.

    Example:
        >>> limit = ParameterDescriptor(
        ...     name="limit",
        ...     position=0,
        ...     has_default=True,
        ...     default_value=10,
        ... )
        >>> limit.has_default
        True
    """

    name: str
    position: int
    has_default: bool = False
    default_value: Any = None
    nullable: bool = False
    annotation: Any = None
    declaring_context: str | None = None
    positional_only: bool = False

    @classmethod
    def required(cls, name: str, position: int = 0, **kwargs: Any) -> ParameterDescriptor:
        """Create a descriptor with no default that is not nullable.

        Example:
            >>> ParameterDescriptor.required("id").nullable
            False
        """
        return cls(name=name, position=position, **kwargs)

    @classmethod
    def with_default(
        cls, name: str, default_value: Any, position: int = 0, **kwargs: Any
    ) -> ParameterDescriptor:
        """Create a descriptor that declares a default value.

        Example:
            >>> ParameterDescriptor.with_default("limit", 10).default_value
            10
        """
        return cls(
            name=name,
            position=position,
            has_default=True,
            default_value=default_value,
            **kwargs,
        )

    @classmethod
    def optional(cls, name: str, position: int = 0, **kwargs: Any) -> ParameterDescriptor:
        """Create a nullable descriptor without a default.

        Example:
            >>> ParameterDescriptor.optional("logger").nullable
            True
        """
        return cls(name=name, position=position, nullable=True, **kwargs)


__all__ = ["ParameterDescriptor"]
