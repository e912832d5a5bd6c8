"""Build ParameterDescriptor lists from Python callables.

The resolver itself only needs descriptors; this module is the adapter
that produces them from ``inspect.signature`` and ``typing`` hints.

Nullability rules:
- A parameter without annotation accepts None
- ``Any``, ``None``, ``Optional[X]``, ``Union[X, None]`` and ``X | None`` accept None
- ``Annotated[X, ...]`` follows ``X``

Example:
    >>> def handler(repo: Repo, limit: int = 10, logger: Logger | None = None): ...
    >>> [p.name for p in describe_callable(handler)]
    ['repo', 'limit', 'logger']
"""

from __future__ import annotations

import inspect
import types
from collections.abc import Callable
from typing import Annotated, Any, Union, get_args, get_origin, get_type_hints

from .descriptor import ParameterDescriptor
from .logging import log_trace

_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
_NONE_TYPE = type(None)


def is_nullable_annotation(annotation: Any) -> bool:
    """Check whether a declared type accepts None.

    Args:
        annotation: Annotation object, string annotation, or
            ``inspect.Parameter.empty``.

    Returns:
        True if None is an acceptable value.
    """
    if annotation is inspect.Parameter.empty or annotation is Any:
        return True

    if annotation is None or annotation is _NONE_TYPE:
        return True

    if isinstance(annotation, str):
        return _is_nullable_string(annotation)

    origin = get_origin(annotation)
    if origin is Annotated:
        return is_nullable_annotation(get_args(annotation)[0])

    if origin is Union or origin is types.UnionType:
        return any(is_nullable_annotation(arg) for arg in get_args(annotation))

    return False


def describe_parameter(
    parameter: inspect.Parameter,
    position: int,
    *,
    hints: dict[str, Any] | None = None,
    context: str | None = None,
) -> ParameterDescriptor:
    """Convert one ``inspect.Parameter`` into a descriptor.

    Args:
        parameter: The signature parameter.
        position: 0-based position among non-variadic parameters.
        hints: Evaluated type hints of the declaring callable.
        context: Qualified name of the declaring callable.

    Returns:
        ParameterDescriptor for the parameter.
    """
    annotation = (hints or {}).get(parameter.name, parameter.annotation)
    has_default = parameter.default is not inspect.Parameter.empty

    return ParameterDescriptor(
        name=parameter.name,
        position=position,
        has_default=has_default,
        default_value=parameter.default if has_default else None,
        nullable=is_nullable_annotation(annotation),
        annotation=None if annotation is inspect.Parameter.empty else annotation,
        declaring_context=context,
        positional_only=parameter.kind is inspect.Parameter.POSITIONAL_ONLY,
    )


def describe_callable(func: Callable[..., Any]) -> list[ParameterDescriptor]:
    """Describe the resolvable parameters of a function, method or class.

    ``*args`` and ``**kwargs`` are skipped. Bound methods and classes are
    described without ``self``.

    Args:
        func: The callable to describe.

    Returns:
        Descriptors in declaration order.
    """
    signature = inspect.signature(func)
    context = callable_name(func)
    hints = _type_hints(func)

    descriptors: list[ParameterDescriptor] = []
    for parameter in signature.parameters.values():
        if parameter.kind in _VARIADIC:
            continue
        descriptors.append(
            describe_parameter(parameter, len(descriptors), hints=hints, context=context)
        )

    return descriptors


def callable_name(func: Callable[..., Any]) -> str:
    """Return ``module.qualname`` for a callable, or its repr."""
    qualname = getattr(func, "__qualname__", None)
    if qualname is None:
        return repr(func)
    module = getattr(func, "__module__", None)
    return f"{module}.{qualname}" if module else qualname


def _type_hints(func: Callable[..., Any]) -> dict[str, Any]:
    target = func.__init__ if isinstance(func, type) else func  # type: ignore[misc]
    try:
        return get_type_hints(target, include_extras=True)
    except (NameError, TypeError, AttributeError) as e:
        # Unresolvable forward references: fall back to raw annotations
        log_trace(
            "describe_callable: Type hints unavailable, using raw annotations",
            {"callable": callable_name(func), "error": e},
        )
        return {}


def _is_nullable_string(annotation: str) -> bool:
    text = annotation.replace(" ", "").removeprefix("typing.")
    if text in ("None", "NoneType", "Any"):
        return True

    members = _split_top_level(text, "|")
    if len(members) > 1:
        return any(_is_nullable_string(member) for member in members)

    for prefix in ("Optional[", "Union[", "Annotated["):
        if text.startswith(prefix) and text.endswith("]"):
            args = _split_top_level(text[len(prefix) : -1], ",")
            if prefix == "Optional[":
                return True
            if prefix == "Annotated[":
                return _is_nullable_string(args[0])
            return any(_is_nullable_string(arg) for arg in args)

    return False


def _split_top_level(text: str, separator: str) -> list[str]:
    """Split on ``separator`` outside of square brackets."""
    parts: list[str] = []
    depth = 0
    start = 0
    for index, char in enumerate(text):
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
        elif char == separator and depth == 0:
            parts.append(text[start:index])
            start = index + 1
    parts.append(text[start:])
    return parts


__all__ = [
    "callable_name",
    "describe_callable",
    "describe_parameter",
    "is_nullable_annotation",
]
