"""pytest configuration and fixtures for parameter_resolver tests.

This module provides shared fixtures for testing the resolver, including
descriptor samples and strategies that record whether they were called.
"""

from __future__ import annotations

from collections.abc import Callable, Generator, Mapping
from typing import Any

import pytest

from parameter_resolver import BaseResolver, ParameterDescriptor, ResolvedParameter

_MISSING = object()


class RecordingResolver(BaseResolver):
    """Strategy that records its calls and optionally supplies one value."""

    def __init__(self, name: str, target: str | None = None, value: Any = _MISSING) -> None:
        self._name = name
        self._target = target
        self._value = value
        self.calls: list[str] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def called(self) -> bool:
        return bool(self.calls)

    def resolve(
        self, parameter: ParameterDescriptor, params: Mapping[str, Any]
    ) -> ResolvedParameter | None:
        self.calls.append(parameter.name)
        if self._value is _MISSING:
            return None
        if self._target is not None and parameter.name != self._target:
            return None
        return ResolvedParameter(parameter.name, self._value)


class FaultyResolver(BaseResolver):
    """Strategy that raises instead of answering."""

    def resolve(self, parameter, params):
        raise RuntimeError(f"backend unavailable for {parameter.name}")


class DictContainer:
    """Minimal service locator keyed by arbitrary identities."""

    def __init__(self, entries: dict[Any, Any] | None = None) -> None:
        self._entries = dict(entries or {})
        self.lookups: list[Any] = []

    def set(self, key: Any, value: Any) -> None:
        self._entries[key] = value

    def get(self, key: Any) -> Any:
        self.lookups.append(key)
        if key not in self._entries:
            raise LookupError(f"No entry for {key!r}")
        return self._entries[key]


@pytest.fixture
def recording_resolver() -> Callable[..., RecordingResolver]:
    """Provide a factory for RecordingResolver instances.

    Pass ``value`` to make the strategy answer; ``target`` restricts the
    answer to one parameter name.
    """
    return RecordingResolver


@pytest.fixture
def faulty_resolver() -> FaultyResolver:
    """Provide a strategy that always raises."""
    return FaultyResolver()


@pytest.fixture
def container() -> DictContainer:
    """Provide an empty service locator."""
    return DictContainer()


@pytest.fixture
def required_id() -> ParameterDescriptor:
    """Required, non-nullable parameter ``id`` at position 0."""
    return ParameterDescriptor(name="id", position=0)


@pytest.fixture
def sample_parameters() -> list[ParameterDescriptor]:
    """A typical parameter list: required, defaulted and nullable."""
    return [
        ParameterDescriptor(name="repo", position=0, annotation=object),
        ParameterDescriptor(name="limit", position=1, has_default=True, default_value=10),
        ParameterDescriptor(name="logger", position=2, nullable=True),
    ]


@pytest.fixture
def resolver_logs(
    caplog: pytest.LogCaptureFixture,
) -> Generator[pytest.LogCaptureFixture, None, None]:
    """Capture package logs down to TRACE level."""
    with caplog.at_level(5, logger="parameter_resolver"):
        yield caplog
