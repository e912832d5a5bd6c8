"""Tests for ResolverCollector.

These tests verify:
- Construction from an ordered iterable (possibly empty)
- Registration order is preserved, duplicates are kept
- Iteration is stable and repeatable
- Non-strategy entries are rejected
- Name lookup and debugging helpers
- Acquisition from a service locator
"""

from __future__ import annotations

import threading

import pytest

from parameter_resolver import (
    InvalidCollectorError,
    InvalidResolverError,
    ResolverCollector,
    ServiceLocator,
)


class TestConstruction:
    """Tests for building a collector."""

    def test_empty(self):
        """An empty collector is valid and truthy."""
        collector = ResolverCollector()

        assert len(collector) == 0
        assert list(collector) == []
        assert bool(collector) is True

    def test_preserves_order(self, recording_resolver):
        """Strategies iterate in construction order."""
        strategies = [recording_resolver(n) for n in ("b", "a", "c")]

        collector = ResolverCollector(strategies)

        assert list(collector) == strategies
        assert collector.resolver_names == ["b", "a", "c"]

    def test_accepts_generator(self, recording_resolver):
        """Any iterable can seed the collector."""
        collector = ResolverCollector(recording_resolver(n) for n in ("x", "y"))

        assert collector.resolver_names == ["x", "y"]

    def test_keeps_duplicates(self, recording_resolver):
        """The same strategy registered twice appears twice."""
        strategy = recording_resolver("dup")

        collector = ResolverCollector([strategy, strategy])

        assert list(collector) == [strategy, strategy]

    def test_rejects_non_resolver(self):
        """Objects that are not strategies are rejected."""
        with pytest.raises(InvalidResolverError, match="got object"):
            ResolverCollector([object()])  # type: ignore[list-item]

    def test_rejects_plain_callable(self):
        """A bare function is not a strategy."""
        with pytest.raises(InvalidResolverError, match="got function"):
            ResolverCollector().add_resolver(lambda p, params: None)  # type: ignore[arg-type]


class TestAddResolver:
    """Tests for builder-style registration."""

    def test_appends(self, recording_resolver):
        """add_resolver() appends at the end."""
        first = recording_resolver("first")
        second = recording_resolver("second")
        collector = ResolverCollector([first])

        collector.add_resolver(second)

        assert list(collector) == [first, second]

    def test_chainable(self, recording_resolver):
        """add_resolver() returns the collector."""
        collector = ResolverCollector()

        result = collector.add_resolver(recording_resolver("a")).add_resolver(
            recording_resolver("b")
        )

        assert result is collector
        assert len(collector) == 2

    def test_iteration_snapshot(self, recording_resolver):
        """An iterator taken before add_resolver() is not affected by it."""
        collector = ResolverCollector([recording_resolver("a")])
        iterator = iter(collector)

        collector.add_resolver(recording_resolver("b"))

        assert [r.name for r in iterator] == ["a"]
        assert collector.resolver_names == ["a", "b"]

    def test_concurrent_registration(self, recording_resolver):
        """Concurrent add_resolver() calls lose no strategies."""
        collector = ResolverCollector()

        def register(prefix: str) -> None:
            for i in range(50):
                collector.add_resolver(recording_resolver(f"{prefix}{i}"))

        threads = [threading.Thread(target=register, args=(p,)) for p in "abcd"]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(collector) == 200


class TestIntrospection:
    """Tests for lookup and debugging helpers."""

    def test_iteration_is_repeatable(self, recording_resolver):
        """Iterating twice yields the same sequence."""
        collector = ResolverCollector([recording_resolver("a"), recording_resolver("b")])

        assert list(collector) == list(collector)

    def test_get_resolver(self, recording_resolver):
        """get_resolver() returns the first strategy with the name."""
        first = recording_resolver("same")
        second = recording_resolver("same")
        collector = ResolverCollector([first, second])

        assert collector.get_resolver("same") is first
        assert collector.get_resolver("missing") is None

    def test_default_name_is_class_name(self, faulty_resolver):
        """Strategies without a custom name use their class name."""
        collector = ResolverCollector([faulty_resolver])

        assert collector.resolver_names == ["FaultyResolver"]

    def test_chain_info(self, recording_resolver):
        """chain_info() lists position, name and type."""
        collector = ResolverCollector([recording_resolver("a"), recording_resolver("b")])

        assert collector.chain_info() == [
            {"position": 0, "name": "a", "type": "RecordingResolver"},
            {"position": 1, "name": "b", "type": "RecordingResolver"},
        ]

    def test_repr(self, recording_resolver):
        """repr() shows the strategy names."""
        collector = ResolverCollector([recording_resolver("a")])

        assert repr(collector) == "ResolverCollector(['a'])"


class TestFromContainer:
    """Tests for acquiring a shared collector."""

    def test_default_key_is_class(self, container):
        """The collector class is the default container identity."""
        collector = ResolverCollector()
        container.set(ResolverCollector, collector)

        assert ResolverCollector.from_container(container) is collector
        assert container.lookups == [ResolverCollector]

    def test_custom_key(self, container):
        """A custom identity can be given."""
        collector = ResolverCollector()
        container.set("param.resolvers", collector)

        assert ResolverCollector.from_container(container, "param.resolvers") is collector

    def test_wrong_type(self, container):
        """The error names the key and the type that was found."""
        container.set("param.resolvers", "nope")

        with pytest.raises(InvalidCollectorError) as exc_info:
            ResolverCollector.from_container(container, "param.resolvers")

        assert "'param.resolvers'" in str(exc_info.value)
        assert "got str" in str(exc_info.value)

    def test_container_satisfies_protocol(self, container):
        """Test containers and dicts both satisfy ServiceLocator."""
        assert isinstance(container, ServiceLocator)
        assert isinstance({}, ServiceLocator)
