"""Unit tests for runtime support (gencomponent.runtime.componentutil / dom)."""

from __future__ import annotations

import collections.abc
from dataclasses import dataclass, field
from typing import Annotated, Optional

import pytest

from gencomponent.runtime.componentutil import (
    Core,
    EmptyLifecycle,
    NotMountedError,
    initial_value,
    zero_value,
)
from gencomponent.runtime.dom import Instance, Registry, UnknownComponentError, component_id


pytestmark = pytest.mark.unit


@dataclass
class Sample:
    count: int
    title: str
    tags: list[str]
    owner: Optional[str]
    label: str = "hello"
    items: dict[str, int] = field(default_factory=lambda: {"a": 1})


class Pinned:
    __component_id__ = "widgets.Pinned"


# ---------------------------------------------------------------------------
# zero_value / initial_value
# ---------------------------------------------------------------------------


class TestZeroValue:
    @pytest.mark.parametrize(
        ("tp", "expected"),
        [
            (int, 0),
            (float, 0.0),
            (bool, False),
            (str, ""),
            (bytes, b""),
            (list[int], []),
            (dict[str, int], {}),
            (set[str], set()),
            (tuple[int, ...], ()),
            (collections.abc.Sequence[int], []),
            (collections.abc.Mapping[str, int], {}),
            (Annotated[int, "meta"], 0),
        ],
    )
    def test_empty_construction(self, tp, expected):
        assert zero_value(tp) == expected

    def test_optional_and_unknown_are_none(self):
        assert zero_value(Optional[int]) is None
        assert zero_value(int | str) is None
        assert zero_value(Instance) is None

    def test_containers_are_fresh(self):
        assert zero_value(list[int]) is not zero_value(list[int])


class TestInitialValue:
    def test_zero_value_without_default(self):
        assert initial_value(Sample, "count") == 0
        assert initial_value(Sample, "title") == ""
        assert initial_value(Sample, "tags") == []
        assert initial_value(Sample, "owner") is None

    def test_declared_default(self):
        assert initial_value(Sample, "label") == "hello"

    def test_default_factory_called_each_time(self):
        first = initial_value(Sample, "items")
        assert first == {"a": 1}
        assert initial_value(Sample, "items") is not first


# ---------------------------------------------------------------------------
# Core
# ---------------------------------------------------------------------------


class _Lifecycle(EmptyLifecycle):
    def __init__(self) -> None:
        self.renders = 0

    def render(self) -> str:
        self.renders += 1
        return f"node-{self.renders}"


class TestCore:
    def test_render_without_lifecycle_raises(self):
        with pytest.raises(NotMountedError):
            Core().do_render()

    def test_do_render_stores_node(self):
        core = Core()
        core.lifecycle = _Lifecycle()

        core.do_render()

        assert core.node() == "node-1"
        assert core.render_count == 1

    def test_update_renders_every_time(self):
        core = Core()
        core.lifecycle = _Lifecycle()

        core.update()
        core.update()

        assert core.render_count == 2
        assert core.node() == "node-2"

    def test_empty_lifecycle_is_noop(self):
        lifecycle = EmptyLifecycle()
        lifecycle.component_will_mount()
        lifecycle.component_did_mount()
        assert lifecycle.render() is None


# ---------------------------------------------------------------------------
# component_id / Registry
# ---------------------------------------------------------------------------


class TestComponentId:
    def test_module_and_qualname(self):
        assert component_id(Sample) == f"{__name__}.Sample"
        assert component_id(Sample(0, "", [], None)) == f"{__name__}.Sample"

    def test_explicit_identity(self):
        assert component_id(Pinned) == "widgets.Pinned"
        assert component_id(Pinned()) == "widgets.Pinned"


class TestRegistry:
    def test_lookup_unknown_raises(self):
        with pytest.raises(UnknownComponentError):
            Registry().lookup(Sample)

    def test_reconcile_dispatches_by_new_spec_type(self):
        calls: list[tuple[object, object]] = []
        handle = Instance()

        def fake_reconcile(new_spec, old_spec):
            calls.append((new_spec, old_spec))
            return handle

        registry = Registry()
        registry.register(Sample, fake_reconcile)
        spec = Sample(0, "", [], None)

        assert registry.reconcile(spec) is handle
        assert calls == [(spec, None)]

    def test_reconcile_unknown_spec_raises(self):
        with pytest.raises(UnknownComponentError):
            Registry().reconcile(Pinned())

    def test_register_replaces(self):
        registry = Registry()
        registry.register(Sample, lambda n, o: None)
        replacement = lambda n, o: None  # noqa: E731
        registry.register(Sample, replacement)

        assert registry.lookup(Sample) is replacement
        assert len(registry) == 1

    def test_membership_and_iteration(self):
        registry = Registry()
        registry.register(Pinned, lambda n, o: None)
        registry.register(Sample, lambda n, o: None)

        assert Pinned in registry
        assert "widgets.Pinned" not in registry
        assert list(registry) == sorted(["widgets.Pinned", f"{__name__}.Sample"])
