"""Base classes and helpers for generated component implementations.

Every generated ``_<Name>Core`` subclasses :class:`Core`, and every
generated ``<Name>Impl`` mixes in :class:`EmptyLifecycle` so hosts only
override the hooks they care about.
"""

from __future__ import annotations

import collections.abc
import dataclasses
import functools
import types
import typing
from typing import Any, Protocol


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------


class Lifecycle(Protocol):
    """Hooks the reconcile protocol invokes on an instance handle."""

    def component_will_mount(self) -> None: ...

    def component_did_mount(self) -> None: ...

    def render(self) -> Any: ...


class EmptyLifecycle:
    """No-op implementation of every :class:`Lifecycle` hook."""

    def component_will_mount(self) -> None:
        pass

    def component_did_mount(self) -> None:
        pass

    def render(self) -> Any:
        return None


# ---------------------------------------------------------------------------
# Core
# ---------------------------------------------------------------------------


class NotMountedError(RuntimeError):
    """Raised when a Core is asked to render before a lifecycle is bound."""


class Core:
    """Backing object shared by all generated component cores.

    Holds the lifecycle (the instance handle) the core renders through and
    the node produced by the most recent render.  Rendering happens on the
    caller's thread; callers serialize all access to a given core.
    """

    def __init__(self) -> None:
        self.lifecycle: Lifecycle | None = None
        self.render_count = 0
        self._node: Any = None

    def node(self) -> Any:
        """Return the node produced by the last render, or ``None``."""
        return self._node

    def update(self) -> None:
        """Request a re-render after a state change."""
        self.do_render()

    def do_render(self) -> None:
        """Render through the bound lifecycle and keep the resulting node."""
        if self.lifecycle is None:
            raise NotMountedError(f"{type(self).__name__} has no lifecycle bound")
        self.render_count += 1
        self._node = self.lifecycle.render()


# ---------------------------------------------------------------------------
# Initial values
# ---------------------------------------------------------------------------

_ZERO_FACTORIES: dict[Any, Any] = {
    bool: bool,
    int: int,
    float: float,
    complex: complex,
    str: str,
    bytes: bytes,
    list: list,
    dict: dict,
    set: set,
    frozenset: frozenset,
    tuple: tuple,
    collections.abc.Sequence: list,
    collections.abc.MutableSequence: list,
    collections.abc.Mapping: dict,
    collections.abc.MutableMapping: dict,
    collections.abc.Set: set,
    collections.abc.MutableSet: set,
}


def zero_value(tp: Any) -> Any:
    """Return the zero value for a resolved type hint.

    Scalars and containers map to their empty construction (``int`` -> 0,
    ``list[str]`` -> ``[]``).  Optional types, unions and anything else
    without an obvious empty form map to ``None``.
    """
    origin = typing.get_origin(tp)
    if origin is typing.Annotated:
        return zero_value(typing.get_args(tp)[0])
    if origin is typing.Union or origin is types.UnionType:
        return None
    factory = _ZERO_FACTORIES.get(origin if origin is not None else tp)
    return factory() if factory is not None else None


@functools.lru_cache(maxsize=None)
def _field_table(spec_type: type) -> tuple[dict[str, dataclasses.Field], dict[str, Any]]:
    fields = {f.name: f for f in dataclasses.fields(spec_type)}
    hints = typing.get_type_hints(spec_type, include_extras=True)
    return fields, hints


def initial_value(spec_type: type, field_name: str) -> Any:
    """Return the value a core's backing storage starts with.

    Uses the dataclass field's ``default`` or ``default_factory`` when one
    is declared, and the type's :func:`zero_value` otherwise.
    """
    fields, hints = _field_table(spec_type)
    field = fields[field_name]
    if field.default is not dataclasses.MISSING:
        return field.default
    if field.default_factory is not dataclasses.MISSING:
        return field.default_factory()
    return zero_value(hints.get(field_name, Any))
