"""Host-side types shared by component declarations and generated code.

Component packages import :class:`Instance` to declare the handle field on
their dataclasses, and optionally :class:`Prop` / :class:`State` to tag a
field's role explicitly.  Generated modules register their reconcile
functions in a :class:`Registry`, which the host's render engine uses to
dispatch every incoming Spec.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Optional


ReconcileFunc = Callable[[Any, Optional[Any]], "Instance"]


# ---------------------------------------------------------------------------
# Handle and role markers
# ---------------------------------------------------------------------------


class Instance:
    """Opaque handle binding a generated Core to a renderable node.

    Created exactly once when an occurrence mounts and carried unchanged on
    every later Spec of that occurrence.  Fields typed as ``Instance`` are
    framework-managed and never treated as props or state.
    """


class Prop:
    """Marker for ``Annotated[T, Prop]``: the field is supplied by the caller."""


class State:
    """Marker for ``Annotated[T, State]``: the field is owned by the instance."""


# ---------------------------------------------------------------------------
# Type identity
# ---------------------------------------------------------------------------


def component_id(spec: Any) -> str:
    """Return the component type identity carried by *spec*.

    A Spec class may pin its identity with a ``__component_id__`` class
    attribute; otherwise the identity is ``"<module>.<qualname>"``.
    """
    spec_type = spec if isinstance(spec, type) else type(spec)
    explicit = getattr(spec_type, "__component_id__", None)
    if explicit:
        return str(explicit)
    return f"{spec_type.__module__}.{spec_type.__qualname__}"


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class UnknownComponentError(LookupError):
    """Raised when a Spec's component type has no registered reconcile function."""


class Registry:
    """Maps component type identity to its reconcile function.

    Built once at startup (usually by a generated ``install()``) and handed
    to the render engine by reference.
    """

    def __init__(self) -> None:
        self._entries: dict[str, ReconcileFunc] = {}

    def register(self, component_type: type, fn: ReconcileFunc) -> None:
        """Register *fn* as the reconcile function for *component_type*.

        Re-registering a type replaces the previous function.
        """
        self._entries[component_id(component_type)] = fn

    def lookup(self, component_type: type) -> ReconcileFunc:
        """Return the reconcile function for *component_type*.

        Raises:
            UnknownComponentError: If nothing is registered for the type.
        """
        key = component_id(component_type)
        try:
            return self._entries[key]
        except KeyError:
            raise UnknownComponentError(f"No reconcile function registered for {key}") from None

    def reconcile(self, new_spec: Any, old_spec: Any | None = None) -> Instance:
        """Dispatch *new_spec* to its component's reconcile function.

        Returns:
            The instance handle attached to *new_spec* afterwards.
        """
        fn = self.lookup(type(new_spec))
        return fn(new_spec, old_spec)

    def __contains__(self, component_type: object) -> bool:
        if not isinstance(component_type, type):
            return False
        return component_id(component_type) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._entries))
