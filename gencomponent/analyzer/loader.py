"""Package analysis: discover components and classify their fields.

Imports the target package, resolves every dataclass's type hints and
splits its fields into caller-supplied props and instance-owned state.

Classification rules, applied per field in declaration order:

1. A field typed as the opaque instance handle (``Instance`` or an optional
   ``Instance``) is framework-managed and skipped.
2. An explicit ``Annotated[T, Prop]`` or ``Annotated[T, State]`` marker wins.
3. Otherwise an exported name is a prop and an underscore-prefixed name is
   state.

Components are reported in alphabetical order so the generated module is
stable across runs.
"""

from __future__ import annotations

import dataclasses
import importlib
import importlib.util
import keyword
import sys
import types
import typing
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from gencomponent.analyzer.models import AnalysisResult, Component, ComponentField, FieldRole
from gencomponent.analyzer.typestr import UnrepresentableTypeError, describe, strip_annotated
from gencomponent.errors import LoadError, TypeCheckError
from gencomponent.runtime.dom import Instance, Prop, State, component_id
from gencomponent.utils import snake_case


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Members of the generated core and accessor protocols.
RESERVED_ACCESSORS = frozenset({
    "accessors",
    "apply_props",
    "do_render",
    "lifecycle",
    "node",
    "props",
    "render_count",
    "self",
    "state",
    "update",
})

HOOK_SLOT_PREFIX = "reconcile_"


# ---------------------------------------------------------------------------
# Analyzer
# ---------------------------------------------------------------------------


class PackageAnalyzer:
    """Discovers components in a package.

    Args:
        search_paths: Directories prepended to ``sys.path`` before the
            package is located, typically the working directory.
    """

    def __init__(self, search_paths: Sequence[str | Path] = ()) -> None:
        self.search_paths = [str(Path(p)) for p in search_paths]

    def analyze(self, package: str) -> AnalysisResult:
        """Load *package* and return its components.

        Raises:
            LoadError: The package cannot be located.
            TypeCheckError: The package fails to import or a component's
                types cannot be resolved.
        """
        module = self.load(package)
        components: list[Component] = []
        generated_names: dict[str, str] = {}
        for name in sorted(vars(module)):
            obj = getattr(module, name)
            if not _is_component_type(obj, name, module.__name__):
                continue
            # reconcile_<snake> and <SNAKE>_ID must stay unique per module.
            snake = snake_case(name)
            if snake in generated_names:
                raise TypeCheckError(
                    package,
                    f"components {generated_names[snake]!r} and {name!r} both generate "
                    f"reconcile_{snake}",
                    component=name,
                )
            generated_names[snake] = name
            components.append(_build_component(package, module, obj))
        return AnalysisResult(package=package, components=components)

    def load(self, package: str) -> types.ModuleType:
        """Locate and import *package*."""
        if not package or not all(part.isidentifier() for part in package.split(".")):
            raise LoadError(package, "not an absolute dotted import path")

        added = [entry for entry in self.search_paths if entry not in sys.path]
        sys.path[:0] = added
        try:
            return self._import(package)
        finally:
            for entry in added:
                if entry in sys.path:
                    sys.path.remove(entry)

    def _import(self, package: str) -> types.ModuleType:
        try:
            spec = importlib.util.find_spec(package)
        except ModuleNotFoundError as exc:
            raise LoadError(package, f"cannot locate package ({exc})") from exc
        except Exception as exc:
            # A parent package exists but failed while being imported.
            raise TypeCheckError(package, f"{type(exc).__name__}: {exc}") from exc
        if spec is None:
            raise LoadError(package, "cannot locate package")

        try:
            return importlib.import_module(package)
        except Exception as exc:
            raise TypeCheckError(package, f"{type(exc).__name__}: {exc}") from exc


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def classify_field(name: str, tp: Any) -> FieldRole:
    """Return the role of a field given its name and resolved type hint."""
    if typing.get_origin(tp) is typing.Annotated:
        for marker in tp.__metadata__:
            if marker is Prop or isinstance(marker, Prop):
                return FieldRole.PROP
            if marker is State or isinstance(marker, State):
                return FieldRole.STATE
    return FieldRole.STATE if name.startswith("_") else FieldRole.PROP


def is_instance_handle(tp: Any) -> bool:
    """Return ``True`` for ``Instance`` and ``Instance | None`` style hints."""
    tp = strip_annotated(tp)
    origin = typing.get_origin(tp)
    if origin is typing.Union or origin is types.UnionType:
        members = [arg for arg in typing.get_args(tp) if arg is not type(None)]
        return bool(members) and all(is_instance_handle(arg) for arg in members)
    return isinstance(tp, type) and issubclass(tp, Instance)


def accessor_name(field_name: str) -> str:
    """Public accessor for a field: the name without leading underscores."""
    return field_name.lstrip("_")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _is_component_type(obj: Any, name: str, package: str) -> bool:
    if not isinstance(obj, type) or not dataclasses.is_dataclass(obj):
        return False
    # Skip aliases and re-exports from other packages.
    if obj.__qualname__ != name:
        return False
    if obj.__module__ != package and not obj.__module__.startswith(package + "."):
        return False
    # Frozen dataclasses cannot carry an instance handle; they are value types.
    return not obj.__dataclass_params__.frozen


def _build_component(package: str, module: types.ModuleType, cls: type) -> Component:
    name = cls.__name__
    try:
        hints = typing.get_type_hints(cls, include_extras=True)
    except Exception as exc:
        raise TypeCheckError(
            package, f"cannot resolve type hints ({type(exc).__name__}: {exc})", component=name
        ) from exc

    props: list[ComponentField] = []
    state: list[ComponentField] = []
    instance_field: str | None = None
    taken: dict[str, str] = {}

    for field in dataclasses.fields(cls):
        tp = hints.get(field.name, Any)
        if is_instance_handle(tp):
            if instance_field is None:
                instance_field = field.name
            continue

        role = classify_field(field.name, tp)
        accessor = accessor_name(field.name)
        _check_accessor(package, name, field.name, accessor, role, taken)
        taken[accessor] = field.name
        if role is FieldRole.STATE:
            taken[f"set_{accessor}"] = field.name

        try:
            annotation, modules = describe(strip_annotated(tp))
        except UnrepresentableTypeError as exc:
            raise TypeCheckError(package, f"field {field.name!r}: {exc}", component=name) from exc

        entry = ComponentField(
            name=field.name,
            accessor=accessor,
            role=role,
            annotation=annotation,
            modules=sorted(modules),
        )
        if role is FieldRole.PROP:
            props.append(entry)
        else:
            state.append(entry)

    slot = f"{HOOK_SLOT_PREFIX}{snake_case(name)}"
    return Component(
        name=name,
        module=cls.__module__,
        component_id=component_id(cls),
        props=props,
        state=state,
        instance_field=instance_field or "instance",
        hook_slot=slot if hasattr(module, slot) else None,
    )


def _check_accessor(
    package: str,
    component: str,
    field_name: str,
    accessor: str,
    role: FieldRole,
    taken: dict[str, str],
) -> None:
    if not accessor.isidentifier() or keyword.iskeyword(accessor):
        raise TypeCheckError(
            package, f"field {field_name!r} has no usable accessor name", component=component
        )
    if accessor in RESERVED_ACCESSORS:
        raise TypeCheckError(
            package, f"field {field_name!r} collides with reserved member {accessor!r}",
            component=component,
        )
    if accessor in taken:
        raise TypeCheckError(
            package,
            f"fields {taken[accessor]!r} and {field_name!r} both map to accessor {accessor!r}",
            component=component,
        )
    setter = f"set_{accessor}"
    if role is FieldRole.STATE and setter in taken:
        raise TypeCheckError(
            package,
            f"setter {setter!r} for field {field_name!r} collides with field {taken[setter]!r}",
            component=component,
        )
