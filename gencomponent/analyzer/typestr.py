"""Render resolved type hints as importable annotation strings.

``describe`` turns a runtime type (``list[datetime.date] | None``) into
the text the generated module uses as an annotation and reports every
module that text refers to, so the import resolver can emit the matching
``import`` statements.  Builtins stay unqualified; everything else is
written as ``<module>.<qualname>``.
"""

from __future__ import annotations

import types
import typing
from typing import Any


class UnrepresentableTypeError(ValueError):
    """Raised for types that cannot be referenced from another module."""


def describe(tp: Any) -> tuple[str, set[str]]:
    """Return ``(annotation, modules)`` for a resolved type hint."""
    modules: set[str] = set()
    return _format(tp, modules), modules


def strip_annotated(tp: Any) -> Any:
    """Drop ``Annotated[...]`` wrappers, keeping the underlying type."""
    while typing.get_origin(tp) is typing.Annotated:
        tp = typing.get_args(tp)[0]
    return tp


def _format(tp: Any, modules: set[str]) -> str:
    if tp is None or tp is type(None):
        return "None"
    if tp is Ellipsis:
        return "..."
    if tp is typing.Any or isinstance(tp, typing.TypeVar):
        modules.add("typing")
        return "typing.Any"
    if isinstance(tp, list):
        # Callable parameter lists
        return "[" + ", ".join(_format(arg, modules) for arg in tp) + "]"

    origin = typing.get_origin(tp)
    args = typing.get_args(tp)

    if origin is typing.Annotated:
        return _format(args[0], modules)
    if origin is typing.Union or origin is types.UnionType:
        return " | ".join(_format(arg, modules) for arg in args)
    if origin is typing.Literal:
        modules.add("typing")
        return f"typing.Literal[{', '.join(repr(arg) for arg in args)}]"
    if origin is not None:
        base = _qualify(origin, modules)
        if not args:
            return base
        return f"{base}[{', '.join(_format(arg, modules) for arg in args)}]"
    if isinstance(tp, type):
        return _qualify(tp, modules)

    raise UnrepresentableTypeError(f"cannot express {tp!r} as an annotation")


def _qualify(cls: Any, modules: set[str]) -> str:
    module = getattr(cls, "__module__", None)
    qualname = getattr(cls, "__qualname__", None)
    if not module or not qualname:
        raise UnrepresentableTypeError(f"cannot express {cls!r} as an annotation")
    if "<locals>" in qualname:
        raise UnrepresentableTypeError(f"{module}.{qualname} is local to a function")
    if module == "builtins":
        return qualname
    modules.add(module)
    return f"{module}.{qualname}"
