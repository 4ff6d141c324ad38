"""Import resolution for generated modules."""

from __future__ import annotations

from gencomponent.analyzer.models import AnalysisResult


# Modules every generated file refers to regardless of its components.
FRAMEWORK_IMPORTS: frozenset[str] = frozenset({
    "functools",
    "typing",
    "gencomponent.runtime.componentutil",
    "gencomponent.runtime.dom",
})


def resolve_imports(result: AnalysisResult) -> list[str]:
    """Return the sorted, deduplicated modules the generated code imports.

    Combines the framework modules, the analyzed package itself, and every
    module referenced by a prop or state type.  Builtins never appear.
    """
    imports = set(FRAMEWORK_IMPORTS)
    imports.add(result.package)
    for component in result.components:
        for field in component.all_fields:
            imports.update(field.modules)
    imports.discard("builtins")
    return sorted(imports)
