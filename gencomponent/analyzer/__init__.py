"""gencomponent package analyzer.

Imports a package of component declarations and classifies every
dataclass field as a prop or as state.

Usage::

    from gencomponent.analyzer import PackageAnalyzer

    result = PackageAnalyzer(search_paths=["."]).analyze("app.components")
    for component in result.components:
        print(component.name, len(component.props), len(component.state))
"""

from gencomponent.analyzer.loader import PackageAnalyzer, classify_field, is_instance_handle
from gencomponent.analyzer.models import (
    AnalysisResult,
    Component,
    ComponentField,
    FieldRole,
)

__all__ = [
    "PackageAnalyzer",
    "classify_field",
    "is_instance_handle",
    "AnalysisResult",
    "Component",
    "ComponentField",
    "FieldRole",
]
