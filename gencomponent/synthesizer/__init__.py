"""gencomponent code synthesizer -- emits reconciliation scaffolding.

Quick usage::

    from gencomponent.analyzer import PackageAnalyzer
    from gencomponent.synthesizer import CodeSynthesizer, resolve_imports

    result = PackageAnalyzer(["."]).analyze("app.components")
    source = CodeSynthesizer().synthesize(result, resolve_imports(result))
"""

from gencomponent.synthesizer.generator import CodeSynthesizer, format_source
from gencomponent.synthesizer.imports import FRAMEWORK_IMPORTS, resolve_imports
from gencomponent.synthesizer.templates import TemplateRenderer

__all__ = [
    "CodeSynthesizer",
    "FRAMEWORK_IMPORTS",
    "TemplateRenderer",
    "format_source",
    "resolve_imports",
]
