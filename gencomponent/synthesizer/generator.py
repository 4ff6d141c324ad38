"""Code synthesis for discovered components.

Renders ``impl.py.j2`` with the analysis result and the resolved imports,
then checks and normalizes the emitted source.  The output is a pure
function of the analysis result: no timestamps, no environment details.
"""

from __future__ import annotations

import ast
import re
from typing import Any

from jinja2 import TemplateError

from gencomponent.analyzer.models import AnalysisResult
from gencomponent.errors import SynthesisError
from gencomponent.synthesizer.imports import resolve_imports
from gencomponent.synthesizer.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_HEADER = "# GENERATED, DO NOT CHANGE"
IMPL_TEMPLATE = "impl.py.j2"

_TRAILING_WS = re.compile(r"[ \t]+$", re.MULTILINE)
_EXCESS_BLANK_LINES = re.compile(r"\n{4,}")


# ---------------------------------------------------------------------------
# Synthesizer
# ---------------------------------------------------------------------------


class CodeSynthesizer:
    """Turns an :class:`AnalysisResult` into one generated Python module.

    Per component the module holds the props/state/accessor protocols, the
    instance handle class, the backing core with ``apply_props`` and state
    setters, and the reconcile function.  A single ``install()`` wires every
    reconcile function into a registry and into the host's hook slots.
    """

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        header: str = DEFAULT_HEADER,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.header = header

    def build_context(self, result: AnalysisResult, imports: list[str]) -> dict[str, Any]:
        """Assemble the template context."""
        return {
            "header": self.header,
            "package": result.package,
            "package_name": result.package_name,
            "imports": imports,
            "components": result.components,
        }

    def synthesize(self, result: AnalysisResult, imports: list[str] | None = None) -> str:
        """Render, check and normalize the generated module.

        Args:
            result: Components discovered by the analyzer.
            imports: Modules to import; resolved from *result* when omitted.

        Raises:
            SynthesisError: Template rendering failed or the output is not
                valid Python.
        """
        if imports is None:
            imports = resolve_imports(result)
        context = self.build_context(result, imports)
        try:
            rendered = self.renderer.render(IMPL_TEMPLATE, context)
        except TemplateError as exc:
            raise SynthesisError(result.package, f"template rendering failed: {exc}") from exc
        return format_source(rendered, package=result.package)


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


def format_source(source: str, package: str = "<generated>") -> str:
    """Check that *source* parses and normalize its layout.

    Strips trailing whitespace, collapses runs of blank lines to at most
    two, and ends the text with exactly one newline.

    Raises:
        SynthesisError: The source is not valid Python.
    """
    try:
        ast.parse(source)
    except SyntaxError as exc:
        raise SynthesisError(
            package, f"generated source is malformed (line {exc.lineno}: {exc.msg})"
        ) from exc

    text = _TRAILING_WS.sub("", source)
    text = _EXCESS_BLANK_LINES.sub("\n\n\n", text)
    return text.strip("\n") + "\n"
