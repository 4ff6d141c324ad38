"""Exceptions raised by the gencomponent generator.

Every failure is fatal to the run: the pipeline never writes a partial
artifact, so these errors simply propagate up to the CLI entry point.
"""

from __future__ import annotations


class GenComponentError(Exception):
    """Base class for all generator failures."""

    def __init__(self, package: str, message: str) -> None:
        self.package = package
        super().__init__(f"{package}: {message}")


class LoadError(GenComponentError):
    """Raised when the target package cannot be located."""


class TypeCheckError(GenComponentError):
    """Raised when the package fails to import or its types cannot be resolved."""

    def __init__(
        self,
        package: str,
        message: str,
        component: str | None = None,
    ) -> None:
        self.component = component
        if component:
            message = f"{component}: {message}"
        super().__init__(package, message)


class SynthesisError(GenComponentError):
    """Raised when template rendering fails or the emitted source is malformed."""
