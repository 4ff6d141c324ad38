"""Pydantic v2 models for the package analyzer.

Describes the components discovered in a target package: their props,
their state, and the few naming facts code synthesis needs.  All models are
frozen; a component list is immutable once discovery finishes.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class FieldRole(str, Enum):
    """Whether a field is supplied by the caller or owned by the instance."""
    PROP = "prop"
    STATE = "state"


# ---------------------------------------------------------------------------
# Field & Component Models
# ---------------------------------------------------------------------------

class ComponentField(BaseModel):
    """A single prop or state field of a component."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Attribute name as declared on the dataclass")
    accessor: str = Field(..., description="Public accessor name, e.g. 'count' for '_count'")
    role: FieldRole = Field(..., description="Prop or state")
    annotation: str = Field(..., description="Fully qualified type annotation")
    modules: list[str] = Field(
        default_factory=list, description="Modules the annotation refers to"
    )

    @property
    def storage(self) -> str:
        """Private backing attribute on the generated core."""
        return f"_{self.accessor}"


class Component(BaseModel):
    """A component discovered in the analyzed package."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Class name, e.g. 'Counter'")
    module: str = Field(..., description="Module that defines the class")
    component_id: str = Field(..., description="Type identity compared during reconcile")
    props: list[ComponentField] = Field(default_factory=list, description="Props in declaration order")
    state: list[ComponentField] = Field(default_factory=list, description="State in declaration order")
    instance_field: str = Field(
        default="instance", description="Spec attribute that carries the instance handle"
    )
    hook_slot: Optional[str] = Field(
        default=None, description="Reconcile slot declared by the host package, if any"
    )

    @property
    def all_fields(self) -> list[ComponentField]:
        """Props followed by state."""
        return [*self.props, *self.state]


# ---------------------------------------------------------------------------
# Top-Level Analysis Result
# ---------------------------------------------------------------------------

class AnalysisResult(BaseModel):
    """Everything the analyzer learned about one package."""
    model_config = ConfigDict(frozen=True)

    package: str = Field(..., description="Import path of the analyzed package")
    components: list[Component] = Field(
        default_factory=list, description="Components, alphabetical by name"
    )

    @property
    def package_name(self) -> str:
        """Last dotted segment of the package path."""
        return self.package.rsplit(".", 1)[-1]
