"""Runtime support imported by generated component modules."""

from gencomponent.runtime.componentutil import Core, EmptyLifecycle, Lifecycle, NotMountedError
from gencomponent.runtime.dom import Instance, Prop, Registry, State, UnknownComponentError, component_id

__all__ = [
    "Core",
    "EmptyLifecycle",
    "Instance",
    "Lifecycle",
    "NotMountedError",
    "Prop",
    "Registry",
    "State",
    "UnknownComponentError",
    "component_id",
]
