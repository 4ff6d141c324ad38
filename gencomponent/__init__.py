"""gencomponent -- build-time generator for component reconciliation scaffolding.

Reads dataclass component declarations from a package, classifies their
fields into props and state, and emits a module with accessor protocols,
backing cores and reconcile functions for the host UI runtime.
"""

__version__ = "0.1.0"
