"""gencomponent configuration.

Typed settings for a generator run.  Uses Pydantic v2 models so values are
validated at construction time and can be serialised to/from JSON or read
from environment variables.  The CLI accepts no flags; anything beyond the
package path comes from here.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from gencomponent.synthesizer.generator import DEFAULT_HEADER


class Config(BaseModel):
    """Settings for one generator run.

    Instances are typically created once by the CLI entry point and passed
    to the ``Pipeline``.
    """

    output_dir: Path = Field(default=Path("."))
    output_filename: str = Field(default="impl_gen.py")
    header: str = Field(default=DEFAULT_HEADER, description="First line of the generated module")
    search_paths: list[Path] = Field(
        default_factory=list, description="Extra sys.path entries used to locate the package"
    )

    @field_validator("output_filename")
    @classmethod
    def _importable_module_name(cls, value: str) -> str:
        stem, dot, suffix = value.rpartition(".")
        if not dot or suffix != "py" or not stem.isidentifier():
            raise ValueError(f"output filename must be an importable module name, got {value!r}")
        return value

    @field_validator("header")
    @classmethod
    def _header_is_comment(cls, value: str) -> str:
        if not all(line.startswith("#") for line in value.splitlines()):
            raise ValueError("header must consist of comment lines")
        return value

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def output_path(self) -> Path:
        """Where the generated module is written."""
        return self.output_dir / self.output_filename

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file and return its path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            GENCOMPONENT_OUTPUT_DIR, GENCOMPONENT_OUTPUT_FILE,
            GENCOMPONENT_SEARCH_PATHS (``os.pathsep`` separated).
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("GENCOMPONENT_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["GENCOMPONENT_OUTPUT_DIR"])
        if os.environ.get("GENCOMPONENT_OUTPUT_FILE"):
            kwargs["output_filename"] = os.environ["GENCOMPONENT_OUTPUT_FILE"]

        raw_paths = os.environ.get("GENCOMPONENT_SEARCH_PATHS", "")
        kwargs["search_paths"] = [Path(p) for p in raw_paths.split(os.pathsep) if p.strip()]

        return cls(**kwargs)
