"""gencomponent pipeline orchestrator.

Runs one generator pass, strictly in order:

ANALYZE    -- import the package and classify component fields.
RESOLVE    -- collect the modules the generated code imports.
SYNTHESIZE -- render the template, then check and normalize the source.
WRITE      -- atomically write the module to the working directory.

Any failure aborts the run before WRITE, so a broken input never leaves a
partial artifact behind.

Usage::

    python -m gencomponent.pipeline app.components
    gencomponent app.components
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from rich.markup import escape

from gencomponent.analyzer import AnalysisResult, PackageAnalyzer
from gencomponent.config import Config
from gencomponent.errors import GenComponentError
from gencomponent.synthesizer import CodeSynthesizer, resolve_imports
from gencomponent.utils import (
    console,
    print_error,
    print_phase_header,
    print_success,
    print_summary_table,
    print_warning,
    write_atomic,
)


# ---------------------------------------------------------------------------
# Pipeline Orchestrator
# ---------------------------------------------------------------------------


class Pipeline:
    """Drives analyze -> resolve -> synthesize -> write for one package.

    Attributes:
        config: Run configuration.
        analyzer: Package analyzer; looks up packages from the working
            directory first, then ``config.search_paths``.
        synthesizer: Renders the generated module.
    """

    def __init__(
        self,
        config: Config,
        analyzer: PackageAnalyzer | None = None,
        synthesizer: CodeSynthesizer | None = None,
    ) -> None:
        self.config = config
        self.analyzer = analyzer or PackageAnalyzer([Path.cwd(), *config.search_paths])
        self.synthesizer = synthesizer or CodeSynthesizer(header=config.header)

    async def run(self, package: str) -> Path:
        """Generate the scaffolding module for *package*.

        Returns:
            Path of the written module.

        Raises:
            GenComponentError: Loading, type resolution or synthesis failed.
                Nothing has been written in that case.
        """
        print_phase_header("ANALYZE")
        result = self.analyzer.analyze(package)
        self._print_components(result)

        print_phase_header("RESOLVE")
        imports = resolve_imports(result)
        console.print(f"  [green]+[/green] {len(imports)} import(s)")

        print_phase_header("SYNTHESIZE")
        source = self.synthesizer.synthesize(result, imports)
        console.print(f"  [green]+[/green] {len(source.splitlines())} line(s)")

        print_phase_header("WRITE")
        path = await asyncio.to_thread(write_atomic, self.config.output_path, source)
        print_success(f"Wrote {path}")
        return path

    def _print_components(self, result: AnalysisResult) -> None:
        if not result.components:
            print_warning(f"No components found in {result.package}")
            return
        rows = [
            (
                component.name,
                str(len(component.props)),
                str(len(component.state)),
                component.hook_slot or "-",
            )
            for component in result.components
        ]
        print_summary_table(rows, ["Component", "Props", "State", "Hook slot"], title=result.package)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``python -m gencomponent.pipeline``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="gencomponent",
        description="Generate component reconciliation scaffolding for a package",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  gencomponent app.components\n"
            "  GENCOMPONENT_OUTPUT_DIR=app gencomponent app.components\n"
        ),
    )
    parser.add_argument(
        "package",
        help="Import path of the package that declares the components",
    )
    args = parser.parse_args(argv)

    try:
        config = Config.from_env()
    except ValueError as exc:
        print_error(f"Error: invalid configuration: {escape(str(exc))}")
        sys.exit(1)

    pipeline = Pipeline(config)
    try:
        asyncio.run(pipeline.run(args.package))
    except GenComponentError as exc:
        print_error(f"Error: {escape(str(exc))}")
        sys.exit(1)
    except OSError as exc:
        print_error(f"Error: cannot write {config.output_path}: {escape(str(exc))}")
        sys.exit(1)


if __name__ == "__main__":
    main()
