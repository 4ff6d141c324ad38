"""Shared pytest fixtures for the gencomponent test suite.

Provides reusable fixtures for:
- Throwaway component packages written under ``tmp_path``
- Generating and importing the scaffolding module for such a package
- Sample component sources (Counter, Badge)
"""

from __future__ import annotations

import importlib
import sys
import textwrap
import uuid
from collections.abc import Callable
from pathlib import Path
from types import ModuleType

import pytest

from gencomponent.analyzer import PackageAnalyzer
from gencomponent.synthesizer import CodeSynthesizer


# ---------------------------------------------------------------------------
# Sample component sources
# ---------------------------------------------------------------------------

COUNTER_SOURCE = '''
from __future__ import annotations

from dataclasses import dataclass

from gencomponent.runtime.dom import Instance


@dataclass
class Counter:
    label: str = ""
    _count: int = 0
    instance: Instance | None = None


@dataclass
class Badge:
    text: str = ""
    instance: Instance | None = None


reconcile_counter = None
'''


# ---------------------------------------------------------------------------
# Package factories
# ---------------------------------------------------------------------------

@pytest.fixture
def make_package(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Callable[..., str]:
    """Factory writing a uniquely named package into ``tmp_path``.

    Takes a mapping of relative file path -> source text and returns the
    package's import path.  Imported modules are evicted afterwards so
    tests never see each other's packages.
    """
    monkeypatch.syspath_prepend(str(tmp_path))
    created: list[str] = []

    def _make(files: dict[str, str] | str, name: str | None = None) -> str:
        if isinstance(files, str):
            files = {"__init__.py": files}
        name = name or f"pkg_{uuid.uuid4().hex[:10]}"
        root = tmp_path / name
        root.mkdir()
        for rel, content in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(content), encoding="utf-8")
        if "__init__.py" not in files:
            (root / "__init__.py").write_text("", encoding="utf-8")
        created.append(name)
        importlib.invalidate_caches()
        return name

    yield _make

    for module_name in list(sys.modules):
        if any(module_name == n or module_name.startswith(f"{n}.") for n in created):
            del sys.modules[module_name]


@pytest.fixture
def generate_module(tmp_path: Path, make_package) -> Callable[[str], tuple[ModuleType, ModuleType]]:
    """Generate, write and import the scaffolding for a component source.

    Returns ``(host_package, generated_module)``.
    """
    generated: list[str] = []

    def _generate(source: str) -> tuple[ModuleType, ModuleType]:
        package = make_package(source)
        result = PackageAnalyzer().analyze(package)
        module_name = f"{package}_impl_gen"
        (tmp_path / f"{module_name}.py").write_text(
            CodeSynthesizer().synthesize(result), encoding="utf-8"
        )
        importlib.invalidate_caches()
        generated.append(module_name)
        return importlib.import_module(package), importlib.import_module(module_name)

    yield _generate

    for module_name in generated:
        sys.modules.pop(module_name, None)


@pytest.fixture
def counter_package(make_package) -> str:
    """Import path of a package declaring ``Counter`` and ``Badge``."""
    return make_package(COUNTER_SOURCE)


@pytest.fixture
def counter_source() -> str:
    """Source of the ``Counter``/``Badge`` component package."""
    return COUNTER_SOURCE
