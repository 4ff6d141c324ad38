"""Unit tests for utility functions (gencomponent.utils).

Tests cover:
- snake_case (various inputs)
- write_atomic (creates parents, replaces, leaves no temp files)
- Rich output helpers
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from gencomponent.utils import (
    console,
    print_error,
    print_phase_header,
    print_success,
    print_summary_table,
    print_warning,
    snake_case,
    write_atomic,
)


class TestSnakeCase:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("Counter", "counter"),
            ("TodoListItem", "todo_list_item"),
            ("HTTPHeader", "http_header"),
            ("Item2Row", "item2_row"),
            ("already_snake", "already_snake"),
            ("some-thing", "some_thing"),
        ],
    )
    def test_conversions(self, value, expected):
        assert snake_case(value) == expected


class TestWriteAtomic:
    @pytest.mark.unit
    def test_creates_parents(self, tmp_path: Path):
        target = tmp_path / "a" / "b" / "impl_gen.py"
        written = write_atomic(target, "x = 1\n")

        assert written == target.resolve()
        assert target.read_text(encoding="utf-8") == "x = 1\n"

    @pytest.mark.unit
    def test_replaces_existing_file(self, tmp_path: Path):
        target = tmp_path / "impl_gen.py"
        target.write_text("old\n", encoding="utf-8")

        write_atomic(target, "new\n")

        assert target.read_text(encoding="utf-8") == "new\n"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["impl_gen.py"]

    @pytest.mark.unit
    def test_failure_keeps_old_content_and_cleans_up(self, tmp_path: Path):
        target = tmp_path / "impl_gen.py"
        target.write_text("old\n", encoding="utf-8")

        with patch("gencomponent.utils.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(OSError):
                write_atomic(target, "new\n")

        assert target.read_text(encoding="utf-8") == "old\n"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["impl_gen.py"]


class TestRichHelpers:
    @pytest.mark.unit
    def test_messages_are_printed(self):
        with console.capture() as capture:
            print_success("done")
            print_error("broken")
            print_warning("careful")
            print_phase_header("ANALYZE")
        out = capture.get()

        assert "done" in out
        assert "broken" in out
        assert "careful" in out
        assert "ANALYZE" in out

    @pytest.mark.unit
    def test_summary_table(self):
        with console.capture() as capture:
            print_summary_table([("Counter", "1", "1")], ["Component", "Props", "State"], title="app")
        out = capture.get()

        assert "Counter" in out
        assert "Props" in out
