from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from step_check.checks import (
    InplaceRenameCheck,
    RenameObservedCheck,
    StepCompletionCheck,
    check,
    create_check,
    get_check,
    list_checks,
    load_check_modules,
)
from step_check.checks.registry import unregister
from step_check.host import InMemoryHost

from .conftest import PROJECT_CHECK

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def scratch_names():
    """Names registered during a test are removed afterwards."""
    names: list[str] = []
    yield names
    unregister(*names)


class TestBuiltins:
    def test_builtin_checks_registered(self):
        names = [name for name, _ in list_checks()]
        assert "inplace_rename" in names
        assert "rename_observed" in names
        assert names == sorted(names)

    def test_lookup(self):
        assert get_check("inplace_rename") is InplaceRenameCheck
        assert get_check("rename_observed") is RenameObservedCheck
        assert get_check("missing") is None

    def test_decorator_sets_name_and_description(self):
        assert InplaceRenameCheck.name == "inplace_rename"
        assert "in-place rename" in InplaceRenameCheck.description

    def test_create_check_binds_registry(self):
        host = InMemoryHost()
        created = create_check("inplace_rename", host)
        assert isinstance(created, InplaceRenameCheck)
        assert created.registry is host

    def test_unknown_check(self):
        with pytest.raises(KeyError, match="Unknown check: 'missing'"):
            create_check("missing", InMemoryHost())


class TestDecorator:
    def test_description_falls_back_to_docstring(self, scratch_names):
        @check("docstring_check")
        class DocCheck(StepCompletionCheck):
            """First line wins.

            Not this one.
            """

            def is_complete(self):
                return False

        scratch_names.append("docstring_check")
        assert DocCheck.description == "First line wins."

    def test_options_passed_through(self, scratch_names):
        @check("option_check")
        class OptionCheck(StepCompletionCheck):
            def __init__(self, registry, limit=1):
                super().__init__()
                self.limit = limit

            def is_complete(self):
                return False

        scratch_names.append("option_check")
        created = create_check("option_check", InMemoryHost(), limit=5)
        assert created.limit == 5


class TestLoadCheckModules:
    def test_loads_project_checks(self, tmp_path: Path, scratch_names):
        (tmp_path / "extract.py").write_text(
            PROJECT_CHECK.format(name="extract_constant_ok", description="Constant extracted"),
            encoding="utf-8",
        )
        scratch_names.append("extract_constant_ok")

        added = load_check_modules(tmp_path)

        assert added == ["extract_constant_ok"]
        assert ("extract_constant_ok", "Constant extracted") in list_checks()
        created = create_check("extract_constant_ok", InMemoryHost(), threshold=2)
        assert created.threshold == 2
        assert created.is_complete() is False

    def test_broken_module_is_skipped(self, tmp_path: Path, scratch_names, caplog):
        (tmp_path / "broken.py").write_text("raise RuntimeError('boom')\n", encoding="utf-8")
        (tmp_path / "good.py").write_text(
            PROJECT_CHECK.format(name="survivor_check", description="Still loads"),
            encoding="utf-8",
        )
        scratch_names.append("survivor_check")

        added = load_check_modules(tmp_path)

        assert added == ["survivor_check"]
        assert "failed to load check module" in caplog.text

    def test_private_modules_ignored(self, tmp_path: Path):
        (tmp_path / "_helpers.py").write_text("raise RuntimeError('never imported')\n", encoding="utf-8")
        assert load_check_modules(tmp_path) == []

    def test_missing_dir(self, tmp_path: Path):
        assert load_check_modules(tmp_path / "nope") == []
