"""Shared fixtures for step-check tests."""
from __future__ import annotations

import shutil
import sys
from pathlib import Path

import pytest

from step_check.checks import create_check
from step_check.cli import main
from step_check.engine import PollResult, StepPoller
from step_check.host import Editor, InMemoryHost
from step_check.types import EditingContext, InputEvent

SCENARIOS_DIR = Path(__file__).parent / ".stepcheck" / "scenarios"


class StepHarness:
    """Test harness for driving one lesson step against the in-memory host.

    Owns a host with a single project, a check built by name and a poller.
    Editor handles are looked up by path so tests never keep strong
    references to them by accident.
    """

    def __init__(self, check_name: str = "inplace_rename", **options):
        self.host = InMemoryHost()
        self.project = self.host.open_project("lesson")
        self.check = create_check(check_name, self.host, **options)
        self.poller = StepPoller(self.check, self.host)

    def open(self, path: str, *, focus: bool = True) -> None:
        editor = self.host.open_editor(self.project, path)
        if focus:
            self.host.focus(editor)

    def editor(self, path: str) -> Editor:
        return self.host.editors[path]

    def context(self, path: str) -> EditingContext:
        return EditingContext.of(self.project, self.editor(path))

    def rename(self, path: str, symbol: str = "LIMIT") -> None:
        self.host.start_rename(self.editor(path), symbol)

    def finish(self, path: str, new_name: str = "MAX_ITEMS") -> None:
        self.host.finish_rename(self.editor(path), new_name)

    def cancel(self, path: str) -> None:
        self.host.cancel_rename(self.editor(path))

    def begin(self) -> PollResult:
        return self.poller.start()

    def key(self, detail: str = "") -> PollResult:
        return self.poller.dispatch(InputEvent("key", detail))

    def editor_event(self, detail: str = "") -> PollResult:
        return self.poller.dispatch(InputEvent("editor", detail))

    @property
    def status(self) -> str:
        return self.poller.status


@pytest.fixture
def host() -> InMemoryHost:
    return InMemoryHost()


@pytest.fixture
def harness_factory():
    """Factory fixture that creates StepHarness instances."""
    def _make(check_name: str = "inplace_rename", **options) -> StepHarness:
        return StepHarness(check_name, **options)
    return _make


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A working directory with .stepcheck/ holding the test scenarios."""
    root = tmp_path / ".stepcheck"
    (root / "checks").mkdir(parents=True)
    shutil.copytree(SCENARIOS_DIR, root / "scenarios")
    return tmp_path


@pytest.fixture
def run_cli(monkeypatch, capsys):
    """Run the CLI in a directory; returns (exit_code, stdout, stderr)."""
    def _run(cwd: Path, *args: str) -> tuple[int, str, str]:
        monkeypatch.chdir(cwd)
        monkeypatch.setattr(sys, "argv", ["stepcheck", *args])
        code = 0
        try:
            main()
        except SystemExit as e:
            code = e.code if isinstance(e.code, int) else 1
        out, err = capsys.readouterr()
        return code, out, err
    return _run


# ─── Check module templates for tests ───

PROJECT_CHECK = """\
from step_check.checks import StepCompletionCheck, check

@check("{name}", description="{description}")
class ProjectCheck(StepCompletionCheck):
    def __init__(self, registry, threshold=0):
        super().__init__()
        self.registry = registry
        self.threshold = threshold

    def is_complete(self):
        return self.context is not None and self.threshold >= 0
"""
