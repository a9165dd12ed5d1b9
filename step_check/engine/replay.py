"""Replay a scripted scenario against the in-memory host.

Each event is applied to the host or the poller in order. An event carrying
``expect`` then asks the check for its verdict (a real poll, so stateful
checks see it too) and compares.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from step_check.checks.registry import create_check
from step_check.engine.poller import PollResult, StepPoller
from step_check.host.memory import Editor, InMemoryHost
from step_check.types import InputEvent

if TYPE_CHECKING:
    from step_check.types import ScenarioDefinition, ScenarioEvent

logger = logging.getLogger(__name__)

DEFAULT_PROJECT = "lesson"


@dataclass
class TraceLine:
    index: int
    label: str
    ok: bool
    message: str
    verdict: bool | None = None
    expected: str | None = None

    def __str__(self) -> str:
        mark = "✓" if self.ok else "✗"
        text = f"{mark} #{self.index + 1} {self.label}: {self.message}"
        if self.expected is not None:
            got = "complete" if self.verdict else "incomplete"
            text += f" (expected {self.expected}, got {got})"
        return text


@dataclass
class ReplayReport:
    scenario: str
    check: str
    lines: list[TraceLine] = field(default_factory=list)
    status: str = "pending"
    polls: int = 0

    @property
    def failures(self) -> list[TraceLine]:
        return [line for line in self.lines if not line.ok]

    @property
    def passed(self) -> bool:
        return not self.failures

    def summary(self) -> str:
        verdict = "passed" if self.passed else f"{len(self.failures)} failure(s)"
        return f'Scenario "{self.scenario}" ({self.check}): {verdict}, step {self.status}, {self.polls} poll(s)'


class ScenarioRunner:
    def __init__(self, scenario: ScenarioDefinition, host: InMemoryHost | None = None):
        self.scenario = scenario
        self.host = host or InMemoryHost()
        self.project = self.host.open_project(DEFAULT_PROJECT)
        self.check = create_check(scenario.check, self.host, **scenario.options)
        self.poller = StepPoller(self.check, self.host)

    def run(self) -> ReplayReport:
        report = ReplayReport(scenario=self.scenario.name, check=self.scenario.check)
        for ev in self.scenario.events:
            report.lines.append(self._apply(ev))
        report.status = self.poller.status
        report.polls = self.poller.polls
        return report

    # ─── Private ───

    def _apply(self, ev: ScenarioEvent) -> TraceLine:
        label = ev.label()
        try:
            result = self._perform(ev)
        except (RuntimeError, KeyError) as e:
            logger.debug("event #%d %s failed", ev.index + 1, label, exc_info=True)
            return TraceLine(ev.index, label, False, str(e))

        # Input after completion is not a scripting error
        line = TraceLine(ev.index, label, result.success or result.complete, result.message)
        if ev.expect is not None:
            verdict = self.poller.evaluate()
            line.verdict = verdict
            line.expected = ev.expect
            if verdict != (ev.expect == "complete"):
                line.ok = False
        return line

    def _perform(self, ev: ScenarioEvent) -> PollResult:
        match ev.action:
            case "open":
                project = self.host.open_project(ev.args.get("project", DEFAULT_PROJECT))
                editor = self.host.open_editor(project, ev.target or "")
                self.host.focus(editor)
                return PollResult(True, f"Opened and focused {editor.path}")
            case "focus":
                editor = self._editor(ev)
                self.host.focus(editor)
                return PollResult(True, f"Focused {editor.path}")
            case "close":
                editor = self._editor(ev)
                self.host.close_editor(editor)
                return PollResult(True, f"Closed {editor.path}")
            case "rename":
                editor = self._editor(ev)
                session = self.host.start_rename(editor, str(ev.args.get("symbol", "symbol")))
                return PollResult(True, f"Renaming {session.symbol} in {editor.path}")
            case "finish":
                editor = self._editor(ev)
                session = self.host.finish_rename(editor, str(ev.args.get("new_name", "renamed")))
                return PollResult(True, f"Renamed {session.symbol} to {session.new_name}")
            case "cancel":
                editor = self._editor(ev)
                session = self.host.cancel_rename(editor)
                return PollResult(True, f"Cancelled rename of {session.symbol}")
            case "begin":
                return self.poller.start()
            case "refresh":
                return self.poller.refresh_context()
            case "abandon":
                return self.poller.abandon()
            case "key" | "editor":
                return self.poller.dispatch(InputEvent(ev.action, str(ev.args.get("detail", ""))))
            case "shutdown":
                self.host.shutdown()
                return PollResult(True, "Host shut down")
        raise KeyError(f"Unknown action: {ev.action}")

    def _editor(self, ev: ScenarioEvent) -> Editor:
        if ev.target is None:
            if self.host.focused is None:
                raise RuntimeError("No editor is focused")
            return self.host.focused
        editor = self.host.editors.get(ev.target)
        if editor is None:
            raise RuntimeError(f"Editor is not open: {ev.target}")
        return editor
