"""stepcheck replay <scenario>: run a scenario through the poller and report."""
from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from step_check.commands.validate import load_scenario
from step_check.compiler import format_errors
from step_check.engine import ScenarioRunner

if TYPE_CHECKING:
    from step_check.config import Settings


def cmd_replay(ref: str, settings: Settings, cwd: str):
    scenario, errors = load_scenario(ref, settings, cwd)
    if any(e.level == "error" for e in errors):
        print(f'✗ Scenario "{scenario.name}" failed validation:')
        print(format_errors(errors))
        sys.exit(1)
    if errors:
        print(format_errors(errors))
        print()

    report = ScenarioRunner(scenario).run()
    for line in report.lines:
        print(line)
    print()
    print(report.summary())

    if not report.passed:
        sys.exit(1)
