"""Static analysis for scenarios: catch scripting mistakes before replay."""
from __future__ import annotations

from typing import TYPE_CHECKING

from step_check.checks.registry import option_error
from step_check.compiler.parser import ACTIONS

if TYPE_CHECKING:
    from collections.abc import Iterable

    from step_check.types import ScenarioDefinition

_INPUT_ACTIONS = frozenset({"key", "editor", "refresh"})
_EDITOR_ACTIONS = frozenset({"focus", "close", "rename", "finish", "cancel"})


class ValidationError:
    def __init__(self, level: str, message: str, event: int | None = None):
        self.level = level  # "error" | "warning"
        self.message = message
        self.event = event

    def __str__(self):
        prefix = f"[event #{self.event + 1}] " if self.event is not None else ""
        return f"{self.level.upper()}: {prefix}{self.message}"


def validate_scenario(scenario: ScenarioDefinition, known_checks: Iterable[str]) -> list[ValidationError]:
    """Run all static checks on a scenario."""
    errors: list[ValidationError] = []

    if scenario.check not in set(known_checks):
        errors.append(ValidationError("error", f"Unknown check: '{scenario.check}'"))
    else:
        problem = option_error(scenario.check, scenario.options)
        if problem:
            errors.append(ValidationError("error", f"Invalid options for '{scenario.check}': {problem}"))

    if not scenario.events:
        errors.append(ValidationError("error", "Scenario has no events"))
        return errors

    errors.extend(_check_actions(scenario))
    errors.extend(_check_begin(scenario))
    errors.extend(_check_editors(scenario))
    errors.extend(_check_after_abandon(scenario))

    return errors


def format_errors(errors: list[ValidationError]) -> str:
    if not errors:
        return ""
    lines = []
    errs = [e for e in errors if e.level == "error"]
    warns = [e for e in errors if e.level == "warning"]
    if errs:
        lines.append(f"  {len(errs)} error(s):")
        for e in errs:
            lines.append(f"    ✗ {e}")
    if warns:
        lines.append(f"  {len(warns)} warning(s):")
        for e in warns:
            lines.append(f"    ⚠ {e}")
    return "\n".join(lines)


# ─── Checks ───

def _check_actions(scenario: ScenarioDefinition) -> list[ValidationError]:
    errors: list[ValidationError] = []
    for ev in scenario.events:
        if ev.action not in ACTIONS:
            errors.append(ValidationError("error", f"Unknown action: '{ev.action}'", ev.index))
        elif ev.action == "open" and not ev.target:
            errors.append(ValidationError("error", "open needs a file path", ev.index))
    return errors


def _check_begin(scenario: ScenarioDefinition) -> list[ValidationError]:
    """Exactly one begin; input before it never reaches the check."""
    errors: list[ValidationError] = []
    begins = [ev for ev in scenario.events if ev.action == "begin"]
    if not begins:
        errors.append(ValidationError("error", "Scenario never begins the step"))
        return errors
    for ev in begins[1:]:
        errors.append(ValidationError("error", "Step begun more than once", ev.index))

    first = begins[0].index
    for ev in scenario.events:
        if ev.index >= first:
            break
        if ev.action in _INPUT_ACTIONS:
            errors.append(ValidationError("warning", f"{ev.action} before begin is ignored", ev.index))
        if ev.expect:
            errors.append(ValidationError("warning", "expectation before begin always reads incomplete", ev.index))
    return errors


def _check_editors(scenario: ScenarioDefinition) -> list[ValidationError]:
    """Editor-targeted events must refer to a file opened earlier."""
    errors: list[ValidationError] = []
    opened: set[str] = set()
    for ev in scenario.events:
        if ev.action == "open" and ev.target:
            opened.add(ev.target)
        elif ev.action in _EDITOR_ACTIONS:
            if ev.target is not None and ev.target not in opened:
                errors.append(ValidationError("error", f"Editor not opened: '{ev.target}'", ev.index))
            elif ev.target is None and not opened:
                errors.append(ValidationError("error", f"{ev.action} with no editor open", ev.index))
            if ev.action == "close" and ev.target:
                opened.discard(ev.target)
    return errors


def _check_after_abandon(scenario: ScenarioDefinition) -> list[ValidationError]:
    errors: list[ValidationError] = []
    abandoned = False
    for ev in scenario.events:
        if abandoned and ev.action in _INPUT_ACTIONS:
            errors.append(ValidationError("warning", f"{ev.action} after abandon has no effect", ev.index))
        if ev.action == "abandon":
            abandoned = True
    return errors
