"""stepcheck validate <scenario>: parse and statically check a scenario."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import yaml

from step_check.checks import list_checks, load_check_modules
from step_check.compiler import format_errors, parse_scenario_yaml, validate_scenario

if TYPE_CHECKING:
    from step_check.compiler.validator import ValidationError
    from step_check.config import Settings
    from step_check.types import ScenarioDefinition


def resolve_scenario_path(ref: str, settings: Settings, cwd: str) -> Path:
    """A scenario reference is a file path, or a name under the scenarios dir."""
    direct = Path(ref)
    if not direct.is_absolute():
        direct = Path(cwd) / direct
    if direct.is_file():
        return direct
    name = ref if ref.endswith((".yaml", ".yml")) else f"{ref}.yaml"
    return settings.scenarios_path / name


def load_scenario(ref: str, settings: Settings, cwd: str) -> tuple[ScenarioDefinition, list[ValidationError]]:
    """Parse + validate, exiting with a message if the file is missing or malformed."""
    path = resolve_scenario_path(ref, settings, cwd)
    if not path.exists():
        print(f"Scenario file not found: {path}", file=sys.stderr)
        sys.exit(1)

    load_check_modules(settings.checks_path)
    try:
        scenario = parse_scenario_yaml(path.read_text(encoding="utf-8"))
    except (ValueError, yaml.YAMLError) as e:
        print(f"✗ Parse error: {e}", file=sys.stderr)
        sys.exit(1)

    known = [name for name, _ in list_checks()]
    return scenario, validate_scenario(scenario, known)


def cmd_validate(ref: str, settings: Settings, cwd: str):
    scenario, errors = load_scenario(ref, settings, cwd)
    if any(e.level == "error" for e in errors):
        print(f'✗ Scenario "{scenario.name}" failed validation:')
        print(format_errors(errors))
        sys.exit(1)

    print(f'✓ Scenario "{scenario.name}" is valid ({len(scenario.events)} events, check: {scenario.check})')
    if errors:
        print(format_errors(errors))
