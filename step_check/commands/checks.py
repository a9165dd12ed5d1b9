"""stepcheck checks: list built-in and project completion checks."""
from __future__ import annotations

from typing import TYPE_CHECKING

from step_check.checks import list_checks, load_check_modules

if TYPE_CHECKING:
    from step_check.config import Settings


def cmd_checks(settings: Settings):
    project_checks = set(load_check_modules(settings.checks_path))
    rows = list_checks()
    width = max(len(name) for name, _ in rows)
    for name, description in rows:
        origin = " (project)" if name in project_checks else ""
        print(f"  {name.ljust(width)}  {description}{origin}")
