"""Initialize a stepcheck project.

Creates .stepcheck/ with default settings, an empty checks directory and an
example scenario.
"""
from __future__ import annotations

import shutil
from pathlib import Path

from step_check.config import CONFIG_FILE, PROJECT_DIR

# Templates bundled with the package
TEMPLATES_DIR = Path(__file__).parent.parent / "templates"

EXAMPLE_SCENARIO = "rename_constant.yaml"


def init_project(target_dir: Path | None = None) -> str:
    """Initialize a stepcheck project.

    Args:
        target_dir: Target directory (default: current directory)

    Returns:
        Message describing what was created
    """
    target = target_dir or Path.cwd()
    project_dir = target / PROJECT_DIR

    if project_dir.exists():
        return f"Already initialized: {project_dir} exists"

    checks_dir = project_dir / "checks"
    scenarios_dir = project_dir / "scenarios"
    checks_dir.mkdir(parents=True)
    scenarios_dir.mkdir()

    shutil.copy(TEMPLATES_DIR / CONFIG_FILE, project_dir / CONFIG_FILE)
    shutil.copy(TEMPLATES_DIR / EXAMPLE_SCENARIO, scenarios_dir / EXAMPLE_SCENARIO)

    return f"""Initialized stepcheck project:
  {project_dir}/
  ├── {CONFIG_FILE}
  ├── checks/
  └── scenarios/
      └── {EXAMPLE_SCENARIO}

Next steps:
  1. Run: stepcheck validate rename_constant
  2. Run: stepcheck replay rename_constant
"""


def cmd_init(cwd: str):
    print(init_project(Path(cwd)))
