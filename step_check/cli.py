"""Thin CLI router: dispatches to commands."""
from __future__ import annotations

import os
import sys

from step_check.config import configure_logging, load_settings

USAGE = """\
stepcheck: lesson-step completion checks for editor training

Usage:
  stepcheck init                 Create .stepcheck/ with an example scenario
  stepcheck checks               List available completion checks
  stepcheck validate <scenario>  Parse and statically check a scenario
  stepcheck replay <scenario>    Replay a scenario and report the verdicts

Options:
  -v, --verbose                  Debug logging (or set STEPCHECK_LOG_LEVEL)

<scenario> is a YAML file path or a name under .stepcheck/scenarios/.
"""


def main():
    args = sys.argv[1:]
    verbose = any(a in ("-v", "--verbose") for a in args)
    args = [a for a in args if a not in ("-v", "--verbose")]
    cwd = os.getcwd()
    command = args[0] if args else None

    try:
        settings = load_settings(cwd)
    except ValueError as e:
        print(f"✗ {e}", file=sys.stderr)
        sys.exit(1)
    configure_logging("DEBUG" if verbose else settings.log_level)

    if command in ("validate", "replay"):
        if len(args) < 2:
            print(f"Usage: stepcheck {command} <scenario>", file=sys.stderr)
            sys.exit(1)
        if command == "validate":
            from step_check.commands.validate import cmd_validate
            cmd_validate(args[1], settings, cwd)
        else:
            from step_check.commands.replay import cmd_replay
            cmd_replay(args[1], settings, cwd)

    elif command == "checks":
        from step_check.commands.checks import cmd_checks
        cmd_checks(settings)

    elif command == "init":
        from step_check.commands.init import cmd_init
        cmd_init(cwd)

    elif command in ("help", "--help", "-h", None):
        print(USAGE)

    else:
        print(f"Unknown command: {command}", file=sys.stderr)
        print(USAGE)
        sys.exit(1)
