from step_check.compiler.parser import parse_scenario_yaml
from step_check.compiler.validator import format_errors, validate_scenario

__all__ = ["format_errors", "parse_scenario_yaml", "validate_scenario"]
