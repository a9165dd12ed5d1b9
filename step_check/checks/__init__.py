from step_check.checks.base import StepCompletionCheck
from step_check.checks.registry import check, create_check, get_check, list_checks, load_check_modules
from step_check.checks.rename import InplaceRenameCheck, RenameObservedCheck

__all__ = [
    "InplaceRenameCheck",
    "RenameObservedCheck",
    "StepCompletionCheck",
    "check",
    "create_check",
    "get_check",
    "list_checks",
    "load_check_modules",
]
