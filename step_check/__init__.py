"""Lesson-step completion checks for in-editor training."""
from step_check.checks import InplaceRenameCheck, RenameObservedCheck, StepCompletionCheck, check
from step_check.engine import StepPoller
from step_check.host import ContextProvider, InMemoryHost, RenameRegistry
from step_check.types import EditingContext, InputEvent

__version__ = "0.1.0"

__all__ = [
    "ContextProvider",
    "EditingContext",
    "InMemoryHost",
    "InplaceRenameCheck",
    "InputEvent",
    "RenameObservedCheck",
    "RenameRegistry",
    "StepCompletionCheck",
    "StepPoller",
    "check",
]
