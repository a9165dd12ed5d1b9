"""Base class for lesson-step completion checks."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from step_check.types import EditingContext


class StepCompletionCheck(ABC):
    """Predicate the lesson engine polls to decide whether a step is done.

    One instance lives for one lesson step. The engine injects the editing
    context, calls ``on_step_start`` once, then calls ``is_complete`` as
    often as it likes. ``is_complete`` must not raise and must answer False
    while no usable context is held.
    """

    name = ""
    description = ""

    def __init__(self):
        self._context: EditingContext | None = None

    def inject(self, context: EditingContext | None) -> None:
        self._context = context

    def on_step_start(self) -> None:
        pass

    @abstractmethod
    def is_complete(self) -> bool:
        ...

    def wants_continuous_polling(self) -> bool:
        """Whether every low-level input event should trigger ``is_complete``."""
        return False

    @property
    def context(self) -> EditingContext | None:
        return self._context

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
