"""Capabilities the host editor exposes to completion checks."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from step_check.types import EditingContext


class HostUnavailableError(RuntimeError):
    """The host editor subsystem can no longer answer queries."""


class RenameRegistry(ABC):
    """Single host-wide registry of in-place rename interactions.

    Checks receive this by injection so tests can substitute a fake
    without a real editor runtime.
    """

    @abstractmethod
    def active_renamer(self, editor: Any) -> object | None:
        """Return the in-place rename active in ``editor``, or None.

        Args:
            editor: Editor handle taken from an EditingContext

        Returns:
            An opaque rename session handle while a rename is in progress,
            None otherwise
        """
        ...


class ContextProvider(ABC):
    """Supplies the editing context at the start of a lesson step."""

    @abstractmethod
    def current_context(self) -> EditingContext | None:
        """Return the context of the focused editor, or None if nothing is focused."""
        ...
