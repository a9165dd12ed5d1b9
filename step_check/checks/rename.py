"""Checks built on the host's in-place rename registry."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from step_check.checks.base import StepCompletionCheck
from step_check.checks.registry import check

if TYPE_CHECKING:
    from step_check.host.capability import RenameRegistry

logger = logging.getLogger(__name__)


@check("inplace_rename", description="No in-place rename is active in the lesson editor")
class InplaceRenameCheck(StepCompletionCheck):
    def __init__(self, registry: RenameRegistry):
        super().__init__()
        self.registry = registry

    def is_complete(self) -> bool:
        active = self._query_active()
        return active is False

    def wants_continuous_polling(self) -> bool:
        # A rename can open and close between coarse editor notifications.
        return True

    def _query_active(self) -> bool | None:
        """True/False for an active rename, None when the host cannot tell."""
        editor = self._live_editor()
        if editor is None:
            return None
        try:
            return self.registry.active_renamer(editor) is not None
        except Exception:
            logger.debug("rename query failed for %r", editor, exc_info=True)
            return None

    def _live_editor(self) -> Any | None:
        context = self.context
        if context is None or not context.alive:
            return None
        return context.editor


@check("rename_observed", description="A rename was seen in progress and has since ended")
class RenameObservedCheck(InplaceRenameCheck):
    """Requires evidence that a rename ran during the step, not just its absence."""

    def __init__(self, registry: RenameRegistry):
        super().__init__(registry)
        self.rename_seen = False

    def on_step_start(self) -> None:
        self.rename_seen = False

    def is_complete(self) -> bool:
        active = self._query_active()
        if active:
            self.rename_seen = True
            return False
        return active is False and self.rename_seen
