"""Step poller: drives one completion check the way a lesson engine does.

The engine owns the step lifecycle:
  1. start     → acquire context from the host, inject it, run the pre-step hook
  2. dispatch  → on each input event, poll the check if the event qualifies
  3. done      → the first True verdict completes the step
Abandoning drops the check; no cleanup is owed to it.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from step_check.checks.base import StepCompletionCheck
    from step_check.host.capability import ContextProvider
    from step_check.types import InputEvent

logger = logging.getLogger(__name__)

# ─── Result type ───

class PollResult:
    def __init__(self, success: bool, message: str, complete: bool = False):
        self.success = success
        self.message = message
        self.complete = complete

    def __bool__(self) -> bool:
        return self.success

    def to_dict(self) -> dict:
        return {"success": self.success, "message": self.message, "complete": self.complete}


# ─── Poller ───

class StepPoller:
    def __init__(self, check: StepCompletionCheck, provider: ContextProvider):
        self.check: StepCompletionCheck | None = check
        self.provider = provider
        self.status = "pending"  # pending | running | done | abandoned
        self.polls = 0
        self.history: list[dict[str, Any]] = []

    def start(self) -> PollResult:
        if self.status != "pending":
            return PollResult(False, f"Step already started (status: {self.status}).")
        check = self._require_check()
        check.inject(self._acquire_context())
        check.on_step_start()
        self.status = "running"
        self._record("start", check.name)
        return PollResult(True, f'Step started with check "{check.name}"')

    def dispatch(self, event: InputEvent) -> PollResult:
        if self.status == "done":
            return PollResult(False, "Step is already complete.", complete=True)
        if self.status != "running":
            return PollResult(False, f"Step is not running (status: {self.status}).")

        check = self._require_check()
        if event.kind == "key" and not check.wants_continuous_polling():
            self._record("skip", event.kind)
            return PollResult(True, f"Ignored {event.kind} event")

        complete = check.is_complete()
        self.polls += 1
        self._record("poll", event.kind, complete)
        if complete:
            self.status = "done"
            logger.info("step completed by %s after %d poll(s)", check.name, self.polls)
            return PollResult(True, "Step complete", complete=True)
        return PollResult(True, "Step not complete yet")

    def evaluate(self) -> bool:
        """Current verdict without recording a poll; False once abandoned."""
        if self.check is None:
            return False
        return self.check.is_complete()

    def refresh_context(self) -> PollResult:
        if self.status != "running":
            return PollResult(False, f"Cannot refresh context: status is {self.status}.")
        self._require_check().inject(self._acquire_context())
        self._record("refresh")
        return PollResult(True, "Context re-injected")

    def abandon(self) -> PollResult:
        if self.status in ("done", "abandoned"):
            return PollResult(False, f"Step already {self.status}.")
        self.status = "abandoned"
        self.check = None
        self._record("abandon")
        return PollResult(True, "Step abandoned")

    # ─── Private ───

    def _require_check(self) -> StepCompletionCheck:
        if self.check is None:
            raise RuntimeError("Step was abandoned; its check has been discarded.")
        return self.check

    def _acquire_context(self):
        try:
            context = self.provider.current_context()
        except Exception:
            logger.debug("host could not supply a context", exc_info=True)
            return None
        if context is None:
            logger.debug("no focused editor; check starts without context")
        return context

    def _record(self, action: str, detail: str | None = None, result: bool | None = None) -> None:
        self.history.append({"action": action, "detail": detail, "result": result})
