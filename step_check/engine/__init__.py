from step_check.engine.poller import PollResult, StepPoller
from step_check.engine.replay import ReplayReport, ScenarioRunner

__all__ = ["PollResult", "ReplayReport", "ScenarioRunner", "StepPoller"]
