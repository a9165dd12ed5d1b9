from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from typing import Any

# ─── Host handles ───

@dataclass(frozen=True)
class EditingContext:
    """Project + editor pair handed over by the host for one lesson step.

    Both handles are held weakly: the host owns them and may tear them down
    at any time, after which the context reads as stale.
    """
    project_ref: weakref.ref
    editor_ref: weakref.ref

    @classmethod
    def of(cls, project: Any, editor: Any) -> EditingContext:
        return cls(project_ref=weakref.ref(project), editor_ref=weakref.ref(editor))

    @property
    def project(self) -> Any | None:
        return self.project_ref()

    @property
    def editor(self) -> Any | None:
        return self.editor_ref()

    @property
    def alive(self) -> bool:
        return self.project is not None and self.editor is not None

# ─── Input ───

@dataclass(frozen=True)
class InputEvent:
    kind: str  # key | editor
    detail: str = ""

# ─── Scenario IR (parsed from YAML) ───

@dataclass
class ScenarioEvent:
    action: str
    target: str | None = None
    args: dict[str, Any] = field(default_factory=dict)
    expect: str | None = None  # complete | incomplete | None
    index: int = 0

    def label(self) -> str:
        return f"{self.action} {self.target}" if self.target else self.action

@dataclass
class ScenarioDefinition:
    name: str
    check: str
    description: str = ""
    options: dict[str, Any] = field(default_factory=dict)
    events: list[ScenarioEvent] = field(default_factory=list)
