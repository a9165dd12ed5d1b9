"""In-memory editor host: projects, editors and in-place rename sessions."""
from __future__ import annotations

import logging
import weakref
from dataclasses import dataclass

from step_check.host.capability import ContextProvider, HostUnavailableError, RenameRegistry
from step_check.types import EditingContext

logger = logging.getLogger(__name__)


class Project:
    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return f"Project({self.name!r})"


class Editor:
    def __init__(self, project: Project, path: str):
        self.project = project
        self.path = path

    def __repr__(self) -> str:
        return f"Editor({self.path!r})"


@dataclass
class RenameSession:
    path: str
    symbol: str
    new_name: str | None = None


class InMemoryHost(RenameRegistry, ContextProvider):
    """Host fake holding the only strong references to its projects and editors.

    Closing an editor or project drops those references, so contexts
    captured earlier go stale exactly as they would in a real IDE.
    """

    def __init__(self):
        self.projects: dict[str, Project] = {}
        self.editors: dict[str, Editor] = {}
        self.completed_renames: list[RenameSession] = []
        self._renamers: weakref.WeakKeyDictionary[Editor, RenameSession] = weakref.WeakKeyDictionary()
        self._focused: Editor | None = None
        self._available = True

    # ─── Workspace ───

    def open_project(self, name: str) -> Project:
        self._require_available()
        project = self.projects.get(name)
        if project is None:
            project = Project(name)
            self.projects[name] = project
        return project

    def close_project(self, project: Project) -> None:
        for path in [p for p, e in self.editors.items() if e.project is project]:
            self.close_editor(self.editors[path])
        self.projects.pop(project.name, None)

    def open_editor(self, project: Project, path: str) -> Editor:
        self._require_available()
        editor = self.editors.get(path)
        if editor is None:
            editor = Editor(project, path)
            self.editors[path] = editor
        elif editor.project is not project:
            raise RuntimeError(f"{path} is already open in project {editor.project.name!r}")
        return editor

    def close_editor(self, editor: Editor) -> None:
        self._renamers.pop(editor, None)
        self.editors.pop(editor.path, None)
        if self._focused is editor:
            self._focused = None

    def focus(self, editor: Editor) -> None:
        self._require_available()
        if self.editors.get(editor.path) is not editor:
            raise RuntimeError(f"Editor is not open: {editor.path}")
        self._focused = editor

    @property
    def focused(self) -> Editor | None:
        return self._focused

    # ─── In-place rename ───

    def start_rename(self, editor: Editor, symbol: str) -> RenameSession:
        self._require_available()
        if editor in self._renamers:
            raise RuntimeError(f"A rename is already active in {editor.path}")
        session = RenameSession(path=editor.path, symbol=symbol)
        self._renamers[editor] = session
        logger.debug("rename started: %s in %s", symbol, editor.path)
        return session

    def finish_rename(self, editor: Editor, new_name: str) -> RenameSession:
        session = self._end_rename(editor)
        session.new_name = new_name
        self.completed_renames.append(session)
        logger.debug("rename finished: %s -> %s in %s", session.symbol, new_name, editor.path)
        return session

    def cancel_rename(self, editor: Editor) -> RenameSession:
        session = self._end_rename(editor)
        logger.debug("rename cancelled: %s in %s", session.symbol, editor.path)
        return session

    def active_renamer(self, editor) -> RenameSession | None:
        self._require_available()
        if editor is None:
            return None
        return self._renamers.get(editor)

    # ─── Context ───

    def current_context(self) -> EditingContext | None:
        self._require_available()
        if self._focused is None:
            return None
        return EditingContext.of(self._focused.project, self._focused)

    def shutdown(self) -> None:
        self._available = False
        self._focused = None
        self._renamers.clear()
        self.editors.clear()
        self.projects.clear()

    # ─── Private ───

    def _require_available(self) -> None:
        if not self._available:
            raise HostUnavailableError("Host editor subsystem has shut down")

    def _end_rename(self, editor: Editor) -> RenameSession:
        self._require_available()
        session = self._renamers.pop(editor, None)
        if session is None:
            raise RuntimeError(f"No rename is active in {editor.path}")
        return session
