from step_check.host.capability import ContextProvider, HostUnavailableError, RenameRegistry
from step_check.host.memory import Editor, InMemoryHost, Project, RenameSession

__all__ = [
    "ContextProvider",
    "Editor",
    "HostUnavailableError",
    "InMemoryHost",
    "Project",
    "RenameRegistry",
    "RenameSession",
]
