"""Named check registry, extensible from .py files in .stepcheck/checks/."""
from __future__ import annotations

import importlib.util
import inspect
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from step_check.checks.base import StepCompletionCheck
    from step_check.host.capability import RenameRegistry

logger = logging.getLogger(__name__)

_CHECK_REGISTRY: dict[str, type[StepCompletionCheck]] = {}


def check(name: str, description: str = ""):
    """Class decorator registering a completion check under ``name``.

    Usage in .stepcheck/checks/extract_variable.py::

        from step_check.checks import InplaceRenameCheck, check

        @check("extract_variable", description="Variable extracted and named")
        class ExtractVariableCheck(InplaceRenameCheck):
            ...

    Registered classes are built with the host's RenameRegistry as the first
    argument, followed by any scenario options as keyword arguments.
    """
    def decorator(cls: type[StepCompletionCheck]) -> type[StepCompletionCheck]:
        cls.name = name
        cls.description = description or (cls.__doc__ or "").strip().split("\n")[0]
        if name in _CHECK_REGISTRY and _CHECK_REGISTRY[name] is not cls:
            logger.warning("check %r redefined by %s", name, cls.__qualname__)
        _CHECK_REGISTRY[name] = cls
        return cls
    return decorator


def get_check(name: str) -> type[StepCompletionCheck] | None:
    return _CHECK_REGISTRY.get(name)


def create_check(name: str, registry: RenameRegistry, **options: Any) -> StepCompletionCheck:
    cls = _CHECK_REGISTRY.get(name)
    if cls is None:
        available = ", ".join(sorted(_CHECK_REGISTRY)) or "none"
        raise KeyError(f"Unknown check: {name!r}. Available: {available}")
    return cls(registry, **options)


def option_error(name: str, options: dict[str, Any]) -> str | None:
    """Why ``options`` cannot construct check ``name``, or None when they can."""
    cls = _CHECK_REGISTRY.get(name)
    if cls is None:
        return None
    try:
        inspect.signature(cls).bind(None, **options)
    except TypeError as e:
        return str(e)
    return None


def list_checks() -> list[tuple[str, str]]:
    return [(name, _CHECK_REGISTRY[name].description) for name in sorted(_CHECK_REGISTRY)]


def load_check_modules(checks_dir: str | Path) -> list[str]:
    """Import every check module in ``checks_dir``; return the names of new checks."""
    checks_path = Path(checks_dir)
    if not checks_path.is_dir():
        return []

    before = set(_CHECK_REGISTRY)
    for py_file in sorted(checks_path.glob("*.py")):
        if py_file.name.startswith("_"):
            continue
        try:
            spec = importlib.util.spec_from_file_location(f"stepcheck_project_{py_file.stem}", py_file)
            if not spec or not spec.loader:
                continue
            mod = importlib.util.module_from_spec(spec)
            spec.loader.exec_module(mod)
        except Exception as e:
            logger.warning("failed to load check module %s: %s", py_file, e)

    added = sorted(set(_CHECK_REGISTRY) - before)
    if added:
        logger.info("loaded project checks: %s", ", ".join(added))
    return added


def unregister(*names: str) -> None:
    for name in names:
        _CHECK_REGISTRY.pop(name, None)
