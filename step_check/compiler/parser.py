"""Parse YAML step scenarios into a list of host events."""
from __future__ import annotations

from typing import Any

import yaml

from step_check.types import ScenarioDefinition, ScenarioEvent

ACTIONS = frozenset({
    "open", "focus", "close",
    "begin", "refresh", "abandon",
    "rename", "finish", "cancel",
    "key", "editor",
    "shutdown",
})

# Which argument a bare scalar value fills, e.g. `- open: main.py`
_SCALAR_ARG = {
    "open": "path",
    "focus": "path",
    "close": "path",
    "rename": "symbol",
    "finish": "new_name",
    "cancel": "editor",
    "key": "detail",
    "editor": "detail",
}

# Arguments naming the editor an event applies to
_TARGET_KEYS = ("path", "editor")

_EXPECT_ALIASES = {
    True: "complete",
    False: "incomplete",
    "complete": "complete",
    "done": "complete",
    "incomplete": "incomplete",
    "pending": "incomplete",
}


def _parse_expect(value: Any, index: int) -> str | None:
    if value is None:
        return None
    key = value.strip().lower() if isinstance(value, str) else value
    try:
        return _EXPECT_ALIASES[key]
    except (KeyError, TypeError):
        raise ValueError(
            f"Event #{index + 1}: expect must be complete or incomplete, got {value!r}"
        ) from None


def _parse_raw_event(raw: Any, index: int) -> ScenarioEvent:
    """Parse one raw YAML event into a ScenarioEvent."""
    if isinstance(raw, str):
        return ScenarioEvent(action=raw.strip(), index=index)

    if not isinstance(raw, dict) or not raw:
        raise ValueError(f"Event #{index + 1}: expected a name or a single-key mapping, got {raw!r}")

    if "action" in raw:
        action = str(raw["action"]).strip()
        body: Any = {k: v for k, v in raw.items() if k != "action"}
    elif len(raw) == 1:
        action, body = next(iter(raw.items()))
        action = str(action).strip()
    else:
        raise ValueError(f"Event #{index + 1}: mapping has several keys but no 'action': {sorted(raw)}")

    if body is None:
        args: dict[str, Any] = {}
    elif isinstance(body, dict):
        args = dict(body)
    elif isinstance(body, (str, int, float)):
        args = {_SCALAR_ARG.get(action, "detail"): str(body)}
    else:
        raise ValueError(f"Event #{index + 1} ({action}): unsupported value {body!r}")

    expect = _parse_expect(args.pop("expect", None), index)
    target = None
    for key in _TARGET_KEYS:
        if key in args:
            target = str(args.pop(key))
            break

    return ScenarioEvent(action=action, target=target, args=args, expect=expect, index=index)


def parse_scenario_yaml(content: str) -> ScenarioDefinition:
    raw = yaml.safe_load(content)
    if not isinstance(raw, dict):
        raise ValueError("Invalid YAML: expected a mapping")

    raw_events = raw.get("events")
    if not isinstance(raw_events, list):
        raise ValueError('Invalid scenario: missing "events" list')

    options = raw.get("options") or {}
    if not isinstance(options, dict):
        raise ValueError('Invalid scenario: "options" must be a mapping')

    events = [_parse_raw_event(item, i) for i, item in enumerate(raw_events)]
    return ScenarioDefinition(
        name=str(raw.get("name") or "unnamed scenario"),
        check=str(raw.get("check") or "inplace_rename"),
        description=str(raw.get("description") or ""),
        options=options,
        events=events,
    )
