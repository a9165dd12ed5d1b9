from __future__ import annotations

from pathlib import Path

import pytest

from step_check.compiler import parse_scenario_yaml

SCENARIOS_DIR = Path(__file__).parent / ".stepcheck" / "scenarios"


class TestParseScenario:
    def test_bundled_scenario(self):
        scenario = parse_scenario_yaml((SCENARIOS_DIR / "rename_constant.yaml").read_text(encoding="utf-8"))
        assert scenario.name == "Rename a constant in place"
        assert scenario.check == "inplace_rename"
        assert [ev.action for ev in scenario.events] == [
            "open", "begin", "rename", "key", "key", "finish", "key",
        ]
        assert [ev.index for ev in scenario.events] == list(range(7))

    def test_bare_string_event(self):
        scenario = parse_scenario_yaml("events:\n  - begin\n")
        ev = scenario.events[0]
        assert ev.action == "begin"
        assert ev.target is None
        assert ev.args == {}
        assert ev.expect is None

    def test_scalar_fills_action_argument(self):
        scenario = parse_scenario_yaml(
            "events:\n  - open: main.py\n  - rename: LIMIT\n  - finish: MAX\n  - key: x\n"
        )
        opened, rename, finish, key = scenario.events
        assert opened.target == "main.py"
        assert rename.args == {"symbol": "LIMIT"}
        assert finish.args == {"new_name": "MAX"}
        assert key.args == {"detail": "x"}

    def test_mapping_body_with_target_and_expect(self):
        scenario = parse_scenario_yaml(
            "events:\n  - finish: {editor: b.py, new_name: TOTAL, expect: complete}\n"
        )
        ev = scenario.events[0]
        assert ev.target == "b.py"
        assert ev.args == {"new_name": "TOTAL"}
        assert ev.expect == "complete"

    def test_explicit_action_key(self):
        scenario = parse_scenario_yaml("events:\n  - {action: key, detail: Enter, expect: false}\n")
        ev = scenario.events[0]
        assert ev.action == "key"
        assert ev.args == {"detail": "Enter"}
        assert ev.expect == "incomplete"

    @pytest.mark.parametrize(("raw", "expected"), [
        ("true", "complete"),
        ("false", "incomplete"),
        ("done", "complete"),
        ("Pending", "incomplete"),
    ])
    def test_expect_aliases(self, raw, expected):
        scenario = parse_scenario_yaml(f"events:\n  - key: {{expect: {raw}}}\n")
        assert scenario.events[0].expect == expected

    def test_defaults(self):
        scenario = parse_scenario_yaml("events: []\n")
        assert scenario.name == "unnamed scenario"
        assert scenario.check == "inplace_rename"
        assert scenario.options == {}
        assert scenario.events == []

    def test_empty_values_fall_back_to_defaults(self):
        scenario = parse_scenario_yaml("name:\ncheck:\ndescription:\nevents: [begin]\n")
        assert scenario.name == "unnamed scenario"
        assert scenario.check == "inplace_rename"
        assert scenario.description == ""

    def test_options_kept(self):
        scenario = parse_scenario_yaml("check: custom\noptions: {threshold: 3}\nevents: [begin]\n")
        assert scenario.options == {"threshold": 3}


class TestParseErrors:
    def test_root_must_be_mapping(self):
        with pytest.raises(ValueError, match="expected a mapping"):
            parse_scenario_yaml("- begin\n")

    def test_events_required(self):
        with pytest.raises(ValueError, match='missing "events"'):
            parse_scenario_yaml("name: nothing\n")

    def test_options_must_be_mapping(self):
        with pytest.raises(ValueError, match='"options" must be a mapping'):
            parse_scenario_yaml("options: [1, 2]\nevents: [begin]\n")

    def test_multi_key_event_without_action(self):
        with pytest.raises(ValueError, match="Event #1"):
            parse_scenario_yaml("events:\n  - {key: a, begin: b}\n")

    def test_bad_expect(self):
        with pytest.raises(ValueError, match="expect must be complete or incomplete"):
            parse_scenario_yaml("events:\n  - key: {expect: maybe}\n")

    def test_list_body_rejected(self):
        with pytest.raises(ValueError, match="unsupported value"):
            parse_scenario_yaml("events:\n  - key: [a, b]\n")
