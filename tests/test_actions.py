"""
Tests for the action data model and mapping table.
"""

import pytest

from midi_actions.actions import (
    Command,
    ConfigError,
    Key,
    Linear,
    Relative,
    build_mapping_table,
    key_codes,
    parse_action,
    parse_controller_id,
)


class TestParseAction:
    def test_key(self):
        assert parse_action({"type": "Key", "code": "KEY_F13"}) == Key("KEY_F13")

    def test_command(self):
        assert parse_action({"type": "Command", "cmd": "echo hi"}) == Command("echo hi")

    def test_linear(self):
        action = parse_action({"type": "Linear", "template": "set-vol {}%"})
        assert action == Linear("set-vol {}%")
        assert action.render(42) == "set-vol 42%"

    def test_relative(self):
        action = parse_action({"type": "Relative", "inc_cmd": "up", "dec_cmd": "down"})
        assert action == Relative(inc_cmd="up", dec_cmd="down")

    def test_type_is_case_insensitive(self):
        assert parse_action({"type": "command", "cmd": "ls"}) == Command("ls")

    def test_unknown_type(self):
        with pytest.raises(ConfigError, match="Unknown action type"):
            parse_action({"type": "Macro", "steps": []})

    def test_missing_field(self):
        with pytest.raises(ConfigError, match="'dec_cmd'"):
            parse_action({"type": "Relative", "inc_cmd": "up"})

    def test_non_string_field(self):
        with pytest.raises(ConfigError):
            parse_action({"type": "Key", "code": 13})

    @pytest.mark.parametrize("template", ["set-vol", "set {} {}"])
    def test_linear_needs_one_placeholder(self, template):
        with pytest.raises(ConfigError, match="exactly one"):
            parse_action({"type": "Linear", "template": template})

    def test_not_a_table(self):
        with pytest.raises(ConfigError):
            parse_action("KEY_F13")


class TestControllerId:
    @pytest.mark.parametrize("key,expected", [
        ("0", 0), ("127", 127), (" 20 ", 20), (64, 64),
        ("128", None), ("-1", None), ("knob", None), ("1.5", None), (True, None),
    ])
    def test_parse(self, key, expected):
        assert parse_controller_id(key) == expected


class TestMappingTable:
    def test_invalid_ids_are_dropped(self):
        table = build_mapping_table({
            "20": {"type": "Command", "cmd": "a"},
            "200": {"type": "Command", "cmd": "b"},
            "fader": {"type": "Command", "cmd": "c"},
        })
        assert dict(table) == {20: Command("a")}

    def test_table_is_read_only(self):
        table = build_mapping_table({"1": {"type": "Key", "code": "KEY_A"}})
        with pytest.raises(TypeError):
            table[2] = Key("KEY_B")

    def test_invalid_action_names_mapping(self):
        with pytest.raises(ConfigError, match="'5'"):
            build_mapping_table({"5": {"type": "Key"}})

    def test_key_codes(self):
        table = build_mapping_table({
            "1": {"type": "Key", "code": "KEY_F13"},
            "2": {"type": "Key", "code": "KEY_F14"},
            "3": {"type": "Key", "code": "KEY_F13"},
            "4": {"type": "Command", "cmd": "ls"},
        })
        assert key_codes(table) == {"KEY_F13", "KEY_F14"}
