"""Tests for command dialog completion."""

from rocket_tui.widgets.command_input import complete

COMMANDS = ["help", "launch", "show", "hide", "switch", "on"]


class TestComplete:
    """Test tab completion."""

    def test_unique_match(self):
        assert complete("la", COMMANDS) == "launch "

    def test_keeps_arguments(self):
        assert complete("sw next", COMMANDS) == "switch next"

    def test_common_prefix(self):
        assert complete("s", ["switch", "swap"]) == "sw"

    def test_no_match(self):
        assert complete("xyz", COMMANDS) == "xyz"

    def test_ambiguous_without_progress(self):
        assert complete("s", COMMANDS) == "s"

    def test_empty(self):
        assert complete("", COMMANDS) == ""
