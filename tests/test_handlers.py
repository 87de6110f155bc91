"""Tests for the built-in command handlers."""

from structlog.testing import capture_logs

from rocket_tui.commands.errors import AppNotFound, UnknownSwitchTarget
from rocket_tui.commands.gestures import Pinch, PinchDirection, Swipe, SwipeDirection, Tap


def start(launcher, *names):
    """Switch to each named app in turn, leaving the last one current."""
    for name in names:
        launcher.switch_app(launcher.get_app(name))


class TestLaunch:
    """Test launch."""

    def test_unknown_app(self, dispatcher):
        """Missing apps fail with the app name."""
        result = dispatcher.run_now("launch Music")
        assert not result.success
        assert result.error == AppNotFound("Music")
        assert "App not found Music" in result.message

    def test_switches_to_app(self, launcher, dispatcher):
        """launch brings the app to the foreground."""
        result = dispatcher.run_now("launch Reader")
        assert result.success
        assert result.message == "Launching: Reader"
        assert launcher.current_app_path == "/opt/bin/reader"
        assert launcher.get_app("Reader").running

    def test_no_app_named_notes(self, launcher, dispatcher):
        """The error message names the missing app."""
        launcher.apps.pop(0)
        assert "App not found Notes" in dispatcher.run_now("launch Notes").message

    def test_arity(self, dispatcher):
        """launch needs exactly one argument."""
        assert not dispatcher.run_now("launch").success
        assert not dispatcher.run_now("launch Notes Reader").success


class TestShowHide:
    """Test show and hide."""

    def test_show(self, launcher, dispatcher):
        result = dispatcher.run_now("show")
        assert result.success
        assert result.message == "OK"
        assert launcher.visible

    def test_hide(self, launcher, dispatcher):
        launcher.draw_apps_launcher()
        assert dispatcher.run_now("hide").success
        assert not launcher.visible


class TestSwitch:
    """Test switch."""

    def test_next_without_current(self, dispatcher):
        """No current app is reported, not failed."""
        result = dispatcher.run_now("switch next")
        assert result.success
        assert result.message == "No apps running"

    def test_prev_without_current(self, dispatcher):
        result = dispatcher.run_now("switch prev")
        assert result.success
        assert result.message == "No apps running"

    def test_next_skips_stopped(self, launcher, dispatcher):
        """next skips apps that are not running."""
        start(launcher, "Terminal", "Notes")
        assert dispatcher.run_now("switch next").success
        assert launcher.current_app_path == "/opt/bin/terminal"

    def test_next_wraps(self, launcher, dispatcher):
        """next wraps from the end of the list to the start."""
        start(launcher, "Notes", "Terminal")
        dispatcher.run_now("switch next")
        assert launcher.current_app_path == "/opt/bin/notes"

    def test_prev_wraps(self, launcher, dispatcher):
        """prev walks backwards and wraps to the end."""
        start(launcher, "Terminal", "Notes")
        dispatcher.run_now("switch prev")
        assert launcher.current_app_path == "/opt/bin/terminal"

    def test_prev_adjacent(self, launcher, dispatcher):
        start(launcher, "Notes", "Reader", "Terminal")
        dispatcher.run_now("switch prev")
        assert launcher.current_app_path == "/opt/bin/reader"

    def test_only_current_running(self, launcher, dispatcher):
        """With a single running app, next stays on it."""
        start(launcher, "Reader")
        assert dispatcher.run_now("switch next").success
        assert launcher.current_app_path == "/opt/bin/reader"

    def test_current_not_in_list(self, launcher, dispatcher):
        """A current path with no matching app counts as no apps."""
        launcher.current_app_path = "/opt/bin/gone"
        assert dispatcher.run_now("switch next").message == "No apps running"

    def test_last(self, launcher, dispatcher):
        """last picks the most recently active other app."""
        start(launcher, "Reader", "Notes", "Terminal")
        dispatcher.run_now("switch last")
        assert launcher.current_app_path == "/opt/bin/notes"

    def test_last_toggles(self, launcher, dispatcher):
        """Repeated last toggles between two apps."""
        start(launcher, "Reader", "Notes")
        dispatcher.run_now("switch last")
        assert launcher.current_app_path == "/opt/bin/reader"
        dispatcher.run_now("switch last")
        assert launcher.current_app_path == "/opt/bin/notes"

    def test_last_without_others(self, launcher, dispatcher):
        start(launcher, "Reader")
        result = dispatcher.run_now("switch last")
        assert result.success
        assert result.message == "No other apps"
        assert launcher.current_app_path == "/opt/bin/reader"

    def test_unknown_target(self, dispatcher):
        result = dispatcher.run_now("switch sideways")
        assert not result.success
        assert result.error == UnknownSwitchTarget("sideways")


class TestHelp:
    """Test help."""

    def test_lists_commands(self, dispatcher, registry):
        result = dispatcher.run_now("help")
        assert result.success
        lines = result.message.splitlines()
        assert lines[0] == "Commands:"
        assert len(lines) == len(registry) + 1
        for name, descriptor in registry.items():
            assert f"\t{name} {descriptor.help}" in lines


class TestOn:
    """Test binding gestures to commands."""

    def test_registers_binding(self, launcher, dispatcher):
        """on adds one binding without running the command."""
        result = dispatcher.run_now("on Tap:2 show")
        assert result.success
        assert result.message == "OK"
        assert len(launcher.config.actions) == 1
        binding = launcher.config.actions[0]
        assert binding.action == Tap(2)
        assert binding.command == "show"
        assert not launcher.visible

        binding.invoke()
        assert launcher.visible

    def test_quoted_command(self, launcher, dispatcher):
        """Commands with arguments are quoted."""
        assert dispatcher.run_now('on Swipe:Left:3 "launch Reader"').success
        launcher.trigger(Swipe(SwipeDirection.LEFT, 3))
        assert launcher.current_app_path == "/opt/bin/reader"

    def test_bound_failure_is_contained(self, launcher, dispatcher):
        """A bound command that fails logs instead of raising."""
        dispatcher.run_now('on Pinch:In:2 "launch Nowhere"')
        with capture_logs() as logs:
            assert launcher.trigger(Pinch(PinchDirection.IN, 2)) == 1
        assert logs[0]["event"] == "deferred_command_failed"
        assert logs[0]["error"] == "App not found Nowhere"

    def test_binding_outlives_line(self, launcher, dispatcher):
        """The bound command owns its arguments."""
        line = 'on Tap:1 "launch Notes"'
        dispatcher.run_now(line)
        del line
        launcher.config.actions[0].invoke()
        assert launcher.current_app_path == "/opt/bin/notes"

    def test_bad_gesture(self, launcher, dispatcher):
        result = dispatcher.run_now("on Spin:1 show")
        assert not result.success
        assert "Unknown gesture: Spin" in result.message
        assert launcher.config.actions == []

    def test_unknown_nested_command(self, launcher, dispatcher):
        """The nested command is named in the error."""
        result = dispatcher.run_now("on Tap:2 fly")
        assert not result.success
        assert result.message == 'Can\'t add action: Command fly not found for command: "fly"'
        assert launcher.config.actions == []

    def test_empty_nested_command(self, launcher, dispatcher):
        result = dispatcher.run_now('on Tap:2 ""')
        assert result.message == 'Can\'t add action: Empty command for command: ""'

    def test_nested_arity(self, dispatcher):
        result = dispatcher.run_now('on Tap:2 "launch"')
        assert "Invalid number of arguments for 'launch', expected 1 got 0" in result.message

    def test_nested_on(self, launcher, dispatcher):
        """A bound on registers another binding when fired."""
        assert dispatcher.run_now('on Tap:3 "on Tap:4 show"').success
        launcher.trigger(Tap(3))
        assert len(launcher.config.actions) == 2
        launcher.trigger(Tap(4))
        assert launcher.visible
