"""Tests for the in-memory launcher."""

import json

from structlog.testing import capture_logs

from rocket_tui.commands.gestures import Swipe, SwipeDirection, Tap
from rocket_tui.config import Config
from rocket_tui.launcher import App, Binding, Launcher


class TestLauncher:
    """Test launcher state."""

    def test_get_app(self, launcher):
        assert launcher.get_app("Reader").path == "/opt/bin/reader"
        assert launcher.get_app("reader") is None

    def test_switch_app(self, launcher):
        """Switching starts the app and stamps its activation."""
        notes = launcher.get_app("Notes")
        reader = launcher.get_app("Reader")
        launcher.draw_apps_launcher()
        launcher.switch_app(notes)
        launcher.switch_app(reader)
        assert notes.running and reader.running
        assert reader.last_activated > notes.last_activated
        assert launcher.get_current_app() is reader
        assert not launcher.visible

    def test_no_current_app(self, launcher):
        assert launcher.get_current_app() is None

    def test_show_hide(self, launcher):
        launcher.draw_apps_launcher()
        assert launcher.visible
        launcher.close_launcher()
        assert not launcher.visible

    def test_from_config(self):
        """Apps come from the config, path defaults to the name."""
        config = Config(apps=[{"name": "Notes", "path": "/bin/notes"}, {"name": "Draw"}])
        launcher = Launcher.from_config(config)
        assert [a.name for a in launcher.apps] == ["Notes", "Draw"]
        assert launcher.get_app("Draw").path == "Draw"

    def test_from_config_skips_invalid_entries(self, tmp_path):
        """App entries without a name are logged and skipped."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"apps": [{"path": "/x"}, "Notes", {"name": "Draw"}]}))

        with capture_logs() as logs:
            launcher = Launcher.from_config(Config.load(path))

        assert [a.name for a in launcher.apps] == ["Draw"]
        warnings = [entry for entry in logs if entry["event"] == "invalid_app_entry"]
        assert [w["entry"] for w in warnings] == [{"path": "/x"}, "Notes"]
        assert all(w["log_level"] == "warning" for w in warnings)


class TestTrigger:
    """Test firing gesture bindings."""

    def test_matching_bindings_fire(self):
        calls = []
        launcher = Launcher([App(name="Notes", path="/bin/notes")])
        launcher.config.actions.append(Binding(Tap(2), lambda: calls.append("a"), "a"))
        launcher.config.actions.append(Binding(Tap(2), lambda: calls.append("b"), "b"))
        launcher.config.actions.append(Binding(Tap(3), lambda: calls.append("c"), "c"))

        assert launcher.trigger(Tap(2)) == 2
        assert calls == ["a", "b"]

    def test_no_match(self):
        launcher = Launcher()
        launcher.config.actions.append(Binding(Tap(1), lambda: None))
        assert launcher.trigger(Swipe(SwipeDirection.UP, 1)) == 0
