"""Main Textual application for rocket-tui."""

from typing import Optional

import structlog
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widgets import Header

from rocket_tui.commands import CommandResult, Dispatcher, parse_action
from rocket_tui.config import Config, get_config
from rocket_tui.launcher import Launcher
from rocket_tui.widgets import AppList, CommandInput, StatusBar

log = structlog.get_logger(__name__)


class RocketApp(App):
    """Launcher front end: app list, command dialog and simulated gestures."""

    TITLE = "Rocket"

    BINDINGS = [
        Binding("colon", "command_mode", "Command", show=False),
        Binding("q", "quit", "Quit", show=False),
        Binding("ctrl+up", "gesture('Swipe:Up:3')", "Swipe up", show=False),
        Binding("ctrl+down", "gesture('Swipe:Down:3')", "Swipe down", show=False),
        Binding("ctrl+left", "gesture('Swipe:Left:3')", "Swipe left", show=False),
        Binding("ctrl+right", "gesture('Swipe:Right:3')", "Swipe right", show=False),
        Binding("plus", "gesture('Pinch:Out:2')", "Pinch out", show=False),
        Binding("minus", "gesture('Pinch:In:2')", "Pinch in", show=False),
        Binding("t", "gesture('Tap:2')", "Tap", show=False),
    ]

    def __init__(self, config: Optional[Config] = None) -> None:
        super().__init__()
        self._config = config or get_config()
        self._launcher = Launcher.from_config(self._config)
        self._dispatcher = Dispatcher(self._launcher)
        self._in_command_mode = False

    @property
    def launcher(self) -> Launcher:
        """The launcher driven by this app."""
        return self._launcher

    def compose(self) -> ComposeResult:
        """Create the UI layout."""
        yield Header()
        with VerticalScroll(id="app-scroll"):
            yield AppList(id="app-list")
        yield CommandInput(
            commands=self._dispatcher.registry.names(),
            id="command-input",
        )
        yield StatusBar(id="status-bar")

    def on_mount(self) -> None:
        """Run startup commands and draw the initial state."""
        self.query_one("#command-input").display = False
        self._launcher.draw_apps_launcher()

        for line in self._config.commands:
            result = self._dispatcher.run_now(line)
            if not result.success:
                log.warning("startup_command_failed", command=line, error=result.message)
                self.query_one("#status-bar", StatusBar).show_message(result.message, error=True)

        self._refresh_state()

    # ==================== Command Mode ====================

    def action_command_mode(self) -> None:
        """Open the command dialog."""
        if self._in_command_mode:
            return
        self._in_command_mode = True
        self.query_one("#status-bar", StatusBar).set_mode("command")
        cmd_input = self.query_one("#command-input", CommandInput)
        cmd_input.display = True
        cmd_input.reset()
        cmd_input.focus()

    def _close_command_mode(self) -> None:
        """Close the command dialog."""
        self._in_command_mode = False
        self.query_one("#command-input", CommandInput).display = False
        self.query_one("#status-bar", StatusBar).set_mode("normal")
        self.query_one("#app-scroll").focus()

    # ==================== Gestures ====================

    def action_gesture(self, spec: str) -> None:
        """Fire the bindings for a gesture, as if it had been recognised."""
        parsed = parse_action(spec)
        status = self.query_one("#status-bar", StatusBar)
        if parsed.error is not None:
            status.show_message(parsed.error.message, error=True)
            return

        fired = self._launcher.trigger(parsed.value)
        self._refresh_state()
        if not fired:
            status.show_message(f"No binding for {spec}")

    # ==================== Event Handlers ====================

    def on_command_input_command_submitted(
        self, event: CommandInput.CommandSubmitted
    ) -> None:
        """Handle submitted command."""
        self._close_command_mode()
        result = self._dispatcher.run_now(event.command)
        self._handle_command_result(result)

    def on_command_input_command_cancelled(
        self, event: CommandInput.CommandCancelled
    ) -> None:
        """Handle cancelled command."""
        self._close_command_mode()

    def _handle_command_result(self, result: CommandResult) -> None:
        """Show a command result and redraw."""
        self._refresh_state()
        status = self.query_one("#status-bar", StatusBar)

        if not result.success:
            status.show_message(result.message, error=True)
        elif "\n" in result.message:
            self.notify(result.message, title="Help", timeout=30)
        elif result.message:
            status.show_message(result.message)

    def _refresh_state(self) -> None:
        """Redraw the app list and status bar from the launcher."""
        app_list = self.query_one("#app-list", AppList)
        app_list.display = self._launcher.visible
        app_list.set_apps(self._launcher.apps, self._launcher.current_app_path)

        current = self._launcher.get_current_app()
        self.query_one("#status-bar", StatusBar).set_state(
            current.name if current else "",
            len(self._launcher.config.actions),
        )
