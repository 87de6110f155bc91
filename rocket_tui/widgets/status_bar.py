"""Status bar widget."""

from typing import Optional

from rich.text import Text
from textual.widgets import Static


class StatusBar(Static):
    """Status bar showing the current app, last result and key hints."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: 1;
        background: $primary-darken-2;
        color: $text-muted;
        padding: 0 1;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__("", **kwargs)
        self._mode = "normal"
        self._current_app = ""
        self._bindings = 0
        self._message: Optional[str] = None
        self._is_error = False

    def set_mode(self, mode: str) -> None:
        """Set the current mode: normal, command."""
        self._mode = mode
        self._message = None
        self._update()

    def set_state(self, current_app: str, bindings: int) -> None:
        """Set the foreground app name and number of gesture bindings."""
        self._current_app = current_app
        self._bindings = bindings
        self._update()

    def show_message(self, message: str, error: bool = False) -> None:
        """Show a temporary message."""
        self._message = message
        self._is_error = error
        self._update()

    def _update(self) -> None:
        """Update the status bar display."""
        text = Text()

        text.append(self._current_app or "no app", style="bold")
        text.append(" | ")
        text.append(f"[{self._bindings} bindings]", style="cyan")

        if self._mode == "command":
            text.append(" | ")
            text.append("COMMAND", style="bold black on yellow")

        if self._message:
            text.append("  ")
            text.append(self._message, style="bold red" if self._is_error else "yellow")
        else:
            hints = self._get_hints()
            if hints:
                text.append("  ")
                for i, (key, desc) in enumerate(hints):
                    if i > 0:
                        text.append(" ", style="dim")
                    text.append(key, style="bold yellow")
                    text.append(f" {desc}", style="dim")

        self.update(text)

    def _get_hints(self) -> list[tuple[str, str]]:
        """Get keybinding hints for the current mode."""
        if self._mode == "normal":
            return [
                (":", "command"),
                ("^arrows", "swipe"),
                ("+/-", "pinch"),
                ("t", "tap"),
                ("q", "quit"),
            ]
        elif self._mode == "command":
            return [
                ("Enter", "run"),
                ("Esc", "cancel"),
            ]
        else:
            return []
