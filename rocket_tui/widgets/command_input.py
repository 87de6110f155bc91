"""Command dialog widget."""

from typing import List, Optional

from textual.app import ComposeResult
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Input, Static

MAX_HISTORY = 100


class CommandInput(Widget):
    """Single line command dialog with history and completion."""

    DEFAULT_CSS = """
    CommandInput {
        dock: bottom;
        height: 1;
        layout: horizontal;
        background: $surface;
    }

    CommandInput > .command-prefix {
        width: 1;
        height: 1;
        color: $text;
    }

    CommandInput > .command-text {
        width: 1fr;
        height: 1;
        border: none;
        padding: 0;
        background: $surface;
    }

    CommandInput > .command-text:focus {
        border: none;
    }
    """

    class CommandSubmitted(Message):
        """Message sent when a command line is submitted."""

        def __init__(self, command: str) -> None:
            self.command = command
            super().__init__()

    class CommandCancelled(Message):
        """Message sent when the dialog is cancelled."""

        pass

    def __init__(
        self,
        commands: Optional[List[str]] = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._commands = commands or []
        self._history: List[str] = []
        self._history_index = -1
        self._saved_input = ""

    def compose(self) -> ComposeResult:
        yield Static(":", classes="command-prefix")
        yield Input(placeholder="", classes="command-text", id="cmd-input")

    @property
    def input_widget(self) -> Input:
        """Get the input widget."""
        return self.query_one("#cmd-input", Input)

    def reset(self) -> None:
        """Clear the input and history cursor."""
        self.input_widget.value = ""
        self._history_index = -1
        self._saved_input = ""

    def focus(self, scroll_visible: bool = True) -> None:
        """Focus the input widget."""
        self.input_widget.focus(scroll_visible=scroll_visible)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter key."""
        event.stop()
        command = self.input_widget.value.strip()

        if command:
            self._add_to_history(command)

        self.post_message(self.CommandSubmitted(command))

    def on_key(self, event) -> None:
        """Handle special keys."""
        key = event.key

        if key == "escape":
            event.prevent_default()
            event.stop()
            self.post_message(self.CommandCancelled())
        elif key == "up":
            event.prevent_default()
            event.stop()
            self._history_previous()
        elif key == "down":
            event.prevent_default()
            event.stop()
            self._history_next()
        elif key == "tab":
            event.prevent_default()
            event.stop()
            self.input_widget.value = complete(self.input_widget.value, self._commands)

    def _add_to_history(self, command: str) -> None:
        """Add command to history."""
        if self._history and self._history[-1] == command:
            return
        self._history.append(command)
        if len(self._history) > MAX_HISTORY:
            self._history = self._history[-MAX_HISTORY:]

    def _history_previous(self) -> None:
        """Navigate to previous history entry."""
        if not self._history:
            return

        if self._history_index == -1:
            self._saved_input = self.input_widget.value
            self._history_index = len(self._history) - 1
        elif self._history_index > 0:
            self._history_index -= 1

        self.input_widget.value = self._history[self._history_index]

    def _history_next(self) -> None:
        """Navigate to next history entry."""
        if self._history_index == -1:
            return

        if self._history_index < len(self._history) - 1:
            self._history_index += 1
            self.input_widget.value = self._history[self._history_index]
        else:
            self._history_index = -1
            self.input_widget.value = self._saved_input


def complete(current: str, commands: List[str]) -> str:
    """Complete the command name at the start of ``current``.

    A unique match is completed with a trailing space, several matches
    are completed to their common prefix.

    Args:
        current: Text typed so far
        commands: Known command names

    Returns:
        The completed text, or ``current`` unchanged
    """
    stripped = current.lstrip()
    if not stripped:
        return current

    parts = stripped.split(maxsplit=1)
    cmd_part = parts[0]
    rest = parts[1] if len(parts) > 1 else ""

    matches = [c for c in commands if c.startswith(cmd_part)]
    if len(matches) == 1:
        return matches[0] + " " + rest

    if len(matches) > 1:
        common = matches[0]
        for match in matches[1:]:
            while not match.startswith(common):
                common = common[:-1]
        if len(common) > len(cmd_part):
            return common + (" " + rest if rest else "")

    return current
