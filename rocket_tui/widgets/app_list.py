"""App list widget shown while the launcher surface is open."""

from typing import List

from rich.text import Text
from textual.widgets import Static

from rocket_tui.launcher import App


class AppList(Static):
    """Lists the launcher's apps, marking running and current ones."""

    DEFAULT_CSS = """
    AppList {
        width: 100%;
        height: auto;
        padding: 1 2;
        background: $surface;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__("", **kwargs)

    def set_apps(self, apps: List[App], current_path: str) -> None:
        """Render the app list."""
        text = Text()
        if not apps:
            text.append("No apps configured", style="dim")
        for i, app in enumerate(apps):
            if i > 0:
                text.append("\n")
            is_current = app.path == current_path
            text.append("> " if is_current else "  ", style="bold yellow")
            text.append(app.name, style="bold cyan" if is_current else "")
            if app.running:
                text.append("  running", style="green")
            text.append(f"  {app.path}", style="dim")
        self.update(text)
