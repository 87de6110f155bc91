"""Launcher state that commands act on."""

import itertools
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, List, Optional, Protocol, Sequence

import structlog

from rocket_tui.commands.gestures import ActionDescriptor

if TYPE_CHECKING:
    from rocket_tui.config import Config

log = structlog.get_logger(__name__)


@dataclass
class App:
    """An application known to the launcher."""

    name: str
    path: str
    running: bool = False
    last_activated: int = 0


@dataclass
class Binding:
    """A gesture bound to a pre-compiled command."""

    action: ActionDescriptor
    invoke: Callable[[], None]
    command: str = ""  # Source text, for display


@dataclass
class LauncherConfig:
    """Runtime configuration owned by the launcher."""

    actions: List[Binding] = field(default_factory=list)


class LauncherLike(Protocol):
    """What command handlers need from a launcher."""

    apps: Sequence[App]
    current_app_path: str
    config: LauncherConfig

    def get_app(self, name: str) -> Optional[App]:
        ...

    def get_current_app(self) -> Optional[App]:
        ...

    def switch_app(self, app: App) -> None:
        ...

    def draw_apps_launcher(self) -> None:
        ...

    def close_launcher(self) -> None:
        ...


class Launcher:
    """In-memory launcher.

    Keeps the app list, the current app and the launcher surface
    visibility, and fires gesture bindings.
    """

    def __init__(self, apps: Optional[List[App]] = None) -> None:
        self.apps: List[App] = apps if apps is not None else []
        self.current_app_path = ""
        self.config = LauncherConfig()
        self.visible = False
        self._clock = itertools.count(1)

    @classmethod
    def from_config(cls, config: "Config") -> "Launcher":
        """Create a launcher with the apps listed in the config.

        Entries without a name are skipped; the path defaults to the name.
        """
        apps: List[App] = []
        for entry in config.apps:
            name = entry.get("name") if isinstance(entry, dict) else None
            if not isinstance(name, str) or not name:
                log.warning("invalid_app_entry", entry=entry)
                continue
            apps.append(App(name=name, path=str(entry.get("path", name))))
        return cls(apps)

    def get_app(self, name: str) -> Optional[App]:
        """Find an app by name."""
        for app in self.apps:
            if app.name == name:
                return app
        return None

    def get_current_app(self) -> Optional[App]:
        """Return the app in the foreground, if any."""
        if not self.current_app_path:
            return None
        for app in self.apps:
            if app.path == self.current_app_path:
                return app
        return None

    def switch_app(self, app: App) -> None:
        """Start the app if needed and bring it to the foreground."""
        app.running = True
        app.last_activated = next(self._clock)
        self.current_app_path = app.path
        self.visible = False
        log.info("app_switched", app=app.name, path=app.path)

    def draw_apps_launcher(self) -> None:
        """Show the launcher surface."""
        self.visible = True

    def close_launcher(self) -> None:
        """Hide the launcher surface."""
        self.visible = False

    def trigger(self, action: ActionDescriptor) -> int:
        """Fire every binding for a recognised gesture.

        Args:
            action: The gesture that occurred

        Returns:
            Number of bindings fired
        """
        fired = 0
        for binding in list(self.config.actions):
            if binding.action == action:
                binding.invoke()
                fired += 1
        log.debug("gesture_triggered", action=str(action), fired=fired)
        return fired
