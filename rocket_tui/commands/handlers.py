"""Built-in command handlers.

Each handler takes the dispatcher as context followed by its parsed
arguments and returns a CommandResult.
"""

from typing import List, Optional, Tuple

from rocket_tui.commands.descriptor import CommandDescriptor
from rocket_tui.commands.errors import (
    ActionNotAdded,
    AppNotFound,
    CommandResult,
    NoAppsRunning,
    NoOtherApp,
    UnknownSwitchTarget,
)
from rocket_tui.commands.gestures import ActionDescriptor
from rocket_tui.commands.registry import Dispatcher
from rocket_tui.commands.tokenizer import Token
from rocket_tui.launcher import App, Binding, LauncherLike


def show_help(ctx: Dispatcher) -> CommandResult:
    """Handle help command."""
    lines = ["Commands:"]
    for name, descriptor in ctx.registry.items():
        lines.append(f"\t{name} {descriptor.help}")
    return CommandResult.ok("\n".join(lines) + "\n")


def launch(ctx: Dispatcher, name: Token) -> CommandResult:
    """Handle launch command."""
    app = ctx.launcher.get_app(str(name))
    if app is None:
        return CommandResult.fail(AppNotFound(str(name)))

    ctx.launcher.switch_app(app)
    return CommandResult.ok(f"Launching: {name}")


def show(ctx: Dispatcher) -> CommandResult:
    """Handle show command."""
    ctx.launcher.draw_apps_launcher()
    return CommandResult.ok("OK")


def hide(ctx: Dispatcher) -> CommandResult:
    """Handle hide command."""
    ctx.launcher.close_launcher()
    return CommandResult.ok("OK")


def _next_running(launcher: LauncherLike, reverse: bool) -> Optional[App]:
    """Find the running app after the current one, wrapping around.

    Returns the current app when no other app is running, or None when
    there is no current app.
    """
    apps = list(launcher.apps)
    if reverse:
        apps.reverse()

    current = launcher.current_app_path
    start = next((i for i, app in enumerate(apps) if app.path == current), None)
    if not current or start is None:
        return None

    count = len(apps)
    for offset in range(1, count + 1):
        app = apps[(start + offset) % count]
        if app.running:
            return app
    return apps[start]


def _last_running(launcher: LauncherLike) -> Optional[App]:
    """Most recently activated running app other than the current one."""
    current = launcher.get_current_app()
    last: Optional[App] = None
    for app in launcher.apps:
        if not app.running or app is current:
            continue
        if last is None or app.last_activated > last.last_activated:
            last = app
    return last


def switch_to(ctx: Dispatcher, target: Token) -> CommandResult:
    """Handle switch command."""
    launcher = ctx.launcher

    if target == "next" or target == "prev":
        app = _next_running(launcher, reverse=target == "prev")
        if app is None:
            return CommandResult.ok(NoAppsRunning().message)
    elif target == "last":
        app = _last_running(launcher)
        if app is None:
            return CommandResult.ok(NoOtherApp().message)
    else:
        return CommandResult.fail(UnknownSwitchTarget(str(target)))

    launcher.switch_app(app)
    return CommandResult.ok("OK")


def on_action(ctx: Dispatcher, action: ActionDescriptor, command: Token) -> CommandResult:
    """Handle on command: bind a gesture to a command."""
    command_str = str(command)
    compiled = ctx.compile_later(command_str)
    if compiled.error is not None:
        return CommandResult.fail(ActionNotAdded(command_str, compiled.error))

    ctx.launcher.config.actions.append(
        Binding(action=action, invoke=compiled.value, command=command_str)
    )
    return CommandResult.ok("OK")


def builtin_commands() -> List[Tuple[str, CommandDescriptor]]:
    """Descriptors for the built-in commands, in help order."""
    return [
        ("help", CommandDescriptor(show_help, "- Show help")),
        ("launch", CommandDescriptor(launch, "- launch <app name> - Start or switch to app")),
        ("show", CommandDescriptor(show, "- Show the launcher")),
        ("hide", CommandDescriptor(hide, "- Hide the launcher")),
        (
            "switch",
            CommandDescriptor(
                switch_to,
                "- switch <next|prev|last> - Switch to the next, previous or last running app",
            ),
        ),
        (
            "on",
            CommandDescriptor(
                on_action,
                "- on <gesture> <command> - execute command when the given action occurs",
            ),
        ),
    ]
