"""Shared fixtures."""

import pytest

from rocket_tui.commands.handlers import builtin_commands
from rocket_tui.commands.registry import Dispatcher, Registry
from rocket_tui.launcher import App, Launcher


@pytest.fixture
def registry() -> Registry:
    """A fresh registry of the built-in commands."""
    return Registry(builtin_commands())


@pytest.fixture
def launcher() -> Launcher:
    """Launcher with three apps, none running."""
    return Launcher([
        App(name="Notes", path="/opt/bin/notes"),
        App(name="Reader", path="/opt/bin/reader"),
        App(name="Terminal", path="/opt/bin/terminal"),
    ])


@pytest.fixture
def dispatcher(launcher: Launcher, registry: Registry) -> Dispatcher:
    """Dispatcher bound to the launcher fixture."""
    return Dispatcher(launcher, registry)
