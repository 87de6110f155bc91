"""Textual widgets for rocket-tui."""

from rocket_tui.widgets.app_list import AppList
from rocket_tui.widgets.command_input import CommandInput
from rocket_tui.widgets.status_bar import StatusBar

__all__ = [
    "AppList",
    "CommandInput",
    "StatusBar",
]
