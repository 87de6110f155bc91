"""Command parsing and dispatch for rocket-tui."""

from rocket_tui.commands.errors import CommandError, CommandResult, Outcome
from rocket_tui.commands.tokenizer import Token, tokenize
from rocket_tui.commands.gestures import (
    ActionDescriptor,
    Pinch,
    PinchDirection,
    Swipe,
    SwipeDirection,
    Tap,
)
from rocket_tui.commands.arguments import parse_action, parse_arg
from rocket_tui.commands.descriptor import CommandDescriptor, DeferredInvocation
from rocket_tui.commands.registry import (
    Dispatcher,
    Registry,
    compile_later,
    default_registry,
    run_now,
)

__all__ = [
    "CommandError",
    "CommandResult",
    "Outcome",
    "Token",
    "tokenize",
    "ActionDescriptor",
    "Pinch",
    "PinchDirection",
    "Swipe",
    "SwipeDirection",
    "Tap",
    "parse_action",
    "parse_arg",
    "CommandDescriptor",
    "DeferredInvocation",
    "Dispatcher",
    "Registry",
    "compile_later",
    "default_registry",
    "run_now",
]
