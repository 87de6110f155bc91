"""Conversion of tokens into typed handler arguments.

Handlers declare one of three argument kinds per parameter:

- ``Token``: borrowed text, a view into the command line
- ``str``: owned text
- ``ActionDescriptor``: a gesture spec such as ``Swipe:Up:2``
"""

import re
from typing import Any, Callable, Dict, Sequence, Tuple, Type

from rocket_tui.commands.errors import (
    ArgumentParseError,
    EmptyGesture,
    MalformedGesture,
    Outcome,
    UnknownGestureDirection,
    UnknownGestureKind,
)
from rocket_tui.commands.gestures import (
    ActionDescriptor,
    Pinch,
    PinchDirection,
    Swipe,
    SwipeDirection,
    Tap,
)
from rocket_tui.commands.tokenizer import Token

_LEADING_INT = re.compile(r"\s*\+?(\d+)")


def parse_fingers(text: str) -> int:
    """Parse a finger count the lenient way.

    Leading decimal digits are used, anything else counts as 0.
    """
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_action(text: str) -> Outcome[ActionDescriptor]:
    """Parse a gesture spec.

    Supports:
    - Swipe:<Up|Down|Left|Right>:<fingers>
    - Pinch:<In|Out>:<fingers>
    - Tap:<fingers>

    Args:
        text: Gesture spec

    Returns:
        Outcome with a Swipe, Pinch or Tap descriptor
    """
    segments = [s for s in text.split(":") if s]
    if not segments:
        return Outcome.fail(EmptyGesture())

    kind = segments[0]
    if kind == Swipe.kind:
        if len(segments) != 3:
            return Outcome.fail(MalformedGesture("Swipe:direction:fingers"))
        try:
            swipe_direction = SwipeDirection(segments[1])
        except ValueError:
            return Outcome.fail(UnknownGestureDirection(segments[1], kind))
        return Outcome.ok(Swipe(swipe_direction, parse_fingers(segments[2])))

    if kind == Pinch.kind:
        if len(segments) != 3:
            return Outcome.fail(MalformedGesture("Pinch:direction:fingers"))
        try:
            pinch_direction = PinchDirection(segments[1])
        except ValueError:
            return Outcome.fail(UnknownGestureDirection(segments[1], kind))
        return Outcome.ok(Pinch(pinch_direction, parse_fingers(segments[2])))

    if kind == Tap.kind:
        if len(segments) != 2:
            return Outcome.fail(MalformedGesture("Tap:fingers"))
        return Outcome.ok(Tap(parse_fingers(segments[1])))

    return Outcome.fail(UnknownGestureKind(kind))


PARSERS: Dict[Type, Callable[[Token], Outcome[Any]]] = {
    Token: Outcome.ok,
    str: lambda token: Outcome.ok(str(token)),
    ActionDescriptor: lambda token: parse_action(str(token)),
}

# Borrowed kinds and the owned kind they become in a deferred invocation
OWNED_KINDS: Dict[Type, Type] = {
    Token: str,
}


def owned_kind(kind: Type) -> Type:
    """Return the kind that owns its data for ``kind``."""
    return OWNED_KINDS.get(kind, kind)


def is_supported(kind: Type) -> bool:
    """Check whether arguments of ``kind`` can be parsed."""
    return kind in PARSERS


def parse_arg(kind: Type, token: Token) -> Outcome[Any]:
    """Parse a single token as ``kind``."""
    return PARSERS[kind](token)


def parse_args(kinds: Sequence[Type], tokens: Sequence[Token]) -> Outcome[Tuple[Any, ...]]:
    """Parse every token as its declared kind.

    All tokens are parsed even after a failure so that the error lists
    every bad argument.

    Args:
        kinds: Declared argument kinds
        tokens: Argument tokens, same length as kinds

    Returns:
        Outcome with the tuple of values, or one ArgumentParseError
    """
    outcomes = [parse_arg(kind, token) for kind, token in zip(kinds, tokens)]
    errors = [o.error.message for o in outcomes if o.error is not None]
    if errors:
        return Outcome.fail(ArgumentParseError(", ".join(errors)))
    return Outcome.ok(tuple(o.value for o in outcomes))
