"""Gesture descriptors that can trigger bound commands."""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class SwipeDirection(Enum):
    """Swipe directions."""

    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"


class PinchDirection(Enum):
    """Pinch directions."""

    IN = "In"
    OUT = "Out"


class ActionDescriptor:
    """Base class for a recognised gesture.

    Written as ``Kind:direction:fingers`` (or ``Tap:fingers``), see ``str()``.
    """

    kind: ClassVar[str] = ""


@dataclass(frozen=True)
class Swipe(ActionDescriptor):
    """Swipe in a direction with a number of fingers."""

    kind: ClassVar[str] = "Swipe"

    direction: SwipeDirection
    fingers: int

    def __str__(self) -> str:
        return f"{self.kind}:{self.direction.value}:{self.fingers}"


@dataclass(frozen=True)
class Pinch(ActionDescriptor):
    """Pinch in or out with a number of fingers."""

    kind: ClassVar[str] = "Pinch"

    direction: PinchDirection
    fingers: int

    def __str__(self) -> str:
        return f"{self.kind}:{self.direction.value}:{self.fingers}"


@dataclass(frozen=True)
class Tap(ActionDescriptor):
    """Tap with a number of fingers."""

    kind: ClassVar[str] = "Tap"

    fingers: int

    def __str__(self) -> str:
        return f"{self.kind}:{self.fingers}"
