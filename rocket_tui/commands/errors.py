"""Command errors and result types.

Every failure in the command layer is returned as a value. ``Outcome``
carries either a parsed value or a ``CommandError``; ``CommandResult`` is
what handlers and dispatch entry points hand back to the caller.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class CommandError:
    """Base class for command failures."""

    @property
    def message(self) -> str:
        """Human readable description."""
        return "Command failed"

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class UnclosedQuote(CommandError):
    """A double quote was still open at the end of the line."""

    @property
    def message(self) -> str:
        return "Unclosed quotes"


@dataclass(frozen=True)
class ArityMismatch(CommandError):
    """Wrong number of arguments for a command."""

    command: str
    expected: int
    got: int

    @property
    def message(self) -> str:
        return (
            f"Invalid number of arguments for '{self.command}', "
            f"expected {self.expected} got {self.got}"
        )


@dataclass(frozen=True)
class ArgumentParseError(CommandError):
    """One or more arguments failed to parse."""

    detail: str

    @property
    def message(self) -> str:
        return self.detail


@dataclass(frozen=True)
class CommandNotFound(CommandError):
    """No command registered under this name."""

    name: str

    @property
    def message(self) -> str:
        return f"Command {self.name} not found"


@dataclass(frozen=True)
class EmptyCommand(CommandError):
    """Nothing to compile."""

    @property
    def message(self) -> str:
        return "Empty command"


@dataclass(frozen=True)
class AppNotFound(CommandError):
    """The launcher has no app with this name."""

    name: str

    @property
    def message(self) -> str:
        return f"App not found {self.name}"


@dataclass(frozen=True)
class EmptyGesture(CommandError):
    """Gesture spec had no segments."""

    @property
    def message(self) -> str:
        return "Empty action"


@dataclass(frozen=True)
class MalformedGesture(CommandError):
    """Gesture spec had the wrong number of segments."""

    shape: str

    @property
    def message(self) -> str:
        return f"Expected {self.shape}"


@dataclass(frozen=True)
class UnknownGestureDirection(CommandError):
    """Direction not in the gesture's vocabulary."""

    value: str
    kind: str

    @property
    def message(self) -> str:
        return f"Unknown {self.kind} direction: {self.value}"


@dataclass(frozen=True)
class UnknownGestureKind(CommandError):
    """First gesture segment is not Swipe, Pinch or Tap."""

    value: str

    @property
    def message(self) -> str:
        return f"Unknown gesture: {self.value}"


@dataclass(frozen=True)
class UnknownSwitchTarget(CommandError):
    """switch was given something other than next, prev or last."""

    value: str

    @property
    def message(self) -> str:
        return f"Unknown switch target, expected <next|prev|last>, got: {self.value}"


@dataclass(frozen=True)
class NoAppsRunning(CommandError):
    """There is no current app to switch away from."""

    @property
    def message(self) -> str:
        return "No apps running"


@dataclass(frozen=True)
class NoOtherApp(CommandError):
    """No running app besides the current one."""

    @property
    def message(self) -> str:
        return "No other apps"


@dataclass(frozen=True)
class ActionNotAdded(CommandError):
    """The command of an ``on`` binding could not be compiled."""

    command: str
    reason: CommandError

    @property
    def message(self) -> str:
        return f"Can't add action: {self.reason.message} for command: \"{self.command}\""


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """A value or an error, never both."""

    value: Optional[T] = None
    error: Optional[CommandError] = None

    @classmethod
    def ok(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, error: CommandError) -> "Outcome[T]":
        return cls(error=error)

    @property
    def is_error(self) -> bool:
        return self.error is not None


@dataclass
class CommandResult:
    """Result of command execution."""

    success: bool
    message: str = ""
    error: Optional[CommandError] = None

    @classmethod
    def ok(cls, message: str = "") -> "CommandResult":
        """Successful result with an optional message."""
        return cls(success=True, message=message)

    @classmethod
    def fail(cls, error: CommandError) -> "CommandResult":
        """Failed result; the message is taken from the error."""
        return cls(success=False, message=error.message, error=error)
