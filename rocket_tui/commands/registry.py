"""Command registry and dispatch entry points."""

from functools import lru_cache
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Iterable, Iterator, Mapping, Optional, Tuple, Union

import structlog

from rocket_tui.commands.descriptor import CommandDescriptor
from rocket_tui.commands.errors import CommandNotFound, CommandResult, EmptyCommand, Outcome
from rocket_tui.commands.tokenizer import tokenize

if TYPE_CHECKING:
    from rocket_tui.launcher import LauncherLike

log = structlog.get_logger(__name__)

Entries = Union[Mapping[str, CommandDescriptor], Iterable[Tuple[str, CommandDescriptor]]]


class Registry(Mapping[str, CommandDescriptor]):
    """Fixed name to descriptor mapping.

    Built once and read-only afterwards. Lookups are exact and
    case-sensitive; iteration follows registration order.
    """

    def __init__(self, commands: Entries) -> None:
        pairs = commands.items() if isinstance(commands, Mapping) else commands
        table = {}
        for name, descriptor in pairs:
            if name in table:
                raise ValueError(f"Command '{name}' registered twice")
            table[name] = descriptor
        self._commands = MappingProxyType(table)

    def __getitem__(self, name: str) -> CommandDescriptor:
        return self._commands[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def names(self) -> list[str]:
        """Registered command names, e.g. for completion."""
        return list(self._commands)


@lru_cache(maxsize=None)
def default_registry() -> Registry:
    """The process-wide registry of built-in commands, built on first use."""
    from rocket_tui.commands.handlers import builtin_commands

    return Registry(builtin_commands())


class Dispatcher:
    """Runs command lines against a launcher.

    The dispatcher is also the context handed to handlers as their first
    argument, giving them the launcher and the registry they were
    dispatched from.
    """

    def __init__(self, launcher: "LauncherLike", registry: Optional[Registry] = None) -> None:
        self._launcher = launcher
        self._registry = registry if registry is not None else default_registry()

    @property
    def launcher(self) -> "LauncherLike":
        """The launcher commands act on."""
        return self._launcher

    @property
    def registry(self) -> Registry:
        """The commands this dispatcher knows."""
        return self._registry

    def run_now(self, line: str) -> CommandResult:
        """Parse and run a command line immediately.

        An empty line does nothing and succeeds with an empty message.

        Args:
            line: Command line, e.g. 'launch Notes'

        Returns:
            CommandResult of the handler, or the parse/lookup failure
        """
        tokenized = tokenize(line)
        if tokenized.error is not None:
            return CommandResult.fail(tokenized.error)

        tokens = tokenized.value
        if not tokens:
            return CommandResult.ok("")

        name = tokens[0].text
        descriptor = self._registry.get(name)
        if descriptor is None:
            return CommandResult.fail(CommandNotFound(name))

        result = descriptor.invoke_now(self, tokens)
        log.debug("command_run", command=name, success=result.success, message=result.message)
        return result

    def compile_later(self, line: str) -> Outcome[Callable[[], None]]:
        """Parse a command line into a closure that runs it later.

        Unlike run_now, an empty line is an error. Failures of the closure
        itself are logged when it runs, since nobody is waiting for them.

        Args:
            line: Command line, e.g. 'switch next'

        Returns:
            Outcome with a no-argument callable, or the parse/lookup failure
        """
        tokenized = tokenize(line)
        if tokenized.error is not None:
            return Outcome.fail(tokenized.error)

        tokens = tokenized.value
        if not tokens:
            return Outcome.fail(EmptyCommand())

        name = tokens[0].text
        descriptor = self._registry.get(name)
        if descriptor is None:
            return Outcome.fail(CommandNotFound(name))

        compiled = descriptor.compile(self, tokens)
        if compiled.error is not None:
            return Outcome.fail(compiled.error)

        deferred = compiled.value

        def invoke() -> None:
            try:
                result = deferred()
            except Exception:
                log.exception("deferred_command_raised", command=line)
                return
            if not result.success:
                log.error("deferred_command_failed", command=line, error=result.message)

        return Outcome.ok(invoke)


def run_now(
    launcher: "LauncherLike",
    line: str,
    registry: Optional[Registry] = None,
) -> CommandResult:
    """Run a command line against ``launcher``."""
    return Dispatcher(launcher, registry).run_now(line)


def compile_later(
    launcher: "LauncherLike",
    line: str,
    registry: Optional[Registry] = None,
) -> Outcome[Callable[[], None]]:
    """Compile a command line for ``launcher`` into a deferred closure."""
    return Dispatcher(launcher, registry).compile_later(line)
