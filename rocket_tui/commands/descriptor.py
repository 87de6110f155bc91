"""Command descriptors: one uniform surface over handlers of any signature."""

import inspect
from typing import Any, Callable, Optional, Sequence, Tuple, Type, get_type_hints

from rocket_tui.commands.arguments import is_supported, owned_kind, parse_args
from rocket_tui.commands.errors import ArityMismatch, CommandResult, Outcome
from rocket_tui.commands.tokenizer import Token

Handler = Callable[..., CommandResult]


def declared_kinds(handler: Handler) -> Tuple[Type, ...]:
    """Read argument kinds from a handler's annotations.

    The first parameter is the dispatch context and is skipped.
    """
    hints = get_type_hints(handler)
    params = list(inspect.signature(handler).parameters.values())[1:]
    kinds = []
    for param in params:
        if param.kind not in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            raise TypeError(f"{handler.__name__}: only positional parameters are supported")
        if param.name not in hints:
            raise TypeError(f"{handler.__name__}: parameter '{param.name}' has no annotation")
        kinds.append(hints[param.name])
    return tuple(kinds)


class DeferredInvocation:
    """A handler call with all arguments parsed and owned.

    Can be called any number of times; each call returns a new result.
    """

    __slots__ = ("_handler", "_context", "_args")

    def __init__(self, handler: Handler, context: Any, args: Tuple[Any, ...]) -> None:
        self._handler = handler
        self._context = context
        self._args = args

    @property
    def args(self) -> Tuple[Any, ...]:
        """The captured arguments."""
        return self._args

    def __call__(self) -> CommandResult:
        return self._handler(self._context, *self._args)

    def __repr__(self) -> str:
        return f"DeferredInvocation({self._handler.__name__}, {self._args!r})"


class CommandDescriptor:
    """Registry entry wrapping one handler.

    The handler has the shape ``(ctx, *args) -> CommandResult``. Argument
    kinds are fixed when the descriptor is built: once as declared (text
    arguments may borrow from the command line) and once in owned form for
    deferred invocations. Both paths share the arity check and error
    aggregation.
    """

    __slots__ = ("_handler", "_help", "_borrowed", "_owned")

    def __init__(
        self,
        handler: Handler,
        help: str,
        arg_types: Optional[Sequence[Type]] = None,
    ) -> None:
        kinds = tuple(arg_types) if arg_types is not None else declared_kinds(handler)
        for kind in kinds:
            if not is_supported(kind):
                raise TypeError(f"{handler.__name__}: no parser for argument type {kind!r}")

        self._handler = handler
        self._help = help
        self._borrowed = kinds
        self._owned = tuple(owned_kind(kind) for kind in kinds)

    @property
    def help(self) -> str:
        """Help text shown by the help command."""
        return self._help

    @property
    def arity(self) -> int:
        """Number of arguments the handler takes."""
        return len(self._borrowed)

    @property
    def arg_types(self) -> Tuple[Type, ...]:
        """Declared argument kinds."""
        return self._borrowed

    @property
    def owned_arg_types(self) -> Tuple[Type, ...]:
        """Argument kinds used for deferred invocations."""
        return self._owned

    def _parse(self, kinds: Tuple[Type, ...], tokens: Sequence[Token]) -> Outcome[Tuple[Any, ...]]:
        got = len(tokens) - 1
        if got != self.arity:
            return Outcome.fail(ArityMismatch(str(tokens[0]), self.arity, got))
        return parse_args(kinds, tokens[1:])

    def invoke_now(self, context: Any, tokens: Sequence[Token]) -> CommandResult:
        """Parse the arguments and run the handler.

        Text arguments may be tokens borrowing from the command line and
        must not be kept after the call.

        Args:
            context: Dispatch context passed as first handler argument
            tokens: All tokens, the command name first

        Returns:
            The handler's result, or the parse failure
        """
        parsed = self._parse(self._borrowed, tokens)
        if parsed.error is not None:
            return CommandResult.fail(parsed.error)
        return self._handler(context, *parsed.value)

    def compile(self, context: Any, tokens: Sequence[Token]) -> Outcome[DeferredInvocation]:
        """Parse the arguments into owned values for later invocation.

        Args:
            context: Dispatch context captured by the invocation
            tokens: All tokens, the command name first

        Returns:
            Outcome with a DeferredInvocation, or the parse failure
        """
        parsed = self._parse(self._owned, tokens)
        if parsed.error is not None:
            return Outcome.fail(parsed.error)
        return Outcome.ok(DeferredInvocation(self._handler, context, parsed.value))
