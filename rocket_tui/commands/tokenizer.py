"""Tokenizer for launcher command lines."""

from dataclasses import dataclass
from typing import List, Optional

import structlog

from rocket_tui.commands.errors import Outcome, UnclosedQuote

log = structlog.get_logger(__name__)

SEPARATORS = " "  # Only spaces separate; tabs stay inside tokens
QUOTE = '"'


@dataclass(frozen=True, eq=False)
class Token:
    """A view into a range of the source line.

    Tokens only hold a reference to the line plus offsets; ``text``
    materialises the slice. Compares equal to ``str`` with the same text.
    """

    source: str
    start: int
    end: int

    @property
    def text(self) -> str:
        """The token's characters."""
        return self.source[self.start:self.end]

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"Token({self.text!r})"

    def __len__(self) -> int:
        return self.end - self.start

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Token):
            return self.text == other.text
        if isinstance(other, str):
            return self.text == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.text)


def tokenize(line: str) -> Outcome[List[Token]]:
    """Split a command line into tokens.

    Supports:
    - Space separated words: launch Notes
    - Quoted spans: launch "My Notes"
    - Empty quoted spans: "" yields an empty token

    Args:
        line: Raw command line

    Returns:
        Outcome with the list of tokens, or UnclosedQuote
    """
    tokens: List[Token] = []
    word_start: Optional[int] = None
    quote_start: Optional[int] = None

    for i, ch in enumerate(line):
        if quote_start is not None:
            if ch == QUOTE:
                tokens.append(Token(line, quote_start, i))
                quote_start = None
            continue

        if ch == QUOTE:
            # Text glued to an opening quote is its own token
            if word_start is not None:
                tokens.append(Token(line, word_start, i))
                word_start = None
            quote_start = i + 1
        elif ch in SEPARATORS:
            if word_start is not None:
                tokens.append(Token(line, word_start, i))
                word_start = None
        elif word_start is None:
            word_start = i

    if quote_start is not None:
        return Outcome.fail(UnclosedQuote())

    if word_start is not None:
        tokens.append(Token(line, word_start, len(line)))

    log.debug("tokenized", tokens=[t.text for t in tokens])
    return Outcome.ok(tokens)
