"""
Lexer for prefix expressions.

Brackets are always standalone lexemes; anything else is a maximal run of
characters that are neither whitespace nor brackets. The lexer does not
classify lexemes, that is left to the parser.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

BRACKETS = "()"

# ECMAScript \s, which leaves out \x1c-\x1f and \x85
WHITESPACE = frozenset(
    "\t\n\v\f\r \u00a0\u1680\u2028\u2029\u202f\u205f\u3000\ufeff"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
)


@dataclass(frozen=True)
class Lexeme:
    """A lexeme and the 0-based index where it starts in the source."""

    text: str
    start: int

    @property
    def end(self) -> int:
        return self.start + len(self.text)


class Lexer:
    """Cursor over the source string with one lexeme of pushback."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self._pushed: Optional[Lexeme] = None

    @property
    def at_end(self) -> bool:
        return self._pushed is None and self.pos >= len(self.text)

    def skip_whitespace(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos] in WHITESPACE:
            self.pos += 1

    def next_lexeme(self) -> Lexeme:
        """
        Return the next lexeme.

        At the end of input an empty lexeme positioned at the end is returned.
        """
        if self._pushed is not None:
            lexeme, self._pushed = self._pushed, None
            return lexeme

        self.skip_whitespace()
        start = self.pos
        if self.pos < len(self.text) and self.text[self.pos] in BRACKETS:
            self.pos += 1
            return Lexeme(self.text[start], start)

        while (
            self.pos < len(self.text)
            and self.text[self.pos] not in WHITESPACE
            and self.text[self.pos] not in BRACKETS
        ):
            self.pos += 1
        return Lexeme(self.text[start:self.pos], start)

    def push_back(self, lexeme: Lexeme) -> None:
        if self._pushed is not None:
            raise RuntimeError("Only one lexeme of pushback is supported")
        self._pushed = lexeme
