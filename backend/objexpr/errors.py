"""
Parse error taxonomy.

Every error carries the source expression, a 1-based position and the length
of the offending span, and renders a message with a visual pointer over it.
"""

from __future__ import annotations

OPEN_MARKER = "|-->"
CLOSE_MARKER = "<--|"


def mark_position(text: str, index: int, length: int) -> str:
    """
    Return a copy of text with markers around text[index:index + length].

    Both insertion points are clamped to the end of the text, so spans that
    run past the end (e.g. a missing closing bracket) still render.
    """
    start = min(len(text), index)
    end = min(len(text), index + length)
    return text[:start] + OPEN_MARKER + text[start:end] + CLOSE_MARKER + text[end:]


class ExpressionError(Exception):
    """Base exception for all expression parse errors."""

    def __init__(self, expression: str, index: int, length: int, message: str):
        self.expression = expression
        self.position = index + 1
        self.length = length
        self.pointer = mark_position(expression, index, length)
        super().__init__(f"{message} at position: {self.position}\n{self.pointer}")

    @property
    def kind(self) -> str:
        """Name of the error kind."""
        return type(self).__name__


class EmptyExpressionError(ExpressionError):
    """Raised when the input string has zero length."""

    def __init__(self, expression: str = ""):
        self.expression = expression
        self.position = 1
        self.length = len(expression)
        self.pointer = OPEN_MARKER + expression + CLOSE_MARKER
        Exception.__init__(self, f"Expression is empty:\n{self.pointer}")


class UnknownLexemeError(ExpressionError):
    """Raised when a lexeme in value position is not a number or a variable."""

    def __init__(self, expression: str, index: int, lexeme: str):
        self.lexeme = lexeme
        super().__init__(
            expression, index, len(lexeme), f"Found unknown lexeme '{lexeme}'"
        )


class OperationNotFoundError(ExpressionError):
    """Raised when the lexeme after an opening bracket is not an operator."""

    def __init__(self, expression: str, index: int, operation: str):
        self.operation = operation
        super().__init__(
            expression,
            index,
            len(operation),
            f"Expected operation after opening bracket, but found {operation}",
        )


class WrongBracketSequenceError(ExpressionError):
    """Raised when a closing bracket was expected but not found."""

    def __init__(self, expression: str, index: int):
        super().__init__(
            expression,
            index,
            1,
            "Found wrong bracket sequence: expected closing bracket",
        )


class WrongOperandsQtyError(ExpressionError):
    """Raised when a fixed-arity operator gets the wrong number of operands."""

    def __init__(
        self,
        expression: str,
        operation: str,
        expected: int,
        found: int,
        start: int,
        end: int,
    ):
        self.operation = operation
        self.expected = expected
        self.found = found
        super().__init__(
            expression,
            start,
            end - start,
            f"Wrong operands quantity for operation '{operation}': "
            f"expected {expected}, found {found}",
        )


class WrongConstError(ExpressionError):
    """Raised when a numeric-looking lexeme is not a valid number."""

    def __init__(self, expression: str, index: int, lexeme: str):
        self.lexeme = lexeme
        super().__init__(
            expression, index, len(lexeme), f"'{lexeme}' is not a number"
        )


class WrongEndingError(ExpressionError):
    """Raised when content remains after a complete expression."""

    def __init__(self, expression: str, index: int):
        super().__init__(
            expression,
            index,
            len(expression) - index,
            "Expected end of expression",
        )


ERROR_KINDS = {
    cls.__name__: cls
    for cls in (
        EmptyExpressionError,
        UnknownLexemeError,
        OperationNotFoundError,
        WrongBracketSequenceError,
        WrongOperandsQtyError,
        WrongConstError,
        WrongEndingError,
    )
}
