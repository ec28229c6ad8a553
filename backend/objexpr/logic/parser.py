"""
Prefix expression parser.

Parses fully parenthesized prefix notation such as:
    "(+ x 2)"
    "(negate (med3 x y (arith-mean 1 2 3)))"

Into an expression tree:
    Operation(+, [Variable(x), Const(2)])

Grammar:
    expr := atom | "(" operator expr* ")"
    atom := number | variable
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Tuple

from ..errors import (
    EmptyExpressionError,
    ExpressionError,
    OperationNotFoundError,
    UnknownLexemeError,
    WrongBracketSequenceError,
    WrongConstError,
    WrongEndingError,
    WrongOperandsQtyError,
)
from .expression import VARIABLES, Const, Expression, Operation
from .lexer import Lexeme, Lexer
from .operations import OPERATIONS, OperationSpec

logger = logging.getLogger(__name__)

NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
CONST_START = "0123456789-"


def is_number(text: str) -> bool:
    """Check whether a lexeme is a decimal number literal."""
    return NUMBER_RE.fullmatch(text) is not None


class PrefixParser:
    """
    Recursive-descent parser for one expression.

    Holds the lexer cursor and pushback for a single parse; create a new
    parser for every expression.
    """

    def __init__(self, expression: str):
        self.expression = expression
        self.lexer = Lexer(expression)

    def parse(self) -> Expression:
        """
        Parse the whole expression.

        Returns:
            The root of the expression tree.

        Raises:
            ExpressionError: On the first syntax error found.
        """
        if not self.expression:
            raise EmptyExpressionError(self.expression)

        result = self._analyze(self.lexer.next_lexeme())

        self.lexer.skip_whitespace()
        if not self.lexer.at_end:
            raise WrongEndingError(self.expression, self.lexer.pos)
        return result

    def _analyze(self, lexeme: Lexeme) -> Expression:
        """Build the expression that starts with the given lexeme."""
        logger.debug("Analyzing lexeme %r at %d", lexeme.text, lexeme.start + 1)
        text = lexeme.text

        if text == "(":
            return self._parse_operation(lexeme)

        if text in VARIABLES:
            return VARIABLES[text]

        if text and text[0] in CONST_START:
            if not is_number(text):
                raise WrongConstError(self.expression, lexeme.start, text)
            return Const(float(text))

        raise UnknownLexemeError(self.expression, lexeme.start, text)

    def _parse_operation(self, opening: Lexeme) -> Operation:
        """Parse an operator, its operands and the closing bracket."""
        operator = self.lexer.next_lexeme()
        spec = OPERATIONS.get(operator.text)
        if spec is None:
            raise OperationNotFoundError(
                self.expression, operator.start, operator.text
            )

        args = self._parse_arguments(spec)

        closing = self.lexer.next_lexeme()
        if closing.text != ")":
            raise WrongBracketSequenceError(self.expression, closing.start)

        if not spec.arity.accepts(len(args)):
            # Span covers everything between the bracket and the operator end
            raise WrongOperandsQtyError(
                self.expression,
                spec.symbol,
                spec.arity.count,
                len(args),
                opening.end,
                operator.end,
            )

        node = Operation(spec, tuple(args))
        logger.debug("Built operation %s with %d operands", spec.symbol, len(args))
        return node

    def _parse_arguments(self, spec: OperationSpec) -> List[Expression]:
        """
        Collect operands until the arity is reached or a non-operand shows up.

        The lexeme that stops collection is pushed back for the closing
        bracket check.
        """
        args: List[Expression] = []
        while spec.arity.is_variadic or len(args) < spec.arity.count:
            lexeme = self.lexer.next_lexeme()
            if not self._starts_operand(lexeme.text):
                self.lexer.push_back(lexeme)
                break
            args.append(self._analyze(lexeme))
        return args

    @staticmethod
    def _starts_operand(text: str) -> bool:
        return text == "(" or text in VARIABLES or is_number(text)

    @classmethod
    def validate(cls, expression: str) -> Tuple[bool, Optional[str]]:
        """
        Check an expression without keeping the tree.

        Returns:
            Tuple of (is_valid, error_message).
        """
        try:
            cls(expression).parse()
            return True, None
        except ExpressionError as e:
            return False, str(e)


def parse_prefix(expression: str) -> Expression:
    """Parse a prefix expression into an expression tree."""
    return PrefixParser(expression).parse()
