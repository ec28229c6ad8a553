"""
obj-expr: prefix arithmetic expressions over x, y and z.

This package parses fully parenthesized prefix expressions into immutable
expression trees that can be evaluated and rendered in prefix or postfix
notation.
"""

from .errors import (
    ExpressionError,
    EmptyExpressionError,
    UnknownLexemeError,
    OperationNotFoundError,
    WrongBracketSequenceError,
    WrongOperandsQtyError,
    WrongConstError,
    WrongEndingError,
)
from .logic import (
    OPERATIONS,
    Const,
    Expression,
    Operation,
    PrefixParser,
    Variable,
    parse_prefix,
)

__version__ = "1.0.0"
__all__ = [
    "ExpressionError",
    "EmptyExpressionError",
    "UnknownLexemeError",
    "OperationNotFoundError",
    "WrongBracketSequenceError",
    "WrongOperandsQtyError",
    "WrongConstError",
    "WrongEndingError",
    "OPERATIONS",
    "Const",
    "Expression",
    "Operation",
    "PrefixParser",
    "Variable",
    "parse_prefix",
]
