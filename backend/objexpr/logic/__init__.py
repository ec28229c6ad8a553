"""
Expression engine for obj-expr.

Provides the operation catalogue, the expression tree model, the lexer and
the prefix parser.
"""

from .operations import OPERATIONS, Arity, OperationSpec
from .expression import VARIABLES, VARIABLE_NAMES, Const, Expression, Operation, Variable
from .lexer import Lexeme, Lexer
from .parser import PrefixParser, parse_prefix

__all__ = [
    "OPERATIONS",
    "Arity",
    "OperationSpec",
    "VARIABLES",
    "VARIABLE_NAMES",
    "Const",
    "Expression",
    "Operation",
    "Variable",
    "Lexeme",
    "Lexer",
    "PrefixParser",
    "parse_prefix",
]
