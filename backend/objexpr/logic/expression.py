"""
Expression tree model.

Three immutable node kinds: constants, variables and operations. Trees are
built bottom-up by the parser and never mutated afterwards, so one tree can
be evaluated or rendered from several threads at once.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Tuple

from .operations import OPERATIONS, OperationSpec

VARIABLE_NAMES: Tuple[str, ...] = ("x", "y", "z")


def format_number(value: float) -> str:
    """Render a number the way it is written in source, without a trailing .0."""
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


class Expression:
    """Base class of all expression nodes."""

    def evaluate(self, x: float, y: float, z: float) -> float:
        raise NotImplementedError

    def to_postfix(self) -> str:
        raise NotImplementedError

    def to_prefix(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.to_postfix()


@dataclass(frozen=True)
class Const(Expression):
    """A numeric literal."""

    value: float

    def evaluate(self, x: float, y: float, z: float) -> float:
        return self.value

    def to_postfix(self) -> str:
        return format_number(self.value)

    def to_prefix(self) -> str:
        return format_number(self.value)


Const.ZERO = Const(0.0)
Const.ONE = Const(1.0)


@dataclass(frozen=True)
class Variable(Expression):
    """One of the fixed variables, bound positionally as (x, y, z)."""

    name: str
    index: int = field(init=False, compare=False)

    def __post_init__(self):
        if self.name not in VARIABLE_NAMES:
            raise ValueError(
                f"Unknown variable '{self.name}', expected one of {VARIABLE_NAMES}"
            )
        object.__setattr__(self, "index", VARIABLE_NAMES.index(self.name))

    def evaluate(self, x: float, y: float, z: float) -> float:
        return (x, y, z)[self.index]

    def to_postfix(self) -> str:
        return self.name

    def to_prefix(self) -> str:
        return self.name


VARIABLES: Dict[str, Variable] = {name: Variable(name) for name in VARIABLE_NAMES}


@dataclass(frozen=True)
class Operation(Expression):
    """An operator applied to an ordered tuple of operands."""

    operation: OperationSpec
    args: Tuple[Expression, ...] = ()

    def __post_init__(self):
        if not self.operation.arity.accepts(len(self.args)):
            raise ValueError(
                f"Operation '{self.operation.symbol}' expects "
                f"{self.operation.arity} operands, got {len(self.args)}"
            )

    @classmethod
    def create(cls, symbol: str, *args: Expression) -> "Operation":
        """Build an operation node from a catalogue symbol."""
        return cls(OPERATIONS[symbol], tuple(args))

    @property
    def symbol(self) -> str:
        return self.operation.symbol

    def evaluate(self, x: float, y: float, z: float) -> float:
        return self.operation.apply(*(arg.evaluate(x, y, z) for arg in self.args))

    def to_postfix(self) -> str:
        # Zero-operand variadic calls render as the bare symbol
        parts = [arg.to_postfix() for arg in self.args]
        parts.append(self.symbol)
        return " ".join(parts)

    def to_prefix(self) -> str:
        parts = [self.symbol]
        parts.extend(arg.to_prefix() for arg in self.args)
        return "(" + " ".join(parts) + ")"
