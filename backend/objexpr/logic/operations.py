"""
Operation catalogue.

Maps every operator symbol to its arity and its numeric evaluation rule.
The table is built once at import time and never mutated.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Optional


@dataclass(frozen=True)
class Arity:
    """Operand count of an operator: a fixed number or any count."""

    count: Optional[int] = None

    @classmethod
    def fixed(cls, count: int) -> "Arity":
        if count < 0:
            raise ValueError(f"Arity must be non-negative, got {count}")
        return cls(count)

    @classmethod
    def variadic(cls) -> "Arity":
        return cls(None)

    @property
    def is_variadic(self) -> bool:
        return self.count is None

    def accepts(self, count: int) -> bool:
        """Check whether an operand count is valid for this arity."""
        return self.is_variadic or count == self.count

    def __str__(self) -> str:
        return "variadic" if self.is_variadic else str(self.count)


@dataclass(frozen=True)
class OperationSpec:
    """A catalogue entry."""

    symbol: str
    arity: Arity
    rule: Callable[..., float]

    def apply(self, *values: float) -> float:
        return self.rule(*values)


def _divide(a: float, b: float) -> float:
    """IEEE-754 division: x/0 gives a signed infinity, 0/0 gives NaN."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _med3(a: float, b: float, c: float) -> float:
    return sorted((a, b, c))[1]


def _avg5(a: float, b: float, c: float, d: float, e: float) -> float:
    return (a + b + c + d + e) / 5


def _arith_mean(*args: float) -> float:
    return _divide(sum(args, 0.0), len(args))


def _geom_mean(*args: float) -> float:
    if not args:
        return math.nan
    product = 1.0
    for value in args:
        product *= abs(value)
    return product ** _divide(1.0, len(args))


def _harm_mean(*args: float) -> float:
    return _divide(len(args), sum((_divide(1.0, value) for value in args), 0.0))


def _catalogue(*specs: OperationSpec) -> Mapping[str, OperationSpec]:
    return MappingProxyType({spec.symbol: spec for spec in specs})


OPERATIONS: Mapping[str, OperationSpec] = _catalogue(
    OperationSpec("+", Arity.fixed(2), lambda a, b: a + b),
    OperationSpec("-", Arity.fixed(2), lambda a, b: a - b),
    OperationSpec("*", Arity.fixed(2), lambda a, b: a * b),
    OperationSpec("/", Arity.fixed(2), _divide),
    OperationSpec("negate", Arity.fixed(1), lambda a: -a),
    OperationSpec("med3", Arity.fixed(3), _med3),
    OperationSpec("avg5", Arity.fixed(5), _avg5),
    OperationSpec("arith-mean", Arity.variadic(), _arith_mean),
    OperationSpec("geom-mean", Arity.variadic(), _geom_mean),
    OperationSpec("harm-mean", Arity.variadic(), _harm_mean),
)
