"""
Pydantic models for evaluation-case suites.

A suite is a YAML document listing expressions together with the variable
bindings to evaluate them with and the expected outcome.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .errors import ERROR_KINDS
from .logic.expression import VARIABLE_NAMES


class EvaluationCase(BaseModel):
    """One expression to parse and evaluate."""

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = None
    expression: str
    bindings: Dict[str, float] = Field(default_factory=dict)
    expected: Optional[float] = None
    error: Optional[str] = None

    @field_validator("bindings")
    @classmethod
    def validate_binding_names(cls, v: Dict[str, float]) -> Dict[str, float]:
        unknown = sorted(set(v) - set(VARIABLE_NAMES))
        if unknown:
            raise ValueError(
                f"Unknown variables {unknown}, bindings must use {list(VARIABLE_NAMES)}"
            )
        return v

    @field_validator("error")
    @classmethod
    def validate_error_kind(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and v not in ERROR_KINDS:
            raise ValueError(
                f"Unknown error kind '{v}', expected one of {sorted(ERROR_KINDS)}"
            )
        return v

    @model_validator(mode="after")
    def check_single_expectation(self) -> "EvaluationCase":
        if self.expected is not None and self.error is not None:
            raise ValueError("A case cannot expect both a value and an error")
        return self

    @property
    def label(self) -> str:
        return self.name or self.expression

    @property
    def arguments(self) -> Tuple[float, float, float]:
        """Bindings in positional (x, y, z) order, missing names default to 0."""
        x, y, z = (self.bindings.get(name, 0.0) for name in VARIABLE_NAMES)
        return x, y, z


class CaseSuite(BaseModel):
    """A list of evaluation cases sharing one comparison tolerance."""

    model_config = ConfigDict(extra="forbid")

    tolerance: float = Field(default=1e-9, ge=0)
    cases: List[EvaluationCase] = Field(min_length=1)
