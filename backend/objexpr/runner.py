"""
Evaluation-case runner.

Loads YAML case suites, parses and evaluates every case and collects the
outcomes into a single result.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import ValidationError

from .errors import ExpressionError
from .logic.expression import format_number
from .logic.parser import parse_prefix
from .models import CaseSuite, EvaluationCase

logger = logging.getLogger(__name__)


@dataclass
class CaseResult:
    """Outcome of a single case."""

    name: str
    expression: str
    passed: bool
    actual: Optional[float] = None
    postfix: Optional[str] = None
    error: Optional[str] = None
    message: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        result = {
            "name": self.name,
            "expression": self.expression,
            "passed": self.passed,
        }
        if self.actual is not None:
            # JSON has no NaN or infinity literals
            result["actual"] = (
                self.actual if math.isfinite(self.actual) else format_number(self.actual)
            )
        if self.postfix is not None:
            result["postfix"] = self.postfix
        if self.error:
            result["error"] = self.error
        if self.message:
            result["message"] = self.message
        return result


@dataclass
class SuiteResult:
    """Combined result of a case suite."""

    cases: List[CaseResult] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def passed(self) -> int:
        return sum(1 for c in self.cases if c.passed)

    @property
    def failed(self) -> int:
        return sum(1 for c in self.cases if not c.passed)

    @property
    def valid(self) -> bool:
        """True when the suite loaded and every case passed."""
        return not self.errors and self.failed == 0

    def summary(self) -> str:
        """Generate a summary of the run."""
        status = "PASSED" if self.valid else "FAILED"
        lines = [f"Suite {status}"]
        lines.append(f"  Passed: {self.passed}")
        lines.append(f"  Failed: {self.failed}")

        for error in self.errors:
            lines.append(f"  Error: {error}")

        for case in self.cases:
            if not case.passed:
                lines.append(f"  FAIL {case.name}: {case.message}")

        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "valid": self.valid,
            "passed": self.passed,
            "failed": self.failed,
            "errors": self.errors,
            "cases": [c.to_dict() for c in self.cases],
        }


def values_match(actual: float, expected: float, tolerance: float) -> bool:
    """Compare two evaluation results; NaN matches NaN."""
    if math.isnan(expected) or math.isnan(actual):
        return math.isnan(expected) and math.isnan(actual)
    return math.isclose(actual, expected, rel_tol=0.0, abs_tol=tolerance)


class CaseRunner:
    """Runs evaluation cases against the prefix parser."""

    def __init__(self, tolerance: Optional[float] = None):
        """
        Initialize the runner.

        Args:
            tolerance: Overrides the tolerance declared by each suite.
        """
        self.tolerance = tolerance

    def run(self, suite: CaseSuite) -> SuiteResult:
        """Run every case of a suite."""
        tolerance = self.tolerance if self.tolerance is not None else suite.tolerance
        result = SuiteResult()
        for case in suite.cases:
            case_result = self.run_case(case, tolerance)
            if not case_result.passed:
                logger.warning("Case %s failed: %s", case_result.name, case_result.message)
            result.cases.append(case_result)
        return result

    def run_case(self, case: EvaluationCase, tolerance: float = 1e-9) -> CaseResult:
        """Parse and evaluate one case."""
        result = CaseResult(name=case.label, expression=case.expression, passed=False)

        try:
            tree = parse_prefix(case.expression)
        except ExpressionError as e:
            result.error = e.kind
            if case.error == e.kind:
                result.passed = True
            elif case.error:
                result.message = f"expected {case.error}, got {e.kind}: {e}"
            else:
                result.message = str(e)
            return result

        result.postfix = tree.to_postfix()
        result.actual = tree.evaluate(*case.arguments)

        if case.error:
            result.message = f"expected {case.error}, but the expression parsed"
        elif case.expected is not None and not values_match(
            result.actual, case.expected, tolerance
        ):
            result.message = f"expected {case.expected}, got {result.actual}"
        else:
            result.passed = True

        return result

    def run_file(self, path: Path) -> SuiteResult:
        """
        Load and run a YAML suite.

        Loading problems are reported in SuiteResult.errors instead of raised.
        """
        result = SuiteResult()

        if not path.exists():
            result.errors.append(f"File not found: {path}")
            return result

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            result.errors.append(f"YAML parse error: {e}")
            return result

        if data is None:
            result.errors.append("File is empty")
            return result

        try:
            suite = CaseSuite.model_validate(data)
        except ValidationError as e:
            result.errors.append(f"Invalid suite: {e}")
            return result

        logger.info("Loaded %d cases from %s", len(suite.cases), path)
        return self.run(suite)


def run_suite_file(path: Path, tolerance: Optional[float] = None) -> SuiteResult:
    """Convenience function to run a suite file."""
    return CaseRunner(tolerance=tolerance).run_file(Path(path))
