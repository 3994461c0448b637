"""Unit tests for the reference-value checker."""

from __future__ import annotations

import math
import unittest

import numpy as np

from goplex.utils.exceptions import ConfigurationError, ReferenceMismatchError
from goplex.validation import (
    REFERENCE_CASES,
    CheckConfig,
    ReferenceCase,
    assert_reference_cases,
    check_reference_cases,
    ulp_distance,
)


class UlpDistanceTests(unittest.TestCase):
    """ULP distance measurement checks."""

    def test_identical_values_have_zero_distance(self) -> None:
        """Return zero for equal values, including infinities."""
        self.assertEqual(ulp_distance(1.5, 1.5), 0.0)
        self.assertEqual(ulp_distance(math.inf, math.inf), 0.0)

    def test_adjacent_float_is_one_ulp_away(self) -> None:
        """Measure one ULP between neighboring doubles."""
        self.assertEqual(ulp_distance(float(np.nextafter(1.0, 2.0)), 1.0), 1.0)

    def test_nan_and_infinite_mismatch_are_infinitely_far(self) -> None:
        """Treat ``nan`` and one-sided infinities as unbounded mismatches."""
        self.assertEqual(ulp_distance(math.nan, 1.0), math.inf)
        self.assertEqual(ulp_distance(math.inf, 1.0), math.inf)


class CheckConfigTests(unittest.TestCase):
    """Checker configuration validation."""

    def test_rejects_negative_budget(self) -> None:
        """Raise for a negative ULP budget."""
        with self.assertRaises(ConfigurationError):
            CheckConfig(max_ulp=-1).validate()

    def test_rejects_non_integer_budget(self) -> None:
        """Raise for float and boolean budgets."""
        with self.assertRaises(ConfigurationError):
            CheckConfig(max_ulp=1.5).validate()  # type: ignore[arg-type]
        with self.assertRaises(ConfigurationError):
            CheckConfig(max_ulp=True).validate()


class CheckerTests(unittest.TestCase):
    """Reference-case evaluation and reporting."""

    def test_reference_cases_cover_every_formula(self) -> None:
        """Provide one reference case per formula."""
        self.assertEqual(len(REFERENCE_CASES), 7)

    def test_failing_case_is_reported_and_logged(self) -> None:
        """Mark mismatches as failed and log them as warnings."""
        cases = (
            ReferenceCase(name="exact", evaluate=lambda: 2.0, expected=2.0),
            ReferenceCase(name="off", evaluate=lambda: 1.0, expected=2.0),
        )
        with self.assertLogs("goplex.validation", level="WARNING") as logs:
            results = check_reference_cases(cases, CheckConfig(max_ulp=0))

        self.assertEqual([result.passed for result in results], [True, False])
        self.assertEqual(results[0].ulp_distance, 0.0)
        self.assertEqual(results[1].actual, 1.0)
        self.assertEqual(len(logs.records), 1)
        self.assertIn("off", logs.output[0])

    def test_assert_raises_with_failures(self) -> None:
        """Raise a mismatch error carrying the failing results."""
        cases = (ReferenceCase(name="off", evaluate=lambda: math.nan, expected=2.0),)
        with self.assertRaises(ReferenceMismatchError) as ctx:
            assert_reference_cases(cases)
        self.assertIsInstance(ctx.exception.failures, list)
        self.assertEqual([result.name for result in ctx.exception.failures], ["off"])
        self.assertIn("off", str(ctx.exception))

    def test_invalid_config_is_rejected_before_evaluation(self) -> None:
        """Validate configuration before evaluating any case."""
        calls: list[int] = []
        cases = (ReferenceCase(name="x", evaluate=lambda: calls.append(1) or 0.0, expected=0.0),)
        with self.assertRaises(ConfigurationError):
            check_reference_cases(cases, CheckConfig(max_ulp=-3))
        self.assertEqual(calls, [])


if __name__ == "__main__":
    unittest.main()
