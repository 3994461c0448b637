"""Shared test helpers."""

from __future__ import annotations

import numpy as np


def assert_within_ulp(actual: float, expected: float, max_ulp: int = 1) -> None:
    """Assert that two floats differ by at most ``max_ulp`` units in the last place.

    Args:
        actual: Computed value.
        expected: Reference value.
        max_ulp: Accepted ULP distance.
    """
    np.testing.assert_array_max_ulp(
        np.float64(actual),
        np.float64(expected),
        maxulp=max_ulp,
    )
