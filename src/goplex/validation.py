"""Reference values for the formula set and a checker that compares against them.

Reference inputs and results scaled by a power of ten are built as
``mantissa * 10.0**exponent`` so they carry the exact bits they were published
with. Cases must match bit for bit by default; ``CheckConfig.max_ulp`` relaxes
the comparison in units in the last place (ULP).
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass

import numpy as np

from goplex.formulas import (
    abraham_lorentz_force,
    lorentz_factor,
    perihelion_shift,
    photon_energy,
    schwarzschild_radius,
    thermal_velocity_of_heated_gas,
    tsiolkovsky_delta_v,
)
from goplex.utils.constants import (
    MASS_OF_EARTH,
    SECONDS_IN_A_DAY,
    SPEED_OF_LIGHT,
    VACUUM_PERMITTIVITY,
)
from goplex.utils.exceptions import ConfigurationError, ReferenceMismatchError

logger = logging.getLogger(__name__)

DEFAULT_MAX_ULP = 0
PHOTON_WAVELENGTH = 400.0 * 10.0**-9
MERCURY_ORBITAL_PERIOD_DAYS = 59.0


@dataclass(frozen=True)
class CheckConfig:
    """Tolerance controls for the reference checker.

    Args:
        max_ulp: Largest accepted distance between actual and expected value,
            in units of ``numpy.spacing(expected)``. ``0`` demands bit-exact
            results.
    """

    max_ulp: int = DEFAULT_MAX_ULP

    def validate(self) -> None:
        """Validate checker settings.

        Raises:
            goplex.utils.exceptions.ConfigurationError: If ``max_ulp`` is not a
                non-negative integer.
        """
        if isinstance(self.max_ulp, bool) or not isinstance(self.max_ulp, int):
            msg = f"max_ulp must be an integer, got: {self.max_ulp!r}"
            raise ConfigurationError(msg)
        if self.max_ulp < 0:
            msg = "max_ulp must be non-negative"
            raise ConfigurationError(msg)


@dataclass(frozen=True)
class ReferenceCase:
    """One formula evaluation paired with its documented result.

    Args:
        name: Human-readable case label.
        evaluate: Zero-argument callable returning the computed value.
        expected: Documented reference value.
    """

    name: str
    evaluate: Callable[[], float]
    expected: float


@dataclass(frozen=True)
class CaseResult:
    """Outcome of checking one reference case.

    Args:
        name: Case label.
        expected: Documented reference value.
        actual: Value computed by the formula.
        ulp_distance: Distance between both values in ULP of ``expected``.
        passed: Whether the distance fits the configured budget.
    """

    name: str
    expected: float
    actual: float
    ulp_distance: float
    passed: bool


REFERENCE_CASES: tuple[ReferenceCase, ...] = (
    ReferenceCase(
        name="Tsiolkovsky delta-v",
        evaluate=lambda: tsiolkovsky_delta_v(17000.0, 5000.0, 3000.0),
        expected=8684.035604021843,
    ),
    ReferenceCase(
        name="Photon energy at 400 nm",
        evaluate=lambda: photon_energy(PHOTON_WAVELENGTH),
        expected=4.966114480984394 * 10.0**-19,
    ),
    ReferenceCase(
        name="Thermal velocity of RP-1 exhaust",
        evaluate=lambda: thermal_velocity_of_heated_gas(9.8, 3670.0, 0.81),
        expected=0.11043619735553113,
    ),
    ReferenceCase(
        name="Lorentz factor at 0.5c",
        evaluate=lambda: lorentz_factor(SPEED_OF_LIGHT / 2.0),
        expected=1.1547005383792517,
    ),
    ReferenceCase(
        name="Abraham-Lorentz force on an up quark",
        evaluate=lambda: abraham_lorentz_force(0.66666666, VACUUM_PERMITTIVITY, 9.8),
        expected=9.6857127934588849 * 10.0**-16,
    ),
    ReferenceCase(
        name="Perihelion shift of Mercury",
        evaluate=lambda: (
            perihelion_shift(57909050.0, 47.362, 0.205630)
            * SECONDS_IN_A_DAY
            * MERCURY_ORBITAL_PERIOD_DAYS
        ),
        expected=0.065884179454766778,
    ),
    ReferenceCase(
        name="Schwarzschild radius of Earth",
        evaluate=lambda: schwarzschild_radius(MASS_OF_EARTH),
        expected=0.008870062974351377,
    ),
)


def ulp_distance(actual: float, expected: float) -> float:
    """Measure how far ``actual`` is from ``expected`` in ULP of ``expected``.

    Args:
        actual: Computed value.
        expected: Reference value.

    Returns:
        ``0.0`` for identical values, ``inf`` when either value is ``nan``
        or only one is infinite, otherwise ``|actual - expected| / spacing``.
    """
    if actual == expected:
        return 0.0
    if math.isnan(actual) or math.isnan(expected):
        return math.inf
    if math.isinf(actual) or math.isinf(expected):
        return math.inf
    spacing = float(np.spacing(np.abs(np.float64(expected))))
    return abs(actual - expected) / spacing


def check_reference_cases(
    cases: Sequence[ReferenceCase] = REFERENCE_CASES,
    config: CheckConfig | None = None,
) -> list[CaseResult]:
    """Evaluate reference cases and compare them against their expected values.

    Args:
        cases: Cases to evaluate, in reporting order.
        config: Tolerance controls. Defaults to ``CheckConfig()``.

    Returns:
        One result per case, in input order.

    Raises:
        goplex.utils.exceptions.ConfigurationError: If ``config`` is invalid.
    """
    config = config or CheckConfig()
    config.validate()

    results: list[CaseResult] = []
    for case in cases:
        actual = float(case.evaluate())
        distance = ulp_distance(actual, case.expected)
        passed = distance <= config.max_ulp
        if passed:
            logger.debug("%s passed (%.0f ulp)", case.name, distance)
        else:
            logger.warning(
                "%s failed: expected %r, calculated %r (%s ulp)",
                case.name,
                case.expected,
                actual,
                distance,
            )
        results.append(
            CaseResult(
                name=case.name,
                expected=case.expected,
                actual=actual,
                ulp_distance=distance,
                passed=passed,
            )
        )
    return results


def assert_reference_cases(
    cases: Sequence[ReferenceCase] = REFERENCE_CASES,
    config: CheckConfig | None = None,
) -> list[CaseResult]:
    """Check reference cases and raise if any of them fails.

    Args:
        cases: Cases to evaluate.
        config: Tolerance controls. Defaults to ``CheckConfig()``.

    Returns:
        Results of all cases when every case passed.

    Raises:
        goplex.utils.exceptions.ReferenceMismatchError: If at least one case
            is outside the ULP budget.
    """
    results = check_reference_cases(cases, config)
    failures = [result for result in results if not result.passed]
    if failures:
        raise ReferenceMismatchError(failures)
    return results
