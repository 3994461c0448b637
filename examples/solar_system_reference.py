"""Evaluate the formula set for familiar solar-system and rocketry scenarios."""

from __future__ import annotations

import logging

from goplex import (
    MASS_OF_EARTH,
    SECONDS_IN_A_DAY,
    SPEED_OF_LIGHT,
    VACUUM_PERMITTIVITY,
    abraham_lorentz_force,
    lorentz_factor,
    perihelion_shift,
    photon_energy,
    schwarzschild_radius,
    thermal_velocity_of_heated_gas,
    tsiolkovsky_delta_v,
)
from goplex.utils import configure_logging
from goplex.validation import check_reference_cases

MERCURY_SEMI_MAJOR_AXIS = 57909050.0
MERCURY_ORBITAL_SPEED = 47.362
MERCURY_ECCENTRICITY = 0.205630
MERCURY_ORBITAL_PERIOD_DAYS = 59.0


def main() -> None:
    """Log formula results and a summary of the reference check."""
    configure_logging(logging.INFO)
    logger = logging.getLogger("solar_system_example")

    logger.info(
        "Delta-v (17 km/s exhaust, 5000 -> 3000 kg): %.3f m/s",
        tsiolkovsky_delta_v(17000.0, 5000.0, 3000.0),
    )
    logger.info(
        "RP-1 thermal velocity term: %.6f",
        thermal_velocity_of_heated_gas(9.8, 3670.0, 0.81),
    )
    logger.info("Photon energy at 400 nm: %.6e J", photon_energy(400e-9))
    logger.info("Lorentz factor at 0.5c: %.12f", lorentz_factor(SPEED_OF_LIGHT / 2.0))
    logger.info(
        "Abraham-Lorentz force on up quark: %.6e",
        abraham_lorentz_force(0.66666666, VACUUM_PERMITTIVITY, 9.8),
    )

    shift = perihelion_shift(MERCURY_SEMI_MAJOR_AXIS, MERCURY_ORBITAL_SPEED, MERCURY_ECCENTRICITY)
    logger.info(
        "Mercury perihelion shift: %.6e rad/rev (scaled: %.9f)",
        shift,
        shift * SECONDS_IN_A_DAY * MERCURY_ORBITAL_PERIOD_DAYS,
    )
    logger.info("Schwarzschild radius of Earth: %.6f m", schwarzschild_radius(MASS_OF_EARTH))

    results = check_reference_cases()
    passed = sum(result.passed for result in results)
    logger.info("Reference cases passed: %d/%d", passed, len(results))


if __name__ == "__main__":
    main()
