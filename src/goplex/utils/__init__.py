"""Utility helpers."""

from goplex.utils.constants import (
    BOLTZMANN_CONSTANT_EV,
    BOLTZMANN_CONSTANT_JOULES,
    CONSTANTS,
    GRAVITATIONAL_CONSTANT,
    MASS_OF_EARTH,
    PLANCK_CONSTANT,
    SECONDS_IN_A_DAY,
    SPEED_OF_LIGHT,
    VACUUM_PERMITTIVITY,
    PhysicalConstant,
    constant,
)
from goplex.utils.logging import configure_logging

__all__ = [
    "BOLTZMANN_CONSTANT_EV",
    "BOLTZMANN_CONSTANT_JOULES",
    "CONSTANTS",
    "GRAVITATIONAL_CONSTANT",
    "MASS_OF_EARTH",
    "PLANCK_CONSTANT",
    "PhysicalConstant",
    "SECONDS_IN_A_DAY",
    "SPEED_OF_LIGHT",
    "VACUUM_PERMITTIVITY",
    "configure_logging",
    "constant",
]
