"""Closed-form physics and astrodynamics formula library."""

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
    BOLTZMANN_CONSTANT_EV,
    BOLTZMANN_CONSTANT_JOULES,
    GRAVITATIONAL_CONSTANT,
    MASS_OF_EARTH,
    PLANCK_CONSTANT,
    SECONDS_IN_A_DAY,
    SPEED_OF_LIGHT,
    VACUUM_PERMITTIVITY,
)

__all__ = [
    "BOLTZMANN_CONSTANT_EV",
    "BOLTZMANN_CONSTANT_JOULES",
    "GRAVITATIONAL_CONSTANT",
    "MASS_OF_EARTH",
    "PLANCK_CONSTANT",
    "SECONDS_IN_A_DAY",
    "SPEED_OF_LIGHT",
    "VACUUM_PERMITTIVITY",
    "abraham_lorentz_force",
    "lorentz_factor",
    "perihelion_shift",
    "photon_energy",
    "schwarzschild_radius",
    "thermal_velocity_of_heated_gas",
    "tsiolkovsky_delta_v",
]
