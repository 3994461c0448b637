"""Closed-form physics and astrodynamics formulas."""

from goplex.formulas.electrodynamics import abraham_lorentz_force
from goplex.formulas.quantum import photon_energy
from goplex.formulas.relativity import lorentz_factor, perihelion_shift, schwarzschild_radius
from goplex.formulas.rocketry import thermal_velocity_of_heated_gas, tsiolkovsky_delta_v

__all__ = [
    "abraham_lorentz_force",
    "lorentz_factor",
    "perihelion_shift",
    "photon_energy",
    "schwarzschild_radius",
    "thermal_velocity_of_heated_gas",
    "tsiolkovsky_delta_v",
]
