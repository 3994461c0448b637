"""Rocket propulsion formulas."""

from __future__ import annotations

from goplex.formulas._primitives import ieee_log, ieee_sqrt
from goplex.utils.constants import BOLTZMANN_CONSTANT_EV


def tsiolkovsky_delta_v(exhaust_velocity: float, initial_mass: float, final_mass: float) -> float:
    """Evaluate the Tsiolkovsky rocket equation.

    Args:
        exhaust_velocity: Effective exhaust velocity ``Ve`` [m/s].
        initial_mass: Initial total mass including propellant ``m0`` [kg].
        final_mass: Final total mass without propellant ``mf`` [kg].

    Returns:
        Delta-v ``Ve * ln(m0 / mf)`` [m/s], or ``0.0`` when ``final_mass`` is
        zero. A non-positive mass ratio yields ``nan`` or ``-inf``.
    """
    if final_mass == 0:
        return 0.0

    mass_ratio = initial_mass / final_mass
    return exhaust_velocity * ieee_log(mass_ratio)


def thermal_velocity_of_heated_gas(
    gravity: float,
    temperature: float,
    molecular_mass: float,
) -> float:
    """Estimate the thermal velocity of a heated propellant gas.

    The result is scaled by ``1/g``, which makes it a specific-impulse-like
    quantity.

    Args:
        gravity: Gravitational acceleration at sea level ``g`` [m/s^2].
        temperature: Gas temperature ``T`` [K].
        molecular_mass: Mass of exhaust per molecule ``m``.

    Returns:
        ``(1/g) * sqrt(3 * kB * T / m)`` with ``kB`` in eV/K. ``0.0`` when
        ``T < 0``, ``g == 0`` or ``m == 0``; ``nan`` for negative ``m``.
    """
    if temperature < 0 or gravity == 0 or molecular_mass == 0:
        return 0.0

    inverse_gravity = 1 / gravity
    ratio_to_mass = 3 * BOLTZMANN_CONSTANT_EV * temperature / molecular_mass
    return inverse_gravity * ieee_sqrt(ratio_to_mass)
