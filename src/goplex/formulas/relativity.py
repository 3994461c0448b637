"""Special and general relativity formulas."""

from __future__ import annotations

from goplex.formulas._folding import TWENTY_FOUR_PI_CUBED
from goplex.formulas._primitives import ieee_sqrt
from goplex.utils.constants import GRAVITATIONAL_CONSTANT, SPEED_OF_LIGHT


def lorentz_factor(velocity: float) -> float:
    """Compute the Lorentz factor for a velocity.

    Args:
        velocity: Speed relative to the observer ``v`` [m/s].

    Returns:
        ``1 / sqrt(1 - v^2 / c^2)``. Returns ``0.0`` rather than infinity at
        ``v == c``; superluminal input gives ``nan``.
    """
    c = SPEED_OF_LIGHT
    if velocity == c:
        return 0.0

    root = ieee_sqrt(1 - (velocity * velocity) / (c * c))
    if root == 0.0:
        return 0.0
    return 1 / root


def perihelion_shift(semi_major_axis: float, orbital_speed: float, eccentricity: float) -> float:
    """Compute the relativistic perihelion precession of an orbit.

    Multiplying the result by ``SECONDS_IN_A_DAY`` and the orbital period in
    days rescales it the way the Mercury reference value does.

    Args:
        semi_major_axis: Semi-major axis ``L``.
        orbital_speed: Orbital speed ``T``.
        eccentricity: Orbital eccentricity ``e``.

    Returns:
        Perihelion shift [rad/revolution], or ``0.0`` when the divisor
        ``T^2 * (1000 c)^2 * (1 - e^2)`` is zero.
    """
    c_km = SPEED_OF_LIGHT * 1000.0
    dividend = TWENTY_FOUR_PI_CUBED * semi_major_axis * semi_major_axis
    divisor = orbital_speed * orbital_speed * c_km * c_km * (1 - eccentricity * eccentricity)
    if divisor == 0.0:
        return 0.0
    return dividend / divisor


def schwarzschild_radius(mass: float) -> float:
    """Compute the Schwarzschild radius of a mass.

    Args:
        mass: Mass of the body ``M`` [kg].

    Returns:
        ``2 * G * M / c^2`` [m], or ``0.0`` for non-positive mass.
    """
    if mass <= 0.0:
        return 0.0
    return (2 * GRAVITATIONAL_CONSTANT * mass) / (SPEED_OF_LIGHT * SPEED_OF_LIGHT)
