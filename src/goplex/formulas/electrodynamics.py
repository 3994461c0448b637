"""Radiation reaction on accelerating charges."""

from __future__ import annotations

from goplex.formulas._folding import SIX_PI
from goplex.utils.constants import SPEED_OF_LIGHT


def abraham_lorentz_force(charge: float, electric_constant: float, jerk: float) -> float:
    """Compute the Abraham-Lorentz radiation-reaction force.

    Args:
        charge: Particle charge ``q``.
        electric_constant: Electric constant ``e0`` [F/m], usually
            ``goplex.VACUUM_PERMITTIVITY``.
        jerk: Time derivative of acceleration ``a``.

    Returns:
        ``q^2 / (6 * pi * e0 * c^3) * a``, or ``0.0`` when ``e0`` is zero.
    """
    if electric_constant == 0.0:
        return 0.0

    c = SPEED_OF_LIGHT
    field_value = SIX_PI * electric_constant * c * c * c
    return (charge * charge) / field_value * jerk
