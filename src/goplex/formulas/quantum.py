"""Photon energy."""

from __future__ import annotations

from goplex.utils.constants import PLANCK_CONSTANT, SPEED_OF_LIGHT


def photon_energy(wavelength: float) -> float:
    """Compute the energy carried by a single photon.

    Args:
        wavelength: Photon wavelength [m].

    Returns:
        Energy ``h * c / wavelength`` [J], or ``0.0`` for zero wavelength.
    """
    if wavelength == 0:
        return 0.0
    return PLANCK_CONSTANT * SPEED_OF_LIGHT / wavelength
