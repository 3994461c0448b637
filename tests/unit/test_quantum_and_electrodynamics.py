"""Unit tests for photon energy and the Abraham-Lorentz force."""

from __future__ import annotations

import unittest

from goplex.formulas.electrodynamics import abraham_lorentz_force
from goplex.formulas.quantum import photon_energy
from goplex.utils.constants import PLANCK_CONSTANT, SPEED_OF_LIGHT, VACUUM_PERMITTIVITY


class PhotonEnergyTests(unittest.TestCase):
    """Photon energy checks."""

    def test_violet_light_reference(self) -> None:
        """Reproduce the documented energy at 400 nm."""
        self.assertEqual(photon_energy(400.0 * 10.0**-9), 4.966114480984394 * 10.0**-19)

    def test_zero_wavelength_returns_zero(self) -> None:
        """Return zero instead of dividing by zero."""
        self.assertEqual(photon_energy(0.0), 0.0)
        self.assertEqual(photon_energy(0), 0.0)

    def test_unit_wavelength_is_planck_times_c(self) -> None:
        """Reduce to ``h * c`` at one metre."""
        self.assertEqual(photon_energy(1.0), PLANCK_CONSTANT * SPEED_OF_LIGHT)


class AbrahamLorentzForceTests(unittest.TestCase):
    """Abraham-Lorentz force checks."""

    def test_up_quark_reference(self) -> None:
        """Reproduce the documented force on an up quark."""
        self.assertEqual(
            abraham_lorentz_force(0.66666666, VACUUM_PERMITTIVITY, 9.8),
            9.6857127934588849 * 10.0**-16,
        )

    def test_zero_electric_constant_returns_zero(self) -> None:
        """Return zero for a vanishing electric constant."""
        self.assertEqual(abraham_lorentz_force(0.66666666, 0.0, 9.8), 0.0)

    def test_force_follows_jerk_sign(self) -> None:
        """Flip sign with the jerk while ignoring the charge sign."""
        positive = abraham_lorentz_force(1.0, VACUUM_PERMITTIVITY, 9.8)
        self.assertEqual(abraham_lorentz_force(-1.0, VACUUM_PERMITTIVITY, 9.8), positive)
        self.assertEqual(abraham_lorentz_force(1.0, VACUUM_PERMITTIVITY, -9.8), -positive)


if __name__ == "__main__":
    unittest.main()
