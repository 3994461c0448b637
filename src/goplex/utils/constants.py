"""Physical constants used across the library.

Values are plain ``float`` names so formulas can read them directly. The
``CONSTANTS`` table adds units and descriptions for documentation and lookup.

Scaled constants are built as ``mantissa * 10.0**exponent`` rather than parsed
from a decimal literal, which pins the exact bits the reference values were
computed with. The Boltzmann constant in J/K is given in hex because that
product rounds one ULP away from those bits.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from goplex.utils.exceptions import UnknownConstantError

SECONDS_IN_A_DAY: float = 86400.0
SPEED_OF_LIGHT: float = 299792458.0
GRAVITATIONAL_CONSTANT: float = 6.67408e-11
PLANCK_CONSTANT: float = 6.626069934 * 10.0**-34
BOLTZMANN_CONSTANT_JOULES: float = float.fromhex("0x1.0b0e674035e1bp-76")  # 1.38064852e-23
BOLTZMANN_CONSTANT_EV: float = 8.6173303 * 10.0**-5
VACUUM_PERMITTIVITY: float = 8.854187817 * 10.0**-12
MASS_OF_EARTH: float = 5.97237 * 10.0**24


@dataclass(frozen=True)
class PhysicalConstant:
    """Named physical constant with its unit.

    Args:
        name: Table key in snake case.
        value: Constant value in double precision.
        unit: Unit string. Documentation only, never enforced.
        description: Short human-readable meaning.
    """

    name: str
    value: float
    unit: str
    description: str


CONSTANTS: Mapping[str, PhysicalConstant] = MappingProxyType(
    {
        item.name: item
        for item in (
            PhysicalConstant("seconds_in_a_day", SECONDS_IN_A_DAY, "s", "Seconds per Earth day"),
            PhysicalConstant("speed_of_light", SPEED_OF_LIGHT, "m/s", "Speed of light in vacuum"),
            PhysicalConstant(
                "gravitational_constant",
                GRAVITATIONAL_CONSTANT,
                "m^3 kg^-1 s^-2",
                "Universal gravitational constant",
            ),
            PhysicalConstant("planck_constant", PLANCK_CONSTANT, "J*s", "Planck constant"),
            PhysicalConstant(
                "boltzmann_constant_joules",
                BOLTZMANN_CONSTANT_JOULES,
                "J/K",
                "Boltzmann constant in Joules per Kelvin",
            ),
            PhysicalConstant(
                "boltzmann_constant_ev",
                BOLTZMANN_CONSTANT_EV,
                "eV/K",
                "Boltzmann constant in electron-volts per Kelvin",
            ),
            PhysicalConstant(
                "vacuum_permittivity",
                VACUUM_PERMITTIVITY,
                "F/m",
                "Vacuum permittivity (electric constant)",
            ),
            PhysicalConstant("mass_of_earth", MASS_OF_EARTH, "kg", "Mass of the planet Earth"),
        )
    }
)


def constant(name: str) -> PhysicalConstant:
    """Look up a constant by its table key.

    Args:
        name: Snake-case table key, for example ``"speed_of_light"``.

    Returns:
        Matching constant entry.

    Raises:
        goplex.utils.exceptions.UnknownConstantError: If ``name`` is not in
            the table.
    """
    try:
        return CONSTANTS[name]
    except KeyError:
        msg = f"Unknown constant {name!r}, expected one of {sorted(CONSTANTS)}"
        raise UnknownConstantError(msg) from None
