"""Multiples of pi folded in extended precision and rounded once to float64."""

from __future__ import annotations

from decimal import Decimal, localcontext

PI_DIGITS = "3.14159265358979323846264338327950288419716939937510582097494459"


def _fold(multiplier: int, power: int) -> float:
    """Evaluate ``multiplier * pi**power`` exactly enough to round once.

    Args:
        multiplier: Integer prefactor.
        power: Integer exponent of pi.

    Returns:
        Correctly rounded float64 value.
    """
    with localcontext() as ctx:
        ctx.prec = 60
        return float(multiplier * Decimal(PI_DIGITS) ** power)


SIX_PI: float = _fold(6, 1)
TWENTY_FOUR_PI_CUBED: float = _fold(24, 3)
