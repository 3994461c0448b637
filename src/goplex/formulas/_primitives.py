"""IEEE-754 scalar primitives that return ``nan``/``-inf`` instead of raising.

``math.log`` and ``math.sqrt`` raise ``ValueError`` outside their domain. The
formulas must stay total, so they go through numpy scalar ufuncs with floating
point warnings silenced.
"""

from __future__ import annotations

import numpy as np


def ieee_log(value: float) -> float:
    """Natural logarithm with IEEE-754 domain behavior.

    Args:
        value: Argument of the logarithm.

    Returns:
        ``ln(value)``; ``-inf`` for zero and ``nan`` for negative input.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.log(np.float64(value)))


def ieee_sqrt(value: float) -> float:
    """Square root with IEEE-754 domain behavior.

    Args:
        value: Radicand.

    Returns:
        ``sqrt(value)``; ``nan`` for negative input.
    """
    with np.errstate(invalid="ignore"):
        return float(np.sqrt(np.float64(value)))
