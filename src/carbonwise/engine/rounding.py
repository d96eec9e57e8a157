"""Output rounding.

Reported figures round halves up (towards +inf), so month 3 of a timeline
reads 0.3 years and 4000.5 kg reads 4001 kg. The built-in ``round`` rounds
halves to even and is not used for reported values.
"""

from __future__ import annotations

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round ``value`` to ``ndigits`` decimals, halves upwards.

    Returns an ``int`` when ``ndigits`` is 0.
    """
    if ndigits == 0:
        return math.floor(value + 0.5)
    scale = 10 ** ndigits
    return math.floor(value * scale + 0.5) / scale
