"""
Demonstration-grade π approximation using the Chudnovsky series.

- Native floating point for the series (no big integers).
- Accurate to roughly 15 fractional digits; digits past that come from the
  exact binary value of the float and are not digits of π.
- Fixed-point output rounds half away from zero, via decimal.
"""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from functools import reduce
from typing import Tuple

logger = logging.getLogger(__name__)

# Series state: multiplier M, linear term L, power term X, step K, sum S
SeriesState = Tuple[float, int, float, int, float]

C = 426880 * math.sqrt(10005)
L0 = 13591409
L_STEP = 545140134
X_RATIO = -262537412640768000.0  # -640320^3
K0 = 6
K_STEP = 12


# =========================
# Series evaluation
# =========================


def series_step(state: SeriesState, i: int) -> SeriesState:
    """Advance the running series terms by one iteration."""
    _M, L, X, K, S = state
    M = (K * K * K) / (i + 1)
    L += L_STEP
    # X overflows to +/-inf after ~18 steps; further terms then add 0.0
    X *= X_RATIO
    S += (M * L) / X
    K += K_STEP
    return M, L, X, K, S


def format_fixed(value: float, precision: int) -> str:
    """
    Format `value` with exactly `precision` digits after the point.

    Decimal(float) is exact, so a float sitting on a tie rounds half away
    from zero (0.125 -> "0.13") instead of to even.
    """
    if precision < 0:
        raise ValueError(f"precision must not be negative: {precision}")

    exact = Decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(precision + exact.adjusted() + 2, 1)
        rounded = exact.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP)
    return f"{rounded:f}"


def calculate_pi(precision: int) -> str:
    """
    Approximate π and format it with `precision` digits after the point.

    precision <= 1 runs no iterations. A negative precision raises ValueError.
    """
    initial: SeriesState = (1.0, L0, 1.0, K0, float(L0))
    _M, _L, _X, _K, S = reduce(series_step, range(1, precision), initial)
    logger.debug("Series sum after %d terms: %r", max(precision, 1), S)
    return format_fixed(C / S, precision)


def fractional_digits(pi_text: str) -> str:
    """Return the digits after the decimal point ("" when there are none)."""
    _int_part, _sep, frac_part = pi_text.partition(".")
    return frac_part
