"""Fixed-point formatting of statistics values."""

from decimal import ROUND_HALF_UP, Decimal

import numpy as np

from .constants import (
    CSV_NEG_INF_TEXT,
    CSV_POS_INF_TEXT,
    INF_TEXT,
    NAN_TEXT,
    VALUE_DECIMALS,
)


def round_half_up(value: float, decimals: int = VALUE_DECIMALS) -> Decimal:
    """
    Round a finite value the way people read it, not the way binary floats store it.

    The shortest repr of the float is rounded, so 12.345 becomes 12.35 even
    though its binary value is slightly below the midpoint.
    """
    quantum = Decimal(1).scaleb(-decimals)
    return Decimal(str(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)


def format_stat_value(value: float) -> str:
    """Statistics cell text: "NaN", "Inf", or two decimals with thousands separators."""
    v = float(value)
    if np.isnan(v):
        return NAN_TEXT
    if np.isinf(v):
        return INF_TEXT
    return f"{round_half_up(v):,.{VALUE_DECIMALS}f}"


def format_csv_value(value: float) -> str:
    """CSV cell text: two decimals, '.' separator, no grouping."""
    v = float(value)
    if np.isnan(v):
        return NAN_TEXT
    if np.isinf(v):
        return CSV_POS_INF_TEXT if v > 0 else CSV_NEG_INF_TEXT
    return f"{round_half_up(v):.{VALUE_DECIMALS}f}"
