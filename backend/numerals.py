import math

import numpy as np

INFINITY_SYMBOL = "∞"
NAN_SYMBOL = "NaN"

# Longest numeral the user may type (sign and decimal point included)
MAX_INPUT_LENGTH = 16


def parse_number(text: str) -> float:
    """Convert a numeral from the input buffer to a float."""
    return float(text)


def format_number(value) -> str:
    """
    Format a result as a plain numeral: no grouping, no exponent, and the shortest
    run of digits that still round-trips to the same double.
    """
    if math.isnan(value):
        return NAN_SYMBOL
    if math.isinf(value):
        return INFINITY_SYMBOL if value > 0 else "-" + INFINITY_SYMBOL
    return np.format_float_positional(np.float64(value), unique=True, trim="-")


def is_finite_numeral(text: str) -> bool:
    return text not in (INFINITY_SYMBOL, "-" + INFINITY_SYMBOL, NAN_SYMBOL)
