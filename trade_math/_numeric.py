"""Floating-point helpers shared by the formula modules."""

import numpy as np


def divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE-754 semantics.

    A zero denominator gives inf, -inf or nan instead of raising
    ZeroDivisionError, so singular inputs surface as non-finite results.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))
