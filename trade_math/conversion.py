"""Percentage and currency conversion utilities."""

from typing import Iterable, Tuple

from ._numeric import divide


def percentage_of(value: float, from_value: float) -> float:
    """Return what percentage value is of from_value."""
    return divide(value, from_value) * 100.0


def convert_from_original(price: float, exchange_rate: float) -> float:
    """Apply an exchange rate to a price in the original currency."""
    return price * exchange_rate


def convert_to_original(converted_price: float, exchange_rate: float) -> float:
    """Remove an exchange rate from a converted price."""
    return divide(converted_price, exchange_rate)


def average_price(lots: Iterable[Tuple[int, float]]) -> float:
    """Calculate the average price paid over several fills.

    When a position is built from multiple buys, the booked price is the
    share-weighted average:

        S1 * P1 + S2 * P2 = S3 * P3
        => P3 = (S1 * P1 + S2 * P2) / (S1 + S2)

    e.g. 415 shares at 23.65 and 138 at 16.50 average to 21.8657.

    Args:
        lots: Iterable of (shares, price) pairs

    Returns:
        Weighted average price, nan when there are no shares
    """
    total_value = 0.0
    total_shares = 0
    for shares, price in lots:
        total_value += shares * price
        total_shares += shares
    return divide(total_value, total_shares)
