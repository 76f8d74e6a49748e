"""Pre-trade position sizing, stop-loss and risk calculations.

Notation used in the formula notes below:
    S = shares, P = price, SL = stop-loss price, C = commission,
    T = tax as decimal (tax_pct / 100), R = risk budget (risk_pct / 100 * pool)
"""

import math

from ._numeric import divide


def shares_recommended(
    pool: float,
    commission: float,
    tax_pct: float,
    price: float
) -> int:
    """Calculate the recommended number of shares to buy with the pool.

    Args:
        pool: Capital available for the position
        commission: Flat commission for the transaction
        tax_pct: Tax as percentage (0.1 = 0.1%)
        price: Price per share

    Returns:
        Number of shares, truncated toward zero
    """
    available = pool - (tax_pct / 100.0 * pool) - commission
    # Truncate: one contract too few is safe, one too many is not
    return int(divide(available, price))


def leveraged_contracts(n: int) -> int:
    """Calculate the number of contracts to buy with leverage.

    Adds ceil(n / 3) - 1 extra contracts to n. Note that n = 0 gives -1.
    """
    return math.ceil(n / 3.0) - 1 + n


def stoploss(
    price: float,
    shares: int,
    tax_pct: float,
    commission: float,
    risk_pct: float,
    pool: float,
    is_long: bool
) -> float:
    """Calculate the stop-loss price at which the loss equals the risk budget.

    Long:  (S.P + S.P.T + C) - (S.SL - S.SL.T - C) = R
    Short: (S.SL + S.SL.T + C) - (S.P - S.P.T - C) = R

    The denominator is zero for zero shares, or for 100% tax on a long
    position; the result is then non-finite.

    Args:
        price: Entry price
        shares: Number of shares
        tax_pct: Tax as percentage
        commission: Commission per transaction
        risk_pct: Percentage of the pool we are willing to lose
        pool: Capital available for the position
        is_long: True for a long position, False for a short one

    Returns:
        Stop-loss price
    """
    tax = tax_pct / 100.0
    risk = risk_input(pool, risk_pct)
    if is_long:
        numerator = shares * price * (1.0 + tax) - risk + 2.0 * commission
        denominator = shares * (1.0 - tax)
    else:
        numerator = risk + shares * price * (1.0 - tax) - 2.0 * commission
        denominator = shares * (1.0 + tax)
    return divide(numerator, denominator)


def risk_input(pool: float, risk_pct: float) -> float:
    """Risk budget: the theoretical amount we are willing to lose."""
    return risk_pct / 100.0 * pool


def risk_initial(
    price: float,
    shares: int,
    tax_pct: float,
    commission: float,
    stoploss_price: float,
    is_long: bool
) -> float:
    """Calculate the risk taken if the stop-loss is reached.

    Equal to risk_input() when stoploss_price came from stoploss() with the
    same parameters.

    Long:  S.P + S.P.T + C - (S.SL - S.SL.T - C)
    Short: S.SL + S.SL.T + C - (S.P - S.P.T - C)
    """
    tax = tax_pct / 100.0
    if is_long:
        return (
            shares * price * (1.0 + tax)
            - shares * stoploss_price * (1.0 - tax)
            + 2.0 * commission
        )
    return (
        shares * stoploss_price * (1.0 + tax)
        - shares * price * (1.0 - tax)
        + 2.0 * commission
    )
