"""Transaction accounting: amounts, costs and price inversion.

Notation: S = shares, P = price, C = commission, T = tax_pct / 100.
"""

from enum import Enum

from ._numeric import divide


class TransactionSide(Enum):
    """Side of a transaction."""
    BUY = "buy"
    SELL = "sell"


def amount(price: float, shares: int) -> float:
    """Calculate the amount without tax and commission."""
    return price * shares


def amount_with_tax_and_commission(
    price: float,
    shares: int,
    tax_pct: float,
    commission: float,
    side: TransactionSide
) -> float:
    """Calculate the amount including tax and commission.

    Buy:  S.P + S.P.T + C
    Sell: S.P - S.P.T - C
    """
    tax = tax_pct / 100.0
    if side == TransactionSide.BUY:
        return shares * price + shares * price * tax + commission
    return shares * price - shares * price * tax - commission


def amount_with_tax(
    price: float,
    shares: int,
    tax_pct: float,
    side: TransactionSide
) -> float:
    """Calculate the amount with tax included, but not the commission."""
    tax = tax_pct / 100.0
    if side == TransactionSide.BUY:
        return shares * price * (1.0 + tax)
    return shares * price * (1.0 - tax)


def transaction_cost(
    price: float,
    shares: int,
    tax_pct: float,
    commission: float
) -> float:
    """Cost of a transaction: tax plus commission."""
    return price * shares * tax_pct / 100.0 + commission


def tax_cost(
    amount: float,
    commission: float,
    shares: int,
    price: float,
    side: TransactionSide
) -> float:
    """Back out the tax paid from an amount that already includes it.

    Args:
        amount: Amount including tax and commission
        commission: Commission paid
        shares: Number of shares
        price: Price per share
        side: Buy or sell

    Returns:
        Tax component of the amount
    """
    if side == TransactionSide.SELL:
        return -amount - commission + shares * price
    return amount - shares * price - commission


def price(
    amount: float,
    shares: int,
    tax_pct: float,
    commission: float,
    side: TransactionSide
) -> float:
    """Calculate the price per share for a given amount.

    Inverse of amount_with_tax_and_commission(). Zero shares, or 100% tax
    on a sell, give a non-finite result.
    """
    tax = tax_pct / 100.0
    if side == TransactionSide.BUY:
        numerator = amount - commission
        denominator = (1.0 + tax) * shares
    else:
        numerator = amount + commission
        denominator = (1.0 - tax) * shares
    return divide(numerator, denominator)
