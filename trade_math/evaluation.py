"""Post-trade evaluation: actual risk, R-multiple, profit/loss and costs.

All formulas are the same for long and short trades; the buy leg and the
sell leg are passed separately.
"""

from ._numeric import divide


def risk_actual(
    price_buy: float,
    shares_buy: int,
    tax_buy: float,
    commission_buy: float,
    price_sell: float,
    shares_sell: int,
    tax_sell: float,
    commission_sell: float,
    risk_initial: float,
    profit_loss: float
) -> float:
    """Calculate the risk we actually took on a closed trade.

    When the trade won, broke even, or lost less than the initial risk, the
    stop held and the actual risk is the initial risk. Otherwise the loss
    went past the stop and the risk is recalculated from both legs:

        S.Pb + S.Pb.Tb + Cb - (S.Ps - S.Ps.Ts - Cs)

    Args:
        price_buy: Price paid per share
        shares_buy: Shares bought
        tax_buy: Tax on the buy, as percentage
        commission_buy: Commission on the buy
        price_sell: Price received per share
        shares_sell: Shares sold
        tax_sell: Tax on the sell, as percentage
        commission_sell: Commission on the sell
        risk_initial: Risk budgeted when the trade was opened
        profit_loss: Realized profit/loss of the trade

    Returns:
        Actual risk in currency
    """
    stop_held = profit_loss < 0.0 and abs(profit_loss) < risk_initial
    if stop_held or profit_loss >= 0.0:
        return risk_initial
    return (
        shares_buy * price_buy * (1.0 + tax_buy / 100.0)
        - shares_sell * price_sell * (1.0 - tax_sell / 100.0)
        + commission_buy
        + commission_sell
    )


def r_multiple(profit_loss: float, risk_initial: float) -> float:
    """Profit/loss expressed as a multiple of the initial risk."""
    return divide(profit_loss, risk_initial)


def cost_total(
    amount_buy: float,
    tax_buy: float,
    commission_buy: float,
    amount_sell: float,
    tax_sell: float,
    commission_sell: float
) -> float:
    """Total tax and commission paid on both legs of a trade."""
    return (
        tax_buy / 100.0 * amount_buy
        + commission_buy
        + tax_sell / 100.0 * amount_sell
        + commission_sell
    )


def profit_loss(
    price_buy: float,
    shares_buy: int,
    price_sell: float,
    shares_sell: int
) -> float:
    """Gross profit/loss, without tax and commission: S.Ps - S.Pb"""
    return shares_sell * price_sell - shares_buy * price_buy


def profit_loss_total(
    price_buy: float,
    shares_buy: int,
    tax_buy: float,
    commission_buy: float,
    price_sell: float,
    shares_sell: int,
    tax_sell: float,
    commission_sell: float
) -> float:
    """Net profit/loss after tax and commission on both legs.

    S.Ps.(1 - Ts) - S.Pb.(1 - Tb) - (Cb + Cs)
    """
    return (
        shares_sell * price_sell * (1.0 - tax_sell / 100.0)
        - shares_buy * price_buy * (1.0 - tax_buy / 100.0)
        - (commission_buy + commission_sell)
    )


def cost_other(
    profit_loss: float,
    profit_loss_total: float,
    cost_total: float
) -> float:
    """Other costs: whatever is left of the difference between gross and net.

    Returns exactly 0.0 when nothing remains.
    """
    remainder = profit_loss - profit_loss_total - cost_total
    if abs(remainder) > 0.0:
        return remainder
    return 0.0
