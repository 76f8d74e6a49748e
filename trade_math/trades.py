"""Trade planning and evaluation built on the formula modules."""

import logging
import math
from dataclasses import dataclass
from typing import Optional

from .accounting import TransactionSide, amount, amount_with_tax_and_commission
from .evaluation import (
    cost_other,
    cost_total,
    profit_loss,
    profit_loss_total,
    r_multiple,
    risk_actual,
)
from .risk import (
    leveraged_contracts,
    risk_initial as initial_risk,
    risk_input,
    shares_recommended,
    stoploss,
)

logger = logging.getLogger(__name__)


@dataclass
class TradeParams:
    """Parameters for planning a trade.

    Attributes:
        pool: Capital available for the position
        risk_pct: Percentage of the pool risked per trade (1.0 = 1%)
        tax_pct: Tax per transaction as percentage
        commission: Flat commission per transaction
    """
    pool: float = 100000.0
    risk_pct: float = 1.0  # 1% risk per trade
    tax_pct: float = 0.0
    commission: float = 0.0

    @property
    def risk_input(self) -> float:
        """Currency amount risked per trade."""
        return risk_input(self.pool, self.risk_pct)


@dataclass
class TradeLeg:
    """One executed side of a trade."""
    price: float
    shares: int
    tax_pct: float = 0.0
    commission: float = 0.0

    @property
    def amount(self) -> float:
        """Amount without tax and commission."""
        return amount(self.price, self.shares)

    def amount_net(self, side: TransactionSide) -> float:
        """Amount including tax and commission for the given side."""
        return amount_with_tax_and_commission(
            self.price, self.shares, self.tax_pct, self.commission, side
        )


@dataclass
class TradePlan:
    """A trade sized and protected before entry.

    Attributes:
        price: Entry price
        shares: Recommended number of shares
        shares_leveraged: Number of shares when trading with leverage
        stoploss: Stop-loss price
        risk_input: Risk budget from the pool
        risk_initial: Risk taken if the stop-loss is reached
        is_long: Direction of the position
    """
    price: float
    shares: int
    shares_leveraged: int
    stoploss: float
    risk_input: float
    risk_initial: float
    is_long: bool = True

    @property
    def direction(self) -> str:
        return "long" if self.is_long else "short"


@dataclass
class TradeResult:
    """Metrics of a closed trade.

    Attributes:
        profit_loss: Gross profit/loss
        profit_loss_total: Net profit/loss after tax and commission
        cost_total: Tax and commission on both legs
        cost_other: Remaining difference between gross and net
        risk_actual: Risk actually taken
        r_multiple: Net profit/loss as multiple of the initial risk
    """
    profit_loss: float
    profit_loss_total: float
    cost_total: float
    cost_other: float
    risk_actual: float
    r_multiple: float

    @property
    def is_winner(self) -> bool:
        """Check if trade was profitable after costs."""
        return self.profit_loss_total > 0


def plan_trade(
    price: float,
    params: Optional[TradeParams] = None,
    is_long: bool = True,
    stoploss_price: Optional[float] = None
) -> TradePlan:
    """Size a trade and place its stop-loss.

    Args:
        price: Expected entry price
        params: Pool, risk and cost parameters (default: 100k, 1% risk)
        is_long: True for a long position
        stoploss_price: Use this stop-loss instead of deriving it from the
            risk budget

    Returns:
        TradePlan with shares, stop-loss and risk
    """
    if params is None:
        params = TradeParams()

    shares = shares_recommended(
        params.pool, params.commission, params.tax_pct, price
    )
    if stoploss_price is None:
        stoploss_price = stoploss(
            price, shares, params.tax_pct, params.commission,
            params.risk_pct, params.pool, is_long
        )

    plan = TradePlan(
        price=price,
        shares=shares,
        shares_leveraged=leveraged_contracts(shares),
        stoploss=stoploss_price,
        risk_input=params.risk_input,
        risk_initial=initial_risk(
            price, shares, params.tax_pct, params.commission,
            stoploss_price, is_long
        ),
        is_long=is_long,
    )

    logger.debug(
        "Planned %s trade: %d shares at %.4f, stop-loss %.4f",
        plan.direction, plan.shares, plan.price, plan.stoploss
    )
    if not math.isfinite(plan.stoploss):
        logger.warning(
            "Stop-loss is not finite for %d shares at %.4f", shares, price
        )
    return plan


def evaluate_trade(
    buy: TradeLeg,
    sell: TradeLeg,
    risk_initial: float
) -> TradeResult:
    """Calculate all post-trade metrics for a closed trade.

    Args:
        buy: The buy leg
        sell: The sell leg
        risk_initial: Risk budgeted when the trade was opened

    Returns:
        TradeResult with profit/loss, costs, actual risk and R-multiple
    """
    gross = profit_loss(buy.price, buy.shares, sell.price, sell.shares)
    net = profit_loss_total(
        buy.price, buy.shares, buy.tax_pct, buy.commission,
        sell.price, sell.shares, sell.tax_pct, sell.commission
    )
    costs = cost_total(
        buy.amount, buy.tax_pct, buy.commission,
        sell.amount, sell.tax_pct, sell.commission
    )

    result = TradeResult(
        profit_loss=gross,
        profit_loss_total=net,
        cost_total=costs,
        cost_other=cost_other(gross, net, costs),
        risk_actual=risk_actual(
            buy.price, buy.shares, buy.tax_pct, buy.commission,
            sell.price, sell.shares, sell.tax_pct, sell.commission,
            risk_initial, net
        ),
        r_multiple=r_multiple(net, risk_initial),
    )

    logger.debug(
        "Evaluated trade: P&L %.2f net, %.2f costs, %+.2fR",
        result.profit_loss_total, result.cost_total, result.r_multiple
    )
    if not math.isfinite(result.r_multiple):
        logger.warning("R-multiple is not finite (initial risk %r)", risk_initial)
    return result
