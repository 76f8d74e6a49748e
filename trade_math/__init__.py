"""Financial formulas for sizing, costing and evaluating equity trades."""

from .accounting import (
    TransactionSide,
    amount,
    amount_with_tax,
    amount_with_tax_and_commission,
    price,
    tax_cost,
    transaction_cost,
)
from .conversion import (
    average_price,
    convert_from_original,
    convert_to_original,
    percentage_of,
)
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
    risk_initial,
    risk_input,
    shares_recommended,
    stoploss,
)
from .trades import (
    TradeLeg,
    TradeParams,
    TradePlan,
    TradeResult,
    evaluate_trade,
    plan_trade,
)

__all__ = [
    "TransactionSide",
    "percentage_of",
    "convert_from_original",
    "convert_to_original",
    "average_price",
    "shares_recommended",
    "leveraged_contracts",
    "stoploss",
    "risk_input",
    "risk_initial",
    "amount",
    "amount_with_tax_and_commission",
    "amount_with_tax",
    "transaction_cost",
    "tax_cost",
    "price",
    "risk_actual",
    "r_multiple",
    "cost_total",
    "profit_loss",
    "profit_loss_total",
    "cost_other",
    "TradeParams",
    "TradeLeg",
    "TradePlan",
    "TradeResult",
    "plan_trade",
    "evaluate_trade",
]
