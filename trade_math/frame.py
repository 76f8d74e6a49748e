"""Evaluate a DataFrame of closed trades, one row per trade."""

import logging

import numpy as np
import pandas as pd

from .trades import TradeLeg, evaluate_trade

logger = logging.getLogger(__name__)

BUY_COLUMNS = ["price_buy", "shares_buy", "tax_buy", "commission_buy"]
SELL_COLUMNS = ["price_sell", "shares_sell", "tax_sell", "commission_sell"]
REQUIRED_COLUMNS = BUY_COLUMNS + SELL_COLUMNS + ["risk_initial"]

RESULT_COLUMNS = [
    "profit_loss",
    "profit_loss_total",
    "cost_total",
    "cost_other",
    "risk_actual",
    "r_multiple",
]


def validate_trades(trades: pd.DataFrame) -> None:
    """Validate that required columns exist in the data."""
    missing = set(REQUIRED_COLUMNS) - set(trades.columns)
    if missing:
        raise ValueError(f"Missing required columns: {sorted(missing)}")


def evaluate_trades(trades: pd.DataFrame) -> pd.DataFrame:
    """
    Add post-trade metrics to each row of a trades DataFrame.

    Rows are evaluated independently; nothing is aggregated across trades.

    Args:
        trades: DataFrame with REQUIRED_COLUMNS, one closed trade per row

    Returns:
        Copy of the DataFrame with RESULT_COLUMNS added
    """
    validate_trades(trades)
    result = trades.copy()

    if trades.empty:
        for column in RESULT_COLUMNS:
            result[column] = pd.Series(dtype=float)
        return result

    records = []
    for row in trades.itertuples(index=False):
        buy = TradeLeg(
            price=float(row.price_buy),
            shares=int(row.shares_buy),
            tax_pct=float(row.tax_buy),
            commission=float(row.commission_buy),
        )
        sell = TradeLeg(
            price=float(row.price_sell),
            shares=int(row.shares_sell),
            tax_pct=float(row.tax_sell),
            commission=float(row.commission_sell),
        )
        outcome = evaluate_trade(buy, sell, float(row.risk_initial))
        records.append([getattr(outcome, column) for column in RESULT_COLUMNS])

    values = np.array(records, dtype=float)
    for i, column in enumerate(RESULT_COLUMNS):
        result[column] = values[:, i]

    logger.debug("Evaluated %d trades", len(result))
    return result
