"""Command line entry point for planning and evaluating trades."""

import argparse
import logging
import sys
from typing import List, Optional

import pandas as pd

from trade_math import TradeParams, TradePlan, plan_trade
from trade_math.frame import evaluate_trades


def print_plan(plan: TradePlan) -> None:
    """Print a formatted summary of a trade plan."""
    print("\n" + "=" * 50)
    print(f"TRADE PLAN ({plan.direction.upper()})")
    print("=" * 50)
    print(f"Entry Price:     {plan.price:>12.4f}")
    print(f"Shares:          {plan.shares:>12}")
    print(f"Leveraged:       {plan.shares_leveraged:>12}")
    print(f"Stop-loss:       {plan.stoploss:>12.4f}")
    print(f"Risk Input:      {plan.risk_input:>12,.2f}")
    print(f"Risk Initial:    {plan.risk_initial:>12,.2f}")
    print("=" * 50)


def print_results(results: pd.DataFrame) -> None:
    """Print post-trade metrics for each evaluated trade."""
    print("\n" + "=" * 50)
    print("TRADE RESULTS")
    print("=" * 50)

    if results.empty:
        print("No trades to evaluate.")
        return

    for i, row in results.iterrows():
        print(f"\nTrade {i}")
        print("-" * 40)
        print(f"  P&L:         {row['profit_loss']:>12,.2f}")
        print(f"  P&L Total:   {row['profit_loss_total']:>12,.2f}")
        print(f"  Cost Total:  {row['cost_total']:>12,.2f}")
        print(f"  Cost Other:  {row['cost_other']:>12,.2f}")
        print(f"  Risk Actual: {row['risk_actual']:>12,.2f}")
        print(f"  R-multiple:  {row['r_multiple']:>+12.2f}R")


def run_plan(args: argparse.Namespace) -> None:
    params = TradeParams(
        pool=args.pool,
        risk_pct=args.risk,
        tax_pct=args.tax,
        commission=args.commission,
    )
    plan = plan_trade(
        args.price,
        params,
        is_long=not args.short,
        stoploss_price=args.stoploss,
    )
    print_plan(plan)


def run_evaluate(args: argparse.Namespace) -> None:
    trades = pd.read_csv(args.csv)
    results = evaluate_trades(trades)
    print_results(results)

    if args.output:
        results.to_csv(args.output, index=False)
        print(f"\nResults saved to {args.output}")


def build_parser() -> argparse.ArgumentParser:
    defaults = TradeParams()
    parser = argparse.ArgumentParser(description="Trade sizing and evaluation")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    plan = subparsers.add_parser("plan", help="Size a trade and place its stop-loss")
    plan.add_argument("--price", type=float, required=True, help="Entry price")
    plan.add_argument(
        "--pool",
        type=float,
        default=defaults.pool,
        help=f"Capital available (default: {defaults.pool:.0f})",
    )
    plan.add_argument(
        "--risk",
        type=float,
        default=defaults.risk_pct,
        help=f"Risk percentage of the pool (default: {defaults.risk_pct})",
    )
    plan.add_argument(
        "--tax",
        type=float,
        default=defaults.tax_pct,
        help="Tax percentage per transaction (default: 0)",
    )
    plan.add_argument(
        "--commission",
        type=float,
        default=defaults.commission,
        help="Commission per transaction (default: 0)",
    )
    plan.add_argument("--short", action="store_true", help="Plan a short position")
    plan.add_argument(
        "--stoploss",
        type=float,
        default=None,
        help="Use this stop-loss instead of deriving it from the risk",
    )
    plan.set_defaults(func=run_plan)

    evaluate = subparsers.add_parser("evaluate", help="Evaluate closed trades from a CSV")
    evaluate.add_argument("--csv", type=str, required=True, help="CSV file of trades")
    evaluate.add_argument(
        "--output",
        type=str,
        default=None,
        help="Save the evaluated trades to this CSV file",
    )
    evaluate.set_defaults(func=run_evaluate)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        args.func(args)
    except (FileNotFoundError, ValueError, OverflowError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
