"""Tests for post-trade evaluation formulas."""

import math

import pytest

from trade_math.evaluation import (
    cost_other,
    cost_total,
    profit_loss,
    profit_loss_total,
    r_multiple,
    risk_actual,
)


@pytest.fixture
def losing_legs():
    """Buy 10 at 100, sell 10 at 40, 5 commission per leg, no tax."""
    return {
        "price_buy": 100.0,
        "shares_buy": 10,
        "tax_buy": 0.0,
        "commission_buy": 5.0,
        "price_sell": 40.0,
        "shares_sell": 10,
        "tax_sell": 0.0,
        "commission_sell": 5.0,
    }


class TestRiskActual:
    """Tests for risk_actual."""

    def test_break_even_keeps_initial_risk(self, losing_legs):
        assert risk_actual(**losing_legs, risk_initial=500.0, profit_loss=0.0) == 500.0

    def test_profit_keeps_initial_risk(self, losing_legs):
        assert risk_actual(**losing_legs, risk_initial=500.0, profit_loss=250.0) == 500.0

    def test_small_loss_keeps_initial_risk(self, losing_legs):
        assert risk_actual(**losing_legs, risk_initial=500.0, profit_loss=-100.0) == 500.0

    def test_breached_stop_recalculates(self, losing_legs):
        # 10 * 100 - 10 * 40 + 5 + 5
        result = risk_actual(**losing_legs, risk_initial=500.0, profit_loss=-610.0)
        assert result == pytest.approx(610.0)

    def test_loss_equal_to_risk_recalculates(self, losing_legs):
        result = risk_actual(**losing_legs, risk_initial=610.0, profit_loss=-610.0)
        assert result == pytest.approx(610.0)

    def test_recalculation_includes_tax(self, losing_legs):
        losing_legs.update(tax_buy=1.0, tax_sell=1.0)
        # 1000 * 1.01 - 400 * 0.99 + 10
        result = risk_actual(**losing_legs, risk_initial=100.0, profit_loss=-600.0)
        assert result == pytest.approx(624.0)


class TestRMultiple:
    """Tests for r_multiple."""

    def test_winner(self):
        assert r_multiple(1000.0, 500.0) == 2.0

    def test_stopped_out(self):
        assert r_multiple(-500.0, 500.0) == -1.0

    def test_zero_risk_is_infinite(self):
        assert math.isinf(r_multiple(100.0, 0.0))

    def test_zero_over_zero_is_nan(self):
        assert math.isnan(r_multiple(0.0, 0.0))


class TestProfitLoss:
    """Tests for profit_loss, profit_loss_total and cost_total."""

    def test_profit_loss(self):
        assert profit_loss(100.0, 10, 120.0, 10) == 200.0

    def test_profit_loss_partial_sell(self):
        assert profit_loss(100.0, 10, 120.0, 5) == -400.0

    def test_profit_loss_total(self):
        # 120 * 10 * 0.99 - 100 * 10 * 0.99 - 10
        result = profit_loss_total(100.0, 10, 1.0, 5.0, 120.0, 10, 1.0, 5.0)
        assert result == pytest.approx(188.0)

    def test_profit_loss_total_without_costs_equals_gross(self):
        assert profit_loss_total(100.0, 10, 0.0, 0.0, 120.0, 10, 0.0, 0.0) == 200.0

    def test_cost_total(self):
        # 1% of 1000 + 5 + 1% of 1200 + 5
        assert cost_total(1000.0, 1.0, 5.0, 1200.0, 1.0, 5.0) == pytest.approx(32.0)


class TestCostOther:
    """Tests for cost_other."""

    def test_remainder(self):
        assert cost_other(200.0, 150.0, 20.0) == 30.0

    def test_negative_remainder(self):
        assert cost_other(200.0, 188.0, 32.0) == -20.0

    def test_exact_zero(self):
        result = cost_other(200.0, 188.0, 12.0)
        assert result == 0.0
        assert math.copysign(1.0, result) == 1.0

    def test_negative_zero_becomes_positive_zero(self):
        result = cost_other(-0.0, 0.0, 0.0)
        assert result == 0.0
        assert math.copysign(1.0, result) == 1.0
