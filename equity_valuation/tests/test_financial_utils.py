"""Tests for discounting, projection, and rate helpers."""

import math

import numpy as np
import pytest

from equity_valuation.templates.model_templates import DEFAULT_RISK_FREE_RATE
from equity_valuation.utils.financial_utils import (
    adjusted_beta,
    beta,
    build_cashflows,
    capm_cost_of_equity,
    cost_of_debt,
    ddm_required_return,
    net_present_value,
    present_value,
    present_value_of_cashflows,
    risk_premium,
    terminal_cashflow,
    terminal_present_value,
)


class TestPresentValue:
    """Tests for present_value."""

    @pytest.mark.parametrize("cashflow", [0.0, 1.0, -50.0, 1234.5])
    @pytest.mark.parametrize("rate", [0.0, 0.09, -0.5, 3.0])
    def test_period_zero_is_not_discounted(self, cashflow: float, rate: float) -> None:
        """Test that a period 0 cash flow is returned unchanged."""
        assert present_value(cashflow, rate, 0) == cashflow

    def test_negative_period_is_not_discounted(self) -> None:
        """Test that periods before 1 are treated as today."""
        assert present_value(100.0, 0.10, -2) == 100.0

    def test_single_period(self) -> None:
        """Test one-period discounting: 110 / 1.10 = 100."""
        assert present_value(110.0, 0.10, 1) == pytest.approx(100.0)

    def test_multiple_periods(self) -> None:
        """Test compounding: 100 / 1.10^5 = 62.092."""
        assert present_value(100.0, 0.10, 5) == pytest.approx(62.0921, abs=1e-4)

    def test_rate_of_minus_one_is_non_finite(self) -> None:
        """Test division by zero surfaces as a non-finite value, not an error."""
        assert not math.isfinite(present_value(100.0, -1.0, 1))
        assert not math.isfinite(present_value(0.0, -1.0, 3))


class TestNetPresentValue:
    """Tests for net_present_value."""

    def test_includes_period_zero(self) -> None:
        """Test NPV of an investment and two inflows.

        Manual calculation:
        -100 + 60/1.1 + 60/1.21 = -100 + 54.545 + 49.587 = 4.132
        """
        npv = net_present_value([-100.0, 60.0, 60.0], 0.10)
        assert npv == pytest.approx(4.132, abs=0.001)

    def test_zero_rate_is_plain_sum(self) -> None:
        """Test that a zero rate adds up the cash flows."""
        assert net_present_value([1.0, 2.0, 3.0], 0.0) == pytest.approx(6.0)


class TestBuildCashflows:
    """Tests for build_cashflows."""

    @pytest.mark.parametrize("n_periods", [0, 1, 5, 10])
    @pytest.mark.parametrize("growth_rate", [0.0, 0.10, -0.03])
    def test_length_and_geometric_growth(
        self, n_periods: int, growth_rate: float
    ) -> None:
        """Test length n + 1 and each entry compounding on the previous one."""
        cashflows = build_cashflows(2.52, n_periods, growth_rate)

        assert len(cashflows) == n_periods + 1
        assert cashflows[0] == 2.52
        for k in range(1, n_periods + 1):
            assert cashflows[k] == cashflows[k - 1] * (1 + growth_rate)

    def test_zero_periods(self) -> None:
        """Test that zero periods yields just the initial cash flow."""
        np.testing.assert_array_equal(build_cashflows(5.0, 0, 0.2), [5.0])

    def test_values(self) -> None:
        """Test a simple 10% growth projection."""
        np.testing.assert_array_almost_equal(
            build_cashflows(100.0, 3, 0.10), [100.0, 110.0, 121.0, 133.1]
        )

    def test_negative_periods_rejected(self) -> None:
        """Test that a negative period count raises."""
        with pytest.raises(ValueError, match="non-negative"):
            build_cashflows(100.0, -1, 0.05)

    def test_fractional_periods_rejected(self) -> None:
        """Test that a non-integer period count raises."""
        with pytest.raises(ValueError, match="integer"):
            build_cashflows(100.0, 2.5, 0.05)


class TestPresentValueOfCashflows:
    """Tests for present_value_of_cashflows."""

    def test_period_zero_excluded(self) -> None:
        """Test that only future periods are returned."""
        pvs = present_value_of_cashflows([100.0, 110.0, 121.0], 0.10)

        assert sorted(pvs.keys()) == [1, 2]
        assert pvs[1] == pytest.approx(100.0)
        assert pvs[2] == pytest.approx(100.0)

    def test_single_entry_schedule(self) -> None:
        """Test that a schedule with only period 0 has no future values."""
        assert present_value_of_cashflows([100.0], 0.10) == {}


class TestTerminalValue:
    """Tests for terminal_cashflow and terminal_present_value."""

    def test_growing_perpetuity(self) -> None:
        """Test TV = (10 × 1.03) / (0.10 - 0.03) = 147.1429."""
        assert terminal_cashflow(10.0, 0.03, 0.10) == pytest.approx(147.1429, abs=1e-4)

    def test_equal_rates_are_infinite(self) -> None:
        """Test that r == g gives an infinite value without raising."""
        assert math.isinf(terminal_cashflow(10.0, 0.10, 0.10))

    def test_growth_above_required_return_is_negative(self) -> None:
        """Test that g > r keeps the formula's negative result.

        TV = (10 × 1.12) / (0.10 - 0.12) = -560
        """
        assert terminal_cashflow(10.0, 0.12, 0.10) == pytest.approx(-560.0)

    def test_present_value(self) -> None:
        """Test PV of terminal value.

        Manual calculation:
        TV = 147.1429
        PV = 147.1429 / 1.10^5 = 91.364
        """
        pv, future_value = terminal_present_value(10.0, 5, 0.03, 0.10)

        assert future_value == pytest.approx(147.1429, abs=1e-4)
        assert pv == pytest.approx(91.364, abs=0.001)

    def test_later_terminal_period_is_worth_less(self) -> None:
        """Test that discounting over more periods lowers the PV."""
        pv_3, _ = terminal_present_value(10.0, 3, 0.03, 0.10)
        pv_10, _ = terminal_present_value(10.0, 10, 0.03, 0.10)
        assert pv_3 > pv_10


class TestRates:
    """Tests for required return and premium helpers."""

    def test_risk_premium_default_rate(self) -> None:
        """Test that the default risk-free rate applies when none is given."""
        assert risk_premium(0.08) == pytest.approx(0.08 - DEFAULT_RISK_FREE_RATE)

    def test_risk_premium_explicit_rate(self) -> None:
        """Test risk premium with an explicit risk-free rate."""
        assert risk_premium(0.08, 0.03) == pytest.approx(0.05)

    def test_cost_of_debt(self) -> None:
        """Test risk-free rate plus credit spread."""
        assert cost_of_debt(0.02, 0.03) == pytest.approx(0.05)
        assert cost_of_debt(0.02) == pytest.approx(0.0475)

    def test_capm_cost_of_equity(self) -> None:
        """Test rf + β × MRP = 0.03 + 1.2 × 0.05 = 0.09."""
        assert capm_cost_of_equity(1.2, 0.05, 0.03) == pytest.approx(0.09)

    def test_capm_default_rate(self) -> None:
        """Test CAPM falls back to the default risk-free rate."""
        assert capm_cost_of_equity(1.0, 0.05) == pytest.approx(0.0775)

    def test_ddm_required_return(self) -> None:
        """Test g + D / P = 0.03 + 2 / 50 = 0.07."""
        assert ddm_required_return(50.0, 2.0, 0.03) == pytest.approx(0.07)

    def test_ddm_required_return_zero_price(self) -> None:
        """Test that a zero price gives an infinite rate instead of raising."""
        assert math.isinf(ddm_required_return(0.0, 2.0, 0.03))


class TestBeta:
    """Tests for beta and adjusted_beta."""

    @pytest.fixture
    def market_prices(self) -> list[float]:
        """Benchmark moving +5%, -5%, +5%."""
        return [100.0, 105.0, 99.75, 104.7375]

    def test_twice_as_volatile_asset(self, market_prices: list[float]) -> None:
        """Test an asset moving exactly twice the benchmark.

        Asset returns: +10%, -10%, +10% -> beta = 2.

        R² = 1 - SS(y - x) / SS(y - mean(y))
           = 1 - 0.0075 / 0.006667 = -0.125
        """
        asset_prices = [100.0, 110.0, 99.0, 108.9]

        raw_beta, r_squared = beta(asset_prices, market_prices)

        assert raw_beta == pytest.approx(2.0)
        assert r_squared == pytest.approx(-0.125)

    def test_asset_identical_to_market(self, market_prices: list[float]) -> None:
        """Test that tracking the benchmark gives beta 1 and R² 1."""
        raw_beta, r_squared = beta(market_prices, market_prices)

        assert raw_beta == pytest.approx(1.0)
        assert r_squared == pytest.approx(1.0)

    def test_two_point_history(self) -> None:
        """Test that a single return gives a non-finite beta instead of raising."""
        raw_beta, r_squared = beta([100.0, 110.0], [100.0, 105.0])

        assert np.isnan(raw_beta)
        assert not math.isfinite(r_squared)

    def test_adjusted_beta(self) -> None:
        """Test 2/3 × 1.3 + 1/3 = 1.2."""
        assert adjusted_beta(1.3) == pytest.approx(1.2)
        assert adjusted_beta(1.0) == pytest.approx(1.0)
