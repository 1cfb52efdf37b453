"""Financial utility functions for discounting, projections, and rates."""

from collections.abc import Sequence

import numpy as np

from equity_valuation.templates.model_templates import DEFAULT_RISK_FREE_RATE
from equity_valuation.utils.statistics import (
    covariance,
    percent_change_series,
    sum_of_squares,
    variance,
)


def present_value(cashflow: float, rate: float, period: int = 0) -> float:
    """
    Discount a single cash flow back to the present.

    Uses PV = CF / (1 + r)^t. Period 0 (and anything before it) is already
    at present value and is returned unchanged.

    Args:
        cashflow: Cash flow amount.
        rate: Discount rate per period (e.g., 0.09 for 9%).
        period: Period in which the cash flow occurs (0 = today).

    Returns:
        Present value. A rate of -1 yields a non-finite value instead of
        raising.

    Example:
        >>> present_value(110.0, 0.10, 1)
        100.0
    """
    if period < 1:
        return float(cashflow)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.float64(cashflow) / np.power(1.0 + rate, period))


def net_present_value(cashflows: Sequence[float], rate: float) -> float:
    """
    Net present value of a cash flow series indexed by period.

    Unlike the DCF engine, the period 0 flow is included (undiscounted).

    Args:
        cashflows: Cash flows for periods 0, 1, 2, ...
        rate: Discount rate applied.

    Returns:
        NPV of the series.
    """
    return float(
        sum(present_value(cf, rate, period) for period, cf in enumerate(cashflows))
    )


def build_cashflows(
    initial_cashflow: float,
    n_periods: int,
    growth_rate: float,
) -> np.ndarray:
    """
    Project a geometric series of cash flows from an initial value.

    Each period compounds on the previous period's already-grown value.

    Args:
        initial_cashflow: Cash flow at period 0.
        n_periods: Number of periods to project (non-negative).
        growth_rate: Growth rate per period.

    Returns:
        Array of length n_periods + 1, index = period.

    Raises:
        ValueError: If n_periods is negative or not an integer.

    Example:
        >>> build_cashflows(100.0, 2, 0.10)
        array([100. , 110. , 121. ])
    """
    if isinstance(n_periods, bool) or not isinstance(n_periods, (int, np.integer)):
        raise ValueError(f"n_periods must be an integer, got {n_periods!r}")
    if n_periods < 0:
        raise ValueError(f"n_periods must be non-negative, got {n_periods}")

    cashflows = np.zeros(n_periods + 1)
    cashflows[0] = initial_cashflow

    for period in range(1, n_periods + 1):
        cashflows[period] = cashflows[period - 1] * (1 + growth_rate)

    return cashflows


def present_value_of_cashflows(
    cashflows: Sequence[float],
    rate: float,
) -> dict[int, float]:
    """
    Discount every future cash flow of a schedule.

    Args:
        cashflows: Cash flows indexed by period, period 0 first.
        rate: Required return, often cost of equity or WACC.

    Returns:
        Mapping of period -> present value for periods 1..N. Period 0 is
        not a future cash flow and is left out.
    """
    return {
        period: present_value(cf, rate, period)
        for period, cf in enumerate(cashflows)
        if period != 0
    }


def terminal_cashflow(
    cashflow: float,
    terminal_growth_rate: float,
    required_return: float,
) -> float:
    """
    Future value of a growing perpetuity starting after the last cash flow.

    TV = CF × (1 + g) / (r - g)

    Args:
        cashflow: Cash flow in the last explicit projection period.
        terminal_growth_rate: Rate at which cash flows grow forever.
        required_return: Required return, often cost of equity or WACC.

    Returns:
        Terminal value as of the last explicit period. Infinite when
        r == g; negative when r < g.
    """
    g = terminal_growth_rate
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(cashflow) * (1 + g) / np.float64(required_return - g))


def terminal_present_value(
    cashflow: float,
    period: int,
    terminal_growth_rate: float,
    required_return: float,
) -> tuple[float, float]:
    """
    Present value of the terminal value.

    Args:
        cashflow: Cash flow in the last explicit projection period.
        period: Last explicit period; the perpetuity begins after it.
        terminal_growth_rate: Perpetual growth rate.
        required_return: Required return used for both the perpetuity and
            the discounting.

    Returns:
        Tuple of (present_value, future_value).
    """
    future_value = terminal_cashflow(cashflow, terminal_growth_rate, required_return)
    return present_value(future_value, required_return, int(period)), future_value


def risk_premium(rate_of_return: float, risk_free_rate: float | None = None) -> float:
    """
    Premium of a return over the risk-free rate.

    Args:
        rate_of_return: Return of the asset; the market return gives the
            market risk premium.
        risk_free_rate: Defaults to DEFAULT_RISK_FREE_RATE.
    """
    if risk_free_rate is None:
        risk_free_rate = DEFAULT_RISK_FREE_RATE
    return rate_of_return - risk_free_rate


def cost_of_debt(credit_spread: float, risk_free_rate: float | None = None) -> float:
    """Cost of debt as the risk-free rate plus the firm's credit spread."""
    if risk_free_rate is None:
        risk_free_rate = DEFAULT_RISK_FREE_RATE
    return risk_free_rate + credit_spread


def capm_cost_of_equity(
    beta: float,
    market_risk_premium: float,
    risk_free_rate: float | None = None,
) -> float:
    """
    Cost of equity per CAPM: rf + β × MRP.

    Args:
        beta: The asset's beta.
        market_risk_premium: Expected market return minus risk-free rate.
        risk_free_rate: Defaults to DEFAULT_RISK_FREE_RATE.

    Returns:
        Required return (e.g., 0.135 for 13.5%).
    """
    if risk_free_rate is None:
        risk_free_rate = DEFAULT_RISK_FREE_RATE
    return risk_free_rate + beta * market_risk_premium


def ddm_required_return(
    price: float,
    dividend: float,
    terminal_growth_rate: float,
) -> float:
    """
    Required return implied by price and dividend: g + D / P.

    A zero price yields a non-finite rate instead of raising.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        yield_ = np.float64(dividend) / np.float64(price)
    return float(terminal_growth_rate + yield_)


def beta(
    asset_prices: Sequence[float],
    market_prices: Sequence[float],
) -> tuple[float, float]:
    """
    Estimate an asset's beta against a benchmark from price histories.

    Prices are converted to percent changes first. Beta = cov(x, y) / var(y).

    Args:
        asset_prices: Asset prices ordered oldest to newest.
        market_prices: Benchmark prices ordered oldest to newest.

    Returns:
        Tuple of (beta, r_squared), where r_squared =
        1 - SS(y - x) / SS(y - mean(y)). Neither is finite when there are
        fewer than two returns.
    """
    x = percent_change_series(asset_prices)
    y = percent_change_series(market_prices)

    with np.errstate(divide="ignore", invalid="ignore"):
        r_squared = 1 - np.float64(sum_of_squares(y, x)) / sum_of_squares(y)
        raw_beta = np.float64(covariance(x, y)) / variance(y)

    return float(raw_beta), float(r_squared)


def adjusted_beta(raw_beta: float) -> float:
    """Blume-adjusted beta: 2/3 × raw + 1/3."""
    return (2 / 3) * raw_beta + (1 / 3)

