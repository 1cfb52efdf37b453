"""Utility functions for statistics, ratios, and discounting."""

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
from equity_valuation.utils.statistics import (
    covariance,
    mean,
    percent,
    percent_change,
    percent_change_series,
    stddev,
    sum_of_squares,
    variance,
    weighted_average,
)

__all__ = [
    "adjusted_beta",
    "beta",
    "build_cashflows",
    "capm_cost_of_equity",
    "cost_of_debt",
    "ddm_required_return",
    "net_present_value",
    "present_value",
    "present_value_of_cashflows",
    "risk_premium",
    "terminal_cashflow",
    "terminal_present_value",
    "covariance",
    "mean",
    "percent",
    "percent_change",
    "percent_change_series",
    "stddev",
    "sum_of_squares",
    "variance",
    "weighted_average",
]
