"""Model template library with default parameters for each valuation model."""

from typing import Any

# Used wherever a risk-free rate is needed and none is passed explicitly.
DEFAULT_RISK_FREE_RATE = 0.0275

# Explicit projection horizon of the dividend discount model.
DEFAULT_NUMBER_OF_PERIODS = 5

MODEL_TEMPLATES: dict[str, dict[str, Any]] = {
    "zero_growth": {
        "required": ("eps", "discount_rate"),
        "defaults": {},
    },
    "constant_growth": {
        "required": ("forward_eps", "discount_rate", "growth_rate"),
        "defaults": {},
    },
    "dividend_discount": {
        # Plus either cost_of_equity or price to resolve the required return
        "required": (
            "dividend",
            "number_of_periods",
            "growth_rate",
            "terminal_growth_rate",
        ),
        "defaults": {"number_of_periods": DEFAULT_NUMBER_OF_PERIODS},
    },
    "capital_asset_pricing": {
        # Plus either expected_market_return or market_risk_premium
        "required": ("beta",),
        "defaults": {"risk_free_rate": DEFAULT_RISK_FREE_RATE},
    },
}
