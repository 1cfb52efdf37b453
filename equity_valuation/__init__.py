"""
Equity valuation toolkit.

Estimates a security's intrinsic value from small, already-supplied numeric
inputs:
- Zero growth, constant growth, and multi-period dividend discount models
- A discounted cash flow engine with terminal value and reverse DCF
- CAPM required returns, beta, and descriptive statistics
- Financial statement ratios used as model inputs
"""

from equity_valuation.core.results import IntrinsicValue, MissingInputError, Undefined
from equity_valuation.core.valuation import Valuation
from equity_valuation.templates.model_templates import (
    DEFAULT_RISK_FREE_RATE,
    MODEL_TEMPLATES,
)

__version__ = "1.0.0"
__all__ = [
    "Valuation",
    "IntrinsicValue",
    "Undefined",
    "MissingInputError",
    "DEFAULT_RISK_FREE_RATE",
    "MODEL_TEMPLATES",
]
