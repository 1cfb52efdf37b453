"""Core valuation components."""

from equity_valuation.core.results import (
    EngineStateError,
    IntrinsicValue,
    MissingInputError,
    Undefined,
    ValuationError,
    ValuationResult,
)
from equity_valuation.core.dcf_engine import (
    DCFConfig,
    DiscountedCashFlow,
    EngineState,
    implied_required_return,
)
from equity_valuation.core.valuation import Valuation

__all__ = [
    "EngineStateError",
    "IntrinsicValue",
    "MissingInputError",
    "Undefined",
    "ValuationError",
    "ValuationResult",
    "DCFConfig",
    "DiscountedCashFlow",
    "EngineState",
    "implied_required_return",
    "Valuation",
]
