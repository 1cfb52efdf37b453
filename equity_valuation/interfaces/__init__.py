"""Abstract interfaces for valuation models."""

from equity_valuation.interfaces.valuation_model import ValuationModelInterface

__all__ = ["ValuationModelInterface"]
