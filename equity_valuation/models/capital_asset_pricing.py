"""Capital Asset Pricing Model for required returns."""

import logging
from dataclasses import dataclass

from equity_valuation.core.results import MissingInputError, ValuationResult, to_result
from equity_valuation.interfaces.valuation_model import ValuationModelInterface
from equity_valuation.templates.model_templates import (
    DEFAULT_RISK_FREE_RATE,
    MODEL_TEMPLATES,
)
from equity_valuation.utils.financial_utils import capm_cost_of_equity, risk_premium

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CapitalAssetPricingConfig:
    """
    Inputs of the CAPM.

    Attributes:
        beta: The asset's beta.
        risk_free_rate: Defaults to DEFAULT_RISK_FREE_RATE.
        expected_market_return: Expected return of the market benchmark.
        market_risk_premium: Takes priority over expected_market_return.
    """

    beta: float | None = None
    risk_free_rate: float = DEFAULT_RISK_FREE_RATE
    expected_market_return: float | None = None
    market_risk_premium: float | None = None


class CapitalAssetPricingModel(ValuationModelInterface):
    """
    Derives a required return (cost of equity) per CAPM.

    r = rf + β × (E[rM] - rf)

    The result is a rate, not a price; it typically feeds the
    cost_of_equity of a DividendDiscountConfig.
    """

    name = "capital_asset_pricing"
    required = MODEL_TEMPLATES["capital_asset_pricing"]["required"]

    def market_risk_premium(self, config: CapitalAssetPricingConfig) -> float:
        """
        Market risk premium, given directly or from the expected market return.

        Raises:
            MissingInputError: If neither is set.
        """
        if config.market_risk_premium is not None:
            return config.market_risk_premium

        if config.expected_market_return is None:
            raise MissingInputError(
                "Must set expected return of market benchmark or market risk premium"
            )
        return risk_premium(config.expected_market_return, config.risk_free_rate)

    def required_return(self, config: CapitalAssetPricingConfig) -> float:
        """
        Cost of equity per CAPM.

        Raises:
            MissingInputError: If beta or the market risk premium inputs are
                missing.
        """
        self._require(config, *self.required)
        mrp = self.market_risk_premium(config)
        required_return = capm_cost_of_equity(config.beta, mrp, config.risk_free_rate)
        logger.debug(
            "CAPM: rf=%s beta=%s mrp=%s -> %s",
            config.risk_free_rate,
            config.beta,
            mrp,
            required_return,
        )
        return required_return

    def calculate(self, config: CapitalAssetPricingConfig) -> ValuationResult:
        """Required return wrapped as a result."""
        return to_result(
            self.required_return(config),
            self.name,
            "CAPM required return is not finite",
        )
