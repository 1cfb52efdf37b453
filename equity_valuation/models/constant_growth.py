"""Constant growth (Gordon) valuation model."""

import logging
from dataclasses import dataclass

import numpy as np

from equity_valuation.core.results import ValuationResult, to_result
from equity_valuation.interfaces.valuation_model import ValuationModelInterface
from equity_valuation.templates.model_templates import MODEL_TEMPLATES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConstantGrowthConfig:
    """
    Inputs of the constant growth model.

    Attributes:
        forward_eps: Earnings per share over the next 12 months.
        discount_rate: Discount rate.
        growth_rate: Rate at which earnings grow forever.
    """

    forward_eps: float | None = None
    discount_rate: float | None = None
    growth_rate: float | None = None


class ConstantGrowthModel(ValuationModelInterface):
    """
    Values a security as a perpetuity growing at a constant rate.

    V = EPS(1) / (r - g)

    The formula is evaluated as-is: g > r gives a negative value and is the
    caller's responsibility; r == g is reported as Undefined.
    """

    name = "constant_growth"
    required = MODEL_TEMPLATES["constant_growth"]["required"]

    def calculate(self, config: ConstantGrowthConfig) -> ValuationResult:
        """
        Calculate intrinsic value at constant growth.

        Args:
            config: Forward EPS, discount rate, and growth rate.

        Returns:
            IntrinsicValue, or Undefined when discount rate equals growth.

        Raises:
            MissingInputError: If any input is not set.
        """
        self._require(config, *self.required)

        spread = config.discount_rate - config.growth_rate
        with np.errstate(divide="ignore", invalid="ignore"):
            value = float(np.float64(config.forward_eps) / np.float64(spread))

        result = to_result(
            value,
            self.name,
            "forward EPS / (discount rate - growth rate) is not finite",
        )
        logger.debug("Constant growth (spread %.6f): %s", spread, result)
        return result
