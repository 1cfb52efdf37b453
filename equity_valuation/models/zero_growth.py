"""Zero growth valuation model."""

import logging
from dataclasses import dataclass

import numpy as np

from equity_valuation.core.results import ValuationResult, to_result
from equity_valuation.interfaces.valuation_model import ValuationModelInterface
from equity_valuation.templates.model_templates import MODEL_TEMPLATES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ZeroGrowthConfig:
    """
    Inputs of the zero growth model.

    Attributes:
        eps: Earnings per share (this year).
        discount_rate: Discount rate, possibly the expected market return.
    """

    eps: float | None = None
    discount_rate: float | None = None


class ZeroGrowthModel(ValuationModelInterface):
    """
    Values a security as a flat perpetuity of its current earnings.

    V = EPS / r
    """

    name = "zero_growth"
    required = MODEL_TEMPLATES["zero_growth"]["required"]

    def calculate(self, config: ZeroGrowthConfig) -> ValuationResult:
        """
        Calculate intrinsic value at zero growth.

        Args:
            config: EPS and discount rate.

        Returns:
            IntrinsicValue, or Undefined when the discount rate is zero.

        Raises:
            MissingInputError: If EPS or discount rate is not set.
        """
        self._require(config, *self.required)

        with np.errstate(divide="ignore", invalid="ignore"):
            value = float(np.float64(config.eps) / np.float64(config.discount_rate))

        result = to_result(value, self.name, "EPS / discount rate is not finite")
        logger.debug("Zero growth: %s", result)
        return result
