"""Multi-period dividend discount model."""

import logging
import math
from dataclasses import dataclass

from equity_valuation.core.dcf_engine import DCFConfig, DiscountedCashFlow
from equity_valuation.core.results import (
    MissingInputError,
    Undefined,
    ValuationResult,
    to_result,
)
from equity_valuation.interfaces.valuation_model import ValuationModelInterface
from equity_valuation.templates.model_templates import (
    DEFAULT_NUMBER_OF_PERIODS,
    MODEL_TEMPLATES,
)
from equity_valuation.utils.financial_utils import ddm_required_return

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DividendDiscountConfig:
    """
    Inputs of the dividend discount model.

    Attributes:
        dividend: Current annual dividend (period 0).
        growth_rate: Dividend growth over the explicit period.
        terminal_growth_rate: Perpetual dividend growth afterwards.
        number_of_periods: Length of the explicit period in years.
        cost_of_equity: Required return. Takes priority over `price`.
        price: Current market price, used to derive the required return
            when no cost of equity is given.
    """

    dividend: float | None = None
    growth_rate: float | None = None
    terminal_growth_rate: float | None = None
    number_of_periods: int = DEFAULT_NUMBER_OF_PERIODS
    cost_of_equity: float | None = None
    price: float | None = None


class DividendDiscountModel(ValuationModelInterface):
    """
    Values a security as the present value of its future dividends.

    Dividends grow at `growth_rate` for `number_of_periods` years and at
    `terminal_growth_rate` forever after. The stream is valued by the
    DiscountedCashFlow engine at the resolved required return.
    """

    name = "dividend_discount"
    required = MODEL_TEMPLATES["dividend_discount"]["required"]

    def required_return(self, config: DividendDiscountConfig) -> float:
        """
        Resolve the discount rate for the dividend stream.

        Uses the cost of equity if set, otherwise derives
        terminal growth + dividend / price.

        Raises:
            MissingInputError: If neither cost of equity nor the inputs to
                derive it are available.
        """
        if config.cost_of_equity is not None:
            logger.debug(
                "Required return from cost of equity: %s", config.cost_of_equity
            )
            return config.cost_of_equity

        if config.price is None:
            raise MissingInputError(
                "Must set cost of equity or current price to calculate required return"
            )
        self._require(config, "terminal_growth_rate", "dividend")

        required_return = ddm_required_return(
            config.price, config.dividend, config.terminal_growth_rate
        )
        logger.debug("Required return derived from price: %s", required_return)
        return required_return

    def calculate(self, config: DividendDiscountConfig) -> ValuationResult:
        """
        Calculate intrinsic value from the dividend stream.

        Args:
            config: Dividend inputs and a way to resolve the required return.

        Returns:
            IntrinsicValue, or Undefined when the required return or
            the NPV is not finite.

        Raises:
            MissingInputError: If a required input is not set.
        """
        self._require(config, *self.required)
        required_return = self.required_return(config)
        if not math.isfinite(required_return):
            return Undefined(
                reason=f"required return is not finite (got {required_return})",
                model=self.name,
            )

        dcf = DiscountedCashFlow(
            DCFConfig(
                initial_cashflow=config.dividend,
                discount_rate=required_return,
                growth_rate=config.growth_rate,
                n_periods=config.number_of_periods,
                terminal_growth_rate=config.terminal_growth_rate,
            )
        )

        return to_result(
            dcf.get_npv(), self.name, "NPV of the dividend stream is not finite"
        )
