"""Main Valuation class orchestrating the intrinsic value models."""

import logging
from typing import Any

from equity_valuation.core.results import IntrinsicValue, Undefined, ValuationResult
from equity_valuation.interfaces.valuation_model import ValuationModelInterface
from equity_valuation.models.constant_growth import (
    ConstantGrowthConfig,
    ConstantGrowthModel,
)
from equity_valuation.models.dividend_discount import (
    DividendDiscountConfig,
    DividendDiscountModel,
)
from equity_valuation.models.zero_growth import ZeroGrowthConfig, ZeroGrowthModel
from equity_valuation.templates.model_templates import (
    DEFAULT_NUMBER_OF_PERIODS,
    MODEL_TEMPLATES,
)
from equity_valuation.utils.statistics import mean, weighted_average

logger = logging.getLogger(__name__)


class Valuation:
    """
    Main orchestrator for intrinsic value calculations.

    Runs any combination of the zero growth, constant growth, and dividend
    discount models from a parameter dictionary and blends their results
    into a mean and an optional weighted average.

    Example:
        >>> valuation = Valuation()
        >>> results = valuation.calculate({
        ...     "models": {
        ...         "zero_growth": {"eps": 7.34, "discount_rate": 0.09},
        ...         "constant_growth": {
        ...             "forward_eps": 7.70,
        ...             "discount_rate": 0.09,
        ...             "growth_rate": 0.025,
        ...         },
        ...     },
        ...     "weights": {"zero_growth": 0.6, "constant_growth": 0.4},
        ... })
        >>> round(results["mean"], 2)
        100.01
    """

    def __init__(self) -> None:
        """Initialize the valuation models."""
        self.models: dict[str, tuple[ValuationModelInterface, type]] = {
            "zero_growth": (ZeroGrowthModel(), ZeroGrowthConfig),
            "constant_growth": (ConstantGrowthModel(), ConstantGrowthConfig),
            "dividend_discount": (DividendDiscountModel(), DividendDiscountConfig),
        }

    def zero_growth(self, eps: float, discount_rate: float) -> ValuationResult:
        """
        Intrinsic value using the zero growth model.

        Args:
            eps: Earnings per share (this year).
            discount_rate: Discount rate, possibly the expected market return.
        """
        model, _ = self.models["zero_growth"]
        return model.calculate(ZeroGrowthConfig(eps=eps, discount_rate=discount_rate))

    def constant_growth(
        self,
        forward_eps: float,
        discount_rate: float,
        growth_rate: float,
    ) -> ValuationResult:
        """
        Intrinsic value using the constant growth model.

        Args:
            forward_eps: Earnings per share over the next 12 months.
            discount_rate: Discount rate.
            growth_rate: Rate at which earnings grow forever.
        """
        model, _ = self.models["constant_growth"]
        return model.calculate(
            ConstantGrowthConfig(
                forward_eps=forward_eps,
                discount_rate=discount_rate,
                growth_rate=growth_rate,
            )
        )

    def dividend_discount(
        self,
        dividend: float,
        cost_of_equity: float,
        growth_rate: float,
        terminal_growth_rate: float,
        number_of_periods: int = DEFAULT_NUMBER_OF_PERIODS,
    ) -> ValuationResult:
        """
        Intrinsic value using the dividend discount model.

        Args:
            dividend: Current annual dividend.
            cost_of_equity: Required return.
            growth_rate: Dividend growth over the explicit period.
            terminal_growth_rate: Perpetual growth afterwards.
            number_of_periods: Length of the explicit period in years.
        """
        model, _ = self.models["dividend_discount"]
        return model.calculate(
            DividendDiscountConfig(
                dividend=dividend,
                cost_of_equity=cost_of_equity,
                growth_rate=growth_rate,
                terminal_growth_rate=terminal_growth_rate,
                number_of_periods=number_of_periods,
            )
        )

    def calculate(self, params: dict[str, Any]) -> dict[str, Any]:
        """
        Run every configured model and aggregate the defined values.

        Args:
            params: Parameter dictionary with
                - models: mapping of model name to its inputs
                - weights: optional mapping of model name to weight

        Returns:
            Dictionary containing:
                - results: ValuationResult per model
                - values: finite intrinsic values per model
                - mean: mean of the finite values (None if there are none)
                - weighted_average: weighted mean (None if no weights given)

        Raises:
            ValueError: If a model name is unknown, inputs contain unknown
                fields, or weights name a model without a finite value.
            MissingInputError: If a model lacks required inputs.
        """
        model_params = params.get("models", {})
        if not model_params:
            raise ValueError("At least one model must be configured under 'models'")

        results: dict[str, ValuationResult] = {}
        for name, inputs in model_params.items():
            results[name] = self._run_model(name, inputs)

        values = {
            name: result.value
            for name, result in results.items()
            if isinstance(result, IntrinsicValue)
        }
        for name, result in results.items():
            if isinstance(result, Undefined):
                logger.warning("Excluding %s from aggregation: %s", name, result.reason)

        weights = params.get("weights")

        return {
            "results": results,
            "values": values,
            "mean": mean(list(values.values())) if values else None,
            "weighted_average": self._weighted_average(values, weights)
            if weights
            else None,
        }

    def _run_model(self, name: str, inputs: dict[str, Any]) -> ValuationResult:
        """Build the model's config from inputs plus template defaults and run it."""
        if name not in self.models:
            raise ValueError(
                f"Unknown model '{name}'. Available models: {list(self.models.keys())}"
            )

        model, config_cls = self.models[name]
        config_inputs = {**MODEL_TEMPLATES[name]["defaults"], **inputs}

        try:
            config = config_cls(**config_inputs)
        except TypeError as e:
            raise ValueError(f"Invalid inputs for model '{name}': {e}") from e

        result = model.calculate(config)
        logger.debug("%s -> %s", name, result)
        return result

    @staticmethod
    def _weighted_average(
        values: dict[str, float],
        weights: dict[str, float],
    ) -> float:
        """Weighted average of model values keyed by model name."""
        unknown = [name for name in weights if name not in values]
        if unknown:
            raise ValueError(
                f"Weights given for models without a finite value: {unknown}"
            )

        names = list(weights.keys())
        return weighted_average(
            [values[name] for name in names], [weights[name] for name in names]
        )
