"""Abstract interface for intrinsic value models."""

from abc import ABC, abstractmethod
from typing import Any

from equity_valuation.core.results import MissingInputError, ValuationResult


class ValuationModelInterface(ABC):
    """
    Abstract interface for models that estimate a security's intrinsic value.

    Implementations are stateless. All inputs travel in an immutable config
    dataclass whose fields default to None ("not set"), so the same model
    instance can value any number of scenarios.

    Example implementations:
        - ZeroGrowthModel: EPS / discount rate
        - ConstantGrowthModel: Forward EPS / (discount rate - growth rate)
        - DividendDiscountModel: DCF of a growing dividend stream plus
          terminal value
    """

    name: str = ""
    required: tuple[str, ...] = ()

    @abstractmethod
    def calculate(self, config: Any) -> ValuationResult:
        """
        Calculate the intrinsic value as found by the model.

        Args:
            config: Model-specific configuration dataclass.

        Returns:
            IntrinsicValue for a finite result, Undefined otherwise.

        Raises:
            MissingInputError: If a required input is not set.
        """
        raise NotImplementedError

    def _require(self, config: Any, *fields: str) -> None:
        """Raise MissingInputError naming every unset field."""
        missing = [f for f in fields if getattr(config, f) is None]
        if missing:
            raise MissingInputError(
                f"{type(self).__name__} requires {', '.join(fields)}; "
                f"missing: {', '.join(missing)}"
            )
