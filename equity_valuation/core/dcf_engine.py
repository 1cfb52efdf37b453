"""Discounted Cash Flow engine for NPV and implied required return."""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np
from scipy import optimize

from equity_valuation.core.results import EngineStateError, MissingInputError
from equity_valuation.templates.model_templates import DEFAULT_NUMBER_OF_PERIODS
from equity_valuation.utils.financial_utils import (
    build_cashflows,
    present_value_of_cashflows,
    terminal_present_value,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DCFConfig:
    """
    Inputs of a single discounted cash flow projection.

    Attributes:
        initial_cashflow: Period 0 cash flow the projection grows from.
        discount_rate: Required return used for every period.
        growth_rate: Per-period growth of the explicit projection.
        n_periods: Number of explicit projection periods.
        terminal_growth_rate: Perpetual growth after the last period. If
            None, no terminal value is added.
    """

    initial_cashflow: float | None = None
    discount_rate: float | None = None
    growth_rate: float | None = None
    n_periods: int = DEFAULT_NUMBER_OF_PERIODS
    terminal_growth_rate: float | None = None


class EngineState(Enum):
    """Lifecycle of a DiscountedCashFlow engine."""

    UNCONFIGURED = "unconfigured"
    CONFIGURED = "configured"
    BUILT = "built"
    VALUED = "valued"


class DiscountedCashFlow:
    """
    Projects a growing cash flow stream and discounts it to an NPV.

    The schedule is built lazily on the first call to get_npv() and the
    result is cached. The configuration is frozen once the schedule is
    built, so the cached NPV always matches it.

    Uses the end-of-period convention: period 0 is "today" and is not part
    of the NPV; periods 1..N are discounted by (1 + r)^t. The terminal value
    is a growing perpetuity valued at period N.

    Example:
        >>> dcf = DiscountedCashFlow(
        ...     DCFConfig(
        ...         initial_cashflow=2.52,
        ...         discount_rate=0.09,
        ...         growth_rate=0.10,
        ...         n_periods=10,
        ...         terminal_growth_rate=0.025,
        ...     )
        ... )
        >>> round(dcf.get_npv(), 2)
        70.05
    """

    def __init__(self, config: DCFConfig | None = None) -> None:
        """Initialize the engine, optionally with its configuration."""
        self._config: DCFConfig | None = None
        self._cashflows: np.ndarray | None = None
        self._cashflows_pv: dict[int, float] = {}
        self._terminal_cashflow: float | None = None
        self._terminal_cashflow_pv: float | None = None
        self._npv: float | None = None

        if config is not None:
            self.configure(config)

    @property
    def state(self) -> EngineState:
        """Current lifecycle state."""
        if self._npv is not None:
            return EngineState.VALUED
        if self._cashflows is not None:
            return EngineState.BUILT
        if self._config is not None:
            return EngineState.CONFIGURED
        return EngineState.UNCONFIGURED

    @property
    def config(self) -> DCFConfig | None:
        """Configuration in use, if any."""
        return self._config

    def configure(self, config: DCFConfig) -> "DiscountedCashFlow":
        """
        Set the projection inputs.

        Args:
            config: Projection inputs.

        Returns:
            The engine itself.

        Raises:
            EngineStateError: If the schedule has already been built.
        """
        if self._cashflows is not None:
            raise EngineStateError(
                "Cannot reconfigure a DiscountedCashFlow after its cash flows "
                "were built; create a new engine instead"
            )
        self._config = config
        return self

    def get_npv(self) -> float:
        """
        Net present value of periods 1..N plus the terminal value.

        Builds the schedule on first use; later calls return the cached
        value without recomputation.

        Returns:
            NPV as float. May be non-finite for degenerate rates.

        Raises:
            MissingInputError: If the engine is not fully configured.
        """
        if self._npv is None:
            if self._cashflows is None:
                self._build_cashflows()

            pv = float(sum(self._cashflows_pv.values()))

            if self._terminal_cashflow_pv is not None:
                self._npv = pv + self._terminal_cashflow_pv
            else:
                self._npv = pv

            logger.debug(
                "NPV %.6f (explicit %.6f, terminal %s)",
                self._npv,
                pv,
                self._terminal_cashflow_pv,
            )

        return self._npv

    def calculate(self) -> dict[str, Any]:
        """
        Value the projection and report its components.

        Returns:
            Dictionary with the cash flow schedule, per-period present
            values, terminal value (future and present), and NPV.
        """
        npv = self.get_npv()
        return {
            "cashflows": self._cashflows,
            "cashflows_pv": dict(self._cashflows_pv),
            "terminal_cashflow": self._terminal_cashflow,
            "terminal_cashflow_pv": self._terminal_cashflow_pv,
            "npv": npv,
        }

    def _build_cashflows(self) -> None:
        """Project the schedule, discount it, and add the terminal value."""
        config = self._config
        if config is None:
            raise MissingInputError("DiscountedCashFlow has not been configured")

        missing = [
            name
            for name in ("initial_cashflow", "discount_rate", "growth_rate")
            if getattr(config, name) is None
        ]
        if missing:
            raise MissingInputError(
                f"DiscountedCashFlow requires {', '.join(missing)}"
            )

        cashflows = build_cashflows(
            config.initial_cashflow, config.n_periods, config.growth_rate
        )
        cashflows.flags.writeable = False

        cashflows_pv = present_value_of_cashflows(cashflows, config.discount_rate)

        if config.terminal_growth_rate is not None:
            self._terminal_cashflow_pv, self._terminal_cashflow = (
                terminal_present_value(
                    cashflows[-1],
                    config.n_periods,
                    config.terminal_growth_rate,
                    config.discount_rate,
                )
            )

        self._cashflows = cashflows
        self._cashflows_pv = cashflows_pv


def implied_required_return(
    price: float,
    initial_cashflow: float,
    growth_rate: float,
    terminal_growth_rate: float | None = None,
    n_periods: int = DEFAULT_NUMBER_OF_PERIODS,
    upper_bound: float = 1.0,
) -> float:
    """
    Solve for the discount rate at which the DCF value equals a price.

    This is a reverse DCF: "what return is the market pricing in?"

    Args:
        price: Current market price.
        initial_cashflow: Period 0 cash flow (e.g., current dividend).
        growth_rate: Explicit-period growth rate.
        terminal_growth_rate: Perpetual growth after the explicit period.
        n_periods: Number of explicit periods.
        upper_bound: Highest discount rate searched.

    Returns:
        Implied discount rate as decimal. Returns np.nan if no root is found.
    """

    def npv_gap(rate: float) -> float:
        config = DCFConfig(
            initial_cashflow=initial_cashflow,
            discount_rate=rate,
            growth_rate=growth_rate,
            n_periods=n_periods,
            terminal_growth_rate=terminal_growth_rate,
        )
        return DiscountedCashFlow(config).get_npv() - price

    # The perpetuity is only defined above the terminal growth rate
    if terminal_growth_rate is not None:
        lower_bound = terminal_growth_rate + 1e-6
    else:
        lower_bound = -0.99

    try:
        rate = optimize.brentq(npv_gap, lower_bound, upper_bound)
        return float(rate)
    except ValueError:
        # Try newton as fallback
        try:
            rate = optimize.newton(npv_gap, x0=(lower_bound + upper_bound) / 2)
        except (RuntimeError, ValueError):
            return float("nan")

    # Newton may stop on a flat region or cross below the perpetuity bound
    tolerance = 1e-6 * max(1.0, abs(price))
    if (
        not math.isfinite(rate)
        or rate <= lower_bound
        or not abs(npv_gap(rate)) <= tolerance
    ):
        return float("nan")
    return float(rate)
