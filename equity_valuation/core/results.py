"""Valuation result types and errors."""

import math
from dataclasses import dataclass


class ValuationError(Exception):
    """Base exception for valuation failures."""

    pass


class MissingInputError(ValuationError, ValueError):
    """Raised when a model is calculated without all required inputs."""

    pass


class EngineStateError(ValuationError, RuntimeError):
    """Raised when a DCF engine is reconfigured after its schedule is built."""

    pass


@dataclass(frozen=True)
class IntrinsicValue:
    """A finite intrinsic value produced by a valuation model."""

    value: float
    model: str

    def __float__(self) -> float:
        return self.value


@dataclass(frozen=True)
class Undefined:
    """
    Marker for a model whose formula evaluated to infinity or NaN.

    Typical causes are a discount rate equal to the growth rate or a zero
    discount rate. Callers must check for this before using a result
    numerically.
    """

    reason: str
    model: str


ValuationResult = IntrinsicValue | Undefined


def to_result(value: float, model: str, reason: str) -> ValuationResult:
    """Wrap a raw model output, mapping non-finite values to Undefined."""
    if math.isfinite(value):
        return IntrinsicValue(value=float(value), model=model)
    return Undefined(reason=f"{reason} (got {value})", model=model)
