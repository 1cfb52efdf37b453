"""Valuation models for intrinsic value and required return."""

from equity_valuation.models.zero_growth import ZeroGrowthConfig, ZeroGrowthModel
from equity_valuation.models.constant_growth import (
    ConstantGrowthConfig,
    ConstantGrowthModel,
)
from equity_valuation.models.dividend_discount import (
    DividendDiscountConfig,
    DividendDiscountModel,
)
from equity_valuation.models.capital_asset_pricing import (
    CapitalAssetPricingConfig,
    CapitalAssetPricingModel,
)

__all__ = [
    "ZeroGrowthConfig",
    "ZeroGrowthModel",
    "ConstantGrowthConfig",
    "ConstantGrowthModel",
    "DividendDiscountConfig",
    "DividendDiscountModel",
    "CapitalAssetPricingConfig",
    "CapitalAssetPricingModel",
]
