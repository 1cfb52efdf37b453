"""Financial statement ratios used as valuation model inputs."""

from equity_valuation.utils.statistics import percent

DAYS_PER_YEAR = 365


def eps(
    net_income: float,
    shares_outstanding: float,
    preferred_dividends: float = 0.0,
) -> float:
    """Earnings per share available to common shareholders."""
    return (net_income - preferred_dividends) / shares_outstanding


# Profitability


def roa(ebit: float, avg_total_assets: float) -> float:
    """Return on assets."""
    return ebit / avg_total_assets


def roe(net_income: float, avg_shareholder_equity: float) -> float:
    """Return on equity."""
    return net_income / avg_shareholder_equity


def effective_tax_rate(tax_expense: float, pretax_income: float) -> float:
    """Provision for income taxes as a fraction of income before taxes."""
    return percent(tax_expense, pretax_income)


# Leverage


def interest_burden(ebit: float, interest_expense: float) -> float:
    """Share of EBIT left after interest: (EBIT - interest) / EBIT."""
    return (ebit - interest_expense) / ebit


def times_interest_earned(ebit: float, interest_expense: float) -> float:
    """Interest coverage."""
    return ebit / interest_expense


def leverage(assets_or_debt: float, equity: float, is_debt: bool = False) -> float:
    """
    Calculate leverage.

    Args:
        assets_or_debt: Total assets, or total debt if `is_debt` is True.
        equity: Total shareholder equity.
        is_debt: Whether the first argument is debt.

    Returns:
        Assets / equity, or 1 + debt / equity.
    """
    if is_debt:
        return 1 + assets_or_debt / equity
    return assets_or_debt / equity


def required_return_on_debt(interest_expense: float, avg_total_debt: float) -> float:
    """Interest expense as a fraction of average total debt."""
    return percent(interest_expense, avg_total_debt)


# Asset utilization


def asset_turnover(revenue: float, avg_total_assets: float) -> float:
    """Total asset turnover."""
    return revenue / avg_total_assets


def inventory_turnover(cogs: float, avg_inventory: float) -> float:
    """Inventory turnover from cost of goods sold."""
    return cogs / avg_inventory


def days_receivable(avg_receivables: float, revenue: float) -> float:
    """Days sales outstanding."""
    return avg_receivables / revenue * DAYS_PER_YEAR


# Liquidity


def current_ratio(current_assets: float, current_liabilities: float) -> float:
    """Current assets over current liabilities."""
    return current_assets / current_liabilities


def quick_ratio(
    cash: float,
    marketable_securities: float,
    receivables: float,
    current_liabilities: float,
) -> float:
    """Acid-test ratio."""
    return (cash + marketable_securities + receivables) / current_liabilities


# Market price


def pe(price: float, eps: float) -> float:
    """Price-to-earnings ratio."""
    return price / eps


def ps(market_cap: float, revenue: float) -> float:
    """
    Price-to-sales ratio.

    Pass market cap and revenue, or share price and revenue per share.
    """
    return market_cap / revenue


def pb(price: float, book_value: float) -> float:
    """Price-to-book ratio."""
    return price / book_value


def earnings_yield(eps: float, price: float) -> float:
    """Inverse of P/E."""
    return eps / price


def fcf_yield(operating_cashflow: float, capex: float, market_cap: float) -> float:
    """Free cash flow yield: (CFO - CAPEX) / market cap."""
    return (operating_cashflow - capex) / market_cap
