"""Display helpers for money and percentages."""


def format_currency(amount: float, symbol: str = "$") -> str:
    """
    Format an amount as en-US currency.

    Always two decimal places with comma thousands separators; negative
    amounts carry the sign before the symbol (e.g. "-$1,234.50").

    Args:
        amount: Amount to format
        symbol: Currency symbol placed before the digits

    Returns:
        Formatted currency string
    """
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def format_percent(value: float, decimals: int = 2) -> str:
    """Format a percentage value with a fixed number of decimals, e.g. "2.70%"."""
    return f"{value:.{decimals}f}%"
