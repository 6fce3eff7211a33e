from utils.constants import DEFAULT_CURRENCY_SYMBOL


def format_currency(amount: int, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Format whole currency units, e.g. '¥1,234' or '-¥1,234'."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,}"


def format_signed(amount: int, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Format with +/- sign."""
    sign = "+" if amount >= 0 else "-"
    return f"{sign}{symbol}{abs(amount):,}"
