"""Formatting utilities for display."""
import math


def format_price(value, unit):
    """Format a marketplace price: BTC per unit of hashing power per day."""
    if value is None:
        return "N/A"
    return f"{float(value):.8f} BTC/{unit}/day"


def format_pct(ratio, decimals=2, with_color=False):
    """Format a ratio (0.05 = 5%) as a signed percentage. Optionally include rich color markup."""
    if ratio is None:
        return "N/A"
    value = float(ratio) * 100
    if math.isnan(value):
        return "N/A"
    if math.isinf(value):
        formatted = "+inf%" if value > 0 else "-inf%"
    else:
        sign = "+" if value >= 0 else ""
        formatted = f"{sign}{value:.{decimals}f}%"
    if with_color:
        color = "green" if value >= 0 else "red"
        return f"[{color}]{formatted}[/{color}]"
    return formatted


def format_profit(value, with_color=False):
    """Signed BTC amount, green when profitable."""
    if value is None:
        return "N/A"
    value = float(value)
    sign = "+" if value >= 0 else ""
    formatted = f"{sign}{value:.8f} BTC"
    if with_color:
        color = "green" if value >= 0 else "red"
        return f"[{color}]{formatted}[/{color}]"
    return formatted
