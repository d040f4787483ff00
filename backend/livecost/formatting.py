"""Formatting helpers for comparison output.

Provides display strings for the presentation layer: whole-dollar
currency amounts with comma grouping (e.g., '$4,347'), signed
adjustments ('+$1,200') and one-decimal percentages ('-3.7%').
"""

from __future__ import annotations

from livecost.engine import round_half_up


def format_currency(amount: float) -> str:
    """Format an amount in whole US dollars.

    - Comma separators, no cents (e.g., '$72,196')
    - Negative amounts carry a leading minus (e.g., '-$2,804')
    """
    whole = round_half_up(abs(amount))
    if amount < 0 and whole != 0:
        return f"-${whole:,}"
    return f"${whole:,}"


def format_signed_currency(amount: float) -> str:
    """Format an amount with an explicit '+' when positive."""
    if round_half_up(amount) > 0:
        return f"+{format_currency(amount)}"
    return format_currency(amount)


def format_percent_difference(percent: float, is_more_expensive: bool) -> str:
    """Format a percentage difference as '+12.3%', '-3.7%' or '0.0%'.

    The leading '+' follows ``is_more_expensive`` rather than the sign
    of ``percent``.
    """
    if percent == 0:
        percent = 0.0
    prefix = "+" if is_more_expensive else ""
    return f"{prefix}{percent:.1f}%"


def format_index(value: float) -> str:
    """Format an index value rounded to a whole number (e.g., '132')."""
    return str(round_half_up(value))
