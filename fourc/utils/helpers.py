#!/usr/bin/env python3
"""
Utility functions and helpers used across the application.
Display formatting for currency and percentages, plus safe arithmetic.
"""

import math


def format_currency(amount: float, decimals: int = 2) -> str:
    """
    Format amount as currency string.

    Args:
        amount: Amount to format
        decimals: Number of decimal places

    Returns:
        Formatted currency string, e.g. ``$4.44``
    """
    return f"${amount:,.{decimals}f}"


def format_compact_currency(amount: float) -> str:
    """
    Format amount as a short currency string for metric tiles.

    Args:
        amount: Amount to format

    Returns:
        ``$1.2k`` from 1000 upwards, whole dollars below
    """
    if amount >= 1000:
        return f"${amount / 1000:.1f}k"
    return f"${amount:.0f}"


def format_percentage(value: float, decimal_places: int = 0) -> str:
    """
    Format value as percentage string.

    Args:
        value: Value to format (0.15 = 15%)
        decimal_places: Number of decimal places

    Returns:
        Formatted percentage string
    """
    return f"{value*100:.{decimal_places}f}%"


def format_cadence(cadence) -> str:
    """Sessions per month, with infinity shown as ∞."""
    if cadence == math.inf:
        return "∞"
    return f"{cadence:g}"


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """
    Safely divide two numbers, returning default if division by zero.

    Args:
        numerator: Numerator value
        denominator: Denominator value
        default: Default value if division by zero

    Returns:
        Division result or default
    """
    try:
        if denominator == 0:
            return default
        return numerator / denominator
    except (TypeError, ValueError):
        return default


def mix_allocation_label(mix_total: float) -> str:
    """Badge text for a group's composition total."""
    if mix_total == 100:
        return "✓ 100%"
    side = "under" if mix_total < 100 else "over"
    return f"{mix_total:g}% ({side}-allocated)"
