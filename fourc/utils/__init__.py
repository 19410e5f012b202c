# utils/__init__.py
"""Utilities and helper functions module."""

from .helpers import (
    format_currency,
    format_compact_currency,
    format_percentage,
    format_cadence,
    safe_divide,
    mix_allocation_label
)

__all__ = [
    'format_currency',
    'format_compact_currency',
    'format_percentage',
    'format_cadence',
    'safe_divide',
    'mix_allocation_label'
]
