# visualization/__init__.py
"""Visualization and chart generation module."""

from .charts import plot_sensitivity, plot_composition, figure_to_png, capture_figures

__all__ = [
    'plot_sensitivity',
    'plot_composition',
    'figure_to_png',
    'capture_figures'
]
