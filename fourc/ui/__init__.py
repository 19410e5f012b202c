# ui/__init__.py
"""User interface components module."""

from .components import (
    render_spec_slider,
    render_license_control,
    render_quick_controls,
    render_agent_card,
    render_group_card,
    render_org_metrics
)

__all__ = [
    'render_spec_slider',
    'render_license_control',
    'render_quick_controls',
    'render_agent_card',
    'render_group_card',
    'render_org_metrics'
]
