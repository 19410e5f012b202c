# analysis/__init__.py
"""Cost aggregation, break-even and sensitivity analysis."""

from .costs import (
    AgentCostBreakdown,
    GroupCostSummary,
    OrgSummary,
    CostReport,
    aggregate,
    aggregate_state,
    group_summary_frame,
    agent_cost_frame,
    composition_frame
)
from .breakeven import BreakEvenResult, QuickScenarioVerdict, break_even, quick_scenario_verdict
from .sensitivity import SensitivityPoint, SensitivityCurve, sensitivity_curve, build_sensitivity, sensitivity_frame

__all__ = [
    'AgentCostBreakdown',
    'GroupCostSummary',
    'OrgSummary',
    'CostReport',
    'aggregate',
    'aggregate_state',
    'group_summary_frame',
    'agent_cost_frame',
    'composition_frame',
    'BreakEvenResult',
    'QuickScenarioVerdict',
    'break_even',
    'quick_scenario_verdict',
    'SensitivityPoint',
    'SensitivityCurve',
    'sensitivity_curve',
    'build_sensitivity',
    'sensitivity_frame'
]
