#!/usr/bin/env python3
"""
PAYGO cost aggregation for user groups and the whole organization.

For every group and every agent (matched by catalog position):

    sessions         = sessions_per_month * mix[i] / 100
    cost_per_session = turns_per_session * cost_per_turn
    cost             = sessions * cost_per_session

A group's PAYGO total is the per-user sum times headcount, compared with
license * headcount. Savings are license minus PAYGO, so a positive figure
means pay-as-you-go is the cheaper option. Mixes are used as entered; a mix
that does not add up to 100 is costed as-is.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import pandas as pd

from ..utils.helpers import safe_divide


@dataclass(frozen=True)
class AgentCostBreakdown:
    agent_id: int
    agent_name: str
    sessions: float
    cost_per_session: float
    cost: float


@dataclass(frozen=True)
class GroupCostSummary:
    group_id: int
    group_name: str
    headcount: int
    agent_costs: Tuple[AgentCostBreakdown, ...]
    total_per_user: float
    total_group: float
    license_cost: float
    savings: float
    mix_total: float

    @property
    def paygo_wins(self) -> bool:
        return self.savings >= 0

    @property
    def allocation_status(self) -> str:
        if self.mix_total == 100:
            return "exact"
        return "under" if self.mix_total < 100 else "over"


@dataclass(frozen=True)
class OrgSummary:
    total: float
    license_total: float
    headcount: int
    savings: float

    @property
    def paygo_wins(self) -> bool:
        return self.savings >= 0

    @property
    def savings_share(self) -> float:
        """Savings as a share of the org license bill (0 when the bill is 0)."""
        return safe_divide(abs(self.savings), self.license_total)


@dataclass(frozen=True)
class CostReport:
    per_group: Tuple[GroupCostSummary, ...]
    org: OrgSummary


def _group_summary(group, agents, license: float) -> GroupCostSummary:
    breakdown = []
    for i, agent in enumerate(agents):
        sessions = group.sessions_per_month * (group.mix_share(i) / 100)
        cost_per_session = agent.turns_per_session * agent.cost_per_turn
        breakdown.append(AgentCostBreakdown(
            agent_id=agent.id,
            agent_name=agent.name,
            sessions=sessions,
            cost_per_session=cost_per_session,
            cost=sessions * cost_per_session,
        ))

    total_per_user = 0.0
    for item in breakdown:
        total_per_user += item.cost
    total_group = total_per_user * group.headcount
    license_cost = license * group.headcount

    return GroupCostSummary(
        group_id=group.id,
        group_name=group.name,
        headcount=group.headcount,
        agent_costs=tuple(breakdown),
        total_per_user=total_per_user,
        total_group=total_group,
        license_cost=license_cost,
        savings=license_cost - total_group,
        mix_total=group.mix_total,
    )


def aggregate(agents, groups, license: float) -> CostReport:
    """
    Cost every group against the agent catalog and roll up to the organization.

    Args:
        agents: Agent catalog, in display order
        groups: User groups
        license: Per-user monthly license price

    Returns:
        CostReport with one GroupCostSummary per group and the OrgSummary
    """
    per_group = tuple(_group_summary(g, agents, license) for g in groups)

    org_total = 0.0
    org_license = 0.0
    org_headcount = 0
    for summary in per_group:
        org_total += summary.total_group
        org_license += summary.license_cost
        org_headcount += summary.headcount

    org = OrgSummary(
        total=org_total,
        license_total=org_license,
        headcount=org_headcount,
        savings=org_license - org_total,
    )
    return CostReport(per_group=per_group, org=org)


def aggregate_state(state) -> CostReport:
    """aggregate() on a CatalogState."""
    return aggregate(state.agents, state.groups, state.license)


def group_summary_frame(report: CostReport) -> pd.DataFrame:
    """
    One row per group with the headline figures.

    Args:
        report: Output of aggregate()

    Returns:
        DataFrame indexed by position, in group order
    """
    columns = ["group_id", "group", "headcount", "mix_total", "total_per_user",
               "total_group", "license_cost", "savings", "winner"]
    rows = []
    for s in report.per_group:
        rows.append({
            "group_id": s.group_id,
            "group": s.group_name,
            "headcount": s.headcount,
            "mix_total": s.mix_total,
            "total_per_user": s.total_per_user,
            "total_group": s.total_group,
            "license_cost": s.license_cost,
            "savings": s.savings,
            "winner": "PAYGO" if s.paygo_wins else "License",
        })
    return pd.DataFrame(rows, columns=columns)


def agent_cost_frame(report: CostReport) -> pd.DataFrame:
    """Long-format per-group, per-agent breakdown."""
    columns = ["group", "agent", "sessions", "cost_per_session", "cost"]
    rows = [
        {
            "group": s.group_name,
            "agent": item.agent_name,
            "sessions": item.sessions,
            "cost_per_session": item.cost_per_session,
            "cost": item.cost,
        }
        for s in report.per_group
        for item in s.agent_costs
    ]
    return pd.DataFrame(rows, columns=columns)


def composition_frame(report: CostReport, license: float,
                      visible_group_ids: Optional[Iterable[int]] = None) -> pd.DataFrame:
    """
    Per-user cost of each agent, one row per group, for the stacked composition chart.

    Rows and agent columns are keyed by id; names are free text and only ride
    along as the ``group`` label column.

    Args:
        report: Output of aggregate()
        license: Per-user license price, repeated in a ``license`` column
        visible_group_ids: If given, only these groups are kept

    Returns:
        DataFrame indexed by group id with a ``group`` name column, one column per
        agent id, then ``total`` and ``license``
    """
    visible = None if visible_group_ids is None else set(visible_group_ids)
    agent_ids = [item.agent_id for item in report.per_group[0].agent_costs] if report.per_group else []

    rows = []
    for s in report.per_group:
        if visible is not None and s.group_id not in visible:
            continue
        row = {"group_id": s.group_id, "group": s.group_name}
        for item in s.agent_costs:
            row[item.agent_id] = item.cost
        row["total"] = s.total_per_user
        row["license"] = license
        rows.append(row)

    df = pd.DataFrame(rows, columns=["group_id", "group"] + agent_ids + ["total", "license"])
    return df.set_index("group_id")
