#!/usr/bin/env python3
"""
Catalog entities for the 4C cost model.

Agents, user groups and the quick-scenario dials are immutable records; the whole
model lives in one CatalogState value that the mutator replaces on every edit.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any, List, Tuple

from ..config.defaults import DEFAULT_AGENTS, DEFAULT_GROUPS, DEFAULT_LICENSE, DEFAULT_QUICK_SCENARIO
from ..config.parameters import PARAM_SPECS


@dataclass(frozen=True)
class Agent:
    """An agent type: Conversation (turns) x Computation (cost per turn)"""
    id: int
    name: str
    turns_per_session: float
    cost_per_turn: float
    color: str = "#94a3b8"

    @property
    def cost_per_session(self) -> float:
        return self.turns_per_session * self.cost_per_turn

    def validate(self) -> List[str]:
        errors = []
        min_turns = PARAM_SPECS["turns_per_session"]["min"]
        min_cost = PARAM_SPECS["cost_per_turn"]["min"]
        if self.turns_per_session < min_turns:
            errors.append(f"{self.name}: turns per session must be at least {min_turns:g}")
        if self.cost_per_turn < min_cost:
            errors.append(f"{self.name}: cost per turn must be at least ${min_cost:.2f}")
        return errors


@dataclass(frozen=True)
class UserGroup:
    """
    A population of users sharing a Cadence and a Composition.

    ``mix`` holds one percentage per agent, aligned by position with the agent
    catalog. It is not required to sum to 100.
    """
    id: int
    name: str
    headcount: int
    sessions_per_month: float
    mix: Tuple[float, ...] = ()

    @property
    def mix_total(self) -> float:
        return float(sum(self.mix))

    def mix_share(self, agent_index: int) -> float:
        """Percentage for the agent at ``agent_index``; missing slots count as 0."""
        if 0 <= agent_index < len(self.mix):
            return self.mix[agent_index]
        return 0.0

    def validate(self) -> List[str]:
        errors = []
        min_headcount = PARAM_SPECS["headcount"]["min"]
        min_sessions = PARAM_SPECS["sessions_per_month"]["min"]
        if self.headcount < min_headcount:
            errors.append(f"{self.name}: headcount must be at least {min_headcount}")
        if self.sessions_per_month < min_sessions:
            errors.append(f"{self.name}: sessions per month must be at least {min_sessions:g}")
        if any(v < 0 or v > 100 for v in self.mix):
            errors.append(f"{self.name}: every mix slot must be between 0 and 100")
        return errors


@dataclass(frozen=True)
class QuickScenario:
    """Single-agent what-if dials on the Explorer tab"""
    cadence: float
    conversation_turns: float
    cost_per_turn: float

    @property
    def cost_per_session(self) -> float:
        return self.conversation_turns * self.cost_per_turn

    @property
    def monthly_cost(self) -> float:
        # Cadence x Conversation x Computation
        return self.cadence * self.conversation_turns * self.cost_per_turn


@dataclass(frozen=True)
class CatalogState:
    """Everything the cost model reads. Replaced, never modified in place."""
    agents: Tuple[Agent, ...]
    groups: Tuple[UserGroup, ...]
    license: float
    quick: QuickScenario

    def agent(self, agent_id: int):
        return next((a for a in self.agents if a.id == agent_id), None)

    def group(self, group_id: int):
        return next((g for g in self.groups if g.id == group_id), None)

    def to_dict(self) -> Dict[str, Any]:
        """Convert state to plain dicts and lists"""
        return {
            "agents": [asdict(a) for a in self.agents],
            "groups": [dict(asdict(g), mix=list(g.mix)) for g in self.groups],
            "license": self.license,
            "quick": asdict(self.quick),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CatalogState':
        """Create state from the same plain layout ``to_dict`` produces"""
        agents = tuple(Agent(**a) for a in data["agents"])
        groups = tuple(UserGroup(**dict(g, mix=tuple(g.get("mix", ())))) for g in data["groups"])
        return cls(
            agents=agents,
            groups=groups,
            license=float(data["license"]),
            quick=QuickScenario(**data["quick"]),
        )


def default_state() -> CatalogState:
    """Fresh state built from the default dataset."""
    return CatalogState.from_dict({
        "agents": DEFAULT_AGENTS,
        "groups": DEFAULT_GROUPS,
        "license": DEFAULT_LICENSE,
        "quick": DEFAULT_QUICK_SCENARIO,
    })
