#!/usr/bin/env python3
"""
Break-even cadence: how many sessions per month a user can run before PAYGO
costs more than the license.
"""

import math
from dataclasses import dataclass
from typing import Union

Cadence = Union[int, float]

OVER = "over"
UNDER = "under"
AT = "at"


@dataclass(frozen=True)
class BreakEvenResult:
    cadence: Cadence            # int, or math.inf when a session costs nothing
    classification: str         # where current_cadence sits: "over", "under" or "at"
    cost_per_session: float
    current_cadence: float
    delta: float                # |current_cadence - cadence|

    @property
    def is_unbounded(self) -> bool:
        return self.cadence == math.inf


@dataclass(frozen=True)
class QuickScenarioVerdict:
    quick_cost: float
    license: float
    difference: float
    cheaper: str                # "paygo" or "license"
    break_even: BreakEvenResult


def break_even_cadence(turns_per_session: float, cost_per_turn: float, license: float) -> Cadence:
    """
    Largest whole number of sessions per month whose PAYGO cost does not exceed the license.

    Args:
        turns_per_session: Conversation depth
        cost_per_turn: Computation cost
        license: Per-user monthly license price

    Returns:
        floor(license / cost_per_session), or math.inf if a session is free
    """
    cost_per_session = turns_per_session * cost_per_turn
    if cost_per_session <= 0:
        return math.inf
    return math.floor(license / cost_per_session)


def classify(current_cadence: float, cadence: Cadence) -> str:
    if cadence == math.inf:
        return UNDER
    if current_cadence > cadence:
        return OVER
    if current_cadence < cadence:
        return UNDER
    return AT


def break_even(turns_per_session: float, cost_per_turn: float, license: float,
               current_cadence: float) -> BreakEvenResult:
    """
    Solve the break-even cadence and place ``current_cadence`` relative to it.

    A zero license with a positive session cost gives a break-even of 0: any
    usage at all costs more than the license.

    Args:
        turns_per_session: Conversation depth
        cost_per_turn: Computation cost
        license: Per-user monthly license price
        current_cadence: Sessions per month to classify

    Returns:
        BreakEvenResult
    """
    cadence = break_even_cadence(turns_per_session, cost_per_turn, license)
    if cadence == math.inf:
        delta = math.inf
    else:
        delta = abs(current_cadence - cadence)

    return BreakEvenResult(
        cadence=cadence,
        classification=classify(current_cadence, cadence),
        cost_per_session=turns_per_session * cost_per_turn,
        current_cadence=current_cadence,
        delta=delta,
    )


def quick_scenario_verdict(quick, license: float) -> QuickScenarioVerdict:
    """
    Headline comparison for the quick scenario: Cadence x Conversation x Computation vs. license.

    Args:
        quick: QuickScenario
        license: Per-user monthly license price

    Returns:
        QuickScenarioVerdict
    """
    quick_cost = quick.monthly_cost
    return QuickScenarioVerdict(
        quick_cost=quick_cost,
        license=license,
        difference=abs(quick_cost - license),
        cheaper="license" if quick_cost > license else "paygo",
        break_even=break_even(quick.conversation_turns, quick.cost_per_turn, license, quick.cadence),
    )
