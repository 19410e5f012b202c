#!/usr/bin/env python3
"""
Cost-vs-cadence sensitivity curve for a single Conversation x Computation setting.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np
import pandas as pd

SENSITIVITY_MAX_CADENCE = 250


@dataclass(frozen=True)
class SensitivityPoint:
    cadence: int
    cost: float


@dataclass(frozen=True)
class SensitivityCurve:
    """Curve points plus the two reference markers a chart draws on top of it."""
    points: Tuple[SensitivityPoint, ...]
    license: float
    current_cadence: float


def sensitivity_curve(turns_per_session: float, cost_per_turn: float) -> Tuple[SensitivityPoint, ...]:
    """
    Monthly PAYGO cost at every whole cadence from 0 to 250 sessions.

    Args:
        turns_per_session: Conversation depth
        cost_per_turn: Computation cost

    Returns:
        251 SensitivityPoints in cadence order
    """
    cadences = np.arange(0, SENSITIVITY_MAX_CADENCE + 1)
    costs = cadences * float(turns_per_session) * float(cost_per_turn)
    return tuple(SensitivityPoint(cadence=int(c), cost=float(v)) for c, v in zip(cadences, costs))


def build_sensitivity(quick, license: float) -> SensitivityCurve:
    """Curve for the quick scenario, with the license and current cadence as markers."""
    return SensitivityCurve(
        points=sensitivity_curve(quick.conversation_turns, quick.cost_per_turn),
        license=license,
        current_cadence=quick.cadence,
    )


def sensitivity_frame(points) -> pd.DataFrame:
    """Two-column DataFrame (cadence, cost) for charting and export."""
    return pd.DataFrame(
        {"cadence": [p.cadence for p in points], "cost": [p.cost for p in points]},
        columns=["cadence", "cost"],
    )
