#!/usr/bin/env python3
"""
Input validation for catalog edits.
Values outside the documented bounds are rejected (None), never clamped.
"""

import math
from typing import List, Optional, Union

from ..config.parameters import PARAM_SPECS

Number = Union[int, float]


def coerce_number(value) -> Optional[float]:
    """
    Convert a widget value to a finite float.

    Args:
        value: Raw value (number or numeric string)

    Returns:
        The float, or None if it is not a usable number
    """
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def check_bounds(spec_key: str, value) -> Optional[Number]:
    """
    Check a value against the bounds registered in PARAM_SPECS.

    Args:
        spec_key: Key into PARAM_SPECS
        value: Candidate value

    Returns:
        The accepted value (int for int-typed specs), or None if rejected
    """
    spec = PARAM_SPECS.get(spec_key)
    if spec is None:
        return None

    number = coerce_number(value)
    if number is None:
        return None
    if number < spec["min"] or number > spec["max"]:
        return None

    if spec["type"] == "int":
        if not number.is_integer():
            return None
        return int(number)
    return number


def check_name(value) -> Optional[str]:
    """Names are free text; anything that is not a string is rejected."""
    if not isinstance(value, str):
        return None
    return value


def validate_state(state) -> List[str]:
    """
    Pre-flight notes about a catalog state.

    Nothing reported here blocks the calculation: an under- or over-allocated
    mix is a valid state and is costed as-is.

    Args:
        state: CatalogState

    Returns:
        List of human-readable notes
    """
    notes = []
    n_agents = len(state.agents)

    for agent in state.agents:
        notes.extend(agent.validate())

    for group in state.groups:
        notes.extend(group.validate())
        if len(group.mix) != n_agents:
            notes.append(
                f"{group.name}: mix has {len(group.mix)} slots for {n_agents} agents; "
                f"slots are matched to agents by position"
            )
        total = group.mix_total
        if total < 100:
            notes.append(f"{group.name}: mix is under-allocated ({total:g}%)")
        elif total > 100:
            notes.append(f"{group.name}: mix is over-allocated ({total:g}%)")

    return notes
