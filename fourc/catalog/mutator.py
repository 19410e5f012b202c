#!/usr/bin/env python3
"""
The only way to change a CatalogState.

Every function takes the current state and returns the next one. An edit that
names an unknown entity or field, or carries a value outside its bounds, is
rejected: the very same state object comes back and nothing is raised.
Accepted edits replace exactly one record; all other records keep their
identity and position.

Mix slots are positional. Agents may only ever be appended to the catalog,
never reordered or removed, or every group's mix would point at the wrong agent.
"""

import logging
from dataclasses import replace

from ..config.parameters import AGENT_FIELD_SPECS, GROUP_FIELD_SPECS, QUICK_FIELD_SPECS
from .entities import CatalogState, default_state
from .validation import check_bounds, check_name

logger = logging.getLogger(__name__)


def _replace_at(items: tuple, index: int, item) -> tuple:
    return items[:index] + (item,) + items[index + 1:]


def _index_of(items: tuple, entity_id) -> int:
    for i, item in enumerate(items):
        if item.id == entity_id:
            return i
    return -1


def _checked_field(field: str, value, numeric_specs: dict):
    """Return (ok, accepted_value) for an updatable entity field."""
    if field == "name":
        accepted = check_name(value)
    elif field in numeric_specs:
        accepted = check_bounds(numeric_specs[field], value)
    else:
        return False, None
    return accepted is not None, accepted


def update_agent_field(state: CatalogState, agent_id: int, field: str, value) -> CatalogState:
    """
    Replace one field of one agent.

    Args:
        state: Current state
        agent_id: Id of the agent to edit
        field: ``name``, ``turns_per_session`` or ``cost_per_turn``
        value: New value

    Returns:
        The next state (``state`` itself if the edit was rejected)
    """
    idx = _index_of(state.agents, agent_id)
    if idx < 0:
        logger.debug("Ignoring edit of unknown agent %r", agent_id)
        return state

    ok, accepted = _checked_field(field, value, AGENT_FIELD_SPECS)
    if not ok:
        logger.debug("Rejected agent %r %s=%r", agent_id, field, value)
        return state

    agent = replace(state.agents[idx], **{field: accepted})
    return replace(state, agents=_replace_at(state.agents, idx, agent))


def update_group_field(state: CatalogState, group_id: int, field: str, value) -> CatalogState:
    """
    Replace one field of one user group.

    ``mix`` is not editable here; use update_mix_slot.

    Args:
        state: Current state
        group_id: Id of the group to edit
        field: ``name``, ``headcount`` or ``sessions_per_month``
        value: New value

    Returns:
        The next state (``state`` itself if the edit was rejected)
    """
    idx = _index_of(state.groups, group_id)
    if idx < 0:
        logger.debug("Ignoring edit of unknown group %r", group_id)
        return state

    ok, accepted = _checked_field(field, value, GROUP_FIELD_SPECS)
    if not ok:
        logger.debug("Rejected group %r %s=%r", group_id, field, value)
        return state

    group = replace(state.groups[idx], **{field: accepted})
    return replace(state, groups=_replace_at(state.groups, idx, group))


def update_mix_slot(state: CatalogState, group_id: int, agent_index: int, value) -> CatalogState:
    """
    Set one group's share for the agent at ``agent_index`` in the current agent order.

    A mix shorter than the agent catalog is padded with zeros up to the edited slot.

    Args:
        state: Current state
        group_id: Id of the group to edit
        agent_index: Position in ``state.agents``
        value: Percentage in [0, 100]

    Returns:
        The next state (``state`` itself if the edit was rejected)
    """
    idx = _index_of(state.groups, group_id)
    if idx < 0:
        logger.debug("Ignoring mix edit of unknown group %r", group_id)
        return state

    if isinstance(agent_index, bool) or not isinstance(agent_index, int) \
            or not 0 <= agent_index < len(state.agents):
        logger.debug("Ignoring mix edit of group %r at agent index %r", group_id, agent_index)
        return state

    pct = check_bounds("mix_slot", value)
    if pct is None:
        logger.debug("Rejected mix slot %r for group %r: %r", agent_index, group_id, value)
        return state

    group = state.groups[idx]
    mix = list(group.mix)
    if len(mix) <= agent_index:
        mix.extend([0.0] * (agent_index + 1 - len(mix)))
    mix[agent_index] = pct

    group = replace(group, mix=tuple(mix))
    return replace(state, groups=_replace_at(state.groups, idx, group))


def set_license(state: CatalogState, value) -> CatalogState:
    """Set the per-user monthly license price."""
    price = check_bounds("license", value)
    if price is None:
        logger.debug("Rejected license price %r", value)
        return state
    return replace(state, license=price)


def set_quick_scenario(state: CatalogState, cadence, conversation_turns, cost_per_turn) -> CatalogState:
    """
    Set all three quick-scenario dials at once.

    All three must be within bounds or none is applied.
    """
    values = {"cadence": cadence, "conversation_turns": conversation_turns, "cost_per_turn": cost_per_turn}
    accepted = {}
    for field, value in values.items():
        checked = check_bounds(QUICK_FIELD_SPECS[field], value)
        if checked is None:
            logger.debug("Rejected quick scenario %s=%r", field, value)
            return state
        accepted[field] = checked

    return replace(state, quick=replace(state.quick, **accepted))


def update_quick_field(state: CatalogState, field: str, value) -> CatalogState:
    """Set one quick-scenario dial, keeping the other two."""
    if field not in QUICK_FIELD_SPECS:
        logger.debug("Ignoring unknown quick scenario field %r", field)
        return state

    current = {
        "cadence": state.quick.cadence,
        "conversation_turns": state.quick.conversation_turns,
        "cost_per_turn": state.quick.cost_per_turn,
    }
    current[field] = value
    return set_quick_scenario(state, **current)


def reset_all() -> CatalogState:
    """Discard every edit and return the default dataset."""
    logger.info("Resetting catalogs to the default dataset")
    return default_state()
