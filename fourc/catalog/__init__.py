# catalog/__init__.py
"""Catalog state and the mutations allowed on it."""

from .entities import Agent, UserGroup, QuickScenario, CatalogState, default_state
from .mutator import (
    update_agent_field,
    update_group_field,
    update_mix_slot,
    set_license,
    set_quick_scenario,
    update_quick_field,
    reset_all
)
from .validation import check_bounds, validate_state

__all__ = [
    'Agent',
    'UserGroup',
    'QuickScenario',
    'CatalogState',
    'default_state',
    'update_agent_field',
    'update_group_field',
    'update_mix_slot',
    'set_license',
    'set_quick_scenario',
    'update_quick_field',
    'reset_all',
    'check_bounds',
    'validate_state'
]
