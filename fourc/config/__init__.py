# config/__init__.py
"""Configuration module for the 4C cost model."""

from .parameters import PARAM_SPECS, PARAM_GROUPS, AGENT_FIELD_SPECS, GROUP_FIELD_SPECS, QUICK_FIELD_SPECS
from .defaults import DEFAULT_AGENTS, DEFAULT_GROUPS, DEFAULT_LICENSE, DEFAULT_QUICK_SCENARIO

__all__ = [
    'PARAM_SPECS',
    'PARAM_GROUPS',
    'AGENT_FIELD_SPECS',
    'GROUP_FIELD_SPECS',
    'QUICK_FIELD_SPECS',
    'DEFAULT_AGENTS',
    'DEFAULT_GROUPS',
    'DEFAULT_LICENSE',
    'DEFAULT_QUICK_SCENARIO'
]
