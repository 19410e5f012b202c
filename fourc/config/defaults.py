#!/usr/bin/env python3
"""
Default dataset for the 4C cost model.
Seeds the catalogs at start-up and is the target of a full reset.
"""

DEFAULT_LICENSE = 20.0

# Agent catalog, in display order. Group mixes below are index-aligned with this list.
DEFAULT_AGENTS = [
    {"id": 1, "name": "Information Retrieval Agent", "turns_per_session": 1, "cost_per_turn": 0.12, "color": "#3b82f6"},
    {"id": 2, "name": "Task Agent",                  "turns_per_session": 4, "cost_per_turn": 0.25, "color": "#f59e0b"},
    {"id": 3, "name": "Analyst Agent",               "turns_per_session": 8, "cost_per_turn": 0.50, "color": "#10b981"},
    {"id": 4, "name": "Strategy Agent",              "turns_per_session": 3, "cost_per_turn": 0.90, "color": "#8b5cf6"},
]

DEFAULT_GROUPS = [
    {"id": 1, "name": "FLW",                "headcount": 1, "sessions_per_month": 15,  "mix": [80, 20, 0, 0]},
    {"id": 2, "name": "Information Worker", "headcount": 1, "sessions_per_month": 40,  "mix": [30, 50, 10, 10]},
    {"id": 3, "name": "Manager",            "headcount": 1, "sessions_per_month": 80,  "mix": [15, 45, 30, 10]},
    {"id": 4, "name": "Executive",          "headcount": 1, "sessions_per_month": 120, "mix": [5, 5, 50, 40]},
]

# Explorer tab sliders
DEFAULT_QUICK_SCENARIO = {"cadence": 40, "conversation_turns": 5, "cost_per_turn": 0.12}
