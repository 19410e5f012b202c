#!/usr/bin/env python3
"""
Parameter specifications for the 4C cost model.
Single source of truth for the bounds the mutator enforces and the sliders the UI renders.
"""

# PARAMETER SPECIFICATIONS - bounds are inclusive
PARAM_SPECS = {
    # License
    "license": {"type": "float", "min": 0.0, "max": 30.0, "step": 0.01, "label": "License Cost / User / Month",
                "desc": "Flat per-user monthly license fee every group is compared against"},

    # Agent definitions (Conversation x Computation)
    "turns_per_session": {"type": "float", "min": 1, "max": 25, "step": 1, "label": "Turns / Session",
                          "desc": "How deep the dialogue goes for this agent"},
    "cost_per_turn": {"type": "float", "min": 0.01, "max": 1.50, "step": 0.01, "label": "Cost / Turn",
                      "desc": "Backend compute cost of one turn"},

    # User group definitions (Cadence + headcount)
    "sessions_per_month": {"type": "float", "min": 1, "max": 400, "step": 1, "label": "Sessions / Month",
                           "desc": "How often a user in this group engages"},
    "headcount": {"type": "int", "min": 1, "max": 500, "step": 1, "label": "Headcount",
                  "desc": "Number of users in this group"},

    # Composition
    "mix_slot": {"type": "float", "min": 0, "max": 100, "step": 5, "label": "Share of sessions (%)",
                 "desc": "Share of this group's sessions handled by the agent; the mix is not normalized"},

    # Quick scenario (Explorer tab)
    "quick_cadence": {"type": "float", "min": 1, "max": 250, "step": 1, "label": "Sessions / Month",
                      "desc": "How often do users engage?"},
    "quick_conversation_turns": {"type": "float", "min": 1, "max": 25, "step": 1, "label": "Turns / Session",
                                 "desc": "How deep does the dialogue go?"},
    "quick_cost_per_turn": {"type": "float", "min": 0.01, "max": 1.50, "step": 0.01, "label": "Cost / Turn",
                            "desc": "How much backend work per turn?"},
}

# Entity field -> spec key
AGENT_FIELD_SPECS = {
    "turns_per_session": "turns_per_session",
    "cost_per_turn": "cost_per_turn",
}

GROUP_FIELD_SPECS = {
    "sessions_per_month": "sessions_per_month",
    "headcount": "headcount",
}

QUICK_FIELD_SPECS = {
    "cadence": "quick_cadence",
    "conversation_turns": "quick_conversation_turns",
    "cost_per_turn": "quick_cost_per_turn",
}

# PARAMETER GROUPS - the four Cs as shown on the Explorer tab
PARAM_GROUPS = {
    "cadence": {
        "title": "Cadence",
        "icon": "📅",
        "params": ["quick_cadence"],
    },
    "conversation": {
        "title": "Conversation",
        "icon": "🗣️",
        "params": ["quick_conversation_turns"],
    },
    "computation": {
        "title": "Computation",
        "icon": "⚙️",
        "params": ["quick_cost_per_turn"],
    },
}
