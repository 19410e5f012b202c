#!/usr/bin/env python3
"""
Reusable UI components for the Streamlit interface.
Widgets are driven by PARAM_SPECS and write back only through the catalog mutator.
"""

import streamlit as st

from ..catalog import mutator
from ..config.parameters import PARAM_SPECS, PARAM_GROUPS, QUICK_FIELD_SPECS
from ..utils.helpers import (
    format_currency, format_compact_currency, format_percentage, mix_allocation_label
)

STATE_KEY = "catalog"
GEN_KEY = "_widget_gen"


def widget_key(*parts) -> str:
    """Widget key scoped to the current generation, so a reset rebuilds every widget."""
    return "_".join(str(p) for p in (st.session_state.get(GEN_KEY, 0),) + parts)


def build_help_text(spec: dict) -> str:
    """
    Build help text from parameter specification.

    Args:
        spec: Parameter specification dictionary

    Returns:
        Formatted help text
    """
    parts = []

    if 'desc' in spec:
        parts.append(spec['desc'])

    parts.append(f"Range: {spec['min']:g} - {spec['max']:g}")
    return " | ".join(parts)


def _slider_numbers(spec: dict, value):
    """st.slider wants min, max, step and value of one type; use ints whenever they are all whole."""
    nums = [spec['min'], spec['max'], spec['step'], value]
    if all(float(n).is_integer() for n in nums):
        return tuple(int(n) for n in nums)
    return tuple(float(n) for n in nums)


def render_spec_slider(spec_key: str, value, key: str, on_change, args=(), label: str = None,
                       money: bool = False):
    """
    Render a slider for a PARAM_SPECS entry.

    Args:
        spec_key: Key into PARAM_SPECS
        value: Current value from the catalog state
        key: Widget key
        on_change: Callback applying the edit through the mutator
        args: Extra callback arguments
        label: Overrides the spec label
        money: Show the value as dollars
    """
    spec = PARAM_SPECS[spec_key]
    lo, hi, step, current = _slider_numbers(spec, value)
    return st.slider(
        label or spec['label'],
        min_value=lo,
        max_value=hi,
        value=current,
        step=step,
        key=key,
        help=build_help_text(spec),
        format="$%.2f" if money else None,
        on_change=on_change,
        args=args,
    )


# ---------------------------------------------------------------------------
# Callbacks: read the widget value, run the mutator, store the new state
# ---------------------------------------------------------------------------

def _apply(fn, *args):
    st.session_state[STATE_KEY] = fn(st.session_state[STATE_KEY], *args)


def on_agent_change(agent_id, field, key):
    _apply(mutator.update_agent_field, agent_id, field, st.session_state[key])


def on_group_change(group_id, field, key):
    _apply(mutator.update_group_field, group_id, field, st.session_state[key])


def on_mix_change(group_id, agent_index, key):
    _apply(mutator.update_mix_slot, group_id, agent_index, st.session_state[key])


def on_quick_change(field, key):
    _apply(mutator.update_quick_field, field, st.session_state[key])


def on_license_change(key):
    _apply(mutator.set_license, st.session_state[key])
    # Drop the other license widgets so they pick up the new value on rerun
    prefix = widget_key("license")
    for k in [k for k in st.session_state.keys() if isinstance(k, str) and k.startswith(prefix) and k != key]:
        del st.session_state[k]


# ---------------------------------------------------------------------------
# Composite controls
# ---------------------------------------------------------------------------

def render_license_control(license: float, where: str, label: str = None):
    """
    License slider plus an exact-value input; both edit the same state value.

    Args:
        license: Current license price
        where: Distinguishes the copies rendered on different tabs
        label: Overrides the spec label
    """
    spec = PARAM_SPECS["license"]
    slider_key = widget_key("license", where, "slider")
    exact_key = widget_key("license", where, "exact")

    render_spec_slider("license", license, slider_key, on_license_change, args=(slider_key,),
                       label=label, money=True)
    st.number_input(
        "Exact ($)",
        min_value=float(spec['min']),
        max_value=float(spec['max']),
        value=float(license),
        step=float(spec['step']),
        format="%.2f",
        key=exact_key,
        on_change=on_license_change,
        args=(exact_key,),
    )


def render_quick_controls(quick):
    """The three 4C sliders of the Explorer tab."""
    spec_to_field = {v: k for k, v in QUICK_FIELD_SPECS.items()}
    for group in PARAM_GROUPS.values():
        with st.container(border=True):
            st.markdown(f"**{group['icon']} {group['title']}**")
            for spec_key in group['params']:
                field = spec_to_field[spec_key]
                key = widget_key("quick", field)
                render_spec_slider(spec_key, getattr(quick, field), key, on_quick_change,
                                   args=(field, key), money=(field == "cost_per_turn"))
                st.caption(PARAM_SPECS[spec_key]['desc'])


def render_agent_card(agent):
    """Name, Conversation and Computation controls for one agent."""
    with st.container(border=True):
        name_key = widget_key("agent", agent.id, "name")
        st.text_input("Agent name", value=agent.name, key=name_key,
                      on_change=on_agent_change, args=(agent.id, "name", name_key))
        st.caption(f"Cost / session: {format_currency(agent.cost_per_session)}")

        for field in ("turns_per_session", "cost_per_turn"):
            key = widget_key("agent", agent.id, field)
            render_spec_slider(field, getattr(agent, field), key, on_agent_change,
                               args=(agent.id, field, key), money=(field == "cost_per_turn"))


def render_group_card(group, summary, agents):
    """
    Settings, composition sliders and result badge for one user group.

    Args:
        group: UserGroup
        summary: GroupCostSummary for the group
        agents: Agent catalog, in display order
    """
    with st.container(border=True):
        left, middle, right = st.columns([1.2, 1.5, 1])

        with left:
            name_key = widget_key("group", group.id, "name")
            st.text_input("Group name", value=group.name, key=name_key,
                          on_change=on_group_change, args=(group.id, "name", name_key))
            for field in ("sessions_per_month", "headcount"):
                key = widget_key("group", group.id, field)
                render_spec_slider(field, getattr(group, field), key, on_group_change,
                                   args=(group.id, field, key))

        with middle:
            st.markdown(f"**Composition** · {mix_allocation_label(summary.mix_total)}")
            for i, agent in enumerate(agents):
                key = widget_key("mix", group.id, i)
                render_spec_slider("mix_slot", group.mix_share(i), key, on_mix_change,
                                   args=(group.id, i, key), label=agent.name)

        with right:
            st.metric("PAYGO / user / mo", format_currency(summary.total_per_user))
            st.metric("Group PAYGO / mo", format_compact_currency(summary.total_group))
            if summary.paygo_wins:
                st.success("✅ PAYGO wins")
            else:
                st.error("🔴 License wins")


def render_org_metrics(org):
    """Organization-wide tiles."""
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Org PAYGO / Mo", format_compact_currency(org.total))
    col2.metric("Org License / Mo", format_compact_currency(org.license_total))
    col3.metric(
        "PAYGO Savings" if org.paygo_wins else "License Savings",
        format_compact_currency(abs(org.savings)),
        format_percentage(org.savings_share),
        delta_color="normal" if org.paygo_wins else "inverse",
    )
    col4.metric("Total Users", org.headcount)
