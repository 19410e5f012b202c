#!/usr/bin/env python3
"""
Main Streamlit application for the 4C cost model.
Every widget edit goes through the catalog mutator; each rerun recomputes all results from the stored state.
"""

import logging

import streamlit as st

from ..analysis.breakeven import AT, OVER, quick_scenario_verdict
from ..analysis.costs import aggregate_state, composition_frame, group_summary_frame
from ..analysis.sensitivity import SensitivityCurve, sensitivity_curve
from ..catalog import mutator
from ..catalog.entities import default_state
from ..catalog.validation import validate_state
from ..export import plots_zip, results_csv, results_workbook
from ..utils.helpers import format_cadence, format_currency
from ..visualization.charts import capture_figures, plot_composition, plot_sensitivity
from .components import (
    GEN_KEY, STATE_KEY,
    render_agent_card, render_group_card, render_license_control, render_org_metrics,
    render_quick_controls, widget_key
)

logger = logging.getLogger(__name__)

VISIBLE_KEY = "visible_groups"


def initialize_streamlit():
    """Initialize Streamlit configuration and page setup."""
    st.set_page_config(page_title="The 4C Model", layout="wide")
    st.title("The 4C Model")
    st.caption("Cadence × Conversation × Computation across a Composition of agents: "
               "pay-as-you-go agent cost compared with a flat per-user license")


def initialize_state():
    """Seed the catalogs from the default dataset on first run."""
    if STATE_KEY not in st.session_state:
        state = default_state()
        st.session_state[STATE_KEY] = state
        st.session_state[GEN_KEY] = 0
        st.session_state[VISIBLE_KEY] = [g.id for g in state.groups]
        logger.info("Seeded catalogs: %d agents, %d groups", len(state.agents), len(state.groups))


def reset_to_defaults():
    """Reset catalogs, quick scenario and chart filters; rebuild every widget."""
    state = mutator.reset_all()
    st.session_state[STATE_KEY] = state
    st.session_state[VISIBLE_KEY] = [g.id for g in state.groups]
    st.session_state[GEN_KEY] = st.session_state.get(GEN_KEY, 0) + 1


@st.cache_data(show_spinner=False)
def sensitivity_points_cached(turns_per_session: float, cost_per_turn: float):
    return sensitivity_curve(turns_per_session, cost_per_turn)


def render_headline(verdict):
    """Full-width banner comparing the quick scenario with the license."""
    col1, col2, col3 = st.columns(3)
    col1.metric("PAYGO / user / mo", format_currency(verdict.quick_cost))
    col2.metric("License / user / mo", format_currency(verdict.license))
    if verdict.cheaper == "license":
        col3.metric("Verdict", f"License saves {format_currency(verdict.difference)}")
    else:
        col3.metric("Verdict", f"PAYGO saves {format_currency(verdict.difference)}")


def render_break_even(verdict, quick):
    """Break-even cadence for the quick scenario and where the current cadence sits."""
    be = verdict.break_even
    st.markdown("**⚖️ Break-Even**")
    st.caption(f"At {quick.conversation_turns:g} turns × {format_currency(quick.cost_per_turn)}/turn, "
               f"PAYGO stays cheaper up to:")
    st.markdown(f"### {format_cadence(be.cadence)} sessions/mo")

    if be.is_unbounded:
        st.success("✅ PAYGO is always cheaper (a session costs nothing)")
    elif be.classification == OVER:
        st.warning(f"⚠️ You're at {quick.cadence:g} sessions, {be.delta:g} over the break-even")
    elif be.classification == AT:
        st.info(f"⚖️ You're at {quick.cadence:g} sessions, exactly at the break-even")
    else:
        st.success(f"✅ You're at {quick.cadence:g} sessions, {be.delta:g} under the break-even")


def render_explorer(state):
    """
    Explorer tab: quick-scenario dials, cost curve, 4C formula, break-even and license.

    Returns:
        List of (title, figure) pairs for the download bundle
    """
    verdict = quick_scenario_verdict(state.quick, state.license)
    render_headline(verdict)

    left, right = st.columns([1, 2.4])
    with left:
        render_quick_controls(state.quick)

    with right:
        curve = SensitivityCurve(
            points=sensitivity_points_cached(state.quick.conversation_turns, state.quick.cost_per_turn),
            license=state.license,
            current_cadence=state.quick.cadence,
        )
        st.markdown("**Cost Curve: all three sliders drive this chart**")
        st.caption(f"Line = your current config ({state.quick.conversation_turns:g} turns × "
                   f"{format_currency(state.quick.cost_per_turn)}/turn). Green = your cadence "
                   f"({state.quick.cadence:g} sessions/mo). Red dashed = license.")
        fig = plot_sensitivity(curve)
        st.pyplot(fig)

        formula, breakeven, license_col = st.columns(3)
        with formula:
            st.markdown("**📐 The 4C Formula**")
            st.markdown("**Cadence** × **Conversation** × **Computation**  \n"
                        "across a **Composition** of agents")
            st.code("Monthly Cost = Sessions × Turns × Cost/Turn", language=None)
        with breakeven:
            render_break_even(verdict, state.quick)
        with license_col:
            st.markdown("**💰 License Cost**")
            render_license_control(state.license, "explorer", label="Per User / Month")

    return [("Cost curve", fig)]


def render_group_filter(state):
    """Checkbox per group controlling which bars the composition chart shows."""
    visible = set(st.session_state.get(VISIBLE_KEY, []))
    cols = st.columns(max(len(state.groups), 1))
    selected = []
    for col, g in zip(cols, state.groups):
        with col:
            if st.checkbox(g.name, value=g.id in visible, key=widget_key("visible", g.id)):
                selected.append(g.id)
    st.session_state[VISIBLE_KEY] = selected
    return selected


def render_composition(state, report):
    """
    Composition Builder tab: license, org metrics, stacked chart, agent and group definitions.

    Returns:
        List of (title, figure) pairs for the download bundle
    """
    top_left, top_right = st.columns([1, 2.4])
    with top_left:
        with st.container(border=True):
            st.markdown("**💰 License**")
            render_license_control(state.license, "composition")

    with top_right:
        render_org_metrics(report.org)
        visible = render_group_filter(state)
        frame = composition_frame(report, state.license, visible_group_ids=visible)
        labels = {a.id: a.name for a in state.agents}
        colors = {a.id: a.color for a in state.agents}
        fig = plot_composition(frame, state.license, agent_labels=labels, agent_colors=colors)
        st.pyplot(fig)

    notes = validate_state(state)
    if notes:
        with st.expander(f"Composition notes ({len(notes)})", expanded=False):
            for note in notes:
                st.info(note)

    agents_col, groups_col = st.columns([1, 2.4])
    with agents_col:
        st.markdown("**🤖 Agent Definitions**")
        for agent in state.agents:
            render_agent_card(agent)

    with groups_col:
        st.markdown("**👥 User Group Definitions**")
        for group, summary in zip(state.groups, report.per_group):
            render_group_card(group, summary, state.agents)

    return [("Composition by group", fig)]


def render_download_section(state, report, figures):
    """
    Render the download section with charts and raw results.

    Args:
        state: CatalogState
        report: CostReport
        figures: (title, figure) pairs rendered this run
    """
    curve = SensitivityCurve(
        points=sensitivity_points_cached(state.quick.conversation_turns, state.quick.cost_per_turn),
        license=state.license,
        current_cadence=state.quick.cadence,
    )
    images, manifest = capture_figures(figures)

    with st.expander("Downloads & raw results", expanded=False):
        col1, col2, col3 = st.columns(3)
        with col1:
            st.download_button("Download results (CSV)", data=results_csv(report),
                               file_name="4c_group_results.csv", mime="text/csv")
        with col2:
            st.download_button(
                "Download workbook (XLSX)",
                data=results_workbook(state, report, curve),
                file_name="4c_results.xlsx",
                mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            )
        with col3:
            st.download_button("Download charts (zip)", data=plots_zip(images, manifest, state),
                               file_name="4c_charts.zip")

        st.dataframe(group_summary_frame(report), use_container_width=True)


def main():
    """Main application entry point."""
    initialize_streamlit()
    initialize_state()

    st.button("↺ Reset to Defaults", on_click=reset_to_defaults)

    state = st.session_state[STATE_KEY]
    report = aggregate_state(state)

    explorer_tab, composition_tab = st.tabs(["📊 Explorer", "🎨 Composition Builder"])
    figures = []
    with explorer_tab:
        figures += render_explorer(state)
    with composition_tab:
        figures += render_composition(state, report)

    render_download_section(state, report, figures)

    st.caption("4C Model: AI Agent Pricing Framework. All values are illustrative. Adjust inputs to "
               "reflect your organization's actual usage patterns and pricing.")


if __name__ == "__main__":
    main()
