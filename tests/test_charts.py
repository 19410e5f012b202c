"""
Tests for fourc.visualization.charts on the Agg backend.
"""

import matplotlib.pyplot as plt
import pytest

from fourc.analysis.costs import aggregate_state, composition_frame
from fourc.analysis.sensitivity import build_sensitivity
from fourc.catalog.mutator import update_agent_field
from fourc.visualization.charts import capture_figures, figure_to_png, plot_composition, plot_sensitivity

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class TestCharts:

    def test_sensitivity_chart_marks_license_and_cadence(self, state):
        fig = plot_sensitivity(build_sensitivity(state.quick, state.license))
        ax = fig.axes[0]
        labels = [line.get_label() for line in ax.get_lines()]
        assert "Your config" in labels
        assert "License $20/mo" in labels
        assert "40 sess" in labels
        assert ax.get_xlim() == (0, 250)
        plt.close(fig)

    def test_composition_chart_stacks_every_agent(self, state, report):
        frame = composition_frame(report, state.license)
        labels = {a.id: a.name for a in state.agents}
        colors = {a.id: a.color for a in state.agents}
        fig = plot_composition(frame, state.license, agent_labels=labels, agent_colors=colors)
        ax = fig.axes[0]
        # one bar per group per agent
        assert len(ax.patches) == len(state.groups) * len(state.agents)
        assert [t.get_text() for t in ax.get_xticklabels()] == [g.name for g in state.groups]
        legend = [t.get_text() for t in ax.get_legend().get_texts()]
        assert [t for t in legend if not t.startswith("License")] == [a.name for a in state.agents]
        plt.close(fig)

    @pytest.mark.parametrize("name", ["Information Retrieval Agent", "group", "license", "total"])
    def test_composition_chart_after_agent_rename(self, state, name):
        renamed = update_agent_field(state, 2, "name", name)
        frame = composition_frame(aggregate_state(renamed), renamed.license)
        labels = {a.id: a.name for a in renamed.agents}
        fig = plot_composition(frame, renamed.license, agent_labels=labels)
        ax = fig.axes[0]
        assert len(ax.patches) == len(state.groups) * len(state.agents)
        assert name in [t.get_text() for t in ax.get_legend().get_texts()]
        plt.close(fig)

    def test_png_rendering(self, state):
        fig = plot_sensitivity(build_sensitivity(state.quick, state.license))
        assert figure_to_png(fig, dpi=50).startswith(PNG_SIGNATURE)

    def test_capture_figures_manifest(self, state, report):
        figs = [
            ("Cost curve", plot_sensitivity(build_sensitivity(state.quick, state.license))),
            ("Composition", plot_composition(composition_frame(report, state.license), state.license)),
        ]
        images, manifest = capture_figures(figs)
        assert [name for name, _ in images] == ["fig_01.png", "fig_02.png"]
        assert manifest == [{"file": "fig_01.png", "title": "Cost curve"},
                            {"file": "fig_02.png", "title": "Composition"}]
        assert all(data.startswith(PNG_SIGNATURE) for _, data in images)
