#!/usr/bin/env python3
"""
Chart generation for the Explorer and Composition Builder tabs.
Figures are built on the Agg backend and handed to the UI (or the download bundle) as-is.
"""

import io
from typing import Dict, List, Optional, Tuple

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns

from ..analysis.sensitivity import SENSITIVITY_MAX_CADENCE, sensitivity_frame

LICENSE_COLOR = "#ef4444"
CADENCE_COLOR = "#10b981"
CURVE_COLOR = "#38bdf8"


def _style():
    sns.set_theme(style="darkgrid", context="notebook")


def plot_sensitivity(curve, title: str = "Cost Curve") -> plt.Figure:
    """
    Area chart of monthly PAYGO cost against cadence.

    Red dashed line marks the license price, green dashed line the current cadence.

    Args:
        curve: SensitivityCurve
        title: Axes title

    Returns:
        matplotlib Figure
    """
    _style()
    df = sensitivity_frame(curve.points)

    fig, ax = plt.subplots(figsize=(9, 4))
    ax.plot(df["cadence"], df["cost"], color=CURVE_COLOR, linewidth=2.5, label="Your config")
    ax.fill_between(df["cadence"], df["cost"], color=CURVE_COLOR, alpha=0.15)

    ax.axhline(curve.license, color=LICENSE_COLOR, linestyle="--", linewidth=2,
               label=f"License ${curve.license:g}/mo")
    ax.axvline(curve.current_cadence, color=CADENCE_COLOR, linestyle="--", linewidth=1.5,
               label=f"{curve.current_cadence:g} sess")

    ax.set_xlim(0, SENSITIVITY_MAX_CADENCE)
    ax.set_xticks(range(0, SENSITIVITY_MAX_CADENCE + 1, 25))
    ax.set_xlabel("Sessions / Month (Cadence)")
    ax.set_ylabel("Monthly cost ($)")
    ax.set_title(title)
    ax.legend(loc="upper left", fontsize=8)
    fig.tight_layout()
    return fig


def plot_composition(frame: pd.DataFrame, license: float,
                     agent_labels: Optional[Dict[int, str]] = None,
                     agent_colors: Optional[Dict[int, str]] = None,
                     title: str = "PAYGO cost per user by group") -> plt.Figure:
    """
    Stacked bars of per-user agent cost for each group, with the license as a reference line.

    Args:
        frame: Output of composition_frame()
        license: Per-user license price
        agent_labels: Agent id -> legend label; the id itself is used for gaps
        agent_colors: Agent id -> color; seaborn's palette fills any gaps
        title: Axes title

    Returns:
        matplotlib Figure
    """
    _style()
    agent_cols = [c for c in frame.columns if c not in ("group", "total", "license")]
    palette = sns.color_palette("deep", n_colors=max(len(agent_cols), 1))
    agent_labels = agent_labels or {}
    agent_colors = agent_colors or {}

    fig, ax = plt.subplots(figsize=(9, 4))
    # positions, not names, so two groups with the same name keep separate bars
    x = list(range(len(frame)))
    bottom = [0.0] * len(frame)
    for i, col in enumerate(agent_cols):
        values = frame[col].fillna(0.0).tolist()
        ax.bar(x, values, bottom=bottom, width=0.5,
               color=agent_colors.get(col, palette[i]), label=agent_labels.get(col, str(col)))
        bottom = [b + v for b, v in zip(bottom, values)]

    ax.set_xticks(x)
    ax.set_xticklabels(frame["group"].tolist())
    ax.axhline(license, color=LICENSE_COLOR, linestyle="--", linewidth=2, label=f"License ${license:g}/mo")
    ax.set_ylabel("Monthly cost per user ($)")
    ax.set_title(title)
    ax.legend(loc="upper left", fontsize=8)
    fig.tight_layout()
    return fig


def figure_to_png(fig: plt.Figure, dpi: int = 200) -> bytes:
    """Render a figure to PNG bytes and close it."""
    buf = io.BytesIO()
    fig.savefig(buf, dpi=dpi, bbox_inches="tight", format="png")
    buf.seek(0)
    data = buf.read()
    plt.close(fig)
    return data


def capture_figures(figures: List[Tuple[str, plt.Figure]]):
    """
    Render named figures for download.

    Args:
        figures: (title, figure) pairs

    Returns:
        tuple: (images, manifest) where images is a list of (filename, png bytes)
    """
    images = []
    manifest = []
    for i, (title, fig) in enumerate(figures, start=1):
        fname = f"fig_{i:02d}.png"
        images.append((fname, figure_to_png(fig)))
        manifest.append({"file": fname, "title": title})
    return images, manifest
