#!/usr/bin/env python3
"""
Download bundles for the current results: CSV, Excel workbook and a zip of charts.
Nothing here is read back in; every bundle is a snapshot of one recomputation.
"""

from __future__ import annotations
import io, json, zipfile
from typing import Any, Dict, List, Tuple

import pandas as pd
from openpyxl.utils import get_column_letter

from .analysis.costs import agent_cost_frame, group_summary_frame
from .analysis.sensitivity import sensitivity_frame


def results_csv(report) -> str:
    """Group summary as CSV text."""
    buf = io.StringIO()
    group_summary_frame(report).to_csv(buf, index=False)
    return buf.getvalue()


def _autosize(ws, df: pd.DataFrame):
    for i, col in enumerate(df.columns, start=1):
        width = max([len(str(col))] + [len(f"{v}") for v in df[col].tolist()]) + 2
        ws.column_dimensions[get_column_letter(i)].width = min(width, 40)


def results_workbook(state, report, curve) -> bytes:
    """
    Excel workbook with Groups, Agent costs, Org, Inputs and Sensitivity sheets.

    Args:
        state: CatalogState the results were computed from
        report: CostReport
        curve: SensitivityCurve

    Returns:
        xlsx file contents
    """
    org = report.org
    sheets = {
        "Groups": group_summary_frame(report),
        "Agent costs": agent_cost_frame(report),
        "Org": pd.DataFrame([{
            "paygo_total": org.total,
            "license_total": org.license_total,
            "headcount": org.headcount,
            "savings": org.savings,
            "winner": "PAYGO" if org.paygo_wins else "License",
        }]),
        "Inputs": _inputs_frame(state),
        "Sensitivity": sensitivity_frame(curve.points),
    }

    buf = io.BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as writer:
        for name, df in sheets.items():
            df.to_excel(writer, sheet_name=name, index=False)
            ws = writer.sheets[name]
            ws.freeze_panes = "A2"
            _autosize(ws, df)
    return buf.getvalue()


def _inputs_frame(state) -> pd.DataFrame:
    rows: List[Dict[str, Any]] = [{"item": "license", "value": state.license}]
    for key, value in (("quick_cadence", state.quick.cadence),
                       ("quick_conversation_turns", state.quick.conversation_turns),
                       ("quick_cost_per_turn", state.quick.cost_per_turn)):
        rows.append({"item": key, "value": value})
    for a in state.agents:
        rows.append({"item": f"agent:{a.name}:turns_per_session", "value": a.turns_per_session})
        rows.append({"item": f"agent:{a.name}:cost_per_turn", "value": a.cost_per_turn})
    for g in state.groups:
        rows.append({"item": f"group:{g.name}:headcount", "value": g.headcount})
        rows.append({"item": f"group:{g.name}:sessions_per_month", "value": g.sessions_per_month})
        for a, pct in zip(state.agents, g.mix):
            rows.append({"item": f"group:{g.name}:mix:{a.name}", "value": pct})
    return pd.DataFrame(rows, columns=["item", "value"])


def plots_zip(images: List[Tuple[str, bytes]], manifest: List[Dict[str, str]], state=None) -> bytes:
    """
    Zip of chart PNGs with a manifest, plus the inputs as JSON when ``state`` is given.

    Args:
        images: (filename, png bytes) pairs
        manifest: One {"file", "title"} entry per image
        state: Optional CatalogState to include as inputs.json

    Returns:
        zip file contents
    """
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", zipfile.ZIP_DEFLATED) as zf:
        zf.writestr("manifest.json", json.dumps(manifest, indent=2))
        if state is not None:
            zf.writestr("inputs.json", json.dumps(state.to_dict(), indent=2))
        for fname, data in images:
            zf.writestr(fname, data)
    return buf.getvalue()
