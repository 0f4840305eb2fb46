from __future__ import annotations

import math
from datetime import datetime
from typing import Any, Mapping, Optional

import plotly.graph_objects as go
from plotly.subplots import make_subplots

from .profile import build_level_profile
from .station import StationProfile

LABELS = {
    "current_level": "Nivel actual",
    "current_level_line": "Linea de nivel actual",
    "section": "Sección",
    "safe": "Nivel seguro",
    "yellow": "Alerta Amarilla",
    "orange": "Alerta Naranja",
    "red": "Alerta Roja",
    "thresholds": "Umbrales",
    "x_axis": " Ancho de la corriente (m)",
    "y_axis": "Nivel (cm)",
}

LEVEL_COLOR = "#005EB8"
SECTION_COLOR = "#e9c39e"
AXIS_COLOR = "#6a7985"
BAND_COLORS = {
    "safe": "green",
    "yellow": "yellow",
    "orange": "orange",
    "red": "red",
}


def format_axis_value(value: Any, dimension: str) -> str:
    """Crosshair label: cm on the vertical axis, m on the horizontal one."""
    try:
        num = float(value)
    except (TypeError, ValueError):
        return f"{value}"
    if math.isnan(num):
        return f"{value}"
    unit = "cm" if dimension == "y" else "m"
    return f"{num:.0f} {unit}"


def _level_text(level: float) -> str:
    return f"{int(level)}" if float(level).is_integer() else f"{level}"


def level_profile_figure(
    station: StationProfile,
    current_level: Optional[float] = None,
    *,
    now: Optional[datetime] = None,
    labels: Optional[Mapping[str, str]] = None,
) -> go.Figure:
    """Cross-section with the current level band and a stacked threshold column.

    Left grid: level area, bed section and dashed level line (drawn in that
    order so the section masks the water below the bed). Right grid: one
    stacked bar per alert band, bottom to top safe/yellow/orange/red.
    """
    lab = {**LABELS, **(labels or {})}
    prof = build_level_profile(station, current_level)
    pts = prof.points
    now = now or datetime.now()

    fig = make_subplots(rows=1, cols=2, column_widths=[0.9, 0.1], horizontal_spacing=0.02)

    hover = [
        f"{format_axis_value(x, 'x')}<br>{format_axis_value(lv, 'y')}"
        for x, lv in zip(pts["x"], pts["level"])
    ]
    fig.add_trace(go.Scatter(x=pts["x"], y=pts["level"], name=lab["current_level"], mode="lines",
                             line=dict(color="rgba(0,0,0,0)"), fill="tozeroy", fillcolor=LEVEL_COLOR,
                             text=hover, hovertemplate="%{text}<extra></extra>"), row=1, col=1)
    fig.add_trace(go.Scatter(x=pts["x"], y=pts["y"], name=lab["section"], mode="lines",
                             line=dict(color=SECTION_COLOR), fill="tozeroy", fillcolor=SECTION_COLOR,
                             hoverinfo="skip", showlegend=False), row=1, col=1)
    fig.add_trace(go.Scatter(x=pts["x"], y=pts["level"], name=lab["current_level_line"], mode="lines",
                             line=dict(color=LEVEL_COLOR, dash="dash", width=1),
                             hoverinfo="skip", showlegend=False), row=1, col=1)
    fig.add_annotation(x=prof.x_max, y=prof.level, xref="x", yref="y", text=f"<b>{_level_text(prof.level)} cm</b>",
                       showarrow=False, xanchor="right", yanchor="bottom",
                       font=dict(color=LEVEL_COLOR, size=16), bgcolor="rgba(255,255,255,0.8)", borderpad=2)

    bands = zip(("safe", "yellow", "orange", "red"), prof.segments.as_tuple())
    for key, value in bands:
        fig.add_trace(go.Bar(x=[lab["thresholds"]], y=[value], name=lab[key], marker_color=BAND_COLORS[key],
                             hoverinfo="skip"), row=1, col=2)

    fig.update_xaxes(title_text=lab["x_axis"], range=[prof.x_min, prof.x_max], showgrid=True, zeroline=False,
                     showspikes=True, spikemode="across", row=1, col=1)
    fig.update_yaxes(title_text=lab["y_axis"], range=[0, prof.y_max], tick0=0, dtick=prof.y_interval,
                     tickformat=".0f", showline=True, linecolor=AXIS_COLOR,
                     showspikes=True, spikemode="across", row=1, col=1)
    fig.update_xaxes(showticklabels=False, showgrid=False, ticks="", row=1, col=2)
    fig.update_yaxes(range=[0, prof.y_max], tick0=0, dtick=prof.y_interval, showticklabels=False,
                     showgrid=False, showline=False, zeroline=False, ticks="", row=1, col=2)

    fig.update_layout(
        title=f"{station.code} - {station.location} - {now:%d/%m/%Y %H:%M}",
        template="plotly_white",
        height=500,
        barmode="stack",
        hovermode="x",
        legend=dict(orientation="h", yanchor="top", y=-0.15, xanchor="center", x=0.5),
        margin=dict(l=70, r=30, t=60, b=100),
    )
    return fig


def chart_config(station: StationProfile) -> dict:
    """Plotly display config: PNG download named after the station, no logo."""
    return {
        "displaylogo": False,
        "modeBarButtonsToRemove": ["select2d", "lasso2d"],
        "toImageButtonOptions": {"format": "png", "filename": f"nivel_{station.code}"},
    }


__all__ = [
    "LABELS",
    "format_axis_value",
    "level_profile_figure",
    "chart_config",
]
