from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from config import THEME


SENTIMENT_COLORS = {label: THEME[label] for label in ("negative", "neutral", "positive")}


@dataclass(frozen=True)
class Kpi:
    label: str
    value: str
    delta: Optional[str] = None


def render_kpi_row(kpis: list[Kpi]) -> None:
    if not kpis:
        return
    cols = st.columns(len(kpis))
    for c, k in zip(cols, kpis):
        with c:
            delta_html = f'<div class="metric-delta">{k.delta}</div>' if k.delta else ""
            st.markdown(
                f"""
<div class="metric-card">
  <div class="metric-label">{k.label}</div>
  <div class="metric-value">{k.value}</div>
  {delta_html}
</div>
                """,
                unsafe_allow_html=True,
            )


def apply_plotly_theme(fig: go.Figure, x_title: str, y_title: str) -> go.Figure:
    fig.update_layout(
        margin=dict(l=10, r=10, t=44, b=10),
        font=dict(family="system-ui, -apple-system, Segoe UI, Roboto, Arial, sans-serif", color=THEME["text_primary"]),
        paper_bgcolor=THEME["bg_card"],
        plot_bgcolor=THEME["bg_card"],
        colorway=[THEME["accent_primary"], THEME["navy_900"], THEME["accent_secondary"], THEME["navy_800"], "#9CA3AF"],
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="left", x=0),
        title_font=dict(color=THEME["navy_900"], size=16),
    )
    for axis in (fig.update_xaxes, fig.update_yaxes):
        axis(gridcolor=THEME["grid"], zeroline=False, linecolor=THEME["border_color"])
    fig.update_xaxes(title_text=x_title)
    fig.update_yaxes(title_text=y_title)
    return fig


def histogram_chart(df: pd.DataFrame, title: str = "", sentiment: bool = False) -> None:
    """Stacked bars of `total` per `time` bucket, one color per `label`."""
    fig = px.bar(
        df,
        x="time",
        y="total",
        color="label",
        title=title,
        color_discrete_map=SENTIMENT_COLORS if sentiment else None,
    )
    fig = apply_plotly_theme(fig, x_title="time", y_title="tweets")
    fig.update_layout(barmode="stack")
    st.plotly_chart(fig, use_container_width=True)


def totals_chart(df: pd.DataFrame, title: str = "") -> None:
    """Horizontal bars of `total` per `label`, largest on top."""
    fig = px.bar(df.sort_values("total"), x="total", y="label", orientation="h", title=title)
    fig = apply_plotly_theme(fig, x_title="tweets", y_title="")
    st.plotly_chart(fig, use_container_width=True)
