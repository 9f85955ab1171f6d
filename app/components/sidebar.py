from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time, timedelta

import pandas as pd
import streamlit as st

from config import AppConfig
from data.service import get_date_range


@dataclass(frozen=True)
class SidebarState:
    view: str
    use_mock: bool
    begin: datetime
    end: datetime


NAV_ITEMS = [
    ("📊 Overview", "overview"),
    ("💬 Tweets", "tweets"),
]


def _dataset_bounds(cfg: AppConfig, use_mock: bool) -> tuple[datetime, datetime]:
    res = get_date_range(cfg, use_mock)
    row = res.df.iloc[0] if len(res.df) else None
    if row is None or pd.isna(row["begin"]) or pd.isna(row["end"]):
        now = datetime.now().replace(second=0, microsecond=0)
        return now - timedelta(hours=1), now
    return pd.Timestamp(row["begin"]).to_pydatetime(), pd.Timestamp(row["end"]).to_pydatetime()


def render_sidebar(cfg: AppConfig) -> SidebarState:
    with st.sidebar:
        st.markdown("### 🐦 Tweet Sentiment")
        st.caption("Sentiment and topics over a Vertica tweet dataset")

        labels = [l for l, _ in NAV_ITEMS]
        default_label = st.session_state.get("nav_label", labels[0])
        idx = labels.index(default_label) if default_label in labels else 0

        label = st.radio(
            "Nav",
            labels,
            index=idx,
            label_visibility="collapsed",
        )
        st.session_state["nav_label"] = label
        view = dict(NAV_ITEMS)[label]

        with st.expander("⚙️ Settings", expanded=False):
            use_mock = st.toggle(
                "Use mock data",
                value=st.session_state.get("use_mock", cfg.default_use_mock),
                help="When off, the app queries Vertica. Any failure falls back to mock data.",
            )
            st.session_state["use_mock"] = use_mock

            st.markdown("**Target schema**")
            st.code(f"{cfg.vertica_database or '?'}.{cfg.vertica_schema}", language="text")
        use_mock = st.session_state.get("use_mock", cfg.default_use_mock)

        lo, hi = _dataset_bounds(cfg, use_mock)
        st.markdown("**Time range**")
        c1, c2 = st.columns(2)
        begin_date = c1.date_input("From", value=lo.date(), min_value=lo.date(), max_value=hi.date())
        begin_time = c2.time_input("at", value=lo.time().replace(second=0, microsecond=0), key="begin_time")
        c3, c4 = st.columns(2)
        end_date = c3.date_input("To", value=hi.date(), min_value=lo.date(), max_value=hi.date())
        end_time = c4.time_input("at", value=time(hi.hour, hi.minute), key="end_time")

    begin = datetime.combine(begin_date, begin_time)
    # Inclusive of the selected end minute
    end = datetime.combine(end_date, end_time) + timedelta(minutes=1)
    return SidebarState(view=view, use_mock=use_mock, begin=begin, end=end)
