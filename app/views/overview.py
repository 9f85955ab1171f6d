from __future__ import annotations

from datetime import datetime

import streamlit as st

from components.metrics import Kpi, histogram_chart, render_kpi_row, totals_chart
from components.narrative import render_chart_annotation, render_tab_intro
from config import AppConfig
from data.mock_data import LABELS
from data.service import get_aggregate_histogram, get_aggregate_total, get_topic_histogram, get_topic_total
from data.windows import histogram_slice_minutes


def render(cfg: AppConfig, use_mock: bool, begin: datetime, end: datetime) -> None:
    st.title("Overview")

    render_tab_intro(
        question="How did the conversation feel, and what was it about?",
        context=f"Tweets from {begin:%Y-%m-%d %H:%M} up to {end:%Y-%m-%d %H:%M}. Click through to the Tweets tab to read a bucket.",
    )

    totals = get_aggregate_total(cfg, use_mock, begin, end)
    agg_hist = get_aggregate_histogram(cfg, use_mock, begin, end)
    topics = get_topic_total(cfg, use_mock, begin, end)
    topic_hist = get_topic_histogram(cfg, use_mock, begin, end)

    for res in (totals, agg_hist, topics, topic_hist):
        if res.warning:
            st.warning(res.warning)
            break

    st.caption(f"Data source: **{totals.source}**")

    # --- KPI snapshot ---
    by_label = dict(zip(totals.df["label"], totals.df["total"])) if len(totals.df) else {}
    grand = sum(int(v) for v in by_label.values())
    kpis = [Kpi("Labelled tweets", f"{grand:,}")]
    for label in LABELS:
        n = int(by_label.get(label, 0))
        share = f"{n / grand * 100:.1f}% of labelled" if grand else None
        kpis.append(Kpi(label.capitalize(), f"{n:,}", delta=share))
    render_kpi_row(kpis)

    st.divider()

    minutes = histogram_slice_minutes(begin, end)
    st.subheader("Sentiment over time")
    render_chart_annotation(
        title="Buckets",
        body=f"Each bar covers {minutes} minute{'s' if minutes > 1 else ''}. Ranges of an hour or more use 10-minute bars.",
    )
    if len(agg_hist.df):
        histogram_chart(agg_hist.df, title="Tweets per bucket by sentiment", sentiment=True)
    else:
        st.info("No labelled tweets in this range.")

    st.subheader("Topics")
    c1, c2 = st.columns([1, 2])
    with c1:
        if len(topics.df):
            totals_chart(topics.df.head(15), title="Top topics")
            with st.expander("All topics"):
                st.dataframe(topics.df, use_container_width=True)
        else:
            st.info("No topic annotations in this range.")
    with c2:
        if len(topic_hist.df):
            top = set(topics.df["label"].head(8)) if len(topics.df) else set()
            plot = topic_hist.df[topic_hist.df["label"].isin(top)] if top else topic_hist.df
            histogram_chart(plot, title="Top topics per bucket")
