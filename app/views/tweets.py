from __future__ import annotations

from datetime import datetime

import streamlit as st

from components.narrative import render_tab_intro
from config import AppConfig
from data.mock_data import LABELS
from data.service import get_topic_total, get_tweets_with_aggregate, get_tweets_with_time, get_tweets_with_topic
from data.windows import parse_window


def render(cfg: AppConfig, use_mock: bool, begin: datetime, end: datetime) -> None:
    st.title("Tweets")
    render_tab_intro(
        question="What were people actually saying?",
        context="Read tweets by sentiment label, by topic, or inside a time window such as 2015-02-02 03:00 (10 minutes) or 2015-02-02 01:41 (1 minute).",
    )

    mode = st.radio("Filter by", ["Sentiment", "Topic", "Time window"], horizontal=True)

    if mode == "Sentiment":
        label = st.selectbox("Sentiment", LABELS, index=1)
        res = get_tweets_with_aggregate(cfg, use_mock, label, begin, end)
    elif mode == "Topic":
        topics = get_topic_total(cfg, use_mock, begin, end).df
        options = topics["label"].tolist() if len(topics) else []
        if not options:
            st.info("No topic annotations in this range.")
            return
        topic = st.selectbox("Topic", options)
        res = get_tweets_with_topic(cfg, use_mock, topic, begin, end)
    else:
        window = st.text_input("Window start", value=f"{begin:%Y-%m-%d %H:%M}")
        bounds = parse_window(window)
        if bounds is None:
            st.warning("Could not parse the window; use YYYY-MM-DD HH:MM.")
        else:
            st.caption(f"Showing [{bounds[0]:%H:%M}, {bounds[1]:%H:%M})")
        res = get_tweets_with_time(cfg, use_mock, window)

    if res.warning:
        st.warning(res.warning)

    st.caption(f"{len(res.df):,} tweets (capped at {cfg.tweet_limit:,}) from **{res.source}**")
    if len(res.df):
        st.dataframe(res.df, use_container_width=True, hide_index=True)
