from __future__ import annotations

import streamlit as st


def render_tab_intro(question: str, context: str | None = None) -> None:
    st.markdown(
        f"""
<div class="tab-intro">
  <div class="tab-intro-question">{question}</div>
  {f'<div class="tab-intro-context">{context}</div>' if context else ''}
</div>
        """,
        unsafe_allow_html=True,
    )


def render_chart_annotation(title: str, body: str) -> None:
    st.markdown(
        f"""
<div class="callout">
  <div class="callout-title">{title}</div>
  <div class="callout-body">{body}</div>
</div>
        """,
        unsafe_allow_html=True,
    )
