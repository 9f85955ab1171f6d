from __future__ import annotations

import streamlit as st

from config import THEME


APP_TITLE = "Tweet Sentiment Explorer"

# Only the classes rendered by components/ and views/.
_CSS = """
<style>
[data-testid="stAppViewContainer"]{ background: __PAGE_BG__; color: __TEXT__; }

.app-header, .metric-card, .tab-intro, .callout{
  background: __CARD_BG__; border: 1px solid __BORDER__;
  border-radius: __RADIUS__px; box-shadow: __SHADOW__;
}
.app-header{ display:flex; justify-content:space-between; align-items:center; padding: 10px 14px; margin-bottom: 14px; }
.app-title, .tab-intro-question, .callout-title{ font-weight: 700; color: __HEADING__; }
.app-title{ font-size: 20px; }
.app-subtitle, .metric-label, .metric-delta, .tab-intro-context, .callout-body{ font-size: 14px; color: __MUTED__; }
.pill{ display:inline-flex; align-items:center; gap:6px; padding: 5px 10px; border-radius: 999px; border: 1px solid __BORDER__; font-size: 13px; }
.pill .dot{ width:8px; height:8px; border-radius:50%; background: __ACCENT__; }

.metric-card{ padding: 12px 14px; }
.metric-value{ font-size: 26px; font-weight: 700; margin: 4px 0; }

.tab-intro{ padding: 14px; margin-bottom: 14px; }
.tab-intro-question{ font-size: 18px; margin-bottom: 4px; }

.callout{ padding: 12px 14px; margin: 10px 0; border-left: 4px solid __ACCENT__; }
.callout-title{ font-size: 14px; margin-bottom: 4px; }
</style>
"""


def apply_theme() -> None:
    st.set_page_config(
        page_title=APP_TITLE,
        page_icon="🐦",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    tokens = {
        "__PAGE_BG__": THEME["bg_primary"],
        "__CARD_BG__": THEME["bg_card"],
        "__BORDER__": THEME["border_color"],
        "__TEXT__": THEME["text_primary"],
        "__MUTED__": THEME["text_secondary"],
        "__HEADING__": THEME["navy_900"],
        "__ACCENT__": THEME["accent_primary"],
        "__SHADOW__": THEME["shadow"],
        "__RADIUS__": int(THEME["radius_px"]),
    }
    css = _CSS
    for k, v in tokens.items():
        css = css.replace(k, str(v))

    st.markdown(css, unsafe_allow_html=True)
