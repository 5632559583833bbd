from __future__ import annotations

import streamlit as st

APP_CSS = r"""
@import url('https://fonts.googleapis.com/css2?family=JetBrains+Mono:wght@400;600&family=Space+Grotesk:wght@500;600;700&display=swap');

h1, h2, h3, h4 {
  font-family: "Space Grotesk", ui-sans-serif, system-ui, sans-serif;
  letter-spacing: -0.02em;
}

/* Metrics read like a terminal readout */
[data-testid="stMetricValue"] {
  font-family: "JetBrains Mono", ui-monospace, monospace;
  font-size: 1.35rem;
}

[data-testid="stSidebar"] {
  border-right: 1px solid rgba(17, 24, 39, 0.08);
}

[data-testid="stSidebar"] [data-testid="stVerticalBlock"] {
  gap: 0.6rem;
}

[data-testid="stAppViewContainer"] > .main {
  padding-top: 1rem;
}

/* Step controls as a compact toolbar */
div.stButton > button {
  border-radius: 8px;
  font-weight: 600;
}
"""


def inject_global_styles() -> None:
    st.markdown(f"<style>{APP_CSS}</style>", unsafe_allow_html=True)
