"""Global CSS and hero header for the Streamlit shell."""

from __future__ import annotations

import html

import streamlit as st

from golive_dashboard.catalog import StatusCategory
from golive_dashboard.ui.common import chip_style_from_color, status_color

_INK = "#11192D"
_PRIMARY = "#0051F1"
_SURFACE = "#FFFFFF"
_BORDER = "rgba(17,25,45,0.12)"


def dashboard_css() -> str:
    go_live = status_color(StatusCategory.GO_LIVE_READY.value)
    testing = status_color(StatusCategory.TESTING.value)
    return f"""
    <style>
      .app-hero {{ padding: 18px 22px; border-radius: 14px; background: {_PRIMARY}; }}
      .app-hero-title {{ color: #FFFFFF; font-size: 1.9rem; font-weight: 800; }}
      .app-hero-sub {{ color: rgba(255,255,255,0.82); font-size: 0.95rem; }}
      .counter {{ display: inline-block; margin: 6px 12px 6px 0; padding: 8px 14px;
                  border-radius: 10px; border: 1px solid {_BORDER}; background: {_SURFACE};
                  color: {_INK}; font-weight: 700; }}
      .go-live-counter {{ border-left: 6px solid {go_live}; }}
      .testing-counter {{ border-left: 6px solid {testing}; }}
      .project-list-table {{ width: 100%; border-collapse: collapse; }}
      .project-list-table th, .project-list-table td {{ padding: 8px 10px;
                  border-bottom: 1px solid {_BORDER}; text-align: left; vertical-align: top; }}
      .project-name {{ font-weight: 700; }}
      .status-go-live-ready {{ color: {go_live}; font-weight: 700; }}
      .status-testing {{ color: {testing}; font-weight: 700; }}
      .scope-item {{ {chip_style_from_color("#0051F1")} display: inline-block; margin: 2px 4px 2px 0; }}
      .table-responsive {{ overflow-x: auto; }}
    </style>
    """


def inject_css() -> None:
    st.markdown(dashboard_css(), unsafe_allow_html=True)


def render_hero(app_title: str) -> None:
    """Render a top hero section."""
    st.markdown(
        f"""
        <div class="app-hero">
          <div class="app-hero-title">{html.escape(app_title)}</div>
          <div class="app-hero-sub">Rocketlane projects ready to go live and in testing</div>
        </div>
        """,
        unsafe_allow_html=True,
    )
