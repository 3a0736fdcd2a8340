"""Main Streamlit application shell: summary header, region links and project list."""

from __future__ import annotations

import streamlit as st

from golive_dashboard.catalog import REGIONS, StatusCategory
from golive_dashboard.config import configure_logging, ensure_env, load_settings
from golive_dashboard.ui.pages import projects_page
from golive_dashboard.ui.state import (
    TOTALS_LOADED_KEY,
    navigate_to_region,
    selected_region_code,
    totals_controller,
)
from golive_dashboard.ui.style import inject_css, render_hero
from golive_dashboard.view_model import TotalsView, run_load_totals


def _render_totals(totals: TotalsView) -> None:
    go_live = totals.counts.get(StatusCategory.GO_LIVE_READY, 0)
    testing = totals.counts.get(StatusCategory.TESTING, 0)
    st.markdown(
        f"""
        <div class="total-project-counts">
          <p class="counter go-live-counter">Total Go-Live Ready Projects: {go_live}</p>
          <p class="counter testing-counter">Total Projects in Testing: {testing}</p>
        </div>
        """,
        unsafe_allow_html=True,
    )


def _render_region_links(active_code: str | None) -> None:
    st.subheader("Select Your Region")
    cols = st.columns(len(REGIONS), gap="small")
    for col, region in zip(cols, REGIONS):
        col.button(
            region.name,
            key=f"region_link_{region.code}",
            type="primary" if region.code == active_code else "secondary",
            width="stretch",
            on_click=navigate_to_region,
            args=(region.code,),
        )


def main() -> None:
    """Boot application, render the header and dispatch the region page."""
    ensure_env()
    settings = load_settings()
    configure_logging(settings)

    st.set_page_config(page_title=settings.APP_TITLE, page_icon="🚀", layout="wide")
    inject_css()
    render_hero(settings.APP_TITLE)

    totals = totals_controller(settings)
    if not st.session_state.get(TOTALS_LOADED_KEY, False):
        run_load_totals(totals)
        st.session_state[TOTALS_LOADED_KEY] = True
    _render_totals(totals.state)

    region_code = selected_region_code()
    _render_region_links(region_code)
    if region_code:
        projects_page.render(settings, region_code)
