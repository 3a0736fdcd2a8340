"""Per-region project list: counters plus the project table."""

from __future__ import annotations

import streamlit as st

from golive_dashboard.catalog import StatusCategory
from golive_dashboard.config import Settings
from golive_dashboard.ui.common import projects_csv, projects_table_html
from golive_dashboard.ui.state import needs_region_load, region_controller
from golive_dashboard.view_model import PHASE_FAILED, RegionView, run_load_region


def _render_counters(view: RegionView) -> None:
    go_live = view.counts.get(StatusCategory.GO_LIVE_READY, 0)
    testing = view.counts.get(StatusCategory.TESTING, 0)
    st.markdown(
        f"""
        <div class="count">
          <p class="counter go-live-counter">Go-Live Ready Projects: {go_live}</p>
          <p class="counter testing-counter">Testing Projects: {testing}</p>
        </div>
        """,
        unsafe_allow_html=True,
    )


def render(settings: Settings, region_code: str) -> None:
    controller = region_controller(settings)
    if needs_region_load(controller, region_code):
        with st.spinner(f"Loading projects in {region_code}..."):
            run_load_region(controller, region_code)

    view = controller.state
    if view.phase == PHASE_FAILED:
        st.error(view.error or "")
        return

    st.subheader(f"Projects in {region_code}")
    _render_counters(view)
    st.markdown(projects_table_html(view.items), unsafe_allow_html=True)
    st.download_button(
        "Download CSV",
        data=projects_csv(view.items),
        file_name=f"projects_{region_code.lower()}.csv",
        mime="text/csv",
        key=f"projects_csv::{region_code}",
    )
