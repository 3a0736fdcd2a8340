"""Session-state helpers for region navigation and the cached controllers."""

from __future__ import annotations

from typing import Any, MutableMapping, Optional

import streamlit as st

from golive_dashboard.catalog import region_by_code
from golive_dashboard.config import Settings
from golive_dashboard.view_model import PHASE_IDLE, RegionProjectsController, TotalsController

REGION_QUERY_PARAM = "region"
REGION_CONTROLLER_KEY = "golive::region_controller"
TOTALS_CONTROLLER_KEY = "golive::totals_controller"
TOTALS_LOADED_KEY = "golive::totals_loaded"


def _query_value(params: MutableMapping[str, Any], key: str) -> str:
    value = params.get(key)
    if isinstance(value, list):
        value = value[0] if value else ""
    return str(value or "").strip()


def selected_region_code() -> Optional[str]:
    """Region code from `?region=...`, or None when absent or unknown."""
    code = _query_value(st.query_params, REGION_QUERY_PARAM)
    if not code:
        return None
    return code if region_by_code(code) is not None else None


def navigate_to_region(region_code: str) -> None:
    st.query_params[REGION_QUERY_PARAM] = region_code


def region_controller(settings: Settings) -> RegionProjectsController:
    """Session controller; rebuilt (and so reloaded) when settings change."""
    controller = st.session_state.get(REGION_CONTROLLER_KEY)
    if not isinstance(controller, RegionProjectsController) or controller.settings != settings:
        controller = RegionProjectsController(settings)
        st.session_state[REGION_CONTROLLER_KEY] = controller
    return controller


def totals_controller(settings: Settings) -> TotalsController:
    controller = st.session_state.get(TOTALS_CONTROLLER_KEY)
    if not isinstance(controller, TotalsController) or controller.settings != settings:
        controller = TotalsController(settings)
        st.session_state[TOTALS_CONTROLLER_KEY] = controller
        st.session_state.pop(TOTALS_LOADED_KEY, None)
    return controller


def needs_region_load(controller: RegionProjectsController, region_code: str) -> bool:
    """True on the first load and on every region change."""
    current = controller.state
    return current.phase == PHASE_IDLE or current.region_code != region_code
