"""Common table shaping and status color helpers for the UI layer."""

from __future__ import annotations

import html
import re
from typing import Dict, Iterable, List, Optional

import pandas as pd

from golive_dashboard.fields import split_scope_of_work
from golive_dashboard.schema import SimplifiedProject

_NEUTRAL = "#7F92B2"
_GREEN_2 = "#22A447"
_YELLOW_1 = "#FBBF24"

TABLE_COLUMNS: Dict[str, str] = {
    "project_name": "Project Name",
    "implementation_manager": "Implementation Manager",
    "project_manager": "Project Manager",
    "current_status": "Current Status",
    "scope_of_work": "Scope of Work",
}

_STATUS_CLASS_BY_KEY: Dict[str, str] = {
    "go-live ready": "status-go-live-ready",
    "testing": "status-testing",
}

_STATUS_COLOR_BY_KEY: Dict[str, str] = {
    "go-live ready": _GREEN_2,
    "testing": _YELLOW_1,
}


def _normalize_token(value: Optional[str]) -> str:
    return re.sub(r"\s+", " ", str(value or "").strip().lower())


def status_css_class(status: Optional[str]) -> str:
    return _STATUS_CLASS_BY_KEY.get(_normalize_token(status), "")


def status_color(status: Optional[str]) -> str:
    return _STATUS_COLOR_BY_KEY.get(_normalize_token(status), _NEUTRAL)


def _hex_to_rgba(hex_color: str, alpha: float) -> str:
    h = hex_color.lstrip("#")
    if len(h) != 6:
        return f"rgba(127,146,178,{alpha:.3f})"
    r = int(h[0:2], 16)
    g = int(h[2:4], 16)
    b = int(h[4:6], 16)
    return f"rgba({r},{g},{b},{alpha:.3f})"


def chip_style_from_color(hex_color: str) -> str:
    border = _hex_to_rgba(hex_color, 0.62)
    bg = _hex_to_rgba(hex_color, 0.16)
    return (
        f"color:{hex_color}; border:1px solid {border}; background:{bg}; "
        "border-radius:999px; padding:2px 10px; font-weight:700; font-size:0.80rem;"
    )


def scope_chips_html(scope_of_work: str) -> str:
    """One `<span class="scope-item">` per comma-separated scope item."""
    return "".join(
        f'<span class="scope-item">{html.escape(item)}</span>'
        for item in split_scope_of_work(scope_of_work)
    )


def projects_dataframe(items: Iterable[SimplifiedProject]) -> pd.DataFrame:
    rows: List[Dict[str, object]] = []
    for p in items:
        row: Dict[str, object] = {col: getattr(p, col) for col in TABLE_COLUMNS}
        row["scope_of_work"] = split_scope_of_work(p.scope_of_work)
        rows.append(row)
    if not rows:
        return pd.DataFrame(columns=list(TABLE_COLUMNS.values()))
    return pd.DataFrame(rows, columns=list(TABLE_COLUMNS)).rename(columns=TABLE_COLUMNS)


def projects_table_html(items: Iterable[SimplifiedProject]) -> str:
    head = "".join(f"<th>{html.escape(label)}</th>" for label in TABLE_COLUMNS.values())
    body: List[str] = []
    for p in items:
        status_cls = status_css_class(p.current_status)
        body.append(
            "<tr>"
            f'<td class="project-name">{html.escape(p.project_name)}</td>'
            f"<td>{html.escape(p.implementation_manager)}</td>"
            f"<td>{html.escape(p.project_manager)}</td>"
            f'<td class="{status_cls}">{html.escape(p.current_status)}</td>'
            f"<td>{scope_chips_html(p.scope_of_work)}</td>"
            "</tr>"
        )
    return (
        '<div class="table-responsive"><table class="project-list-table">'
        f"<thead><tr>{head}</tr></thead><tbody>{''.join(body)}</tbody>"
        "</table></div>"
    )


def projects_csv(items: Iterable[SimplifiedProject]) -> bytes:
    df = projects_dataframe(items)
    scope_col = TABLE_COLUMNS["scope_of_work"]
    if not df.empty:
        df[scope_col] = df[scope_col].map(lambda parts: "; ".join(p for p in parts if p))
    return df.to_csv(index=False).encode("utf-8")
