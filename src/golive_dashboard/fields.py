"""Field-bag lookups and the raw -> simplified project projection."""

from __future__ import annotations

from typing import Iterable, List

from .catalog import FieldIds
from .schema import RawProject, SimplifiedProject


def field_value(project: RawProject, field_id: int) -> str:
    """Return the label of the first entry with `field_id`, or "" when absent."""
    for entry in project.fields:
        if entry.field_id == field_id:
            return entry.field_value_label or ""
    return ""


def simplify_project(project: RawProject) -> SimplifiedProject:
    return SimplifiedProject(
        project_id=project.project_id,
        project_name=project.project_name,
        implementation_manager=field_value(project, FieldIds.IMPLEMENTATION_MANAGER),
        project_manager=field_value(project, FieldIds.PROJECT_MANAGER),
        current_status=field_value(project, FieldIds.CURRENT_STATUS),
        scope_of_work=field_value(project, FieldIds.SCOPE_OF_WORK),
    )


def filter_by_region(projects: Iterable[RawProject], region_code: str) -> List[RawProject]:
    """Keep projects with any region entry equal to `region_code`."""
    return [
        p
        for p in projects
        if any(
            e.field_id == FieldIds.REGION and e.field_value_label == region_code for e in p.fields
        )
    ]


def split_scope_of_work(scope_of_work: str) -> List[str]:
    # "" -> [""]: an empty scope still renders one (blank) item.
    return [item.strip() for item in (scope_of_work or "").split(",")]
