from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest

from golive_dashboard.catalog import FieldIds
from golive_dashboard.config import Settings


def make_project(
    project_id: str,
    *,
    region: Optional[str] = None,
    status: str = "",
    implementation_manager: str = "",
    project_manager: str = "",
    scope_of_work: Optional[str] = None,
    name: Optional[str] = None,
) -> Dict[str, Any]:
    fields: List[Dict[str, Any]] = []
    if region is not None:
        fields.append({"fieldId": FieldIds.REGION, "fieldValueLabel": region})
    if implementation_manager:
        fields.append(
            {"fieldId": FieldIds.IMPLEMENTATION_MANAGER, "fieldValueLabel": implementation_manager}
        )
    if project_manager:
        fields.append({"fieldId": FieldIds.PROJECT_MANAGER, "fieldValueLabel": project_manager})
    if status:
        fields.append({"fieldId": FieldIds.CURRENT_STATUS, "fieldValueLabel": status})
    if scope_of_work is not None:
        fields.append({"fieldId": FieldIds.SCOPE_OF_WORK, "fieldValueLabel": scope_of_work})
    return {
        "projectId": project_id,
        "projectName": name or f"Project {project_id}",
        "owner": {"firstName": "Ada", "lastName": "Lovelace"},
        "fields": fields,
    }


@pytest.fixture
def settings() -> Settings:
    return Settings(ROCKETLANE_API_KEY="rl-test-key-123456")
