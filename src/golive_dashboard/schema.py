"""Typed schema models for Rocketlane project payload normalization."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# -----------------------------
# ROCKETLANE (raw payload)
# -----------------------------
class FieldEntry(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    field_id: int = Field(alias="fieldId")
    field_value_label: str = Field(default="", alias="fieldValueLabel")

    @field_validator("field_value_label", mode="before")
    @classmethod
    def _label_as_text(cls, value: Any) -> str:
        return "" if value is None else str(value)


class Owner(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")


class RawProject(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    project_id: str = Field(alias="projectId")
    project_name: str = Field(default="", alias="projectName")
    owner: Optional[Owner] = None
    fields: List[FieldEntry] = Field(default_factory=list)

    @field_validator("project_id", "project_name", mode="before")
    @classmethod
    def _id_as_text(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("fields", mode="before")
    @classmethod
    def _null_fields_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class ProjectsPage(BaseModel):
    """Body of `GET /projects`: `{"data": [...]}`."""

    model_config = ConfigDict(extra="ignore")

    data: List[RawProject]


# -----------------------------
# Display model
# -----------------------------
class SimplifiedProject(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    project_id: str
    project_name: str = ""
    implementation_manager: str = ""
    project_manager: str = ""
    current_status: str = ""
    scope_of_work: str = ""
