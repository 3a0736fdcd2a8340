"""Static Rocketlane contract data: regions, tracked statuses and field ids."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Final, List, NamedTuple, Optional


class RegionDescriptor(NamedTuple):
    code: str
    name: str


REGIONS: Final[tuple[RegionDescriptor, ...]] = (
    RegionDescriptor("IN", "India"),
    RegionDescriptor("MEA", "Middle East & Africa"),
    RegionDescriptor("SEA", "South East Asia"),
    RegionDescriptor("EU", "Europe"),
    RegionDescriptor("LATAM", "Latin America"),
    RegionDescriptor("US", "United States"),
)


class StatusCategory(str, Enum):
    GO_LIVE_READY = "Go-Live Ready"
    TESTING = "Testing"

    @property
    def filter_value(self) -> str:
        return STATUS_FILTER_VALUES[self]


# Upstream values of the "current status" project field (26538).
STATUS_FILTER_VALUES: Final[Dict[StatusCategory, str]] = {
    StatusCategory.GO_LIVE_READY: "18",
    StatusCategory.TESTING: "4",
}

# Row order of the project table.
TRACKED_STATUSES: Final[tuple[StatusCategory, ...]] = (
    StatusCategory.GO_LIVE_READY,
    StatusCategory.TESTING,
)


class FieldIds:
    REGION: Final[int] = 565384
    IMPLEMENTATION_MANAGER: Final[int] = 51409
    PROJECT_MANAGER: Final[int] = 625583
    CURRENT_STATUS: Final[int] = 26538
    SCOPE_OF_WORK: Final[int] = 643919


STATUS_FILTER_PARAM: Final[str] = f"project.field.{FieldIds.CURRENT_STATUS}.value"

# Requested on the per-region listing. 26526, 26472, 284254, 190414, 25821 and
# 687147 are not displayed yet.
INCLUDE_FIELD_IDS: Final[tuple[int, ...]] = (
    26526,
    FieldIds.REGION,
    FieldIds.IMPLEMENTATION_MANAGER,
    26472,
    284254,
    FieldIds.PROJECT_MANAGER,
    FieldIds.CURRENT_STATUS,
    190414,
    25821,
    687147,
    FieldIds.SCOPE_OF_WORK,
)


def include_fields_param(field_ids: tuple[int, ...] = INCLUDE_FIELD_IDS) -> str:
    return ",".join(f"fields.{fid}" for fid in field_ids)


def region_codes() -> List[str]:
    return [r.code for r in REGIONS]


def region_by_code(code: str) -> Optional[RegionDescriptor]:
    wanted = str(code or "").strip()
    return next((r for r in REGIONS if r.code == wanted), None)
