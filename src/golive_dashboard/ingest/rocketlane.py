"""Rocketlane project fetcher: one GET per tracked status category."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx
from pydantic import ValidationError

from ..catalog import STATUS_FILTER_PARAM, StatusCategory, include_fields_param
from ..config import Settings
from ..fields import filter_by_region, simplify_project
from ..schema import ProjectsPage, RawProject, SimplifiedProject
from ..security import normalize_api_base_url, safe_log_text

logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = "Failed to fetch projects. Please try again later."


class ProjectFetchError(RuntimeError):
    """Transport, HTTP status or payload-shape failure talking to Rocketlane."""


async def _request(client: httpx.AsyncClient, method: str, url: str, **kwargs: Any) -> httpx.Response:
    return await client.request(method, url, **kwargs)


def _projects_url(settings: Settings) -> str:
    try:
        base = normalize_api_base_url(settings.ROCKETLANE_BASE_URL, service_name="Rocketlane")
    except ValueError as e:
        raise ProjectFetchError(str(e)) from e
    return f"{base}/projects"


def _query_params(status: StatusCategory, include_fields: Optional[str]) -> Dict[str, str]:
    params = {STATUS_FILTER_PARAM: status.filter_value}
    if include_fields:
        params["includeFields"] = include_fields
    return params


async def fetch_projects(
    settings: Settings,
    status: StatusCategory,
    *,
    include_fields: Optional[str] = None,
) -> List[RawProject]:
    """
    Fetch every project currently in `status`.

    Raises ProjectFetchError on transport failures, non-200 responses and
    bodies that are not `{"data": [project, ...]}`.
    """
    api_key = str(settings.ROCKETLANE_API_KEY or "").strip()
    if not api_key:
        raise ProjectFetchError("Rocketlane: configure ROCKETLANE_API_KEY.")
    url = _projects_url(settings)

    headers = {"Accept": "application/json", "api-key": api_key}
    async with httpx.AsyncClient(headers=headers) as client:
        try:
            r = await _request(client, "GET", url, params=_query_params(status, include_fields))
        except httpx.HTTPError as e:
            raise ProjectFetchError(f"Rocketlane request failed: {e}") from e

    if r.status_code != 200:
        raise ProjectFetchError(f"Rocketlane error ({r.status_code}): {r.text[:200]}")
    try:
        payload = r.json()
    except ValueError as e:
        raise ProjectFetchError(f"Rocketlane returned invalid JSON: {e}") from e
    try:
        page = ProjectsPage.model_validate(payload)
    except ValidationError as e:
        raise ProjectFetchError(
            f"Rocketlane returned an unexpected payload ({e.error_count()} errors)."
        ) from e
    return page.data


async def fetch_by_status(
    settings: Settings,
    status: StatusCategory,
    region_code: str,
) -> Tuple[bool, str, List[SimplifiedProject]]:
    """
    Fetch `status` projects and keep the ones tagged with region `region_code`.

    Never raises: failures come back as `(False, message, [])`.
    """
    try:
        projects = await fetch_projects(settings, status, include_fields=include_fields_param())
    except ProjectFetchError as e:
        logger.error(
            "Error fetching %s projects for region %s: %s",
            status.value,
            region_code,
            safe_log_text(str(e), secrets=(settings.ROCKETLANE_API_KEY,)),
        )
        return False, FETCH_ERROR_MESSAGE, []

    items = [simplify_project(p) for p in filter_by_region(projects, region_code)]
    logger.info(
        "Fetched %d %s projects (%d in %s)", len(projects), status.value, len(items), region_code
    )
    return True, f"{status.value}: {len(items)} projects in {region_code}.", items


async def count_by_status(settings: Settings, status: StatusCategory) -> Tuple[bool, str, int]:
    """Count every `status` project across all regions."""
    try:
        projects = await fetch_projects(settings, status)
    except ProjectFetchError as e:
        logger.error(
            "Error fetching total %s project count: %s",
            status.value,
            safe_log_text(str(e), secrets=(settings.ROCKETLANE_API_KEY,)),
        )
        return False, FETCH_ERROR_MESSAGE, 0
    return True, f"{status.value}: {len(projects)} projects.", len(projects)
