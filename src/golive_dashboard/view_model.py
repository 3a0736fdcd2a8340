"""Region and totals view models built from the per-status fetches."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .catalog import TRACKED_STATUSES, StatusCategory
from .config import Settings
from .ingest.rocketlane import FETCH_ERROR_MESSAGE, count_by_status, fetch_by_status
from .schema import SimplifiedProject
from .utils import now_iso

logger = logging.getLogger(__name__)

PHASE_IDLE = "idle"
PHASE_LOADING = "loading"
PHASE_READY = "ready"
PHASE_FAILED = "failed"

RegionFetcher = Callable[
    [Settings, StatusCategory, str], Awaitable[Tuple[bool, str, List[SimplifiedProject]]]
]
CountFetcher = Callable[[Settings, StatusCategory], Awaitable[Tuple[bool, str, int]]]


def zero_counts() -> Dict[StatusCategory, int]:
    return {status: 0 for status in TRACKED_STATUSES}


class RegionView(BaseModel):
    """Snapshot of one region load. Replaced wholesale, never mutated."""

    model_config = ConfigDict(frozen=True)

    region_code: str = ""
    phase: str = PHASE_IDLE
    items: List[SimplifiedProject] = Field(default_factory=list)
    counts: Dict[StatusCategory, int] = Field(default_factory=zero_counts)
    error: Optional[str] = None
    loaded_at: str = ""

    @property
    def loading(self) -> bool:
        return self.phase == PHASE_LOADING

    @staticmethod
    def idle() -> "RegionView":
        return RegionView()

    @staticmethod
    def loading_for(region_code: str) -> "RegionView":
        return RegionView(region_code=region_code, phase=PHASE_LOADING)

    @staticmethod
    def failed_for(region_code: str, error: str) -> "RegionView":
        return RegionView(
            region_code=region_code, phase=PHASE_FAILED, error=error, loaded_at=now_iso()
        )


class RegionProjectsController:
    """
    Owns the current RegionView and reloads it on every region change.

    Each load captures a generation number when it starts; its result is only
    published if no newer load was issued in the meantime (last region wins).
    In-flight requests are never cancelled, their late results are dropped.
    """

    def __init__(self, settings: Settings, *, fetcher: RegionFetcher = fetch_by_status) -> None:
        self._settings = settings
        self._fetcher = fetcher
        self._generation = 0
        self.state = RegionView.idle()

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def generation(self) -> int:
        return self._generation

    def is_current(self, generation: int) -> bool:
        return generation == self._generation

    async def load_region(self, region_code: str) -> RegionView:
        """
        Fetch every tracked status for `region_code` and build the view.

        Returns the view computed by this call. It only becomes `state` when
        this call is still the latest one.
        """
        self._generation += 1
        generation = self._generation
        self.state = RegionView.loading_for(region_code)

        results = await asyncio.gather(
            *(self._fetcher(self._settings, status, region_code) for status in TRACKED_STATUSES)
        )
        view = self._build_view(region_code, results)

        if not self.is_current(generation):
            logger.debug(
                "Discarding stale %s results (generation %d, current %d)",
                region_code,
                generation,
                self._generation,
            )
            return view
        self.state = view
        return view

    @staticmethod
    def _build_view(
        region_code: str,
        results: List[Tuple[bool, str, List[SimplifiedProject]]],
    ) -> RegionView:
        if not all(ok for ok, _, _ in results):
            failed = [s.value for s, (ok, _, _) in zip(TRACKED_STATUSES, results) if not ok]
            logger.warning("Region %s load failed for: %s", region_code, ", ".join(failed))
            return RegionView.failed_for(region_code, FETCH_ERROR_MESSAGE)

        items: List[SimplifiedProject] = []
        counts = zero_counts()
        for status, (_, _, status_items) in zip(TRACKED_STATUSES, results):
            items.extend(status_items)
            counts[status] = len(status_items)
        return RegionView(
            region_code=region_code,
            phase=PHASE_READY,
            items=items,
            counts=counts,
            loaded_at=now_iso(),
        )


class TotalsView(BaseModel):
    model_config = ConfigDict(frozen=True)

    counts: Dict[StatusCategory, int] = Field(default_factory=zero_counts)
    ok: bool = True
    error: Optional[str] = None


class TotalsController:
    """All-region project counts per status for the summary header."""

    def __init__(self, settings: Settings, *, fetcher: CountFetcher = count_by_status) -> None:
        self._settings = settings
        self._fetcher = fetcher
        self.state = TotalsView()

    @property
    def settings(self) -> Settings:
        return self._settings

    async def load_totals(self) -> TotalsView:
        results = await asyncio.gather(
            *(self._fetcher(self._settings, status) for status in TRACKED_STATUSES)
        )
        if not all(ok for ok, _, _ in results):
            # Header keeps showing zeros; the error is already logged by the fetcher.
            self.state = TotalsView(ok=False, error=FETCH_ERROR_MESSAGE)
            return self.state

        counts = {status: count for status, (_, _, count) in zip(TRACKED_STATUSES, results)}
        self.state = TotalsView(counts=counts)
        return self.state


def run_load_region(controller: RegionProjectsController, region_code: str) -> RegionView:
    return asyncio.run(controller.load_region(region_code))


def run_load_totals(controller: TotalsController) -> TotalsView:
    return asyncio.run(controller.load_totals())
