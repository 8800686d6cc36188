"""Schedule session: load, index, and filter the schedule.

Provides the state a presentation layer binds to:

* **ScheduleSession** -- runs one scrape, builds the matchday list and
  filter options, and keeps a filtered view in step with the selection.
  Exposes ``loading`` / ``error`` signals for the caller.
* **FilterDebouncer** -- delays the filtered-view recompute so a burst
  of selection changes triggers one pass. A newer pass cancels the one
  still waiting, so an older selection can never overwrite a newer one.
"""

import asyncio
import logging
from typing import Callable

from footballtv.config import ScheduleConfig
from footballtv.exceptions import ScheduleScraperError
from footballtv.filter_engine import FilterEngine
from footballtv.filter_index import build_filter_options
from footballtv.matchday_parser import parse_schedule
from footballtv.models import FilterOptionsModel, FilterSelectionModel, MatchdayModel
from footballtv.provider import ScrapeProvider

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Debounced filtering
# ---------------------------------------------------------------------------

class FilterDebouncer:
    """Run a callback once after *delay* seconds of quiet.

    Each ``schedule()`` cancels the pending task (if it has not run yet)
    and starts a new one. Must be used from a running event loop.
    """

    def __init__(self, delay: float) -> None:
        self.delay = delay
        self._task: asyncio.Task | None = None

    @property
    def pending(self) -> bool:
        """Whether a scheduled callback has not finished yet."""
        return self._task is not None and not self._task.done()

    def schedule(self, callback: Callable[[], None]) -> asyncio.Task:
        """Cancel any pending run and schedule *callback*."""
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._run(callback))
        return self._task

    async def _run(self, callback: Callable[[], None]) -> None:
        await asyncio.sleep(self.delay)
        callback()

    def cancel(self) -> None:
        """Cancel the pending run, if any."""
        if self.pending:
            self._task.cancel()
        self._task = None

    async def flush(self) -> None:
        """Wait for the latest scheduled run to finish.

        Re-raises an exception raised by the callback.
        """
        while self._task is not None:
            task = self._task
            await asyncio.wait({task})
            # schedule() may have replaced the task while we waited
            if self._task is task:
                if not task.cancelled():
                    task.result()
                return


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------

class ScheduleSession:
    """In-memory schedule state for one viewer.

    Nothing is persisted; every ``load()`` rebuilds from a fresh scrape.

    Usage::

        session = ScheduleSession(provider, config)
        await session.load()
        session.update_filter(selected_team="Barcelona")
        await session.flush()
        session.matchdays_filtered
    """

    def __init__(
        self, provider: ScrapeProvider, config: ScheduleConfig | None = None
    ) -> None:
        self._config = config or ScheduleConfig()
        self._provider = provider
        self.engine = FilterEngine()
        self._debouncer = FilterDebouncer(self._config.filter_debounce)

        self.loading: bool = False
        self.error: ScheduleScraperError | None = None
        self.matchdays_all: list[MatchdayModel] = []
        self.matchdays_filtered: list[MatchdayModel] = []
        self.filter_options: FilterOptionsModel = FilterOptionsModel()

    @property
    def selection(self) -> FilterSelectionModel:
        return self.engine.selection

    async def load(self, target: str | None = None) -> bool:
        """Scrape *target* and rebuild all derived state.

        On a retrieval failure the error is kept in ``error`` and all data
        is cleared. Returns ``True`` on success.
        """
        target = target or self._config.target
        self.loading = True
        try:
            root = await self._provider.scrape(target)
        except ScheduleScraperError as exc:
            logger.error("Scrape of %s failed: %s", target, exc)
            self.error = exc
            self._clear()
            return False
        finally:
            self.loading = False

        self.error = None
        self.matchdays_all = parse_schedule(root)
        self.filter_options = build_filter_options(self.matchdays_all)
        logger.info(
            "Loaded %s: %d matchdays, %d matches",
            target,
            len(self.matchdays_all),
            sum(len(m.matches) for m in self.matchdays_all),
        )
        self._schedule_filter()
        return True

    def update_filter(self, **changes) -> None:
        """Change selected filter values and schedule a recompute.

        Keyword names are FilterSelectionModel fields
        (``selected_team="Barcelona"``); pass ``None`` to clear one.

        Raises:
            pydantic.ValidationError: If a value does not fit its field or
                a keyword is not a selection field.
        """
        data = self.engine.selection.model_dump()
        data.update(changes)
        self.engine.selection = FilterSelectionModel.model_validate(data)
        self._schedule_filter()

    def clear_filter(self) -> None:
        """Deactivate every filter dimension."""
        self.engine.selection = FilterSelectionModel()
        self._schedule_filter()

    async def flush(self) -> None:
        """Wait until the filtered view reflects the current selection."""
        await self._debouncer.flush()

    def _schedule_filter(self) -> None:
        self._debouncer.schedule(self._refresh_filtered)

    def _refresh_filtered(self) -> None:
        self.matchdays_filtered = self.engine.apply_filter(self.matchdays_all)

    def _clear(self) -> None:
        self._debouncer.cancel()
        self.matchdays_all = []
        self.matchdays_filtered = []
        self.filter_options = FilterOptionsModel()
