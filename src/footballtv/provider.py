"""Scrape providers: turn a page identifier into a Node tree.

Provides:
- ScrapeProvider: the protocol the session consumes
- BrowserScrapeProvider: render the page in Chrome, convert its HTML
- PayloadScrapeProvider: read a saved scrape-service response from disk

Every failure surfaces as a ``ScheduleScraperError`` subclass.
"""

import json
import logging
from pathlib import Path
from typing import Protocol

from footballtv.config import ScheduleConfig
from footballtv.exceptions import PayloadError, ScheduleFetchError
from footballtv.http_client import ScheduleClient
from footballtv.tree import Node, node_from_html, tree_from_payload

logger = logging.getLogger(__name__)


class ScrapeProvider(Protocol):
    """Anything that can produce the node tree for a page identifier."""

    async def scrape(self, target: str) -> Node:
        """Return the root node for *target* or raise ScheduleScraperError."""
        ...


class BrowserScrapeProvider:
    """Fetch the rendered page with a started ScheduleClient.

    The client's lifecycle (start/close) stays with the caller.
    """

    def __init__(self, client: ScheduleClient, config: ScheduleConfig | None = None):
        self._client = client
        self._config = config or ScheduleConfig()

    async def scrape(self, target: str) -> Node:
        url = self._config.target_url(target)
        html = await self._client.fetch(
            url, ready_selector=self._config.ready_selector
        )
        try:
            return node_from_html(html)
        except PayloadError as exc:
            exc.url = url
            exc.target = target
            raise


class PayloadScrapeProvider:
    """Read a scrape-service response saved as JSON.

    The file holds an object with the root node under ``"html"``, exactly
    what the scrape service returns for a target. The *target* passed to
    ``scrape()`` is only used in log and error messages.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    async def scrape(self, target: str) -> Node:
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise ScheduleFetchError(
                f"Cannot read scrape payload {self.path}: {exc}", target=target
            ) from exc
        except json.JSONDecodeError as exc:
            raise PayloadError(
                f"Scrape payload {self.path} is not valid JSON: {exc}",
                target=target,
            ) from exc

        logger.info("Loaded scrape payload for %s from %s", target, self.path)
        try:
            return tree_from_payload(payload)
        except PayloadError as exc:
            exc.target = target
            raise
