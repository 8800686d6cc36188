"""Schedule page client using nodriver (real Chrome).

The schedule page renders its match list with JavaScript, so a plain HTTP
GET returns an empty shell. ``ScheduleClient`` drives a real Chrome via
nodriver, waits for the ``ready_selector`` to show up, and returns the
rendered ``outerHTML``. Failed loads are retried by tenacity with a jittered
exponential wait between attempts.
"""

import asyncio
import logging
from typing import Any

import nodriver
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from footballtv.config import ScheduleConfig
from footballtv.exceptions import ChallengePage, ScheduleFetchError

logger = logging.getLogger(__name__)

# Challenge page indicators in the page title
_CHALLENGE_TITLES = (
    "Just a moment",
    "Checking your browser",
    "Un momento",
    "Un instant",
    "Einen Moment",
)

_POLL_INTERVAL = 0.5


class ScheduleClient:
    """Fetches rendered schedule pages with a single Chrome tab.

    Usage:
        async with ScheduleClient(config) as client:
            html = await client.fetch("https://baloncestohoy.es")
    """

    def __init__(self, config: ScheduleConfig | None = None):
        if config is None:
            config = ScheduleConfig()

        self._config = config
        self._browser: nodriver.Browser | None = None
        self._tab = None

        self._request_count = 0
        self._success_count = 0
        self._challenge_count = 0

        self._patch_retry()

    async def start(self) -> None:
        """Launch Chrome. The first fetch opens the tab."""
        browser_args = [
            "--window-size=1280,900",
            "--disable-blink-features=AutomationControlled",
            "--no-first-run",
            "--no-default-browser-check",
        ]
        self._browser = await nodriver.start(
            headless=self._config.headless,
            browser_args=browser_args,
            no_sandbox=True,
        )
        logger.info("Browser started (headless=%s)", self._config.headless)

    async def _title(self) -> str:
        # nodriver may return ExceptionDetails instead of str on error
        title = await self._tab.evaluate("document.title")
        return title if isinstance(title, str) else ""

    async def _wait_for_challenge(self, url: str) -> None:
        title = await self._title()
        if not any(sig in title for sig in _CHALLENGE_TITLES):
            return

        logger.info("Challenge detected on %s, waiting...", url)
        elapsed = 0.0
        while elapsed < self._config.challenge_wait:
            await asyncio.sleep(_POLL_INTERVAL)
            elapsed += _POLL_INTERVAL
            title = await self._title()
            if not any(sig in title for sig in _CHALLENGE_TITLES):
                logger.info("Challenge cleared after %.1fs", elapsed)
                return

        self._challenge_count += 1
        raise ChallengePage(
            f"Challenge page on {url} (title: {title!r})", url=url
        )

    async def _wait_for_selector(self, url: str, selector: str) -> None:
        """Poll the live DOM until *selector* matches.

        A selector that never shows is logged, not raised: a schedule with
        no matchdays today is still a valid page.
        """
        js = f"!!document.querySelector({selector!r})"
        elapsed = 0.0
        while elapsed < self._config.ready_timeout:
            if await self._tab.evaluate(js) is True:
                return
            await asyncio.sleep(_POLL_INTERVAL)
            elapsed += _POLL_INTERVAL
        logger.warning(
            "Selector %r not found on %s after %.0fs, extracting anyway",
            selector, url, self._config.ready_timeout,
        )

    async def _fetch_page(self, url: str, ready_selector: str | None) -> str:
        """Navigate to *url* and return the rendered HTML (no retries)."""
        self._request_count += 1

        try:
            if self._tab is None:
                self._tab = await self._browser.get(url)
            else:
                await self._tab.get(url)
            await asyncio.sleep(self._config.page_load_wait)

            await self._wait_for_challenge(url)

            if ready_selector:
                await self._wait_for_selector(url, ready_selector)

            html = await self._tab.evaluate("document.documentElement.outerHTML")
            if not isinstance(html, str):
                html = ""
        except ChallengePage:
            raise
        except Exception as exc:
            raise ScheduleFetchError(
                f"Failed to fetch {url}: {exc}", url=url
            ) from exc

        if len(html) < self._config.min_page_size:
            raise ScheduleFetchError(
                f"Response too short from {url} ({len(html)} chars)", url=url
            )

        self._success_count += 1
        logger.debug("Fetched %s (%d chars)", url, len(html))
        return html

    @retry(
        retry=retry_if_exception_type((ChallengePage, ScheduleFetchError)),
        wait=wait_exponential_jitter(initial=1, max=15, jitter=1),
        stop=stop_after_attempt(3),  # overridden in _patch_retry
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
    async def fetch(self, url: str, ready_selector: str | None = None) -> str:
        """Fetch a rendered page.

        Args:
            url: The full URL to fetch.
            ready_selector: Optional CSS selector polled for before the
                HTML is read.

        Returns:
            The page HTML as a string.

        Raises:
            ChallengePage: If the challenge persists after retries.
            ScheduleFetchError: If navigation fails or the page is empty.
        """
        if self._browser is None:
            raise ScheduleFetchError("Browser not started. Call start() first.", url=url)
        return await self._fetch_page(url, ready_selector)

    async def close(self) -> None:
        """Stop Chrome. Safe to call twice."""
        if not self._browser:
            return
        browser = self._browser
        self._browser = None
        self._tab = None
        try:
            browser.stop()
        except Exception as exc:
            logger.debug("Browser stop failed: %s", exc)

    async def __aenter__(self) -> "ScheduleClient":
        await self.start()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    @property
    def stats(self) -> dict:
        """Return current client statistics."""
        total = self._request_count
        return {
            "requests": total,
            "successes": self._success_count,
            "challenges": self._challenge_count,
            "success_rate": (self._success_count / total) if total > 0 else 0.0,
        }

    def _patch_retry(self) -> None:
        """Patch tenacity stop condition to use config.max_retries."""
        self.fetch.retry.stop = stop_after_attempt(self._config.max_retries)
