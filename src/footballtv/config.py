"""Scraper configuration with sensible defaults for the TV schedule page."""

from dataclasses import dataclass

DEFAULT_TARGET = "baloncestohoy.es"


@dataclass
class ScheduleConfig:
    """Configuration for the schedule scraper and its filter session.

    All timing values are in seconds.
    """

    # Page identifier handed to the scrape provider
    target: str = DEFAULT_TARGET
    scheme: str = "https"

    # tenacity stop_after_attempt
    max_retries: int = 3

    # Seconds to wait after navigation before reading the title
    page_load_wait: float = 1.0

    # Seconds to poll for ready_selector before extracting anyway
    ready_timeout: float = 5.0

    # Seconds to poll for an anti-bot challenge to clear
    challenge_wait: float = 30.0

    # Shorter pages are treated as failed loads
    min_page_size: int = 500

    # Selector polled after navigation; the schedule renders matchday blocks
    ready_selector: str = ".matchday"

    headless: bool = True

    # Delay before a filter change recomputes the visible list
    filter_debounce: float = 0.1

    # Log files go under {data_dir}/logs
    data_dir: str = "data"

    def target_url(self, target: str | None = None) -> str:
        """Build the page URL for *target* (defaults to the configured one).

        Targets that already carry a scheme are returned unchanged.
        """
        target = target or self.target
        if "://" in target:
            return target
        return f"{self.scheme}://{target}"
