"""Custom exception hierarchy for the schedule scraper.

Exception tree:
    ScheduleScraperError
    +-- ChallengePage        (anti-bot interstitial served instead of the page)
    +-- ScheduleFetchError   (page could not be retrieved)
        +-- PayloadError     (scrape payload missing or malformed)
"""

from typing import Optional


class ScheduleScraperError(Exception):
    """Base exception for all retrieval errors.

    ``ScheduleSession`` treats any subclass as a retrieval failure: the
    error is recorded and previously held data is cleared.
    """

    def __init__(
        self,
        message: str,
        *,
        url: Optional[str] = None,
        target: Optional[str] = None,
    ):
        self.url = url
        self.target = target
        super().__init__(message)


class ChallengePage(ScheduleScraperError):
    """An anti-bot challenge page was served instead of real content.

    This is a retriable error -- the client should back off and retry.
    """

    pass


class ScheduleFetchError(ScheduleScraperError):
    """The schedule page could not be fetched (navigation failure, short page)."""

    pass


class PayloadError(ScheduleFetchError):
    """A scrape payload did not hold a usable node tree.

    Raised for a missing ``html`` key or a node without a ``tag``. Not
    retried -- the payload will not change on a second read.
    """

    pass
