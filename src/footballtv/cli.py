"""CLI entry point for the TV schedule scraper.

Provides ``main()`` as the sync entry point for the ``footballtv`` console
script, and ``async_main(args)`` which sets up logging, loads the schedule,
applies the requested filters and prints the visible matchdays.

Usage::

    footballtv                              # full schedule
    footballtv --team "Real Madrid"         # matches of one team
    footballtv --date 2025-10-20 --tv DAZN  # union of both filters
    footballtv --payload scrape.json --json # offline, JSON output
"""

import argparse
import asyncio
import datetime
import json
import logging
import sys

from footballtv.config import DEFAULT_TARGET, ScheduleConfig
from footballtv.http_client import ScheduleClient
from footballtv.logging_config import setup_logging
from footballtv.models import FilterOptionsModel, MatchdayModel
from footballtv.pipeline import ScheduleSession
from footballtv.provider import BrowserScrapeProvider, PayloadScrapeProvider

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the footballtv CLI."""
    parser = argparse.ArgumentParser(
        prog="footballtv",
        description="Show which matches are on TV, filtered by date, competition, team or channel",
    )
    parser.add_argument(
        "--target",
        type=str,
        default=DEFAULT_TARGET,
        help=f"Schedule page to scrape (default: {DEFAULT_TARGET})",
    )
    parser.add_argument(
        "--payload",
        type=str,
        default=None,
        help="Read a saved scrape payload (JSON with an 'html' tree) instead of opening a browser",
    )
    parser.add_argument(
        "--date",
        type=datetime.date.fromisoformat,
        default=None,
        help="Show matchdays/matches on this date (YYYY-MM-DD)",
    )
    parser.add_argument("--competition", type=str, default=None, help="Show matches of this competition")
    parser.add_argument("--team", type=str, default=None, help="Show matches of this team")
    parser.add_argument("--tv", type=str, default=None, help="Show matches on channels containing this text")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the visible matchdays as JSON",
    )
    parser.add_argument(
        "--options",
        action="store_true",
        help="Print the available filter values instead of the schedule",
    )
    parser.add_argument(
        "--data-dir",
        type=str,
        default="data",
        help="Directory for log files (default: data)",
    )
    parser.add_argument(
        "--max-retries",
        type=int,
        default=None,
        help="Fetch attempts before giving up (default: 3)",
    )
    parser.add_argument(
        "--show-browser",
        action="store_true",
        help="Run Chrome with a visible window",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Also show DEBUG messages (skipped markup) on the console",
    )
    return parser


def _format_schedule(matchdays: list[MatchdayModel]) -> str:
    """Format matchdays into a human-readable listing."""
    if not matchdays:
        return "No matches."
    lines: list[str] = []
    for matchday in matchdays:
        lines.append(matchday.date)
        lines.append("-" * len(matchday.date))
        for match in matchday.matches:
            teams = f"{match.home_team or '?'} - {match.away_team or '?'}"
            details = [match.competition or ""]
            if match.phase:
                details.append(match.phase)
            channels = ", ".join(tv for tv in match.tv if tv) or "no TV"
            lines.append(
                "  {:<6} {}  [{}]  {}".format(
                    match.date or "", teams, " / ".join(d for d in details if d), channels,
                )
            )
        lines.append("")
    return "\n".join(lines).rstrip()


def _format_options(options: FilterOptionsModel) -> str:
    lines = []
    for label, values in (
        ("Dates", options.dates),
        ("Competitions", options.competitions),
        ("Teams", options.teams),
        ("TV", options.tvs),
    ):
        lines.append(f"{label}: {', '.join(values) if values else '-'}")
    return "\n".join(lines)


async def async_main(args: argparse.Namespace) -> int:
    """Async entry point: load, filter, print. Returns the exit status."""
    config_overrides = {
        "target": args.target,
        "data_dir": args.data_dir,
        "headless": not args.show_browser,
    }
    if args.max_retries is not None:
        config_overrides["max_retries"] = args.max_retries
    config = ScheduleConfig(**config_overrides)
    log_file = setup_logging(data_dir=config.data_dir, verbose=args.verbose)
    logger.debug("Starting footballtv: target=%s, log=%s", config.target, log_file)

    client: ScheduleClient | None = None
    try:
        if args.payload:
            provider = PayloadScrapeProvider(args.payload)
        else:
            client = ScheduleClient(config)
            await client.start()
            provider = BrowserScrapeProvider(client, config)

        session = ScheduleSession(provider, config)
        if not await session.load():
            print(f"Error: {session.error}", file=sys.stderr)
            return 1

        session.update_filter(
            selected_date=args.date,
            selected_competition=args.competition,
            selected_team=args.team,
            selected_tv=args.tv,
        )
        await session.flush()
    finally:
        if client is not None:
            await client.close()

    if args.options:
        print(_format_options(session.filter_options))
    elif args.json:
        print(json.dumps(
            [m.model_dump() for m in session.matchdays_filtered],
            ensure_ascii=False, indent=2,
        ))
    else:
        print(_format_schedule(session.matchdays_filtered))
    return 0


def main() -> None:
    """Sync entry point for the footballtv console script."""
    parser = build_parser()
    args = parser.parse_args()
    try:
        status = asyncio.run(async_main(args))
    except KeyboardInterrupt:
        status = 130
    finally:
        logging.shutdown()
    sys.exit(status)


if __name__ == "__main__":
    main()
