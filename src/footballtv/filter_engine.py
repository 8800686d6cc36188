"""Visibility rules for matches and matchdays under a filter selection.

Active filters combine as a union: a match is shown when it satisfies
*any* active dimension, not all of them. Dimensions are checked in a
fixed order -- competition, team, TV channel, date -- and the first hit
wins.
"""

import datetime
import logging

from dateutil import parser as date_parser

from footballtv.models import FilterSelectionModel, MatchdayModel, MatchModel

logger = logging.getLogger(__name__)


class ScheduleParserInfo(date_parser.parserinfo):
    """English and Spanish month/weekday names for schedule headings.

    Reads ``"Lunes 20 de octubre de 2025"`` as well as ``"Monday 20 October
    2025"``. Spanish weekdays are full names only: ``"mar"`` is March.
    """

    JUMP = date_parser.parserinfo.JUMP + ["de", "del", "el", "y"]

    WEEKDAYS = [
        ("Mon", "Monday", "lunes"),
        ("Tue", "Tuesday", "martes"),
        ("Wed", "Wednesday", "miércoles", "miercoles"),
        ("Thu", "Thursday", "jueves"),
        ("Fri", "Friday", "viernes"),
        ("Sat", "Saturday", "sábado", "sabado"),
        ("Sun", "Sunday", "domingo"),
    ]

    MONTHS = [
        ("Jan", "January", "ene", "enero"),
        ("Feb", "February", "febrero"),
        ("Mar", "March", "marzo"),
        ("Apr", "April", "abr", "abril"),
        ("May", "mayo"),
        ("Jun", "June", "junio"),
        ("Jul", "July", "julio"),
        ("Aug", "August", "ago", "agosto"),
        ("Sep", "Sept", "September", "septiembre", "setiembre"),
        ("Oct", "October", "octubre"),
        ("Nov", "November", "noviembre"),
        ("Dec", "December", "dic", "diciembre"),
    ]


_PARSER_INFO = ScheduleParserInfo(dayfirst=True)

# Two far-apart defaults: a field the text does not spell out differs
# between the two parses.
_DEFAULT_A = datetime.datetime(1904, 1, 1)
_DEFAULT_B = datetime.datetime(2003, 12, 28)


def to_calendar_date(value: object) -> datetime.date | None:
    """Read *value* as a calendar date, ignoring any time of day.

    Accepts ``date``/``datetime`` objects and strings naming a day, month
    and year (``"2025-10-20"``, ``"Lunes 20/10/2025 21:00"``). Time labels such
    as ``"21:00"``, headings such as ``"Jornada 5"`` and ``None`` give
    ``None``.
    """
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    # ISO first: dayfirst parsing would swap "2025-10-05" into May
    try:
        return datetime.datetime.fromisoformat(value.strip()).date()
    except ValueError:
        pass
    try:
        first = date_parser.parse(
            value, _PARSER_INFO, default=_DEFAULT_A, dayfirst=True, fuzzy=True
        )
        second = date_parser.parse(
            value, _PARSER_INFO, default=_DEFAULT_B, dayfirst=True, fuzzy=True
        )
    except (ValueError, OverflowError):
        return None
    if first.date() != second.date():
        return None
    return first.date()


class FilterEngine:
    """Decides which matches and matchdays are visible.

    Holds the current FilterSelectionModel; ``apply_filter`` derives the
    visible view from a full matchday list without touching it.

    Usage::

        engine = FilterEngine(FilterSelectionModel(selected_team="Barcelona"))
        visible = engine.apply_filter(all_matchdays)
    """

    def __init__(self, selection: FilterSelectionModel | None = None):
        self.selection = selection or FilterSelectionModel()

    def _date_matches(self, value: object) -> bool:
        return to_calendar_date(value) == self.selection.selected_date

    def match_visible(self, match: MatchModel) -> bool:
        """Whether *match* satisfies any active filter (or none is active)."""
        sel = self.selection
        if not sel.any_active:
            return True
        if sel.is_active("competition") and sel.selected_competition == match.competition:
            return True
        if sel.is_active("team") and sel.selected_team in (match.home_team, match.away_team):
            return True
        if sel.is_active("tv") and any(sel.selected_tv in channel for channel in match.tv):
            return True
        return sel.is_active("date") and self._date_matches(match.date)

    def matchday_visible(self, matchday: MatchdayModel) -> bool:
        """Whether *matchday* should be listed.

        With a date selected, a matchday whose own date is the selected one
        is listed even if none of its matches are visible.
        """
        sel = self.selection
        if sel.is_active("date"):
            if self._date_matches(matchday.date):
                return True
        elif not sel.any_active:
            return True
        return any(self.match_visible(m) for m in matchday.matches)

    def apply_filter(self, matchdays: list[MatchdayModel]) -> list[MatchdayModel]:
        """Return a filtered deep copy of *matchdays*.

        Matchdays that are not visible are dropped; kept matchdays lose
        their invisible matches and may end up with no matches at all.
        The input list and its models are never modified.
        """
        visible: list[MatchdayModel] = []
        for matchday in matchdays:
            copy = matchday.model_copy(deep=True)
            if not self.matchday_visible(copy):
                continue
            copy.matches = [m for m in copy.matches if self.match_visible(m)]
            visible.append(copy)
        logger.debug(
            "Filter kept %d of %d matchdays", len(visible), len(matchdays)
        )
        return visible
