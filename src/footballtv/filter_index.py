"""Filter option index derived from the full matchday list."""

from footballtv.models import FilterOptionsModel, MatchdayModel


def _add_unique(values: list[str], value: str | None) -> None:
    if value is not None and value not in values:
        values.append(value)


def build_filter_options(matchdays: list[MatchdayModel]) -> FilterOptionsModel:
    """Rebuild the selectable filter values from scratch.

    Dates are listed once per matchday in page order, duplicates included.
    Competitions, teams (home and away merged) and TV channels are
    deduplicated and sorted. Values that were never found on the page
    (``None``) are not offered.
    """
    options = FilterOptionsModel()

    for matchday in matchdays:
        options.dates.append(matchday.date)
        for match in matchday.matches:
            _add_unique(options.competitions, match.competition)
            _add_unique(options.teams, match.home_team)
            _add_unique(options.teams, match.away_team)
            for channel in match.tv:
                _add_unique(options.tvs, channel)

    options.competitions.sort()
    options.teams.sort()
    options.tvs.sort()
    return options
