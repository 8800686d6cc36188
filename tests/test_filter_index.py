"""Unit tests for build_filter_options()."""

from footballtv.filter_index import build_filter_options
from footballtv.models import FilterOptionsModel, MatchdayModel, MatchModel


def _matchdays() -> list[MatchdayModel]:
    return [
        MatchdayModel(date="Lunes 20/10/2025", matches=[
            MatchModel(competition="LaLiga", home_team="Real Madrid", away_team="Barcelona",
                       tv=["Movistar Plus+", "DAZN LaLiga"]),
            MatchModel(competition="LaLiga", home_team="Sevilla", away_team="Betis", tv=["DAZN 1"]),
        ]),
        MatchdayModel(date="Martes 21/10/2025", matches=[
            MatchModel(competition="Champions League", home_team="Barcelona",
                       away_team="Olympiacos", tv=["DAZN LaLiga"]),
        ]),
        MatchdayModel(date="Lunes 20/10/2025", matches=[]),
    ]


class TestBuildFilterOptions:
    """Tests for the derived option lists."""

    def test_dates_keep_order_and_duplicates(self):
        options = build_filter_options(_matchdays())
        assert options.dates == ["Lunes 20/10/2025", "Martes 21/10/2025", "Lunes 20/10/2025"]

    def test_competitions_unique_sorted(self):
        options = build_filter_options(_matchdays())
        assert options.competitions == ["Champions League", "LaLiga"]

    def test_teams_merge_home_and_away(self):
        options = build_filter_options(_matchdays())
        assert options.teams == ["Barcelona", "Betis", "Olympiacos", "Real Madrid", "Sevilla"]

    def test_tvs_unique_sorted(self):
        options = build_filter_options(_matchdays())
        assert options.tvs == ["DAZN 1", "DAZN LaLiga", "Movistar Plus+"]

    def test_unset_values_not_offered(self):
        days = [MatchdayModel(date="Hoy", matches=[
            MatchModel(competition=None, home_team="Real Madrid", away_team=None),
        ])]
        options = build_filter_options(days)
        assert options.competitions == []
        assert options.teams == ["Real Madrid"]

    def test_empty_strings_offered(self):
        days = [MatchdayModel(date="Hoy", matches=[MatchModel(tv=[""])])]
        options = build_filter_options(days)
        assert options.teams == [""]
        assert options.tvs == [""]

    def test_empty_list(self):
        assert build_filter_options([]) == FilterOptionsModel()

    def test_idempotent(self):
        days = _matchdays()
        assert build_filter_options(days) == build_filter_options(days)

    def test_input_not_modified(self):
        days = _matchdays()
        before = [d.model_dump() for d in days]
        build_filter_options(days)
        assert [d.model_dump() for d in days] == before
