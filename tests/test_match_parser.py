"""Tests for the match block parser.

Covers each block (phase, title, logos, channels, time) present and
missing, and that the seed model is never modified.
"""

import pytest

from footballtv.match_parser import parse_match
from footballtv.models import MatchModel
from footballtv.tree import Node


def el(tag: str, cls: str | None = None, *children, **attrs) -> Node:
    """Build a Node; ``cls`` becomes the class attribute."""
    if cls is not None:
        attrs["class"] = cls
    return Node(tag=tag, attrs=attrs or None, children=list(children) or None)


def _seed(**overrides) -> MatchModel:
    defaults = {
        "date": None,
        "competition": "LaLiga",
        "flag": "",
        "home_team": "",
        "away_team": "",
        "calendar_url": "",
        "tv": [],
    }
    defaults.update(overrides)
    return MatchModel(**defaults)


def _full_match() -> Node:
    return el(
        "div", "col-md-6 match",
        el("div", "m_phase", el("span", "phase", "Jornada 9")),
        el("div", "m_time", el("span", "time", "21:00")),
        el(
            "div", "m_logos",
            el("img", "logo", src="https://img.example/rma.png"),
            el("img", "logo", src="https://img.example/fcb.png"),
        ),
        el("div", "m_title", el("span", "team", "Real Madrid"), el("span", "team", "Barcelona")),
        el("div", "m_chan", el("span", "chan", "DAZN LaLiga"), el("span", "chan", "Movistar Plus+")),
    )


# ---------------------------------------------------------------------------
# TestFullMatch -- every block present
# ---------------------------------------------------------------------------
class TestFullMatch:
    """A match card with every block present."""

    @pytest.fixture(autouse=True)
    def setup(self):
        self.result = parse_match(_full_match(), _seed())

    def test_teams_extracted(self):
        assert self.result.home_team == "Real Madrid"
        assert self.result.away_team == "Barcelona"

    def test_phase_extracted(self):
        assert self.result.phase == "Jornada 9"

    def test_logos_extracted(self):
        assert self.result.home_logo == "https://img.example/rma.png"
        assert self.result.away_logo == "https://img.example/fcb.png"

    def test_channels_in_document_order(self):
        assert self.result.tv == ["DAZN LaLiga", "Movistar Plus+"]

    def test_kickoff_time_overwrites_date(self):
        assert self.result.date == "21:00"

    def test_competition_inherited(self):
        assert self.result.competition == "LaLiga"

    def test_calendar_url_empty(self):
        assert self.result.calendar_url == ""

    def test_flag_empty(self):
        assert self.result.flag == ""


# ---------------------------------------------------------------------------
# TestMissingBlocks
# ---------------------------------------------------------------------------
class TestMissingBlocks:
    """Each block is optional; missing markup never raises."""

    def test_empty_match_keeps_seed(self):
        result = parse_match(el("div", "match"), _seed(date="Jornada 5"))
        assert result.date == "Jornada 5"
        assert result.home_team == ""
        assert result.away_team == ""
        assert result.phase is None
        assert result.home_logo is None
        assert result.tv == []
        assert result.calendar_url == ""

    def test_single_team_leaves_away_none(self):
        node = el("div", "match", el("div", "m_title", el("span", "team", "Real Madrid")))
        result = parse_match(node, _seed())
        assert result.home_team == "Real Madrid"
        assert result.away_team is None

    def test_title_without_classed_spans(self):
        node = el("div", "match", el("div", "m_title", el("span", None, "Real Madrid")))
        result = parse_match(node, _seed())
        assert result.home_team is None
        assert result.away_team is None

    def test_title_without_children_untouched(self):
        node = el("div", "match", el("div", "m_title"))
        result = parse_match(node, _seed())
        assert result.home_team == ""

    def test_phase_with_text_first_child_ignored(self):
        node = el("div", "match", el("div", "m_phase", "Jornada 9"))
        assert parse_match(node, _seed()).phase is None

    def test_phase_fragments_joined(self):
        node = el("div", "match", el("div", "m_phase", el("span", "phase", "Octavos", "Ida")))
        assert parse_match(node, _seed()).phase == "Octavos,Ida"

    def test_logo_without_src(self):
        node = el("div", "match", el("div", "m_logos", el("img", "logo"), el("img", "logo", src="b.png")))
        result = parse_match(node, _seed())
        assert result.home_logo is None
        assert result.away_logo == "b.png"

    def test_empty_channel_span_kept_as_empty_string(self):
        node = el("div", "match", el("div", "m_chan", el("span", "chan"), el("span", "chan", "DAZN 1")))
        assert parse_match(node, _seed()).tv == ["", "DAZN 1"]

    def test_time_block_without_span_keeps_date(self):
        node = el("div", "match", el("div", "m_time", "21:00"))
        assert parse_match(node, _seed(date="seed")).date == "seed"

    def test_first_time_span_wins(self):
        node = el("div", "match", el("div", "m_time", el("span", "t", "18:00"), el("span", "t", "TBD")))
        assert parse_match(node, _seed()).date == "18:00"

    def test_only_first_block_of_a_kind_used(self):
        node = el(
            "div", "match",
            el("div", "m_chan", el("span", "chan", "DAZN 1")),
            el("div", "m_chan", el("span", "chan", "GOL")),
        )
        assert parse_match(node, _seed()).tv == ["DAZN 1"]


class TestSeedUntouched:
    """parse_match returns a new model."""

    def test_seed_not_modified(self):
        seed = _seed()
        result = parse_match(_full_match(), seed)
        assert result is not seed
        assert seed.home_team == ""
        assert seed.tv == []
        assert seed.date is None

    def test_calendar_url_always_reset(self):
        result = parse_match(_full_match(), _seed(calendar_url="https://calendar.example"))
        assert result.calendar_url == ""
