"""Pydantic v2 models for match and matchday records.

Fields mirror what the schedule page exposes. Team names are ``""`` until
extraction runs and ``None`` when the page had no span for them.
"""

from pydantic import BaseModel, Field


class MatchModel(BaseModel):
    """A single fixture as listed on the schedule page."""

    date: str | None = None  # kickoff time label once m_time was read
    home_team: str | None = ""
    away_team: str | None = ""
    home_logo: str | None = None
    away_logo: str | None = None
    tv: list[str] = Field(default_factory=list)
    competition: str | None = None
    phase: str | None = None
    flag: str = ""  # reserved, never filled
    calendar_url: str = ""  # calendar export is not implemented


class MatchdayModel(BaseModel):
    """One dated heading of the schedule and the matches listed under it."""

    date: str
    matches: list[MatchModel] = Field(default_factory=list)
