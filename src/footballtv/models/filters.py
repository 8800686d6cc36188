"""Pydantic v2 models for filter options and the current filter selection."""

import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

DIMENSIONS = ("date", "competition", "team", "tv")


class FilterOptionsModel(BaseModel):
    """Selectable values per filter dimension.

    ``dates`` keeps encounter order and duplicates; the other three are
    deduplicated and sorted.
    """

    dates: list[str] = Field(default_factory=list)
    competitions: list[str] = Field(default_factory=list)
    teams: list[str] = Field(default_factory=list)
    tvs: list[str] = Field(default_factory=list)


class FilterSelectionModel(BaseModel):
    """Currently selected value per dimension; ``None`` means inactive.

    Unknown field names are rejected, so a misspelled dimension fails
    validation instead of being dropped.
    """

    model_config = ConfigDict(extra="forbid")

    selected_date: datetime.date | None = None
    selected_competition: str | None = None
    selected_team: str | None = None
    selected_tv: str | None = None

    @field_validator("selected_date", mode="before")
    @classmethod
    def reduce_to_calendar_date(cls, v: object) -> object:
        """A datetime selection only counts by its calendar date."""
        if isinstance(v, datetime.datetime):
            return v.date()
        return v

    def is_active(self, dimension: str) -> bool:
        """Whether *dimension* (one of ``DIMENSIONS``) has a selection."""
        if dimension not in DIMENSIONS:
            raise ValueError(
                f"dimension must be one of {DIMENSIONS}, got '{dimension}'"
            )
        return getattr(self, f"selected_{dimension}") is not None

    @property
    def any_active(self) -> bool:
        """Whether at least one dimension has a selection."""
        return any(self.is_active(d) for d in DIMENSIONS)
