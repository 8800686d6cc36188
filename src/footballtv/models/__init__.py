"""Pydantic v2 models for the schedule domain.

Re-exports all model classes for convenient import::

    from footballtv.models import MatchModel, MatchdayModel, ...
"""

from .filters import DIMENSIONS, FilterOptionsModel, FilterSelectionModel
from .match import MatchdayModel, MatchModel

__all__ = [
    "MatchModel",
    "MatchdayModel",
    "FilterOptionsModel",
    "FilterSelectionModel",
    "DIMENSIONS",
]
