"""Wire models for the JSON graph and journey files.

Graph file::

    [{"from": 1, "to": 2, "weight": 1}, ...]

Journeys file (``route`` is optional on input and ignored)::

    [{"from": 1, "to": 4}, ...]

Answered journeys carry ``route``: the list of labels, or null.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from ...domain.models import Journey


class EdgeDocument(BaseModel):
    """One edge of the graph file.

    Exposes ``source``, ``destination`` and ``weight`` so it can be fed to
    graph construction directly.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source: int = Field(alias="from", ge=0, strict=True)
    destination: int = Field(alias="to", ge=0, strict=True)
    weight: int = Field(ge=0, strict=True)


class JourneyDocument(BaseModel):
    """One journey, either a query or an answer."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    start: int = Field(alias="from", ge=0, strict=True)
    end: int = Field(alias="to", ge=0, strict=True)
    route: Optional[List[int]] = None

    @classmethod
    def from_journey(cls, journey: Journey) -> JourneyDocument:
        route = list(journey.route) if journey.route is not None else None
        return cls(start=journey.start, end=journey.end, route=route)


EDGES = TypeAdapter(List[EdgeDocument])
JOURNEYS = TypeAdapter(List[JourneyDocument])
