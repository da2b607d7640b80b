"""
Major event I/O models.

The completion contract is fixed by the game client: the request carries a
camelCase ``performanceId`` and the response uses snake_case reward fields.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CompleteMajorEventRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    performance_id: str = Field(alias="performanceId", min_length=1, description="major_event_performances.id")


class CompleteMajorEventResponse(BaseModel):
    success: bool = True
    overall_rating: float = Field(description="Mean of the three song ratings, 0..100")
    cash_earned: int
    fame_gained: int
    fans_gained: int
