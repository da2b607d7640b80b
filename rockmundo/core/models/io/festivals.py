"""Festival performance I/O models (camelCase on the wire)."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CompleteFestivalPerformanceRequest(_CamelModel):
    participation_id: str
    band_id: str
    performance_score: float = Field(ge=0, le=100)
    crowd_energy_peak: float = Field(ge=0, le=100)
    crowd_energy_avg: float = Field(ge=0, le=100)
    event_responses: List[float] = Field(default_factory=list)
    songs_performed: int = Field(default=0, ge=0)


class CompleteFestivalPerformanceResponse(_CamelModel):
    success: bool = True
    performance_score: float
    payment_earned: int
    fame_earned: int
    merch_revenue: int = Field(description="Band's net share of merch takings")
    new_fans_gained: int
    critic_score: float
    fan_score: float
    review_headline: str
    highlights: List[str]
