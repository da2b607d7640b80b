"""Band overview I/O models."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel


class TrendPointRead(BaseModel):
    label: str
    fans: int
    fame: int


class MetricRead(BaseModel):
    name: str
    value: float


class BandOverviewRead(BaseModel):
    band_id: str
    name: str
    fame: int
    band_balance: int
    fame_multiplier: float
    fame_progress: float
    days_together: int
    chemistry_level: int
    chemistry_label: str
    engagement_trend: List[TrendPointRead]
    activity_breakdown: List[MetricRead]
    profile_metrics: List[MetricRead]
