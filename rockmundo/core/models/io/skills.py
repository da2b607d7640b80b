"""Skill catalogue I/O models."""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel


class TrainingCostRead(BaseModel):
    level: int
    cost: int


class SkillRead(BaseModel):
    slug: str
    display_name: str
    description: str | None = None
    tier: str
    current_level: int
    current_xp: int
    required_xp: int
    training_cost: int


class SkillCatalogRead(BaseModel):
    categories: Dict[str, List[str]]
    skills: List[SkillRead]
