"""Skill tree endpoints."""

from typing import Optional

from fastapi import APIRouter, Query

from rockmundo.core.models.io.skills import SkillCatalogRead, TrainingCostRead
from rockmundo.game.skills import MAX_SKILL_LEVEL, training_cost
from rockmundo.server.services.deps import SessionDep
from rockmundo.server.services.skills import SkillService

router = APIRouter(tags=["skills"])


@router.get(
    "/training-cost",
    response_model=TrainingCostRead,
    summary="Skill Training Cost",
    description="XP cost of one training session for a skill at the given level (never below 10).",
)
async def get_training_cost(level: int = Query(ge=0, le=MAX_SKILL_LEVEL)) -> TrainingCostRead:
    return TrainingCostRead(level=level, cost=training_cost(level))


@router.get(
    "",
    response_model=SkillCatalogRead,
    summary="Skill Catalogue",
    description="Skill definitions with the profile's progress, grouped into categories, filtered and sorted.",
    responses={400: {"description": "Unknown category or sort key"}},
)
async def list_skills(
    session: SessionDep,
    profile_id: Optional[str] = None,
    search: Optional[str] = None,
    category: Optional[str] = None,
    sort: str = "name",
) -> SkillCatalogRead:
    """
    List the skill catalogue.

    - **profile_id**: whose levels to show; omitted means level 0 everywhere.
    - **search**: case-insensitive match on name or slug.
    - **category**: one skill tree category, e.g. ``Genres``.
    - **sort**: ``name``, ``level`` (highest first) or ``cost`` (cheapest first).
    """
    return await SkillService(session).catalog(profile_id=profile_id, search=search, category=category, sort=sort)
