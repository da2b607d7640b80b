"""Skill catalogue with a profile's progress."""

from __future__ import annotations

from typing import Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from rockmundo.core.database.repositories import SkillRepository
from rockmundo.core.models.io.skills import SkillCatalogRead, SkillRead
from rockmundo.game import skills as rules


class SkillService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.skills = SkillRepository(session)

    async def catalog(
        self,
        profile_id: Optional[str] = None,
        search: Optional[str] = None,
        category: Optional[str] = None,
        sort: str = "name",
    ) -> SkillCatalogRead:
        """
        The skill tree for one profile: every definition with the profile's
        level, XP and next training cost, filtered and sorted for display.

        Without ``profile_id`` every skill is shown at level 0.
        """
        definitions = [
            {"slug": d.slug, "display_name": d.display_name, "description": d.description}
            for d in await self.skills.list_definitions()
        ]
        progress = {p.skill_slug: p for p in await self.skills.list_progress(profile_id)} if profile_id else {}
        levels = {slug: p.current_level for slug, p in progress.items()}

        selected = rules.filter_skills(definitions, levels, search=search, category=category, sort=sort)

        skills: List[SkillRead] = []
        for definition in selected:
            row = progress.get(definition["slug"])
            level = row.current_level if row else 0
            skills.append(
                SkillRead(
                    slug=definition["slug"],
                    display_name=definition["display_name"],
                    description=definition["description"],
                    tier=rules.tier_from_slug(definition["slug"]),
                    current_level=level,
                    current_xp=row.current_xp if row else 0,
                    required_xp=row.required_xp if row else rules.required_xp(0),
                    training_cost=rules.training_cost(level),
                )
            )

        categories: Dict[str, List[str]] = {
            name: [s["slug"] for s in members] for name, members in rules.categorize_skills(selected).items() if members
        }
        return SkillCatalogRead(categories=categories, skills=skills)
